"""Shared infrastructure used by datasources and flows."""
