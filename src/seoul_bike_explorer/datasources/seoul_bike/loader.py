"""Read the Seoul bike CSV into field -> text mappings."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from pathlib import Path


def decode_csv_bytes(raw: bytes) -> str:
    """Decode dataset bytes; the UCI export is latin-1, cleaned copies are UTF-8."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def parse_csv_text(text: str) -> list[dict[str, str]]:
    """Split CSV text into one dict per data row, keyed by header.

    Every cell stays text (blank cells are ``""``); typing happens in
    ``normalize``.
    """
    df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
    return df.to_dict(orient="records")


def read_csv_rows(path: Path) -> list[dict[str, str]]:
    """Read a CSV file from disk.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    if not path.exists():
        msg = f"Dataset not found: {path}"
        raise FileNotFoundError(msg)
    return parse_csv_text(decode_csv_bytes(path.read_bytes()))
