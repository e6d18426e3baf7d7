"""Tiered data store with freshness-aware caching.

Two tiers, by how the data is produced:
  - reference/: Downloaded source files (the hourly bike CSV), long TTL
  - derived/: Computed outputs (daily series, selection views), always recomputed

JSON outputs are wrapped in a metadata envelope (``{"meta": ..., "data": ...}``).
Source files keep their native format and carry a sidecar ``.meta.json``
holding ``valid_until`` so the fetch flow can skip a download that is still
fresh.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import Any

META_SUFFIX = ".meta.json"


def _build_meta(source: str, valid_until: datetime | None, params: dict[str, Any]) -> dict[str, Any]:
    meta: dict[str, Any] = {"source": source, "fetched_at": datetime.now(UTC).isoformat()}
    if valid_until:
        meta["valid_until"] = valid_until.isoformat()
    return {**meta, **params}


def _load_json(full: Path) -> dict[str, Any]:
    with full.open() as f:
        loaded: dict[str, Any] = json.load(f)
    return loaded


def _parse_expiry(stamp: str) -> datetime:
    """ISO timestamp as an aware datetime; naive stamps are UTC."""
    parsed = datetime.fromisoformat(stamp)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


class DataStore:
    """File cache rooted at ``base`` with a reference and a derived tier."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.reference = base_dir / "reference"
        self.derived = base_dir / "derived"

    # -- JSON outputs ---------------------------------------------------------

    def read(self, path: Path) -> dict[str, Any] | None:
        """Payload stored under ``data``, or None when the file is absent."""
        envelope = self.read_raw(path)
        return None if envelope is None else envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        full = self._resolve(path)
        return _load_json(full) if full.exists() else None

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write ``data`` inside a metadata envelope.

        Args:
            path: Location relative to the store root (e.g. ``derived/dashboard.json``).
            data: Anything ``json.dump`` accepts.
            source: Who produced it (e.g. ``"seoul-bike-explorer"``).
            valid_until: Expiry timestamp; leave unset for outputs that are never reused.
            **params: Additional metadata, such as the selection bounds.

        Returns:
            The file written.
        """
        full = self._prepare(path)
        envelope = {"meta": _build_meta(source, valid_until, params), "data": data}
        full.write_text(json.dumps(envelope, indent=2))
        return full

    # -- Source files ---------------------------------------------------------

    def read_bytes(self, path: Path) -> bytes | None:
        """Contents of a stored source file, or None when it is absent."""
        full = self._resolve(path)
        return full.read_bytes() if full.exists() else None

    def write_file(
        self,
        path: Path,
        content: bytes,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Store ``content`` as-is and record its metadata in a sidecar file.

        The sidecar sits next to the file as ``<name>.meta.json``.
        """
        full = self._prepare(path)
        full.write_bytes(content)
        sidecar = {"meta": _build_meta(source, valid_until, params)}
        self._sidecar(full).write_text(json.dumps(sidecar, indent=2))
        return full

    def file_path(self, path: Path) -> Path | None:
        full = self._resolve(path)
        return full if full.exists() else None

    # -- Metadata -------------------------------------------------------------

    def meta(self, path: Path) -> dict[str, Any]:
        """Metadata of a stored file (sidecar or envelope); empty if there is none."""
        full = self._resolve(path)
        sidecar = self._sidecar(full)
        if sidecar.exists():
            return _load_json(sidecar).get("meta", {})
        if full.suffix == ".json" and full.exists():
            return _load_json(full).get("meta", {})
        return {}

    def is_fresh(self, path: Path) -> bool:
        """True while the file exists and its ``valid_until`` lies in the future.

        Files stored without ``valid_until`` never count as fresh.
        """
        if self.file_path(path) is None:
            return False
        stamp = self.meta(path).get("valid_until")
        return stamp is not None and datetime.now(UTC) < _parse_expiry(stamp)

    # -- Paths ----------------------------------------------------------------

    @staticmethod
    def _sidecar(full: Path) -> Path:
        return full.with_name(full.name + META_SUFFIX)

    def _prepare(self, path: Path) -> Path:
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        return full

    def _resolve(self, path: Path) -> Path:
        """Absolute location of ``path``; refuses anything outside the store root."""
        full = path if path.is_absolute() else self.base / path
        if not full.resolve().is_relative_to(self.base.resolve()):
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg)
        return full
