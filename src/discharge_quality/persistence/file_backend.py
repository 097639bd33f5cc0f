"""File-based persistence backend: one JSON file per key under a collection directory."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)

_SUFFIX = ".json"


class FilePersistenceBackend:
    """Stores each record as ``<base_path>/<collection>/<key>.json``.

    Writes go through a temporary file and ``os.replace`` so readers never see
    a half-written record.
    """

    def __init__(self, base_path: Path, collection: str = "quality_metrics") -> None:
        self._dir = Path(base_path) / collection
        self._dir.mkdir(parents=True, exist_ok=True)

    def _key_path(self, key: str) -> Path:
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self._dir / f"{safe_key}{_SUFFIX}"

    def save(self, key: str, data: str) -> None:
        path = self._key_path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=".tmp-", suffix=_SUFFIX)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        log.debug("Saved %s to %s", key, path)

    def load(self, key: str) -> str:
        path = self._key_path(key)
        if not path.is_file():
            raise KeyError(f"Not found: {key} (path: {path})")
        return path.read_text(encoding="utf-8")

    def exists(self, key: str) -> bool:
        return self._key_path(key).is_file()

    def delete(self, key: str) -> None:
        self._key_path(key).unlink(missing_ok=True)

    def list_keys(self, prefix: str = "") -> list[str]:
        return sorted(
            path.stem
            for path in self._dir.glob(f"*{_SUFFIX}")
            if not path.name.startswith(".tmp-") and path.stem.startswith(prefix)
        )
