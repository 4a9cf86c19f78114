"""Local filesystem storage for JSON collections — one file per storage key.

Storage layout:
    <data_dir>/<key>.json    — the full JSON value stored under <key>
"""

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

from dashboard_store.application.interfaces import KeyValueStorage

logger = logging.getLogger(__name__)


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace characters that are unsafe in filenames with underscores and truncate."""
    return re.sub(r"[^\w\-.]", "_", name)[:max_len].strip("_.") or "unnamed"


class LocalJsonStorage(KeyValueStorage):
    """Infrastructure adapter storing each key as a JSON document on disk."""

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        """Return the file backing ``key``.

        Raises ``ValueError`` for keys that are not usable as a filename as-is,
        so two different keys never share one file.
        """
        name = _sanitise(key)
        if name != key:
            raise ValueError(f"Storage key '{key}' is not a safe filename (closest: '{name}')")
        return self._data_dir / f"{name}.json"

    # ── Reads ───────────────────────────────────────────────────────

    def load(self, key: str) -> Any | None:
        path = self.path_for(key)
        if not path.exists():
            logger.debug("No stored value for key '%s'", key)
            return None

        try:
            return json.loads(path.read_text("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring unreadable value for key '%s': %s", key, exc)
            return None

    # ── Writes ──────────────────────────────────────────────────────

    def save(self, key: str, value: Any) -> None:
        """Serialise ``value`` and atomically replace the file for ``key``.

        The payload is written to a temporary sibling first and then moved
        over the target, so readers never observe a partial document.
        """
        path = self.path_for(key)
        payload = json.dumps(value, ensure_ascii=False, indent=2)

        fd, tmp_name = tempfile.mkstemp(
            dir=self._data_dir, prefix=f".{path.stem}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(payload)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Saved key '%s' to %s (%d bytes)", key, path, len(payload))

    def clear(self, key: str) -> bool:
        path = self.path_for(key)
        if not path.exists():
            return False

        path.unlink(missing_ok=True)
        logger.info("Cleared key '%s' (%s)", key, path)
        return True
