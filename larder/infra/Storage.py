"""Key-value storage collaborators for the InventoryStore.

The store only needs ``save(key, value)`` and ``load(key) -> value | None``
where values are serialized strings. Two adapters are provided:

  MemoryStorage    dict-backed, for tests and embedded use
  JsonFileStorage  one ``<key>.json`` file per key under a data directory,
                   written atomically (temp file + move)
"""
import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_.-]+$')


class StorageError(Exception):
    """Raised when a value cannot be written to storage."""


class KeyValueStorage:
    def save(self, key: str, value: str) -> None:
        raise NotImplementedError

    def load(self, key: str) -> Optional[str]:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})
        self.save_count = 0

    def save(self, key: str, value: str) -> None:
        self.data[key] = value
        self.save_count += 1

    def load(self, key: str) -> Optional[str]:
        return self.data.get(key)


class JsonFileStorage(KeyValueStorage):
    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key or ''):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}.json"

    def save(self, key: str, value: str) -> None:
        target = self.path_for(key)
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        except OSError as e:
            raise StorageError(f"Cannot write {target}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            shutil.move(tmp_path, target)
        except OSError as e:
            raise StorageError(f"Cannot write {target}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        logger.debug("Saved %s (%d bytes)", target.name, len(value))

    def load(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()


__all__ = ['StorageError', 'KeyValueStorage', 'MemoryStorage', 'JsonFileStorage']
