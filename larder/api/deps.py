"""Store dependency for the API routers.

One process-wide InventoryStore backed by JSON files under DATA_DIR, created
and loaded lazily. Tests swap it with ``set_store`` or FastAPI's
``app.dependency_overrides[get_store]``.
"""
from __future__ import annotations
import logging
from threading import Lock
from typing import Optional

from fastapi import HTTPException

from larder.domain.InventoryStore import InventoryStore
from larder.infra.Storage import JsonFileStorage
from larder.utilities.config import DATA_DIR

logger = logging.getLogger(__name__)

_lock = Lock()
_store: Optional[InventoryStore] = None


def get_store() -> InventoryStore:
    global _store
    with _lock:
        if _store is None:
            logger.info("Opening store at %s", DATA_DIR)
            _store = InventoryStore(JsonFileStorage(DATA_DIR)).load()
        return _store


def set_store(store: Optional[InventoryStore]) -> None:
    global _store
    with _lock:
        _store = store


def not_found(what: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{what} not found")
