"""Collection (de)serialization against a key-value storage collaborator."""

import json
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


def serialize_collection(items) -> str:
    """Serialize an ordered collection of entities to a JSON array string."""
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False, indent=2)


def deserialize_collection(raw: str, from_dict: Callable) -> List:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [from_dict(entry) for entry in data]


def read_collection(storage, key: str, from_dict: Callable) -> List:
    """Load one collection; an absent or unreadable slot yields an empty list."""
    try:
        raw = storage.load(key)
    except Exception as e:
        logger.error(f"Error reading {key}: {e}")
        return []
    if raw is None:
        logger.info(f"No stored value for {key}. Starting empty.")
        return []
    try:
        return deserialize_collection(raw, from_dict)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {key}: {e}")
        return []
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid records in {key}: {e}")
        return []


def write_collection(storage, key: str, items) -> None:
    """Serialize and save one collection. Errors propagate to the caller."""
    storage.save(key, serialize_collection(items))


__all__ = ['serialize_collection', 'deserialize_collection', 'read_collection', 'write_collection']
