from fastapi import APIRouter, Depends

from larder.api.deps import get_store, not_found
from larder.domain.InventoryStore import InventoryStore
from larder.utilities.validators import KitchenDeltaInput, KitchenQuantityInput

router = APIRouter()


def _listing(store: InventoryStore):
    items = store.kitchen_items
    return {
        'items': [i.to_dict() for i in items],
        'count': len(items),
        'low_stock': store.low_stock(),
    }


@router.get('')
def list_kitchen(store: InventoryStore = Depends(get_store)):
    return _listing(store)


@router.post('')
def change_kitchen(payload: KitchenDeltaInput, store: InventoryStore = Depends(get_store)):
    """Apply a signed change; reaching zero removes the item."""
    changed = store.add_to_kitchen(payload.name, payload.delta)
    return {'changed': changed, **_listing(store)}


@router.put('/{item_id}')
def set_kitchen_quantity(item_id: str, payload: KitchenQuantityInput,
                         store: InventoryStore = Depends(get_store)):
    if store.get_kitchen_item(item_id) is None:
        raise not_found('Kitchen item')
    changed = store.set_kitchen_quantity(item_id, payload.quantity)
    return {'changed': changed, 'item': _as_dict(store.get_kitchen_item(item_id)), **_listing(store)}


@router.delete('/{item_id}')
def delete_kitchen(item_id: str, store: InventoryStore = Depends(get_store)):
    if not store.delete_kitchen({item_id}):
        raise not_found('Kitchen item')
    return _listing(store)


def _as_dict(item):
    return item.to_dict() if item is not None else None
