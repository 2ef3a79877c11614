from fastapi import APIRouter, Depends, Response

from larder.api.deps import get_store, not_found
from larder.domain.InventoryStore import InventoryStore
from larder.infra.pdf_utils import generate_pdf_for_shopping
from larder.utilities.validators import ShoppingItemInput, ShoppingDeleteInput

router = APIRouter()


def _listing(store: InventoryStore):
    items = store.shopping_items
    return {
        'items': [i.to_dict() for i in items],
        'to_buy': [i.to_dict() for i in items if not i.is_checked],
        'checked': [i.to_dict() for i in items if i.is_checked],
        'count': len(items),
    }


@router.get('')
def list_shopping(store: InventoryStore = Depends(get_store)):
    return _listing(store)


@router.post('')
def add_shopping(payload: ShoppingItemInput, store: InventoryStore = Depends(get_store)):
    item = store.add_or_increment_shopping(payload.name, payload.quantity)
    return {'item': item.to_dict(), **_listing(store)}


@router.post('/{item_id}/toggle')
def toggle_shopping(item_id: str, store: InventoryStore = Depends(get_store)):
    item = store.toggle(item_id)
    if item is None:
        raise not_found('Shopping item')
    return {'item': item.to_dict()}


@router.delete('/{item_id}')
def delete_shopping(item_id: str, store: InventoryStore = Depends(get_store)):
    if not store.delete_shopping({item_id}):
        raise not_found('Shopping item')
    return _listing(store)


@router.post('/delete-visible')
def delete_visible(payload: ShoppingDeleteInput, store: InventoryStore = Depends(get_store)):
    """Delete by position inside the 'to_buy' or 'checked' view."""
    removed = store.delete_shopping_at(payload.offsets, payload.view)
    return {'removed': removed, **_listing(store)}


@router.post('/complete')
def complete_shopping(store: InventoryStore = Depends(get_store)):
    moved = store.complete_shopping()
    return {
        'moved': [{'name': n, 'quantity': q} for n, q in moved],
        'shopping': [i.to_dict() for i in store.shopping_items],
        'kitchen': [i.to_dict() for i in store.kitchen_items],
    }


@router.get('/pdf')
def export_pdf(store: InventoryStore = Depends(get_store)):
    pdf_bytes = generate_pdf_for_shopping(store.shopping_items)
    headers = {"Content-Disposition": 'attachment; filename="shopping_list.pdf"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)
