"""ShoppingItem domain entity: a requested purchase (name, quantity, checked flag)."""
from typing import Optional
from uuid import uuid4


class ShoppingItem:
    def __init__(self, name: str = "", quantity: int = 1, is_checked: bool = False,
                 id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = quantity
        self.is_checked = is_checked

    def __str__(self) -> str:
        mark = "x" if self.is_checked else " "
        return f"[{mark}] {self.name} x{self.quantity}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates a ShoppingItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingItem(
            name=str(d.get("name", "")),
            quantity=int(d.get("quantity", 1)),
            is_checked=bool(d.get("is_checked", False)),
            id=d.get("id") or None,
        )

    def to_dict(self):
        '''Converts the ShoppingItem to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "is_checked": self.is_checked,
        }
