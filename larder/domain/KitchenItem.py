"""KitchenItem domain entity: on-hand stock of one named item."""
from typing import Optional
from uuid import uuid4


class KitchenItem:
    def __init__(self, name: str = "", quantity: int = 0, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = quantity

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, KitchenItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return KitchenItem(
            name=str(d.get("name", "")),
            quantity=int(d.get("quantity", 0)),
            id=d.get("id") or None,
        )

    def to_dict(self):
        return {"id": self.id, "name": self.name, "quantity": self.quantity}
