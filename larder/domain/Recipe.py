"""Recipe domain entity: a name plus an ordered list of RecipeIngredient lines."""
from typing import List, Optional
from uuid import uuid4


class RecipeIngredient:
    def __init__(self, name: str = "", quantity: int = 1, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.quantity = quantity

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecipeIngredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return RecipeIngredient(
            name=str(d.get("name", "")),
            quantity=int(d.get("quantity", 1)),
            id=d.get("id") or None,
        )

    def to_dict(self):
        return {"id": self.id, "name": self.name, "quantity": self.quantity}


class Recipe:
    def __init__(self, name: str = "", ingredients: Optional[List[RecipeIngredient]] = None,
                 id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        # Duplicate names are allowed here: this is a raw record of what the recipe calls for
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        return f"{self.name} - Ingredients: {', '.join(str(i) for i in self.ingredients)}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe (and its ingredient lines) from a dictionary.'''
        d = dict(data) if isinstance(data, dict) else {}
        ingredients = [RecipeIngredient.from_dict(ing) for ing in d.get("ingredients", []) or []]
        return Recipe(name=str(d.get("name", "")), ingredients=ingredients, id=d.get("id") or None)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
