"""
Input validation schemas using Pydantic for the HTTP surface.

The store silently ignores bad input; these schemas reject it early with a 422
so API clients get feedback.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List

from larder.logic.shopping.views import TO_BUY, CHECKED
from larder.utilities.constants import NAME_MAX_LENGTH


class _NamedInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; blank names are rejected."""
        v = v.strip()
        if not v:
            raise ValueError('Name cannot be empty')
        return v


class ShoppingItemInput(_NamedInput):
    """Schema for adding to the shopping list."""
    quantity: int = Field(1, ge=1, le=100000)


class ShoppingDeleteInput(BaseModel):
    """Delete by position inside a filtered view of the shopping list."""
    view: str = Field(..., pattern=f'^({TO_BUY}|{CHECKED})$')
    offsets: List[int] = Field(..., min_length=1)


class KitchenDeltaInput(_NamedInput):
    """Signed change to a kitchen item."""
    delta: int = Field(..., ge=-100000, le=100000)

    @field_validator('delta')
    @classmethod
    def non_zero(cls, v):
        if v == 0:
            raise ValueError('Delta cannot be zero')
        return v


class KitchenQuantityInput(BaseModel):
    """Absolute quantity for an existing kitchen item (0 removes it)."""
    quantity: int = Field(..., ge=0, le=100000)


class RecipeInput(_NamedInput):
    """Schema for recipe creation."""


class IngredientInput(_NamedInput):
    """Schema for a recipe ingredient line."""
    quantity: int = Field(1, ge=1, le=100000)
