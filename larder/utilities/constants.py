from typing import Final

# Storage keys: one independent slot per collection
SHOPPING_KEY: Final[str] = "shopping_items_v1"
KITCHEN_KEY: Final[str] = "kitchen_items_v1"
RECIPES_KEY: Final[str] = "recipes_v1"

NAME_MAX_LENGTH: Final[int] = 100
PDF_TITLE: Final[str] = "Shopping List"
