"""Core reconciliation logic.

Subpackages:
- shopping: missing-ingredient planning and filtered list views
- kitchen: stock analysis helpers

Top-level modules hold the leaf rules every collection shares (naming, quantities).
"""
__all__ = ["naming", "quantities", "shopping", "kitchen"]
