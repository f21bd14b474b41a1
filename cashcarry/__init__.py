"""Store system for a cash-and-carry shop: products, customers, staff, carts, orders, sales reports and text-file storage."""

__version__ = "0.1.0"
__all__ = ["cli", "inventory", "models", "store"]