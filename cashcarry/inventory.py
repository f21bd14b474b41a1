"""Stock keeping, shopping carts and sales reporting."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator

from .models import Product

INVENTORY_CAPACITY = 100
ORDER_CAPACITY = 50


def _number(value: float) -> str:
    return f"{value:g}"


class ProductNotFoundError(LookupError):
    """Raised when no product with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Product not found: {name}")
        self.name = name


class Inventory:
    """The store's stock, holding at most a fixed number of products."""

    def __init__(self, capacity: int = INVENTORY_CAPACITY) -> None:
        self.capacity = capacity
        self._products: list[Product] = []

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __getitem__(self, index: int) -> Product:
        return self._products[index]

    def add_product(self, product: Product) -> bool:
        """Store a copy of the product; return False when the inventory is full."""
        if len(self._products) >= self.capacity:
            return False
        self._products.append(replace(product))
        return True

    def remove_product(self, name: str) -> Product:
        """Remove and return the first product with this name."""
        for index, product in enumerate(self._products):
            if product.name == name:
                return self._products.pop(index)
        raise ProductNotFoundError(name)

    def find(self, name: str) -> Product | None:
        """Return the stored product with this name, or None."""
        return next((p for p in self._products if p.name == name), None)

    def format_listing(self) -> str:
        """Return the numbered listing of every product."""
        return "".join(
            f"{number}. {p.name} - {p.category} - Price: {_number(p.price)}"
            f" - Quantity: {p.quantity} - Supplier: {p.supplier}\n"
            for number, p in enumerate(self._products, start=1)
        )


class Order:
    """A cart of products that becomes an order once placed."""

    def __init__(self, capacity: int = ORDER_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[Product] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)

    def add_product(self, product: Product) -> bool:
        """Add a copy of the product; return False when the order is full."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(replace(product))
        return True

    def total(self) -> float:
        """Return the sum of the item prices."""
        return sum((item.price for item in self._items), 0.0)

    def format_order(self) -> str:
        """Return the numbered item list followed by the total."""
        lines = "".join(
            f"{number}. {item.name} - Price: {_number(item.price)}\n"
            for number, item in enumerate(self._items, start=1)
        )
        return f"{lines}Total: {_number(self.total())}\n"


def sales_total(orders: Iterable[Order]) -> float:
    """Return the combined total of all orders."""
    return sum((order.total() for order in orders), 0.0)


def format_sales_report(orders: Iterable[Order]) -> str:
    """Return the sales report text."""
    return f"Total Sales: {_number(sales_total(orders))}\n"