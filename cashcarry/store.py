"""The store's records and their plain-text files."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator

from .inventory import Inventory, Order
from .models import Customer, Product, Staff

CUSTOMER_CAPACITY = 100
STAFF_CAPACITY = 50
ORDER_CAPACITY = 100

ORDER_PLACED = "Order placed successfully!"

PRODUCTS_FILE = "products.txt"
CUSTOMERS_FILE = "customers.txt"
STAFF_FILE = "staff.txt"


class LimitReachedError(RuntimeError):
    """Raised when a fixed-size collection of the store is full."""


def _number(value: float) -> str:
    return f"{value:g}"


def _records(path: str | Path, width: int) -> Iterator[tuple[str, ...]]:
    """Yield whitespace-separated records of ``width`` fields from a file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return
    tokens = iter(text.split())
    yield from zip(*[tokens] * width)


def _write_lines(path: str | Path, lines: Iterable[str]) -> None:
    Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


def load_products(path: str | Path) -> Inventory:
    """Read products from a file; a missing file gives an empty inventory."""
    inventory = Inventory()
    for name, category, price_text, quantity_text, supplier in _records(path, 5):
        try:
            price = float(price_text)
            quantity = int(quantity_text)
        except ValueError:
            break
        inventory.add_product(Product(name, category, price, quantity, supplier))
    return inventory


def save_products(inventory: Iterable[Product], path: str | Path) -> None:
    """Write one line per product."""
    _write_lines(
        path,
        (
            f"{p.name} {p.category} {_number(p.price)} {p.quantity} {p.supplier}"
            for p in inventory
        ),
    )


def load_customers(path: str | Path) -> list[Customer]:
    """Read customers from a file, up to the customer capacity."""
    return [
        Customer(name, email, address)
        for name, email, address in islice(_records(path, 3), CUSTOMER_CAPACITY)
    ]


def save_customers(customers: Iterable[Customer], path: str | Path) -> None:
    """Write one line per customer."""
    _write_lines(path, (f"{c.name} {c.email} {c.address}" for c in customers))


def load_staff(path: str | Path) -> list[Staff]:
    """Read staff members from a file, up to the staff capacity."""
    return [
        Staff(name, email, position)
        for name, email, position in islice(_records(path, 3), STAFF_CAPACITY)
    ]


def save_staff(staff: Iterable[Staff], path: str | Path) -> None:
    """Write one line per staff member."""
    _write_lines(path, (f"{s.name} {s.email} {s.position}" for s in staff))


@dataclass
class Store:
    """Everything the store keeps: stock, customers, staff and placed orders."""

    inventory: Inventory = field(default_factory=Inventory)
    customers: list[Customer] = field(default_factory=list)
    staff: list[Staff] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)

    def find_customer(self, email: str) -> Customer | None:
        """Return the first customer with this e-mail address, or None."""
        return next((c for c in self.customers if c.email == email), None)

    def find_staff(self, email: str) -> Staff | None:
        """Return the first staff member with this e-mail address, or None."""
        return next((s for s in self.staff if s.email == email), None)

    def signup_customer(self, name: str, email: str, address: str) -> Customer:
        """Register a new customer and return it."""
        if len(self.customers) >= CUSTOMER_CAPACITY:
            raise LimitReachedError("Customer limit reached!")
        customer = Customer(name, email, address)
        self.customers.append(customer)
        return customer

    def place_order(self, customer: Customer, cart: Order) -> bool:
        """Record a copy of the cart as an order; return False for an empty cart."""
        if cart.total() <= 0:
            return False
        if len(self.orders) >= ORDER_CAPACITY:
            raise LimitReachedError("Order limit reached!")
        placed = Order(cart.capacity)
        for item in cart:
            placed.add_product(item)
        self.orders.append(placed)
        customer.add_order(ORDER_PLACED)
        return True


def load_store(directory: str | Path) -> Store:
    """Load the store's files from a directory."""
    base = Path(directory)
    return Store(
        inventory=load_products(base / PRODUCTS_FILE),
        customers=load_customers(base / CUSTOMERS_FILE),
        staff=load_staff(base / STAFF_FILE),
    )


def save_store(store: Store, directory: str | Path) -> None:
    """Write the store's files into a directory."""
    base = Path(directory)
    save_products(store.inventory, base / PRODUCTS_FILE)
    save_customers(store.customers, base / CUSTOMERS_FILE)
    save_staff(store.staff, base / STAFF_FILE)