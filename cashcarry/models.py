"""Core records of the store: products, customers and staff members."""

from __future__ import annotations

from dataclasses import dataclass, field

NAME_MAX = 49
EMAIL_MAX = 49
ADDRESS_MAX = 99
FIELD_MAX = 49


def _check_length(label: str, value: str, limit: int) -> None:
    if len(value) > limit:
        raise ValueError(f"{label} is longer than {limit} characters: {value!r}")


@dataclass
class Product:
    """A product held in stock or placed in a cart."""

    name: str
    category: str
    price: float
    quantity: int
    supplier: str

    def __post_init__(self) -> None:
        _check_length("name", self.name, NAME_MAX)
        _check_length("category", self.category, FIELD_MAX)
        _check_length("supplier", self.supplier, FIELD_MAX)
        self.price = float(self.price)
        self.quantity = int(self.quantity)


@dataclass
class Customer:
    """A registered customer with a history of placed orders."""

    name: str
    email: str
    address: str
    history: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_length("name", self.name, NAME_MAX)
        _check_length("email", self.email, EMAIL_MAX)
        _check_length("address", self.address, ADDRESS_MAX)

    def add_order(self, detail: str) -> None:
        """Record a line in the customer's order history."""
        self.history.append(detail)

    def format_history(self) -> str:
        """Return the order history as printed text."""
        lines = "".join(f"- {order}\n" for order in self.history)
        return f"Order History for {self.name}:{lines}"

    def __str__(self) -> str:
        return f"Customer: {self.name}, Email: {self.email}, Address: {self.address}"


@dataclass
class Staff:
    """A staff member who may manage the inventory."""

    name: str
    email: str
    position: str

    def __post_init__(self) -> None:
        _check_length("name", self.name, NAME_MAX)
        _check_length("email", self.email, EMAIL_MAX)
        _check_length("position", self.position, FIELD_MAX)