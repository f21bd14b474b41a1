"""Interactive text menus of the store."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .inventory import Order, ProductNotFoundError, format_sales_report
from .models import Customer, Product
from .store import LimitReachedError, Store, load_store, save_store

_WORD_PATTERN = re.compile(r"\S+")


class _Reader:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _read(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line

    def token(self) -> str:
        while True:
            stripped = self._buffer.lstrip()
            match = _WORD_PATTERN.match(stripped)
            if match:
                self._buffer = stripped[match.end():]
                return match.group()
            self._buffer = self._read()

    def line(self) -> str:
        """Skip one character, then return the rest of the current line."""
        if not self._buffer:
            self._buffer = self._read()
        data = self._buffer[1:] or self._read()
        text, _, self._buffer = data.partition("\n")
        return text


class Console:
    """The store's menus, reading from and writing to text streams."""

    def __init__(
        self, store: Store, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self.store = store
        self._input = _Reader(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._input.token()

    def _choice(self) -> int | None:
        try:
            return int(self._ask("Choice: "))
        except ValueError:
            return None

    def main_menu(self) -> None:
        """Run the top-level menu until the user exits."""
        while True:
            self._write("\n=== Punjab Cash & Carry Main Menu ===\n")
            self._write("1. Customer Menu\n2. Staff Menu\n3. Exit\n")
            match self._choice():
                case 1:
                    self.customer_menu()
                case 2:
                    self.staff_menu()
                case 3:
                    self._write("Thank you for using Punjab Cash & Carry System!\n")
                    return
                case _:
                    self._write("Invalid choice!\n")

    def customer_menu(self) -> None:
        """Let a customer log in or sign up."""
        while True:
            self._write("\n--- Customer Menu ---\n")
            self._write("1. Login\n2. Signup\n3. Exit\n")
            match self._choice():
                case 1:
                    customer = self.store.find_customer(self._ask("Enter your email: "))
                    if customer is None:
                        self._write("Customer not found!")
                    else:
                        self.customer_order_menu(customer)
                case 2:
                    self._signup()
                case 3:
                    self._write("Exiting Customer Menu.\n")
                    return
                case _:
                    self._write("Invalid choice!\n")

    def _signup(self) -> None:
        if len(self.store.customers) >= 100:
            self._write("Customer limit reached!")
            return
        name = self._ask("Enter name: ")
        email = self._ask("Enter email: ")
        self._write("Enter address: ")
        address = self._input.line()
        try:
            self.store.signup_customer(name, email, address)
        except (ValueError, LimitReachedError) as error:
            self._write(f"{error}\n")
            return
        self._write("Signup successful!")

    def customer_order_menu(self, customer: Customer) -> None:
        """Let a logged-in customer fill a cart and place orders."""
        cart = Order()
        while True:
            self._write("\n--- Customer Order Menu ---\n")
            self._write(
                "1. View Order History\n2. Add Product to Cart\n3. Show Cart\n"
                "4. Place Order\n5. Exit\n"
            )
            match self._choice():
                case 1:
                    self._write(customer.format_history())
                case 2:
                    self._write(self.store.inventory.format_listing())
                    product = self.store.inventory.find(
                        self._ask("Enter product name to add: ")
                    )
                    if product is None:
                        self._write("Product not found!\n")
                    else:
                        cart.add_product(product)
                        self._write("Product added to cart!\n")
                case 3:
                    self._write(cart.format_order())
                case 4:
                    try:
                        placed = self.store.place_order(customer, cart)
                    except LimitReachedError as error:
                        self._write(f"{error}\n")
                    else:
                        self._write("Order placed!\n" if placed else "Cart is empty!\n")
                case 5:
                    self._write("Exiting Customer Order Menu.\n")
                    return
                case _:
                    self._write("Invalid choice!\n")

    def staff_menu(self) -> None:
        """Let a staff member log in."""
        while True:
            self._write("\n--- Staff Menu ---\n")
            self._write("1. Login\n2. Exit\n")
            match self._choice():
                case 1:
                    if self.store.find_staff(self._ask("Enter staff email: ")) is None:
                        self._write("Staff not found!")
                    else:
                        self.staff_management_menu()
                case 2:
                    self._write("Exiting Staff Menu.\n")
                    return
                case _:
                    self._write("Invalid choice!\n")

    def staff_management_menu(self) -> None:
        """Run the inventory and reporting menu for a logged-in staff member."""
        while True:
            self._write("\n--- Staff Management Menu ---\n")
            self._write(
                "1. Add Product\n2. Remove Product\n3. Generate Sales Report\n"
                "4. View Customer Histories\n5. Exit\n"
            )
            match self._choice():
                case 1:
                    self._add_product()
                case 2:
                    name = self._ask("Enter product name to remove: ")
                    try:
                        self.store.inventory.remove_product(name)
                    except ProductNotFoundError:
                        self._write("Product not found.")
                    else:
                        self._write("Product removed.")
                case 3:
                    self._write(format_sales_report(self.store.orders))
                case 4:
                    for customer in self.store.customers:
                        self._write(f"{customer}\n")
                        self._write(customer.format_history())
                case 5:
                    self._write("Exiting Staff Management Menu.\n")
                    return
                case _:
                    self._write("Invalid choice!\n")

    def _add_product(self) -> None:
        name = self._ask("Enter name: ")
        category = self._ask("Enter category: ")
        price_text = self._ask("Enter price: ")
        quantity_text = self._ask("Enter quantity: ")
        supplier = self._ask("Enter supplier: ")
        try:
            product = Product(
                name, category, float(price_text), int(quantity_text), supplier
            )
        except ValueError:
            self._write("Invalid input!\n")
            return
        self.store.inventory.add_product(product)
        self._write("Product added!\n")


def main(argv: list[str] | None = None) -> int:
    """Load the store, run the menus and save the store again."""
    parser = argparse.ArgumentParser(description="Cash and carry store console.")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the store's text files"
    )
    args = parser.parse_args(argv)
    store = load_store(args.data_dir)
    try:
        Console(store).main_menu()
    except EOFError:
        pass
    save_store(store, args.data_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())