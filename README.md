# cashcarry

A small store system for a cash-and-carry shop, run from the terminal.
It keeps an inventory of products, a list of customers and a list of
staff. Customers log in by e-mail, fill a cart and place orders. Staff
add and remove products, see total sales and read customers' order
histories.

## Installing

```
pip install .
```

## Running

```
cashcarry
cashcarry --data-dir path/to/data
```

At startup the program reads `products.txt`, `customers.txt` and
`staff.txt` from the data directory, which is the current directory
unless `--data-dir` says otherwise. A missing file counts as empty. All
three files are written back when you leave the main menu or when the
input ends.

Each file holds whitespace-separated fields, one record per line:

- `products.txt`: name, category, price, quantity, supplier
- `customers.txt`: name, email, address
- `staff.txt`: name, email, position

For example, a `staff.txt` holding

```
alice alice@example.com manager
```

lets staff log in as `alice@example.com`.

### Menus

- **Main menu**: customer menu, staff menu, or exit.
- **Customer menu**: log in by e-mail, sign up, or go back. Sign-up asks
  for a name, an e-mail address and an address. The address is read as
  the rest of the line. Once logged in you can view your order history,
  add a product to the cart by name, show the cart with its total, or
  place the order. An empty cart cannot be placed.
- **Staff menu**: log in by e-mail. Staff can add a product, remove a
  product by name, show total sales over all placed orders, and list
  every customer with their order history.

### Limits

- The inventory holds up to 100 products.
- The store holds up to 100 customers and 100 placed orders.
- At most 50 staff members are loaded from `staff.txt`.
- A cart holds up to 50 items.
- Names, e-mail addresses, categories, suppliers and positions may have
  up to 49 characters. Addresses may have up to 99.

## Using it from Python

```python
from cashcarry.models import Product
from cashcarry.inventory import Order, sales_total
from cashcarry.store import load_store, save_store

store = load_store(".")
store.inventory.add_product(Product("rice", "grocery", 2.5, 10, "farms"))
customer = store.signup_customer("bob", "bob@example.com", "Market-Street")

cart = Order()
cart.add_product(store.inventory.find("rice"))
store.place_order(customer, cart)

print(sales_total(store.orders))
save_store(store, ".")
```

The package has four modules:

- `cashcarry.models`: the `Product`, `Customer` and `Staff` dataclasses.
  They raise `ValueError` when a field is too long.
- `cashcarry.inventory`: `Inventory`, `Order`, `ProductNotFoundError`,
  `sales_total` and `format_sales_report`.
- `cashcarry.store`: `Store`, `LimitReachedError`, and the `load_*` and
  `save_*` file functions, including `load_store` and `save_store`.
- `cashcarry.cli`: the `Console` menus and the `main` entry point.

Some methods report a full collection or a missing product by their
return value:

- `Inventory.find` returns `None` for an unknown name.
- `Inventory.remove_product` raises `ProductNotFoundError` when no
  product has that name.
- `Inventory.add_product` and `Order.add_product` return `False` when
  the collection is full.
- `Store.place_order` returns `False` for an empty cart.

`Store.signup_customer` and `Store.place_order` raise
`LimitReachedError` when the store's limit is reached.

## What it does not do

- Logging in needs only an e-mail address. There are no passwords.
- Placed orders and customers' order histories live only in memory.
  They are not written to any file.
- Placing an order does not reduce product quantities in stock.
- Fields in the data files are separated by whitespace. A field that
  contains spaces, such as an address typed with spaces at sign-up, is
  saved as is but is read back as several fields.

## Tests

```
pip install ".[test]"
pytest
```