import pytest

from cashcarry.inventory import (
    Inventory,
    Order,
    ProductNotFoundError,
    format_sales_report,
    sales_total,
)
from cashcarry.models import Product


def make(name, price=2.5, quantity=10):
    return Product(name, "Grocery", price, quantity, "Acme")


def test_add_and_find():
    inventory = Inventory()
    assert inventory.add_product(make("Rice")) is True
    found = inventory.find("Rice")
    assert found is not None and found.name == "Rice"
    assert inventory.find("Tea") is None


def test_add_stores_a_copy():
    inventory = Inventory()
    product = make("Rice")
    inventory.add_product(product)
    product.quantity = 0
    assert inventory.find("Rice").quantity == 10


def test_inventory_capacity_is_one_hundred():
    inventory = Inventory()
    for i in range(100):
        assert inventory.add_product(make(f"P{i}"))
    assert inventory.add_product(make("Extra")) is False
    assert len(inventory) == 100
    assert inventory.find("Extra") is None


def test_remove_product_keeps_order():
    inventory = Inventory()
    for name in ("A", "B", "C"):
        inventory.add_product(make(name))
    removed = inventory.remove_product("B")
    assert removed.name == "B"
    assert [p.name for p in inventory] == ["A", "C"]


def test_remove_missing_product_raises():
    inventory = Inventory()
    inventory.add_product(make("A"))
    with pytest.raises(ProductNotFoundError):
        inventory.remove_product("Z")
    assert len(inventory) == 1


def test_getitem_returns_product():
    inventory = Inventory()
    inventory.add_product(make("A"))
    inventory.add_product(make("B"))
    assert inventory[1].name == "B"


def test_format_listing():
    inventory = Inventory()
    inventory.add_product(Product("Rice", "Grocery", 2.5, 10, "Acme"))
    assert inventory.format_listing() == (
        "1. Rice - Grocery - Price: 2.5 - Quantity: 10 - Supplier: Acme\n"
    )


def test_format_listing_empty():
    assert Inventory().format_listing() == ""


def test_order_total_is_sum_of_prices():
    order = Order()
    prices = [1.25, 2.5, 4.0]
    for i, price in enumerate(prices):
        order.add_product(make(f"P{i}", price))
    assert order.total() == pytest.approx(sum(prices))


def test_empty_order_total_is_zero():
    assert Order().total() == 0


def test_order_capacity_is_fifty():
    order = Order()
    for i in range(50):
        assert order.add_product(make(f"P{i}", 1.0))
    assert order.add_product(make("Extra", 1.0)) is False
    assert len(order) == 50


def test_format_order():
    order = Order()
    order.add_product(make("Rice", 2.5))
    assert order.format_order() == "1. Rice - Price: 2.5\nTotal: 2.5\n"


def test_format_empty_order():
    assert Order().format_order() == "Total: 0\n"


def test_sales_total_combines_orders():
    first, second = Order(), Order()
    first.add_product(make("A", 2.5))
    second.add_product(make("B", 4.0))
    second.add_product(make("C", 1.5))
    assert sales_total([first, second]) == pytest.approx(first.total() + second.total())
    assert sales_total([]) == 0


def test_format_sales_report():
    order = Order()
    order.add_product(make("A", 2.5))
    assert format_sales_report([order]) == "Total Sales: 2.5\n"
    assert format_sales_report([]) == "Total Sales: 0\n"