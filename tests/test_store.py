import pytest

from partstore.models import MAX_CUSTOMERS, MAX_PRODUCTS, Customer, Product
from partstore.storage import default_products
from partstore.store import ProductNotFoundError, SaleError, Store


@pytest.fixture
def store():
    return Store(default_products(), [])


def test_record_sale_updates_product_and_customer(store):
    sale = store.record_sale(1, 5, "Ana", "0101")
    product = store.products[0]
    assert sale.product is product
    assert sale.quantity == 5
    assert product.sold == 5
    assert product.stock + product.sold == 50
    assert store.customers == [Customer("Ana", "0101", 5)]
    assert sale.customer == Customer("Ana", "0101", 5)


def test_repeat_customer_accumulates_by_id(store):
    store.record_sale(1, 3, "Ana", "0101")
    store.record_sale(2, 4, "Ana Maria", "0101")
    assert len(store.customers) == 1
    assert store.customers[0].name == "Ana"
    assert store.customers[0].purchases == 3 + 4


@pytest.mark.parametrize("number", [0, -1, 6, MAX_PRODUCTS, MAX_PRODUCTS + 1])
def test_invalid_product_number(store, number):
    with pytest.raises(SaleError):
        store.record_sale(number, 1, "Ana", "0101")
    assert store.customers == []


@pytest.mark.parametrize("quantity", [0, -2, 51])
def test_invalid_quantity(store, quantity):
    with pytest.raises(SaleError):
        store.record_sale(1, quantity, "Ana", "0101")
    assert store.products[0] == default_products()[0]


def test_whole_stock_can_be_sold_then_unavailable(store):
    store.record_sale(3, 15, "Ana", "0101")
    assert store.products[2].stock == 0
    assert all(number != 3 for number, _ in store.available_products())
    with pytest.raises(SaleError):
        store.record_sale(3, 1, "Ana", "0101")


def test_available_products_numbers(store):
    numbers = [number for number, _ in store.available_products()]
    assert numbers == [1, 2, 3, 4, 5]
    assert store.available_products()[1][1].name == "Pastillas de Freno"


def test_update_product_stats_unknown(store):
    with pytest.raises(ProductNotFoundError):
        store.update_product_stats("Nada", 1)


def test_customer_limit(store):
    store.customers = [Customer(f"c{n}", str(n), 1) for n in range(MAX_CUSTOMERS)]
    assert store.update_customer_stats("Nuevo", "nuevo", 2) is None
    assert len(store.customers) == MAX_CUSTOMERS
    existing = store.update_customer_stats("c0", "0", 2)
    assert existing is store.customers[0]
    assert existing.purchases == 1 + 2


def test_sale_proceeds_when_customer_list_full(store):
    store.customers = [Customer(f"c{n}", str(n), 1) for n in range(MAX_CUSTOMERS)]
    sale = store.record_sale(1, 2, "Nuevo", "nuevo")
    assert sale.customer is None
    assert store.products[0].sold == 2


def test_best_sellers_order_and_filter(store):
    store.record_sale(2, 1, "Ana", "0101")
    store.record_sale(4, 6, "Luis", "0202")
    store.record_sale(5, 1, "Eva", "0303")
    names = [p.name for p in store.best_sellers()]
    assert names == ["Bujias (set 4)", "Pastillas de Freno", "Aceite Motor 1L"]


def test_best_sellers_empty_without_sales(store):
    assert store.best_sellers() == []


def test_stock_lists_registered_products(store):
    assert [p.name for p in store.stock()] == [p.name for p in default_products()[:5]]
    assert Store([Product()] * 3, []).stock() == []


def test_top_customers(store):
    store.customers = [
        Customer("Ana", "1", 2),
        Customer("Luis", "2", 9),
        Customer("", "3", 50),
        Customer("Eva", "4", 2),
        Customer("Sin", "5", 0),
    ]
    assert [c.name for c in store.top_customers()] == ["Luis", "Ana", "Eva"]


def test_search_customers(store):
    store.customers = [
        Customer("Ana Perez", "0101", 2),
        Customer("Mariana", "0202", 3),
        Customer("Luis", "0303", 1),
    ]
    assert [c.name for c in store.search_customers("ana")] == ["Mariana"]
    assert [c.name for c in store.search_customers("Ana")] == ["Ana Perez"]
    assert [c.name for c in store.search_customers("0303")] == ["Luis"]
    assert store.search_customers("030") == []
    assert len(store.search_customers("")) == 3


def test_reset(store):
    store.record_sale(1, 5, "Ana", "0101")
    store.reset()
    assert store.products == default_products()
    assert store.customers == []