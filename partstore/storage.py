"""Reading and writing the product and customer files."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import TypeVar, Union

from partstore.models import MAX_CUSTOMERS, MAX_PRODUCTS, Customer, Product

PRODUCTS_FILE = "productos.dat"
CUSTOMERS_FILE = "clientes.dat"

_INITIAL_PRODUCTS = (
    ("Filtro de Aceite", 12.50, 50),
    ("Pastillas de Freno", 35.00, 30),
    ("Bateria 12V", 80.00, 15),
    ("Bujias (set 4)", 25.00, 40),
    ("Aceite Motor 1L", 10.00, 100),
)

PathType = Union[str, "PathLike[str]"]
_Record = TypeVar("_Record", Product, Customer)


def default_products(capacity: int = MAX_PRODUCTS) -> list[Product]:
    """Return the starting inventory, padded with empty slots up to capacity."""
    if capacity < len(_INITIAL_PRODUCTS):
        raise ValueError(
            f"capacity must be at least {len(_INITIAL_PRODUCTS)}, got {capacity}"
        )
    products = [Product(name, price, stock) for name, price, stock in _INITIAL_PRODUCTS]
    products.extend(Product() for _ in range(capacity - len(products)))
    return products


def _records(data: bytes, record_type: type[_Record], limit: int) -> list[_Record]:
    size = record_type.RECORD_SIZE
    count = min(len(data) // size, limit)
    view = memoryview(data)
    return [
        record_type.from_bytes(view[start : start + size])
        for start in range(0, count * size, size)
    ]


def save_products(products: Iterable[Product], path: PathType = PRODUCTS_FILE) -> None:
    """Write every product slot to the products file."""
    Path(path).write_bytes(b"".join(product.to_bytes() for product in products))


def load_products(path: PathType = PRODUCTS_FILE, capacity: int = MAX_PRODUCTS) -> list[Product]:
    """Read up to capacity products; missing slots come back empty.

    Raises FileNotFoundError when the products have never been saved.
    """
    products = _records(Path(path).read_bytes(), Product, capacity)
    products.extend(Product() for _ in range(capacity - len(products)))
    return products


def save_customers(customers: Iterable[Customer], path: PathType = CUSTOMERS_FILE) -> None:
    """Write the customer list to the customers file."""
    Path(path).write_bytes(b"".join(customer.to_bytes() for customer in customers))


def load_customers(path: PathType = CUSTOMERS_FILE) -> list[Customer]:
    """Read every complete customer record; a missing file means no customers."""
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return []
    return _records(data, Customer, MAX_CUSTOMERS)