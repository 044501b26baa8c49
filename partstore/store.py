"""Inventory and customer bookkeeping for the parts store."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from partstore.models import MAX_CUSTOMERS, MAX_PRODUCTS, Customer, Product
from partstore.storage import default_products


class SaleError(ValueError):
    """A sale was rejected because of an invalid product or quantity."""


class ProductNotFoundError(LookupError):
    """No product with the given name exists."""


@dataclass(frozen=True)
class Sale:
    """The outcome of a recorded sale; customer is None when the list was full."""

    product: Product
    quantity: int
    customer: Optional[Customer]


class Store:
    """Products and customers held in memory."""

    def __init__(self, products: Iterable[Product], customers: Iterable[Customer]) -> None:
        self.products = list(products)
        self.customers = list(customers)

    def reset(self) -> None:
        """Restore the starting inventory and forget every customer."""
        self.products = default_products(MAX_PRODUCTS)
        self.customers = []

    def available_products(self) -> list[tuple[int, Product]]:
        """Return (number, product) for products that can be sold; numbers start at 1."""
        return [
            (number, product)
            for number, product in enumerate(self.products, start=1)
            if product.registered and product.stock > 0
        ]

    def record_sale(
        self, number: int, quantity: int, customer_name: str, customer_id: str
    ) -> Sale:
        """Sell quantity units of product number (1-based) to a customer."""
        if not 1 <= number <= len(self.products):
            raise SaleError("invalid product selection or product out of stock")
        product = self.products[number - 1]
        if not product.registered or product.stock <= 0:
            raise SaleError("invalid product selection or product out of stock")
        if quantity <= 0 or quantity > product.stock:
            raise SaleError("invalid quantity or insufficient stock")
        self.update_product_stats(product.name, quantity)
        customer = self.update_customer_stats(customer_name, customer_id, quantity)
        return Sale(product, quantity, customer)

    def update_product_stats(self, name: str, quantity: int) -> Product:
        """Move quantity units of the named product from stock to sold."""
        product = next((p for p in self.products if p.name == name), None)
        if product is None:
            raise ProductNotFoundError(f"product {name!r} not found")
        product.sold += quantity
        product.stock -= quantity
        return product

    def update_customer_stats(
        self, name: str, id_number: str, quantity: int
    ) -> Optional[Customer]:
        """Add purchases to the customer with this id, registering them if new.

        Returns None when a new customer cannot be registered because the
        customer list is full.
        """
        existing = next((c for c in self.customers if c.id_number == id_number), None)
        if existing is not None:
            existing.purchases += quantity
            return existing
        if len(self.customers) >= MAX_CUSTOMERS:
            return None
        customer = Customer(name, id_number, quantity)
        self.customers.append(customer)
        return customer

    def best_sellers(self) -> list[Product]:
        """Products with sales, most sold first; ties keep inventory order."""
        ranked = sorted(
            (p for p in self.products if p.registered), key=lambda p: p.sold, reverse=True
        )
        return [p for p in ranked if p.sold > 0]

    def stock(self) -> list[Product]:
        """Every registered product in inventory order."""
        return [p for p in self.products if p.registered]

    def top_customers(self) -> list[Customer]:
        """Customers with purchases, biggest buyers first; ties keep list order."""
        ranked = sorted(
            (c for c in self.customers if c.registered),
            key=lambda c: c.purchases,
            reverse=True,
        )
        return [c for c in ranked if c.purchases > 0]

    def search_customers(self, term: str) -> list[Customer]:
        """Customers whose name contains term (case-sensitive) or whose id equals it."""
        return [
            c
            for c in self.customers
            if c.registered and (term in c.name or c.id_number == term)
        ]