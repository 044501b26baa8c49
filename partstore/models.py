"""Product and customer records with their fixed-size binary layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

MAX_PRODUCTS = 20
MAX_CUSTOMERS = 100
NAME_SIZE = 50
ID_SIZE = 15


def _encode(text: str, size: int, field: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) >= size:
        raise ValueError(f"{field} must be shorter than {size} bytes: {text!r}")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _check_length(data: bytes, size: int, kind: str) -> None:
    if len(data) != size:
        raise ValueError(f"{kind} record must be {size} bytes, got {len(data)}")


@dataclass
class Product:
    """An item in the inventory. A product with an empty name is an unused slot."""

    name: str = ""
    price: float = 0.0
    stock: int = 0
    sold: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<50s2xfii")
    RECORD_SIZE: ClassVar[int] = _FORMAT.size

    @property
    def registered(self) -> bool:
        """True when the slot holds a real product."""
        return bool(self.name)

    def to_bytes(self) -> bytes:
        """Pack the product into its fixed-size record."""
        name = _encode(self.name, NAME_SIZE, "product name")
        return self._FORMAT.pack(name, self.price, self.stock, self.sold)

    @classmethod
    def from_bytes(cls, data: bytes) -> Product:
        """Unpack a product from one fixed-size record."""
        _check_length(data, cls.RECORD_SIZE, "product")
        name, price, stock, sold = cls._FORMAT.unpack(data)
        return cls(_decode(name), price, stock, sold)


@dataclass
class Customer:
    """A customer identified by an id number, with the units bought so far."""

    name: str = ""
    id_number: str = ""
    purchases: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<50s15s3xi")
    RECORD_SIZE: ClassVar[int] = _FORMAT.size

    @property
    def registered(self) -> bool:
        """True when the record holds a real customer."""
        return bool(self.name)

    def to_bytes(self) -> bytes:
        """Pack the customer into its fixed-size record."""
        name = _encode(self.name, NAME_SIZE, "customer name")
        id_number = _encode(self.id_number, ID_SIZE, "customer id")
        return self._FORMAT.pack(name, id_number, self.purchases)

    @classmethod
    def from_bytes(cls, data: bytes) -> Customer:
        """Unpack a customer from one fixed-size record."""
        _check_length(data, cls.RECORD_SIZE, "customer")
        name, id_number, purchases = cls._FORMAT.unpack(data)
        return cls(_decode(name), _decode(id_number), purchases)