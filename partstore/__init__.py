"""Inventory, sales and customer tracking for a small auto parts shop."""

__version__ = "0.1.0"
__all__ = ["models", "storage", "store", "cli"]