"""Interactive menu for running the parts store from a terminal."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Optional, TextIO

from partstore.models import ID_SIZE, MAX_PRODUCTS, NAME_SIZE
from partstore.storage import (
    CUSTOMERS_FILE,
    PRODUCTS_FILE,
    PathType,
    load_customers,
    load_products,
    save_customers,
    save_products,
)
from partstore.store import Store

_MENU = (
    "\n--- SISTEMA DE GESTION TIENDA DE REPUESTOS ---\n"
    "1. Inicializar Productos (Primer uso / Resetear)\n"
    "2. Registrar Nueva Venta\n"
    "3. Mostrar Productos Mas Vendidos\n"
    "4. Mostrar Stock de Productos\n"
    "5. Mostrar Clientes con Mas Compras\n"
    "6. Buscar Cliente por Nombre o Cedula\n"
    "7. Salir\n"
    ">>>>>: "
)
_EXIT_OPTION = 7
_INTEGER = re.compile(r"\s*([+-]?\d+)")


class _EndOfInput(Exception):
    """The input stream ran out."""


class _Console:
    """One interactive session over a pair of text streams."""

    def __init__(self, directory: PathType, stdin: TextIO, stdout: TextIO) -> None:
        base = Path(directory)
        self.products_path = base / PRODUCTS_FILE
        self.customers_path = base / CUSTOMERS_FILE
        self.stdin = stdin
        self.stdout = stdout
        self.store = Store([], load_customers(self.customers_path))
        self._reload_products()

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\n")

    def _read_int(self) -> Optional[int]:
        line = self._read_line()
        while not line.strip():
            line = self._read_line()
        match = _INTEGER.match(line)
        return int(match.group(1)) if match else None

    def _read_text(self, size: int) -> str:
        raw = self._read_line().encode("utf-8")[: size - 1]
        return raw.decode("utf-8", errors="ignore")

    def _reload_products(self) -> bool:
        try:
            self.store.products = load_products(self.products_path, MAX_PRODUCTS)
        except FileNotFoundError:
            self._write(
                "Archivo de productos no encontrado. Por favor, inicialice los "
                "productos primero (Opcion 1).\n"
            )
            self.store.products = load_products_empty()
            return False
        return True

    def _save_products(self) -> None:
        try:
            save_products(self.store.products, self.products_path)
        except OSError:
            self._write("Error al abrir el archivo de productos para escritura.\n")

    def _save_customers(self) -> None:
        try:
            save_customers(self.store.customers, self.customers_path)
        except OSError:
            self._write("Error al abrir el archivo de clientes para escritura.\n")

    def loop(self) -> None:
        while True:
            self._write(_MENU)
            option = self._read_int()
            if option == 1:
                self._reset()
            elif option == 2:
                if self._reload_products():
                    self._sell()
            elif option == 3:
                if self._reload_products():
                    self._show_best_sellers()
            elif option == 4:
                if self._reload_products():
                    self._show_stock()
            elif option == 5:
                self._show_top_customers()
            elif option == 6:
                self._search()
            elif option == _EXIT_OPTION:
                self._write("Saliendo del programa. ¡Hasta luego!\n")
                return
            else:
                self._write("Opcion invalida. Intente de nuevo.\n")

    def _reset(self) -> None:
        self.store.reset()
        self._save_products()
        self._write("Productos inicializados con exito y stock/ventas reseteados a cero.\n")
        self._save_customers()
        self._write("Los datos de clientes tambien han sido reiniciados.\n")

    def _sell(self) -> None:
        available = dict(self.store.available_products())
        self._write("\n--- Lista de Productos Disponibles ---\n")
        for number, product in available.items():
            self._write(
                f"{number}. {product.name:<20} "
                f"(Stock: {product.stock}, Precio: {product.price:.2f})\n"
            )
        if not available:
            self._write("No hay productos disponibles para la venta en este momento.\n")
            return

        self._write("Seleccione el numero del Producto a vender: ")
        number = self._read_int()
        product = available.get(number) if number is not None else None
        if product is None:
            self._write("Seleccion de producto invalida o producto sin stock.\n")
            return

        self._write(
            f"Ingrese la cantidad a vender de {product.name} "
            f"(Stock actual: {product.stock}): "
        )
        quantity = self._read_int()
        if quantity is None or quantity <= 0 or quantity > product.stock:
            self._write("Cantidad de venta invalida o stock insuficiente.\n")
            return

        self._write("Ingrese el nombre del Cliente: ")
        customer_name = self._read_text(NAME_SIZE)
        self._write("Ingrese la cedula del Cliente: ")
        customer_id = self._read_text(ID_SIZE)

        sale = self.store.record_sale(number, quantity, customer_name, customer_id)
        if sale.customer is None:
            self._write(
                "Advertencia: No se puede registrar mas clientes, limite alcanzado.\n"
            )
        self._save_products()
        self._save_customers()
        self._write("Venta registrada con exito!\n")

    def _show_best_sellers(self) -> None:
        if not self.store.stock():
            self._write(
                "\nNo hay productos registrados para mostrar estadisticas de ventas.\n"
            )
            return
        self._write("\n------------------- PRODUCTOS MAS VENDIDOS -------------------\n")
        self._write("POS\tPRODUCTO\t\t\tVENDIDOS\tSTOCK ACTUAL\n")
        self._write("-" * 62 + "\n")
        ranked = self.store.best_sellers()
        for position, product in enumerate(ranked, start=1):
            self._write(
                f"{position}\t{product.name:<20}\t{product.sold}\t\t{product.stock}\n"
            )
        if not ranked:
            self._write("No hay productos vendidos para mostrar estadisticas.\n")

    def _show_stock(self) -> None:
        self._write("\n------------------- STOCK DE PRODUCTOS -------------------\n")
        self._write("PRODUCTO\t\t\tPRECIO\t\tSTOCK\n")
        self._write("-" * 58 + "\n")
        products = self.store.stock()
        for product in products:
            self._write(f"{product.name:<20}\t{product.price:.2f}\t\t{product.stock}\n")
        if not products:
            self._write("No hay productos registrados en el inventario.\n")

    def _show_top_customers(self) -> None:
        if not any(customer.registered for customer in self.store.customers):
            self._write("\nNo hay clientes registrados con compras para mostrar.\n")
            return
        self._write("\n--------------- CLIENTES CON MAS COMPRAS ---------------\n")
        self._write("POS\tCLIENTE\t\t\tCEDULA\t\t\tPRODUCTOS COMPRADOS\n")
        self._write("-" * 64 + "\n")
        ranked = self.store.top_customers()
        for position, customer in enumerate(ranked, start=1):
            self._write(
                f"{position}\t{customer.name:<20}\t{customer.id_number:<15}"
                f"\t{customer.purchases}\n"
            )
        if not ranked:
            self._write("No hay clientes con compras registradas para mostrar.\n")

    def _search(self) -> None:
        self._write("\n--- BUSCAR CLIENTE POR NOMBRE O CEDULA ---\n")
        self._write("Ingrese el nombre o la cedula del cliente a buscar: ")
        term = self._read_text(NAME_SIZE)
        self._write("\nRESULTADOS DE LA BUSQUEDA:\n")
        self._write("CLIENTE\t\t\tCEDULA\t\t\tPRODUCTOS COMPRADOS\n")
        self._write("-" * 56 + "\n")
        found = self.store.search_customers(term)
        for customer in found:
            self._write(
                f"{customer.name:<20}\t{customer.id_number:<15}\t{customer.purchases}\n"
            )
        if not found:
            self._write("No se encontraron clientes con ese nombre o cedula.\n")


def load_products_empty() -> list:
    """Return a full inventory of empty product slots."""
    from partstore.models import Product

    return [Product() for _ in range(MAX_PRODUCTS)]


def run(
    directory: PathType = ".",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run the menu with the data files kept in directory; returns the exit status."""
    console = _Console(
        directory,
        sys.stdin if stdin is None else stdin,
        sys.stdout if stdout is None else stdout,
    )
    try:
        console.loop()
    except _EndOfInput:
        pass
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="partstore", description="Parts store sales and inventory manager."
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory holding the product and customer files",
    )
    args = parser.parse_args(argv)
    return run(args.directory, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())