# partstore

A small console application for running an auto parts shop. It keeps a
product catalogue with prices and stock. It records sales against
customers. It reports the best-selling products, the current stock and the
customers who have bought the most. The menu and its messages are in
Spanish.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
partstore
```

The data files are kept in the current directory. To keep them somewhere
else, pass `-d` / `--directory`:

```
partstore --directory /path/to/data
```

The menu offers:

1. Initialise products (first use, or reset everything)
2. Record a new sale
3. Show best-selling products
4. Show product stock
5. Show customers with the most purchases
6. Search for a customer by name or ID number
7. Quit

Choose option 1 on first use. It fills the catalogue with five sample
products: oil filter, brake pads, 12V battery, spark plug set and 1L engine
oil. It also clears every customer record. Until option 1 has been run,
options 2 to 4 report that the products file is missing.

A sale lists the products that are in stock and asks for a product number,
a quantity, and the customer's name and ID number. Customers are matched by
ID number. A new ID adds a new customer. A known ID adds the quantity to
that customer's total. Names longer than 49 bytes are cut short, and so are
ID numbers longer than 14 bytes. The search in option 6 matches customers
whose name contains the search text, with case counted, or whose ID number
equals it exactly. The program ends when option 7 is chosen or when input
runs out.

Data is kept in two binary files of fixed-size records:

- `productos.dat` holds the products.
- `clientes.dat` holds the customers.

Every sale rewrites both files straight away. The catalogue has room for 20
products. The customer list has room for 100 customers. Once the list is
full, a sale to a new customer is still recorded, but that customer is not
added.

## Using it from Python

`partstore.models` defines the `Product` and `Customer` dataclasses.
`to_bytes` and `from_bytes` convert them to and from their binary records.
A product or customer with an empty name is an unused slot.

`partstore.storage` reads and writes the data files:

- `default_products(capacity)` returns the sample catalogue, padded with
  empty slots up to `capacity`.
- `save_products` and `load_products` write and read the products file.
  `load_products` raises `FileNotFoundError` when the file does not exist.
- `save_customers` and `load_customers` write and read the customers file.
  A missing customers file loads as an empty list.

`partstore.store.Store` holds the products and customers in memory:

- `record_sale(number, quantity, customer_name, customer_id)` validates and
  records a sale. Products are numbered from 1. An invalid product or
  quantity raises `SaleError`.
- `update_product_stats` raises `ProductNotFoundError` for an unknown
  product name.
- `best_sellers`, `stock`, `top_customers` and `search_customers` return the
  data behind each report.
- `reset` restores the sample catalogue and clears the customers.

`Store` does not write to disk itself; save its `products` and `customers`
with the storage functions.

`partstore.cli.run(directory, stdin, stdout)` runs the menu over any pair of
text streams.

## Running the tests

```
pip install ".[test]"
pytest
```