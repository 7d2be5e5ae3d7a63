# pizzametrics

pizzametrics computes sales metrics from a CSV file of pizza orders. It has no dependencies beyond the Python standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## The input file

The file is read as UTF-8. Its first line is a header and is skipped, and blank lines are ignored. Every other line holds these columns in this order:

`pizza_id, order_id, pizza_name_id, quantity, order_date, order_time, unit_price, total_price, pizza_size, pizza_category, "pizza_ingredients", pizza_name`

- `pizza_name_id` is read past and not kept.
- The ingredients are a comma-separated list inside double quotes.
- The pizza name may be quoted. Its quotes are removed.
- Numbers are taken from the start of their field. A field with no number at its start is read as 0.
- Only the first character of `pizza_size` is kept.

A line that is missing a separator, or has an unterminated ingredients list, is rejected with `ValueError`.

## Command line

```
pizzametrics <orders.csv> <metric> [metric ...]
```

You can also run it as `python -m pizzametrics.cli`.

| Name   | Result                                                  |
|--------|---------------------------------------------------------|
| `pms`  | Best-selling pizza, by quantity                         |
| `pls`  | Worst-selling pizza, by quantity                        |
| `dms`  | Date with the highest sales in money, and that amount   |
| `dls`  | Date with the lowest sales in money, and that amount    |
| `dmsp` | Date with the most pizzas sold, as `date: N pizzas`     |
| `dlsp` | Date with the fewest pizzas sold, as `date: N pizzas`   |
| `apo`  | Average number of pizzas per order line, two decimals   |
| `apd`  | Average number of pizzas per distinct date, two decimals|
| `ims`  | Most-sold ingredient, weighted by quantity              |
| `hp`   | Number of pizzas sold in each category                  |

Each metric is printed on its own line as `name: result`. For `hp`, the program prints the heading `Cantidad de pizzas por categoría:` and then one `category: count` line for each category.

If a metric name is not recognised, the program prints a warning to standard error and goes on with the other metrics. The program prints an error message in Spanish and exits with status 1 in these cases:

- fewer than two arguments are given;
- the file cannot be opened;
- a line is malformed;
- the file holds no orders.

Example:

```
pizzametrics orders.csv pms dms hp
```

## Library use

```python
from pizzametrics.orders import read_csv, parse_order_line
from pizzametrics.metrics import pms, apd
from pizzametrics.cli import run_metric

orders = read_csv("orders.csv")
print(pms(orders))
print(apd(orders))
print(run_metric("dmsp", orders))
```

- `read_csv(path)` returns a list of frozen `Order` dataclasses. It raises `OSError` if the file cannot be opened.
- `parse_order_line(line)` parses a single data line.
- Every metric in `pizzametrics.metrics` takes a sequence of orders and returns a string.
- `run_metric(name, orders)` looks a metric up by name. It raises `ValueError` for an unknown name.
- `pizzametrics.cli.main(argv=None)` runs the command and returns its exit status.

### Behaviour to know

- **Ties.** When several entries tie for best or worst, the one seen first in the file wins.
- **Limits on distinct values.**
  - Pizza names, revenue dates and ingredients: only the first 100 distinct values are counted.
  - Categories: only the first 10 distinct values are counted.
  - `dmsp` and `dlsp` count every date.
- **Empty input.**
  - The name and date metrics, and `ims`, return `No hay datos`.
  - `apo` and `apd` raise `ValueError`.
  - `hp` returns an empty string.

## What it does not do

pizzametrics only reports on a file. It does not store, edit or write order data, and it does not produce charts or export reports to other formats.