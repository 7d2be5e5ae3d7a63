"""Order records and reading them from a pizza-sales CSV file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Order:
    """One line of a pizza-sales file."""

    pizza_id: int
    order_id: int
    pizza_name: str
    quantity: int
    order_date: str
    order_time: str
    unit_price: float
    total_price: float
    pizza_size: str
    pizza_category: str
    pizza_ingredients: str


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, or 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    """Parse the number at the start of text, or 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _split_field(rest: str, field: str) -> tuple[str, str]:
    head, sep, tail = rest.partition(",")
    if not sep:
        raise ValueError(f"malformed order line: no separator after {field}")
    return head, tail


def parse_order_line(line: str) -> Order:
    """Parse one data line of the CSV file into an Order.

    Columns: pizza_id, order_id, pizza_name_id (ignored), quantity,
    order_date, order_time, unit_price, total_price, pizza_size,
    pizza_category, quoted pizza_ingredients, pizza_name.
    """
    rest = line.rstrip("\r\n")

    pizza_id, rest = _split_field(rest, "pizza_id")
    order_id, rest = _split_field(rest, "order_id")
    _, rest = _split_field(rest, "pizza_name_id")
    quantity, rest = _split_field(rest, "quantity")
    order_date, rest = _split_field(rest, "order_date")
    order_time, rest = _split_field(rest, "order_time")
    unit_price, rest = _split_field(rest, "unit_price")
    total_price, rest = _split_field(rest, "total_price")
    pizza_size, rest = _split_field(rest, "pizza_size")
    pizza_category, rest = _split_field(rest, "pizza_category")

    ingredients = ""
    if rest.startswith('"'):
        end = rest.find('"', 1)
        if end < 0:
            raise ValueError("malformed order line: unterminated ingredients")
        ingredients = rest[1:end]
        rest = rest[end + 2:]

    if rest.startswith('"'):
        rest = rest[1:]
    pizza_name = rest.split('"', 1)[0]

    return Order(
        pizza_id=_leading_int(pizza_id),
        order_id=_leading_int(order_id),
        pizza_name=pizza_name,
        quantity=_leading_int(quantity),
        order_date=order_date,
        order_time=order_time,
        unit_price=_leading_float(unit_price),
        total_price=_leading_float(total_price),
        pizza_size=pizza_size[:1],
        pizza_category=pizza_category,
        pizza_ingredients=ingredients,
    )


def read_csv(path: str | PathLike[str]) -> list[Order]:
    """Read every order from a CSV file, skipping its header line.

    Raises OSError when the file cannot be opened and ValueError when a
    line is malformed. Blank lines are skipped.
    """
    with Path(path).open(encoding="utf-8") as handle:
        next(handle, None)
        return [
            parse_order_line(line) for line in handle if line.strip("\r\n")
        ]