"""Sales metrics computed over a list of orders."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pizzametrics.orders import Order

MAX_ENTRIES = 100
MAX_CATEGORIES = 10
NO_DATA = "No hay datos"


def _tally(pairs: Iterable[tuple[str, float]], limit: int | None = None) -> dict:
    """Sum values per key in first-seen order; new keys past limit are dropped."""
    totals: dict = {}
    for key, value in pairs:
        if key in totals:
            totals[key] += value
        elif limit is None or len(totals) < limit:
            totals[key] = value
    return totals


def _by_name(orders: Sequence[Order]) -> dict:
    return _tally(((o.pizza_name, o.quantity) for o in orders), MAX_ENTRIES)


def _revenue_by_date(orders: Sequence[Order]) -> dict:
    return _tally(((o.order_date, o.total_price) for o in orders), MAX_ENTRIES)


def _pizzas_by_date(orders: Sequence[Order]) -> dict:
    return _tally((o.order_date, o.quantity) for o in orders)


def _best(totals: dict, pick) -> tuple:
    # max/min keep the first of equal entries, as a strict comparison scan does.
    return pick(totals.items(), key=lambda item: item[1])


def pms(orders: Sequence[Order]) -> str:
    """Name of the pizza sold in the largest quantity."""
    totals = _by_name(orders)
    return _best(totals, max)[0] if totals else NO_DATA


def pls(orders: Sequence[Order]) -> str:
    """Name of the pizza sold in the smallest quantity."""
    totals = _by_name(orders)
    return _best(totals, min)[0] if totals else NO_DATA


def dms(orders: Sequence[Order]) -> str:
    """Date with the highest revenue, with that revenue."""
    totals = _revenue_by_date(orders)
    if not totals:
        return NO_DATA
    date, total = _best(totals, max)
    return f"{date}: {total:.2f}"


def dls(orders: Sequence[Order]) -> str:
    """Date with the lowest revenue, with that revenue."""
    totals = _revenue_by_date(orders)
    if not totals:
        return NO_DATA
    date, total = _best(totals, min)
    return f"{date}: {total:.2f}"


def dmsp(orders: Sequence[Order]) -> str:
    """Date with the most pizzas sold, with that count."""
    totals = _pizzas_by_date(orders)
    if not totals:
        return NO_DATA
    date, count = _best(totals, max)
    return f"{date}: {count} pizzas"


def dlsp(orders: Sequence[Order]) -> str:
    """Date with the fewest pizzas sold, with that count."""
    totals = _pizzas_by_date(orders)
    if not totals:
        return NO_DATA
    date, count = _best(totals, min)
    return f"{date}: {count} pizzas"


def apo(orders: Sequence[Order]) -> str:
    """Average number of pizzas per order line."""
    if not orders:
        raise ValueError("no orders to average")
    average = sum(o.quantity for o in orders) / len(orders)
    return f"{average:.2f}"


def apd(orders: Sequence[Order]) -> str:
    """Average number of pizzas per distinct order date."""
    days = {o.order_date for o in orders}
    if not days:
        raise ValueError("no orders to average")
    average = sum(o.quantity for o in orders) / len(days)
    return f"{average:.2f}"


def _ingredients(order: Order) -> Iterable[str]:
    for token in order.pizza_ingredients.split(","):
        if token:
            yield token.lstrip(" ")


def ims(orders: Sequence[Order]) -> str:
    """Ingredient that appears in the largest quantity of pizzas sold."""
    totals = _tally(
        ((name, o.quantity) for o in orders for name in _ingredients(o)),
        MAX_ENTRIES,
    )
    return _best(totals, max)[0] if totals else NO_DATA


def hp(orders: Sequence[Order]) -> str:
    """Pizzas sold per category, one "category: count" line each."""
    totals = _tally(
        ((o.pizza_category, o.quantity) for o in orders), MAX_CATEGORIES
    )
    return "".join(f"{name}: {count}\n" for name, count in totals.items())