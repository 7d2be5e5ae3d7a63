"""Command line entry point: print the requested metrics for a CSV file."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from pizzametrics import metrics
from pizzametrics.orders import Order, read_csv

METRICS: dict[str, Callable[[Sequence[Order]], str]] = {
    "pms": metrics.pms,
    "pls": metrics.pls,
    "dms": metrics.dms,
    "dls": metrics.dls,
    "dmsp": metrics.dmsp,
    "dlsp": metrics.dlsp,
    "apo": metrics.apo,
    "apd": metrics.apd,
    "ims": metrics.ims,
    "hp": metrics.hp,
}


def run_metric(name: str, orders: Sequence[Order]) -> str:
    """Compute the metric called name; raise ValueError for unknown names."""
    try:
        func = METRICS[name]
    except KeyError:
        raise ValueError(f"unknown metric: {name}") from None
    return func(orders)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(
            "Uso: pizzametrics <archivo.csv> <metrica1> [metrica2...]",
            file=sys.stderr,
        )
        return 1

    path, *names = args
    try:
        orders = read_csv(path)
    except OSError:
        print(f"Error: No se pudo abrir {path}", file=sys.stderr)
        orders = []
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        orders = []
    if not orders:
        print(
            "Error: No se pudieron leer órdenes del archivo", file=sys.stderr
        )
        return 1

    for name in names:
        try:
            result = run_metric(name, orders)
        except ValueError:
            print(
                f"Advertencia: Métrica '{name}' no reconocida", file=sys.stderr
            )
            continue
        if name == "hp":
            print(f"Cantidad de pizzas por categoría:\n{result}", end="")
        else:
            print(f"{name}: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())