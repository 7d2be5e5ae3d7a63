"""Sales metrics for pizza order CSV files: order parsing, metrics and a command."""

__version__ = "0.1.0"

__all__ = ["__version__"]