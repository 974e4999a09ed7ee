"""Output formatters."""

from poker_trainer.formatters.table import TableFormatter

__all__ = ["TableFormatter"]
