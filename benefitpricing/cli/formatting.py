"""Rendering of catalog listings and premium quotes for the command line."""

import json
from typing import Any, Callable


class OutputFormatter:
    """Prints pricing results either as JSON or as a quote table."""

    def __init__(self, format_type: str = "table"):
        self.format_type = format_type

    @property
    def is_json(self) -> bool:
        """Whether results are emitted as JSON for scripting."""
        return self.format_type == "json"

    def output(self, data: Any, table_fn: Callable[[], None]) -> None:
        """Print a quote or listing as JSON, or hand off to ``table_fn`` to draw the table."""
        if self.is_json:
            print(json.dumps(data, indent=2))
        else:
            table_fn()

    def print_header(self, title: str, width: int = 40) -> None:
        """Print a quote table title, underlined. Nothing is printed in JSON mode."""
        if not self.is_json:
            print(title)
            print("=" * width)


def format_money(amount: float, currency: str = "USD") -> str:
    """Render a premium with its currency symbol and cents."""
    symbol = "$" if currency == "USD" else f"{currency} "
    return f"{symbol}{amount:,.2f}"
