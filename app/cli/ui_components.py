"""Rich tables and detail views for Billingo records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

MAX_COLUMN_WIDTH = 40
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Column:
    """One table column: record key, header label, optional formatter."""
    key: str
    label: str
    format: Optional[Callable[[Any, Dict[str, Any]], Any]] = None

    def value(self, row: Dict[str, Any]) -> str:
        raw = row.get(self.key)
        if self.format is not None:
            raw = self.format(raw, row)
        text = "" if raw is None else str(raw)
        return text[:MAX_COLUMN_WIDTH]


def nested_name(value: Any, row: Dict[str, Any]) -> str:
    """Formatter for embedded objects such as a document's partner."""
    if isinstance(value, dict):
        return value.get("name") or NOT_AVAILABLE
    return NOT_AVAILABLE


def build_table(rows: Sequence[Dict[str, Any]], columns: Sequence[Column]) -> Table:
    table = Table(header_style="bold cyan", box=None, pad_edge=False)
    for column in columns:
        table.add_column(column.label, no_wrap=True, max_width=MAX_COLUMN_WIDTH)
    for row in rows:
        table.add_row(*(Text(column.value(row)) for column in columns))
    return table


def print_table(console: Console, rows: Sequence[Dict[str, Any]], columns: Sequence[Column]) -> None:
    """Print records as a table, or a notice when there are none."""
    if not rows:
        console.print("No results found.", style="yellow")
        return

    console.print(build_table(rows, columns))
    console.print(f"\n{len(rows)} result(s)", style="dim", highlight=False)


def print_details(console: Console, title: str, fields: List[Tuple[str, Any]]) -> None:
    """Print a single record as aligned label/value lines."""
    console.print(f"\n{title}\n", style="bold")
    width = max(len(label) for label, _ in fields) + 2
    for label, value in fields:
        shown = NOT_AVAILABLE if value in (None, "") else str(value)
        console.print(Text.assemble(f"{label}:".ljust(width), shown), soft_wrap=True)
