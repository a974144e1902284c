# ABOUTME: Rich table utilities for the human-readable extraction report
# ABOUTME: Renders an ExtractionRecord as a styled key/value table

import json
from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fandom_folio.models import RECORD_FIELDS, ExtractionRecord


def create_key_value_table(
    title: str,
    data: dict[str, Any],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Values are added as plain ``Text`` so page content is never read as markup.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, width=None, no_wrap=True)
    table.add_column("Value", style=value_style, width=None, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, Text(str(value)))

    return table


def field_label(field: str) -> str:
    """Report label for a record field: ``cover_artist`` -> ``Cover Artist``."""
    return " ".join(word.capitalize() for word in field.split("_"))


def format_value(value: Any) -> str:
    if isinstance(value, tuple):
        value = list(value)
    return json.dumps(value, indent=2, ensure_ascii=False)


def create_record_table(record: ExtractionRecord) -> Table:
    """Create the report table for one extraction record, every field included."""
    data = {field_label(field): format_value(getattr(record, field)) for field in RECORD_FIELDS}
    return create_key_value_table(title=f"📚 {escape(record.title or 'Untitled page')}", data=data)


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing and style.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
