"""Shared helpers for AppForge.

Provides the app-name slug used by every artifact generator and the
Rich-based console helpers used by the command line entry point.
"""

from __future__ import annotations

import re
import unicodedata

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Derive the identifier slug for a human-readable app name.

    * Folds accented letters to ASCII (``é`` -> ``e``); characters with no
      ASCII form, such as CJK, are dropped.
    * Lowercases the input.
    * Replaces every run of characters outside ``[a-z0-9]`` with one hyphen.
    * Strips leading/trailing hyphens.

    The same slug is used for ``package.json``, the analytics app id, the
    Terraform bucket name and the README, so every generator must call this
    function rather than deriving its own.

    Examples::

        slugify("My App")          -> "my-app"
        slugify("  Todo   List! ") -> "todo-list"
        slugify("")                -> ""
    """
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = _NON_SLUG_CHARS.sub("-", ascii_name.strip().lower())
    return slug.strip("-")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
