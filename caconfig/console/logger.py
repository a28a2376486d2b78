"""Rich-based logger with caconfig theming.

Operators read this output to decide whether a change is safe, so it needs
to be scannable:
- Semantic colors (cyan=info, green=success, amber=warning, red=error)
- Structured output (tables, key-value pairs)
- Reconciliation helpers for consistent drift and write reporting
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


CACONFIG_THEME = Theme(
    {
        "info": "bold #7dcfff",  # Soft cyan - informational
        "success": "bold #9ece6a",  # Muted green - success
        "warning": "bold #e0af68",  # Warm amber - warnings
        "error": "bold #f7768e",  # Soft coral red - errors
        "highlight": "bold #bb9af7",  # Lavender purple - emphasis
        "muted": "dim #565f89",  # Slate gray - secondary info
        "metric": "#7aa2f7",  # Sky blue - values
        "path": "italic #73daca",  # Teal - file paths
        "step": "#ff9e64",  # Orange - setting names
    }
)


class Logger:
    """Unified logging interface with rich console output.

    Wraps Rich Console to provide semantic log levels and structured data
    display, all with consistent theming.
    """

    def __init__(self) -> None:
        """Initialize with the caconfig theme."""
        self.console = Console(theme=CACONFIG_THEME)

    # ─────────────────────────────────────────────────────────────────────
    # Basic Logging
    # ─────────────────────────────────────────────────────────────────────

    def log(self, message: str) -> None:
        """Log a generic message."""
        self.console.print(message)

    def info(self, message: str) -> None:
        """Log an informational message (cyan ℹ)."""
        self.console.print(f"[info]ℹ[/info] {message}")

    def success(self, message: str) -> None:
        """Log a success message (green ✓)."""
        self.console.print(f"[success]✓[/success] {message}")

    def warning(self, message: str) -> None:
        """Log a warning message (amber ⚠)."""
        self.console.print(f"[warning]⚠[/warning] {message}")

    def error(self, message: str) -> None:
        """Log an error message (red ✗)."""
        self.console.print(f"[error]✗[/error] {message}")

    # ─────────────────────────────────────────────────────────────────────
    # Structured Output
    # ─────────────────────────────────────────────────────────────────────

    def header(self, title: str, subtitle: str | None = None) -> None:
        """Print a prominent section header."""
        header_text = Text()
        header_text.append("━" * 3 + " ", style="muted")
        header_text.append(title, style="highlight")
        if subtitle:
            header_text.append(f" • {subtitle}", style="muted")
        header_text.append(" " + "━" * 40, style="muted")
        self.console.print()
        self.console.print(header_text)
        self.console.print()

    def table(
        self,
        title: str | None = None,
        columns: list[str] | None = None,
        rows: list[list[str]] | None = None,
    ) -> Table:
        """Create and optionally populate a styled table.

        If columns and rows are provided, prints immediately. Otherwise
        returns the Table for manual population.
        """
        table = Table(
            title=title,
            title_style="highlight",
            header_style="info",
            border_style="muted",
            row_styles=["", "dim"],
        )

        if columns and rows:
            for col in columns:
                table.add_column(col)
            for row in rows:
                table.add_row(*row)
            self.console.print(table)

        return table

    def key_value(self, data: dict[str, Any], title: str | None = None) -> None:
        """Display key-value pairs in a clean format."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style="muted")
        table.add_column("Value", style="metric")

        for key, value in data.items():
            table.add_row(f"{key}:", escape(str(value)))

        if title:
            self.console.print(f"[muted]──[/muted] [highlight]{title}[/highlight]")
        self.console.print(table)

    # ─────────────────────────────────────────────────────────────────────
    # Reconciliation Helpers
    # ─────────────────────────────────────────────────────────────────────

    def drift(self, name: str, current: object, desired: object) -> None:
        """Report one setting whose current value differs from the desired one."""
        self.console.print(
            f"  [step]{name}[/step] "
            f"[muted]{escape(render_value(current))}[/muted] → "
            f"[metric]{escape(render_value(desired))}[/metric]"
        )

    def snapshot(self, title: str, values: Mapping[str, object]) -> None:
        """Print a settings table, one row per setting in the order given."""
        self.table(
            title=title,
            columns=["Setting", "Value"],
            rows=[[name, escape(render_value(v))] for name, v in values.items()],
        )

    def applied(self, count: int, target: str) -> None:
        """Summarize a completed set operation."""
        if count == 0:
            self.success(f"{target} already in desired state")
        else:
            noun = "setting" if count == 1 else "settings"
            self.success(f"Wrote {count} {noun} to {target}")


def render_value(value: object) -> str:
    """Human-readable form of a decoded value (sets sorted for stable output)."""
    if value is None:
        return "<absent>"
    if isinstance(value, (set, frozenset)):
        return "{" + ", ".join(sorted(str(v) for v in value)) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(str(v) for v in value) + "]"
    return str(value)


# ─────────────────────────────────────────────────────────────────────────────
# Module-Level Singleton
# ─────────────────────────────────────────────────────────────────────────────

_logger: Logger | None = None


def get_logger() -> Logger:
    """Get or create the singleton Logger instance.

    Using a singleton ensures consistent theming and avoids creating
    multiple Console instances.
    """
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
