from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "cyan": "#56b6c2",
    "purple": "#c678dd",
    "red": "#e06c75",
}

_theme = Theme(
    {
        "text": PALETTE["fg"],
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "info": PALETTE["blue"],
        "section": f"bold {PALETTE['orange']}",
    }
)

console = Console(theme=_theme, style=PALETTE["fg"])

_TRACE_ENABLED = True


def status_spinner(message: str):
    """Return a Rich status spinner context manager."""
    return console.status(f"[info]{message}[/]")


def set_trace_enabled(enabled: bool) -> None:
    """Toggle diagnostic trace output for the default trace sink."""
    global _TRACE_ENABLED
    _TRACE_ENABLED = enabled


def trace(message: str) -> None:
    """Default diagnostic sink; prints muted lines unless tracing is off."""
    if _TRACE_ENABLED:
        console.print(f"[muted]{escape(message)}[/]", highlight=False, soft_wrap=True)
