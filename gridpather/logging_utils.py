"""Logging utilities for gridpather.

Color-coded console output for search outcomes: a found route prints blue
with ``[•]``, a failed search prints red with ``[!]``. Set
GRIDPATHER_NO_COLOR to get plain text (logs, captured output).
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .schemas import PathResult


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Route found
    RED = "\033[91m"       # No path
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for message types (color-blind accessible)
LOG_TAG_SEARCH = "[•]"    # Route found
LOG_TAG_ERROR = "[!]"     # No path
LOG_TAG_INFO = "[i]"      # Information


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes unless GRIDPATHER_NO_COLOR is set."""
    if os.getenv("GRIDPATHER_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def format_search_result(label: str, result: "PathResult") -> str:
    """One-line summary of a search, tagged by outcome.

    Found:     ``[•] <label>: <length> cells, cost <cost>, expanded <n>``
    Not found: ``[!] <label>: no path (expanded <n>)``
    """
    if result.found:
        return (
            f"{LOG_TAG_SEARCH} {label}: {result.length} cells, "
            f"cost {result.cost}, expanded {result.expanded}"
        )
    return f"{LOG_TAG_ERROR} {label}: no path (expanded {result.expanded})"


def log_search_result(label: str, result: "PathResult") -> None:
    """Print the search summary, blue when a route was found and red otherwise."""
    color = Color.BLUE if result.found else Color.RED
    print(colored(format_search_result(label, result), color, bold=not result.found))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))
