"""Utility functions for the Hue CLI.

This module contains helper functions used across the application:
- display_width: Calculate terminal display width for Unicode/emojis
- yes_no: Render an optional flag as yes/no/-
- sort_by_id: Order lights or groups by identifier
- format_table: Lay out rows as a borderless text table
- similarity_score: Fuzzy string matching for command typo suggestions
"""

import unicodedata
from collections.abc import Iterable, Sequence


def display_width(text: str) -> int:
    """Calculate the display width of text accounting for wide characters.

    Emojis and East Asian wide characters take up 2 columns in the terminal.
    """
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        if unicodedata.east_asian_width(char) in ('W', 'F') or ord(char) > 0x1F300:
            width += 2
        else:
            width += 1
    return width


def yes_no(value: bool | None) -> str:
    """Render a flag as 'yes' or 'no', or '-' when it is unknown."""
    if value is None:
        return '-'
    return 'yes' if value else 'no'


def sort_by_id(items: Iterable) -> list:
    """Sort lights or groups by ID (ascending, compared as strings)."""
    return sorted(items, key=lambda item: item.id)


def _pad(text: str, width: int) -> str:
    return text + ' ' * (width - display_width(text))


def format_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> list[str]:
    """Format rows as a table with no outer border.

    Columns are separated by ' | ' and the header is underlined:

        id | name    | on
        ---+---------+----
        1  | Bedroom | yes

    Args:
        headers: Column titles
        rows: Cell values, one sequence per row, same length as headers

    Returns:
        Lines of the table, without trailing newlines
    """
    rows = [[str(cell) for cell in row] for row in rows]
    widths = [display_width(header) for header in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))

    def render(cells: Sequence[str]) -> str:
        return ' | '.join(_pad(cell, widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [render(headers), '-+-'.join('-' * width for width in widths)]
    lines.extend(render(row) for row in rows)
    return lines


def similarity_score(typed: str, candidate: str) -> int:
    """Score how closely a typed command name matches a real one (0-100).

    Case is ignored. An exact match scores 100, a prefix 80 and a substring
    60. Otherwise the score is up to 50, from how many of the typed
    characters appear in order in the candidate; scores of 20 or less
    count as no match.
    """
    a, b = typed.lower(), candidate.lower()
    if a == b:
        return 100
    if a.startswith(b) or b.startswith(a):
        return 80
    if a in b or b in a:
        return 60

    remaining = iter(b)
    in_order = sum(1 for char in a if char in remaining)
    score = in_order * 50 // max(len(a), len(b))
    return score if score > 20 else 0
