from datetime import date
from typing import List, Literal, Optional


def generate_markdown_table(
    headers: Optional[List[str]],
    rows: List[List[str]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: List of column headers, or None to use first row as headers.
        rows: List of rows; cells are converted with str() and pipes escaped.
        aligns: List of alignments ('l', 'c', 'r') for each column.
                Defaults to all center ('c').

    Returns:
        str: Markdown formatted table.
    """
    if not rows:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    headers = [_md_cell(h) for h in headers]
    rows = [[_md_cell(c) for c in row] for row in rows]

    num_cols = len(headers)
    if aligns is None:
        aligns = ["c"] * num_cols
    elif len(aligns) != num_cols:
        raise ValueError("Length of aligns must match number of headers.")

    align_map = {"l": ":---", "c": ":---:", "r": "---:"}

    header_line = "| " + " | ".join(headers) + " |"
    align_line = "| " + " | ".join(align_map[a] for a in aligns) + " |"
    row_lines = ["| " + " | ".join(row) + " |" for row in rows]

    return "\n".join([header_line, align_line, *row_lines])


def _md_cell(value) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def capitalize_label(text: str) -> str:
    """First letter upper-cased, rest untouched ("men's clothing" -> "Men's clothing")."""
    return text[:1].upper() + text[1:]


def format_card_number(raw: str) -> str:
    """Group card digits in blocks of 4: "4111111111111111" -> "4111 1111 1111 1111"."""
    digits = "".join(raw.split())
    return " ".join(digits[i : i + 4] for i in range(0, len(digits), 4))


def format_long_date(day: date) -> str:
    """e.g. October 25, 2026"""
    return f"{day:%B} {day.day}, {day.year}"


def clamp_quantity(current: int, delta: int) -> int:
    """Quantity selectors never go below 1."""
    return max(1, current + delta)
