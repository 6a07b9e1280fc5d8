from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Literal, Optional, Tuple, Union

from db.models import Cart, CartLine, CatalogItem, FilterState
from utils.config import settings

_CENTS = Decimal("0.01")


def compute_total(cart: Cart) -> Union[int, float]:
    """Sum of price * quantity over all lines, unrounded."""
    return sum(line_subtotal(line) for line in cart)


def line_subtotal(line: CartLine) -> Union[int, float]:
    return line.price * line.quantity


def format_price(value: Union[int, float], currency: Optional[str] = None) -> str:
    """
    Render an amount with two decimals, rounding half up on the decimal
    value rather than the binary float (0.125 -> "0.13").
    """
    if currency is None:
        currency = settings.currency
    amount = Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{currency}{amount}"


def compute_visible(
    catalog: Iterable[CatalogItem], filters: FilterState
) -> Tuple[CatalogItem, ...]:
    """
    Catalog items matching the category selection and containing the search
    term in their name (case-insensitive). Catalog order is kept.
    """
    term = filters.search_term.lower()
    return tuple(
        item
        for item in catalog
        if (filters.category == "all" or item.category == filters.category)
        and term in item.name.lower()
    )


def generate_markdown_table(
    headers: Optional[List[str]],
    rows: List[List[str]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: List of column headers, or None to use first row as headers.
        rows: List of rows, each a list of strings.
        aligns: List of alignments ('l', 'c', 'r') for each column.
                Defaults to all center ('c').

    Returns:
        str: Markdown formatted table.
    """
    if not rows:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    headers = list(map(str, headers))
    rows = [list(map(str, row)) for row in rows]

    num_cols = len(headers)
    if aligns is None:
        aligns = ["c"] * num_cols
    elif len(aligns) != num_cols:
        raise ValueError("Length of aligns must match number of headers.")

    align_map = {
        "l": ":---",
        "c": ":---:",
        "r": "---:",
    }

    header_line = "| " + " | ".join(headers) + " |"
    align_line = "| " + " | ".join(align_map[a] for a in aligns) + " |"
    row_lines = ["| " + " | ".join(row) + " |" for row in rows]

    return "\n".join([header_line, align_line, *row_lines])
