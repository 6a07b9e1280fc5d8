"""
Moves the cart between memory and the key-value slot.

Stored format is a JSON array of {"name", "price", "quantity"} objects in
cart order. Anything else found in the slot is treated as an empty cart.
"""

from __future__ import annotations

import json
import math
from typing import Any, Optional

import aiosqlite

from db import crud
from db.models import Cart, CartLine
from utils.logger import get_logger

_logger = get_logger(__name__)

LINE_FIELDS = frozenset({"name", "price", "quantity"})


def serialize_cart(cart: Cart) -> str:
    return json.dumps(
        [
            {"name": line.name, "price": line.price, "quantity": line.quantity}
            for line in cart
        ]
    )


def _is_number(val: Any) -> bool:
    return (
        isinstance(val, (int, float))
        and not isinstance(val, bool)
        and math.isfinite(val)
    )


def _parse_line(obj: Any) -> Optional[CartLine]:
    if not isinstance(obj, dict) or set(obj) != LINE_FIELDS:
        return None
    name, price, quantity = obj["name"], obj["price"], obj["quantity"]
    if not isinstance(name, str):
        return None
    if not _is_number(price) or price < 0:
        return None
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        return None
    return CartLine(name=name, price=price, quantity=quantity)


def deserialize_cart(raw: Optional[str]) -> Cart:
    """
    Parse a stored cart. Returns an empty cart for a missing or malformed
    value instead of raising.
    """
    if raw is None:
        return ()
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        _logger.warning("Stored cart is not valid JSON, starting empty.")
        return ()
    if not isinstance(data, list):
        _logger.warning("Stored cart is not a list, starting empty.")
        return ()

    lines = []
    seen = set()
    for obj in data:
        line = _parse_line(obj)
        if line is None or line.name in seen:
            _logger.warning(f"Stored cart has an invalid entry {obj!r}, starting empty.")
            return ()
        seen.add(line.name)
        lines.append(line)
    return tuple(lines)


async def load_cart(key: str) -> Cart:
    """Read the cart from storage. Storage failures yield an empty cart."""
    try:
        raw = await crud.read_value(key)
    except (aiosqlite.Error, OSError) as e:
        _logger.warning(f"Could not read stored cart: {e}")
        return ()
    cart = deserialize_cart(raw)
    _logger.debug(f"Loaded {len(cart)} cart line(s) from '{key}'.")
    return cart


async def save_cart(cart: Cart, key: str) -> None:
    await crud.write_value(key, serialize_cart(cart))
