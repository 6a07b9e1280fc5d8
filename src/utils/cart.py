"""
Cart operations. Every function takes the current cart and returns a new
one; the input tuple is never modified.

After any operation, names are unique and every quantity is at least 1.
"""

from dataclasses import replace
from typing import Optional, Union

from db.models import Cart, CartLine


def find_line(cart: Cart, name: str) -> Optional[CartLine]:
    for line in cart:
        if line.name == name:
            return line
    return None


def add_item(cart: Cart, name: str, price: Union[int, float]) -> Cart:
    """
    Add one unit of `name`. An existing line keeps its original price and
    gains 1 quantity; otherwise a new line is appended.
    """
    for i, line in enumerate(cart):
        if line.name == name:
            bumped = replace(line, quantity=line.quantity + 1)
            return cart[:i] + (bumped,) + cart[i + 1 :]
    return cart + (CartLine(name=name, price=price, quantity=1),)


def change_quantity(cart: Cart, name: str, delta: int) -> Cart:
    """
    Shift the quantity of `name` by delta. A result of 0 or less drops the
    line. Unknown names leave the cart as is.
    """
    if not isinstance(delta, int) or isinstance(delta, bool):
        raise TypeError("Quantity delta must be an integer.")

    result = []
    for line in cart:
        if line.name != name:
            result.append(line)
            continue
        new_qty = line.quantity + delta
        if new_qty > 0:
            result.append(replace(line, quantity=new_qty))
    return tuple(result)


def remove_item(cart: Cart, name: str) -> Cart:
    return tuple(line for line in cart if line.name != name)


def clear(cart: Cart) -> Cart:
    return ()


def item_count(cart: Cart) -> int:
    """Total number of units across all lines."""
    return sum(line.quantity for line in cart)
