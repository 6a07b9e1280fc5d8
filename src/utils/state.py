from __future__ import annotations

import asyncio
from dataclasses import dataclass, field, replace
from typing import Awaitable, Callable, Literal, Tuple, Union

from db import persistence
from db.catalog import FILTER_CATEGORIES, PRODUCTS
from db.models import Cart, CatalogItem, FilterState, Session
from utils import cart as cart_ops
from utils.config import settings
from utils.logger import get_logger
from utils.pure import compute_total, compute_visible

_logger = get_logger(__name__)

CheckoutOutcome = Literal["empty", "cancelled", "paid"]


@dataclass
class GlobalState:
    """
    Centralized application state shared by screens.

    Fields:
      - cart: ordered cart lines, changed only through the cart methods below
      - session: who is logged in, if anyone
      - filters: search term and category used by the product list
      - cart_key: storage slot the cart is persisted under

    Every cart method writes the resulting cart to storage before returning.
    """

    cart: Cart = ()
    session: Session = field(default_factory=Session)
    filters: FilterState = field(default_factory=FilterState)
    cart_key: str = settings.cart_key

    _write_lock: asyncio.Lock = field(
        default_factory=asyncio.Lock, repr=False, compare=False
    )

    # ---------------------------
    # Derived values
    # ---------------------------

    @property
    def visible_products(self) -> Tuple[CatalogItem, ...]:
        return compute_visible(PRODUCTS, self.filters)

    @property
    def total(self) -> Union[int, float]:
        return compute_total(self.cart)

    @property
    def item_count(self) -> int:
        return cart_ops.item_count(self.cart)

    # ---------------------------
    # Persistence
    # ---------------------------

    async def rehydrate(self) -> None:
        """Load the stored cart, then write it back. Called once at startup."""
        self.cart = await persistence.load_cart(self.cart_key)
        _logger.info(f"Cart restored with {len(self.cart)} line(s).")
        await self._persist()

    async def _persist(self) -> None:
        # always write the newest cart, even if an older write was queued first
        async with self._write_lock:
            await persistence.save_cart(self.cart, self.cart_key)

    async def _commit(self, new_cart: Cart) -> None:
        self.cart = new_cart
        self._report_empty_cart()
        await self._persist()

    def _report_empty_cart(self) -> None:
        if self.session.logged_in and not self.cart:
            _logger.info("Cart is now empty.")

    # ---------------------------
    # Cart
    # ---------------------------

    async def add_item(self, name: str, price: Union[int, float]) -> None:
        await self._commit(cart_ops.add_item(self.cart, name, price))

    async def change_quantity(self, name: str, delta: int) -> None:
        await self._commit(cart_ops.change_quantity(self.cart, name, delta))

    async def remove_item(self, name: str) -> None:
        await self._commit(cart_ops.remove_item(self.cart, name))

    async def clear_cart(self) -> None:
        await self._commit(cart_ops.clear(self.cart))

    async def checkout(self, confirm: Callable[[], Awaitable[bool]]) -> CheckoutOutcome:
        """
        Pay for the cart. `confirm` is asked only when the cart has items;
        the cart is emptied only after it answers True.
        """
        if not self.cart:
            return "empty"
        if not await confirm():
            return "cancelled"
        _logger.info(f"Checkout paid, total {self.total}.")
        await self.clear_cart()
        return "paid"

    # ---------------------------
    # Session & filters
    # ---------------------------

    def login(self, username: str) -> bool:
        """Log in as username. An empty username is ignored; returns False."""
        if not username:
            return False
        was_logged_in = self.session.logged_in
        self.session = Session(username=username, logged_in=True)
        if not was_logged_in:
            _logger.info(f'User "{username}" has logged in.')
            self._report_empty_cart()
        return True

    def logout(self) -> None:
        """End the session and reset filters. The cart is kept."""
        if self.session.logged_in:
            _logger.info(f'User "{self.session.username}" has logged out.')
        self.session = Session()
        self.filters = FilterState()

    def set_search_term(self, term: str) -> None:
        self.filters = replace(self.filters, search_term=term)

    def set_category(self, category: str) -> None:
        if category not in FILTER_CATEGORIES:
            raise ValueError(f"Unknown category: {category!r}")
        self.filters = replace(self.filters, category=category)
