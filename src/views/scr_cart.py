from textual import on, work
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, HorizontalGroup, VerticalScroll
from textual.events import ScreenResume
from textual.widgets import Button, Label, Rule

from db.models import CartLine
from utils.messages import CartChangedMessage
from utils.pure import format_price, line_subtotal
from views.base_screen import BaseScreen
from views.modal_checkout import CheckoutModal
from views.modal_dialog import DialogModal


class CartLineWidget(HorizontalGroup):
    def __init__(self, line: CartLine):
        super().__init__()
        self.line = line

    def compose(self):
        line = self.line
        with Container(id="div-cart-item-group"):
            yield Label(
                f"{line.name} - {format_price(line.price)} x {line.quantity}"
                f" = {format_price(line_subtotal(line))}",
                id="label-item",
            )
            with Container(id="div-actions"):
                yield Button("−", id="btn-item-dec")
                yield Button("+", id="btn-item-inc")
                yield Button("Remove", id="btn-item-remove", variant="error")

    @on(Button.Pressed, "#btn-item-dec")
    async def handle_decrement(self):
        await self.app.state.change_quantity(self.line.name, -1)
        self.post_message(CartChangedMessage())

    @on(Button.Pressed, "#btn-item-inc")
    async def handle_increment(self):
        await self.app.state.change_quantity(self.line.name, 1)
        self.post_message(CartChangedMessage())

    @on(Button.Pressed, "#btn-item-remove")
    async def handle_remove_item(self):
        await self.app.state.remove_item(self.line.name)
        self.post_message(CartChangedMessage())
        self.notify("Item removed from cart.", severity="information")


class CartScreen(BaseScreen):
    """
    cart lines, total and checkout
    """

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield VerticalScroll(id="vertscroll-content")
        yield Label("Total: $0.00", id="label-cart-total")
        yield Rule(line_style="dashed")
        with Horizontal(id="hort-buttons"):
            yield Button("Clear Cart", id="btn-clear-cart")
            yield Button("Checkout", id="btn-checkout", variant="primary")

    @on(CartChangedMessage)
    @on(ScreenResume)
    @work(exclusive=True)  # must exclusive, else might race cond and gen duplicate
    async def handle_cart_change(self):
        """
        Rebuild the line widgets and total from app.state.cart
        """
        cart = self.app.state.cart

        content = self.query_one("#vertscroll-content")
        if tuple(c.line for c in content.children) != cart:
            await content.remove_children()
            await content.mount_all([CartLineWidget(line) for line in cart])

        content.set_class(not cart, "no-items")
        self.query_one(
            "#label-cart-total", Label
        ).update(f"Total: {format_price(self.app.state.total)}")
        await self.refresh_sidebar()

    @on(Button.Pressed, "#btn-clear-cart")
    @work()
    async def handle_clear_cart(self) -> None:
        if not self.app.state.cart:
            self.notify("Your cart is empty.", severity="warning")
            return

        remove_confirmed = await self.app.push_screen_wait(
            DialogModal(
                "Do you really want to remove all items from cart?",
                primary_text="Yes",
                secondary_text="No",
                tone="error",
            )
        )
        if remove_confirmed:
            await self.app.state.clear_cart()
            self.post_message(CartChangedMessage())

    @on(Button.Pressed, "#btn-checkout")
    @work()
    async def handle_checkout(self) -> None:
        async def confirm() -> bool:
            return bool(await self.app.push_screen_wait(CheckoutModal()))

        outcome = await self.app.state.checkout(confirm)
        if outcome == "empty":
            self.notify("Your cart is empty.", severity="warning")
        elif outcome == "paid":
            self.notify("Payment successful! Thank you for your purchase.")
            self.post_message(CartChangedMessage())
