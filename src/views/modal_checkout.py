from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, MarkdownViewer

from utils.pure import format_price, generate_markdown_table, line_subtotal


class CheckoutModal(ModalScreen[bool]):
    """
    Order summary with a payment confirmation.
    Return True if the user wants to pay, False otherwise.
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield MarkdownViewer("", show_table_of_contents=False)
            yield Label("Do you want to proceed to payment?", id="label-confirm")
            with Horizontal():
                yield Button("Go Back", id="btn-quit")
                yield Button("Proceed to Payment", id="btn-submit", variant="primary")

    async def on_mount(self):
        state = self.app.state
        headers = ["Product Name", "Unit Price", "Quantity", "Total Price"]
        rows = [
            [
                line.name,
                format_price(line.price),
                line.quantity,
                format_price(line_subtotal(line)),
            ]
            for line in state.cart
        ]
        md = "### Order Summary\n\n"
        md += generate_markdown_table(headers, rows, ["l", "c", "c", "c"])
        md += f"\n\n**Total:** {format_price(state.total)}"
        await self.query_one(MarkdownViewer).document.update(md)
        self.query_one("#btn-submit").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss(False)

    @on(Button.Pressed, "#btn-submit")
    def handle_submit(self):
        self.dismiss(True)

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)
