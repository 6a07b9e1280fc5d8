from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.events import ScreenResume
from textual.widgets import DataTable, Input, Select

from db.catalog import FILTER_CATEGORIES, find_item
from utils.pure import format_price
from views.base_screen import BaseScreen


class ProdSearchScreen(BaseScreen):
    """
    product list with search box and category selector
    """

    # only here to be displayed in footer
    BINDINGS = [
        Binding("fn+shift+1", "noop", "Add to Cart", show=True, key_display="⏎"),
    ]

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Horizontal(id="hort-filters"):
            yield Input(id="input-search", placeholder="Search products")
            yield Select(
                [(c.capitalize(), c) for c in FILTER_CATEGORIES],
                value="all",
                allow_blank=False,
                id="select-category",
            )
        yield DataTable(id="table-products")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns("Name", "Category", "Price")

        self.query_one("#input-search").focus()

    @on(ScreenResume)
    def handle_resume(self) -> None:
        # filters may have been reset by a logout while this screen was hidden
        filters = self.app.state.filters
        self.query_one("#input-search", Input).value = filters.search_term
        self.query_one("#select-category", Select).value = filters.category
        self.update_product_table()

    @on(Input.Changed, "#input-search")
    def handle_search_changed(self, message: Input.Changed) -> None:
        self.app.state.set_search_term(message.value)
        self.update_product_table()

    @on(Select.Changed, "#select-category")
    def handle_category_changed(self, message: Select.Changed) -> None:
        if message.value is Select.BLANK:
            return
        self.app.state.set_category(message.value)
        self.update_product_table()

    def update_product_table(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        for item in self.app.state.visible_products:
            table.add_row(
                item.name, item.category, format_price(item.price), key=item.name
            )

    @on(DataTable.RowSelected, "#table-products")
    @work()
    async def handle_add_to_cart(self, event: DataTable.RowSelected) -> None:
        item = find_item(event.row_key.value)
        if item is None:
            return
        await self.app.state.add_item(item.name, item.price)
        await self.refresh_sidebar()
        self.notify(f"{item.name} added to cart.")

    def action_noop(self) -> None:
        pass
