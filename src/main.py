from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from utils.logger import get_logger
from utils.messages import ModeSwitchedMessage, QuitRequestedMessage, UserLogoutMessage
from utils.state import GlobalState
from views.scr_cart import CartScreen
from views.scr_login import LoginScreen
from views.scr_prod_search import ProdSearchScreen

_logger = get_logger(__name__)


class ShopApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
    ]

    MODES = {
        "prod_search": ProdSearchScreen,
        "cart": CartScreen,
    }

    SHOP_MODES = {
        "prod_search": "Products",
        "cart": "Cart",
    }

    CSS_PATH = "styles/shop.tcss"

    state: GlobalState

    def __init__(self):
        super().__init__()
        self.state = GlobalState()

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        await self.state.rehydrate()
        self.main_flow()

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    @on(ModeSwitchedMessage)
    def handle_mode_switched(self, message: ModeSwitchedMessage) -> None:
        _logger.debug(f"Mode {message.old_mode!r} -> {message.new_mode!r}")

    @on(UserLogoutMessage)
    def handle_user_logout(self):
        self.state.logout()
        self.notify("Logout successful.")
        self.main_flow()

    @on(QuitRequestedMessage)
    def handle_quit(self):
        self.exit()

    @work(exclusive=True)
    async def main_flow(self):
        await self.push_screen_wait(LoginScreen())
        self.post_message(ModeSwitchedMessage(self.current_mode, "prod_search"))
        await self.switch_mode("prod_search")


def main() -> None:
    ShopApp().run()


if __name__ == "__main__":
    main()
