from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label

from views.base_screen import BaseScreen
from views.modal_dialog import QuitDialogModal


class LoginScreen(BaseScreen):
    """
    Username gate. Dismisses once app.state has a logged in session.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Login", show_sidebar=False)

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-login"):
            yield Label("Username")
            yield Input(placeholder="Enter username", id="input-login-username")
            with Horizontal(id="div-login-btns"):
                yield Button("Quit", id="btn-quit")
                yield Button("Login", id="btn-login", variant="primary")

    def on_mount(self):
        self.query_one("#input-login-username").focus()

    @on(Input.Submitted, "#input-login-username")
    @on(Button.Pressed, "#btn-login")
    def handle_login_submit(self) -> None:
        username = self.query_one("#input-login-username", Input).value.strip()

        # empty username: nothing happens
        if not self.app.state.login(username):
            return

        self.notify(f"Welcome to your shopping point, {username}!")
        self.dismiss()

    @on(Button.Pressed, "#btn-quit")
    def handle_quit_(self) -> None:
        self.app.push_screen(QuitDialogModal())
