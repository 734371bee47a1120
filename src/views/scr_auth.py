from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Button, Input, Label, TabbedContent, TabPane

from utils.messages import PageChangedMessage
from views.base_screen import BaseScreen


class AuthScreen(BaseScreen):
    """
    Login and sign up tabs. Both lead back to the shop on success.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Login")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with TabbedContent(id="super-tab-authscr"):
            with TabPane("Login", id="tab-login"):
                with Vertical(id="div-login"):
                    yield Label("Email")
                    yield Input(placeholder="user@example.com", id="input-login-email")
                    yield Label("Password")
                    yield Input(
                        placeholder="*********", password=True, id="input-login-pwd"
                    )
                    yield Label("", id="label-login-error", classes="form-error")
                    with Container(id="div-login-btns"):
                        yield Button("Login", id="btn-login", variant="primary")

            with TabPane("Sign up", id="tab-signup"):
                with Vertical(id="div-reg"):
                    yield Label("Username")
                    yield Input(placeholder="jane_doe", id="input-reg-username")
                    yield Label("Email")
                    yield Input(placeholder="user@example.com", id="input-reg-email")
                    yield Label("Password")
                    yield Input(
                        placeholder="*********", password=True, id="input-reg-pwd"
                    )
                    yield Label("", id="label-signup-error", classes="form-error")
                    with Container(id="div-reg-btns"):
                        yield Button("Create Account", id="btn-reg", variant="primary")

    async def refresh_view(self) -> None:
        await super().refresh_view()
        self.query_one("#input-login-email").focus()

    @on(Input.Submitted, "#input-login-pwd")
    @on(Button.Pressed, "#btn-login")
    def handle_login_submit(self) -> None:
        email = self.query_one("#input-login-email", Input).value.strip()
        pwd_input = self.query_one("#input-login-pwd", Input)

        if not email or not pwd_input.value:
            self.notify("Email or password cannot be empty!", severity="error")
            return

        state = self.app.state
        if state.login(email, pwd_input.value):
            self.query_one("#input-login-email", Input).value = ""
            pwd_input.value = ""
            pwd_input.remove_class("-invalid")
            self.query_one("#label-login-error", Label).update("")
            self.app.post_message(PageChangedMessage())
        else:
            self.query_one("#label-login-error", Label).update(state.form_errors["login"])
            pwd_input.value = ""
            pwd_input.add_class("-invalid")
            pwd_input.focus()

    @on(Input.Submitted, "#input-reg-pwd")
    @on(Button.Pressed, "#btn-reg")
    def handle_registration_submit(self) -> None:
        inputs = [
            self.query_one(selector, Input)
            for selector in ("#input-reg-username", "#input-reg-email", "#input-reg-pwd")
        ]
        username, email = (i.value.strip() for i in inputs[:2])
        pwd = inputs[2].value

        if not username or not email or not pwd:
            self.notify("Make sure all inputs are filled.", severity="error")
            return

        state = self.app.state
        if state.signup(username, email, pwd):
            for i in inputs:
                i.value = ""
            self.query_one("#label-signup-error", Label).update("")
            self.get_child_by_type(TabbedContent).active = "tab-login"
            self.app.post_message(PageChangedMessage())
        else:
            self.query_one("#label-signup-error", Label).update(state.form_errors["signup"])
            self.query_one("#input-reg-email").focus()
