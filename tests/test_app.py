import unittest

import httpx
from sample_data import RAW_PRODUCTS
from textual.widgets import Input

from main import StorefrontApp
from utils.messages import PageChangedMessage
from utils.state import GlobalState
from views.scr_auth import AuthScreen


def offline_app() -> StorefrontApp:
    state = GlobalState.with_transport(
        httpx.MockTransport(lambda request: httpx.Response(200, json=RAW_PRODUCTS))
    )
    return StorefrontApp(state)


class AuthScreenTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_signup_keeps_password_exactly_as_typed(self):
        app = offline_app()
        async with app.run_test() as pilot:
            app.state.navigate("auth")
            app.post_message(PageChangedMessage())
            await pilot.pause()

            screen = app.screen
            self.assertIsInstance(screen, AuthScreen)
            screen.query_one("#input-reg-username", Input).value = "  bob  "
            screen.query_one("#input-reg-email", Input).value = " bob@x.com "
            screen.query_one("#input-reg-pwd", Input).value = " secret "
            screen.handle_registration_submit()
            await pilot.pause()

            user = app.state.auth.current_user
            self.assertEqual(user.username, "bob")
            self.assertEqual(user.email, "bob@x.com")
            self.assertEqual(user.password, " secret ")

            app.state.logout()
            self.assertTrue(app.state.login("bob@x.com", " secret "))

    async def test_login_screen_has_no_quit_button(self):
        app = offline_app()
        async with app.run_test() as pilot:
            app.state.navigate("auth")
            app.post_message(PageChangedMessage())
            await pilot.pause()
            self.assertEqual(len(app.screen.query("#btn-quit")), 0)
