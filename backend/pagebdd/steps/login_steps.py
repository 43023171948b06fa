from typing import Callable, Dict

from ..errors import RecordNotFoundError
from ..pages.dashboard_page import DashboardPage
from ..pages.login_page import LoginPage
from .library import StepDefinitionLibrary


class LoginSteps(StepDefinitionLibrary):
    """Login and dashboard landing steps"""

    def __init__(self, session):
        super().__init__(session)
        self.login_page = LoginPage(self.driver, self.resolver, self.context)
        self.dashboard_page = DashboardPage(self.driver, self.resolver, self.context)

    def _register_steps(self) -> Dict[str, Callable]:
        return {
            # ============ NAVIGATION ============
            r"I am on the login page": self.on_login_page,

            # ============ AUTHENTICATION ============
            r'I login with user id "([^"]+)"(?: and no password)?': self.login_with_user_id,
            r"I have valid login credentials": self.have_valid_credentials,
            r"I have invalid login credentials": self.have_invalid_credentials,
            r"I login with valid credentials": self.login_with_valid_credentials,
            r"I login with invalid credentials": self.login_with_invalid_credentials,
            r"I log out": self.log_out,

            # ============ ASSERTIONS ============
            r"I should see the dashboard": self.should_see_dashboard,
            r"I should be successfully logged in": self.should_be_logged_in,
            r"I should see an error message": self.should_see_error_message,
        }

    def on_login_page(self):
        self.login_page.navigate_to_login()

        expected_title = self.resolver.get_expected_text("login", "pageTitle")
        actual_title = self.login_page.get_page_title()
        self.assertions.assert_and_store("login_page_title", actual_title, expected_title)

    def login_with_user_id(self, user_id: str):
        user = self.resolver.get_user_by_id(user_id)
        if user is None:
            raise RecordNotFoundError("User", user_id, "login")

        self.context.set("current_user", user)
        self.login_page.login_as(user)

    def have_valid_credentials(self):
        valid_users = self.resolver.get_valid_users()
        if not valid_users:
            raise AssertionError("Login fixture has no valid users")
        self.context.set("valid_users", valid_users)

    def have_invalid_credentials(self):
        invalid_users = self.resolver.get_invalid_users()
        if not invalid_users:
            raise AssertionError("Login fixture has no invalid users")
        self.context.set("invalid_users", invalid_users)

    def login_with_valid_credentials(self):
        user = self.context.get("valid_users")[0]
        self.context.set("current_user", user)
        self.login_page.login_as(user)

    def login_with_invalid_credentials(self):
        user = self.context.get("invalid_users")[0]
        self.context.set("current_user", user)
        self.login_page.login_as(user)

    def log_out(self):
        self.dashboard_page.click_logout()

    def should_see_dashboard(self):
        current_user = self.context.get("current_user")
        expected_title = self.resolver.get_expected_text("dashboard", "dashboardTitle")

        self.dashboard_page.verify_dashboard_loaded()
        actual_title = self.dashboard_page.get_page_title()
        self.assertions.assert_and_store("dashboard_title", actual_title, expected_title)

        self.dashboard_page.verify_successful_login(current_user.id)

    def should_be_logged_in(self):
        current_user = self.context.get("current_user")
        self.dashboard_page.verify_successful_login(current_user.id)

    def should_see_error_message(self):
        current_user = self.context.get("current_user")
        expected_message = current_user.expectedErrorMessage
        actual_message = self.login_page.get_error_message_text()
        self.assertions.assert_and_store("error_message", actual_message, expected_message)
