import logging

from ..models import UserRecord
from .base_page import BasePage

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    PAGE_NAME = "login"
    URL_KEY = "loginPage"
    STATIC_URL = "/"
    STATIC_SELECTORS = {
        "usernameInput": 'input[name="username"], input#username, input[placeholder*="User" i]',
        "passwordInput": 'input[type="password"], input[name="password"], input#password',
        "loginButton": 'button[type="submit"], button:has-text("Login"), input[type="submit"]',
        "errorMessage": '.error-message, .alert-error, [data-testid="error"]',
        "successMessage": '.success-message, .alert-success, [data-testid="success"]',
        "pageTitle": 'h1, .page-title, [data-testid="page-title"]',
    }

    def navigate_to_login(self):
        self.visit()

    def enter_username(self, username: str):
        self.type_text("usernameInput", username)

    def enter_password(self, password: str):
        self.type_text("passwordInput", password)

    def click_login_button(self):
        self.click_element("loginButton")

    def login_with_username_only(self, username: str):
        """Passwordless login: the password field is never touched"""
        logger.info(f"Logging in as '{username}' without password")
        self.navigate_to_login()
        self.wait_for_page_load()
        self.enter_username(username)
        self.click_login_button()

    def login_with_credentials(self, username: str, password: str):
        logger.info(f"Logging in as '{username}'")
        self.navigate_to_login()
        self.wait_for_page_load()
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()

    def login_as(self, user: UserRecord):
        """Pick the login path from the record: password None means username only"""
        if user.is_passwordless:
            self.login_with_username_only(user.id)
        else:
            self.login_with_credentials(user.id, user.password)

    def is_error_message_visible(self):
        return self.is_element_visible("errorMessage")

    def get_error_message_text(self) -> str:
        self.is_error_message_visible()
        return self.get_element_text("errorMessage")

    def is_success_message_visible(self):
        return self.is_element_visible("successMessage")

    def get_page_title(self) -> str:
        return self.get_element_text("pageTitle")

    def verify_page_title(self, expected_title: str):
        self.element_contains_text("pageTitle", expected_title)
