import logging
from typing import List

from ..errors import DataPathNotFoundError
from .base_page import BasePage

logger = logging.getLogger(__name__)


class DashboardPage(BasePage):
    PAGE_NAME = "dashboard"
    URL_KEY = "dashboardPage"
    STATIC_URL = "/dashboard"
    STATIC_SELECTORS = {
        "dashboardTitle": 'h1, .dashboard-title, [data-testid="dashboard-title"]',
        "welcomeMessage": '.welcome-message, .user-greeting, [data-testid="welcome"]',
        "navigationMenu": '.nav-menu, .sidebar, [data-testid="navigation"]',
        "logoutButton": '.logout-btn, .signout-btn, [data-testid="logout"]',
        "userProfile": '.user-profile, .profile-info, [data-testid="profile"]',
        "quickActions": '.quick-actions, .action-buttons, [data-testid="actions"]',
    }

    def verify_dashboard_loaded(self):
        self.wait_for_page_load()

    def is_dashboard_title_visible(self):
        return self.is_element_visible("dashboardTitle")

    def get_page_title(self) -> str:
        return self.get_element_text("dashboardTitle")

    def verify_dashboard_title(self, expected_title: str):
        self.element_contains_text("dashboardTitle", expected_title)

    def verify_dashboard_title_from_data(self):
        self.verify_dashboard_title(self.resolver.get_expected_text(self.PAGE_NAME, "dashboardTitle"))

    def is_welcome_message_visible(self):
        return self.is_element_visible("welcomeMessage")

    def verify_welcome_message_contains_username(self, username: str):
        self.element_contains_text("welcomeMessage", username)

    def is_navigation_menu_visible(self):
        return self.is_element_visible("navigationMenu")

    def click_logout(self):
        self.click_element("logoutButton")

    def is_user_profile_visible(self):
        return self.is_element_visible("userProfile")

    def are_quick_actions_visible(self):
        return self.is_element_visible("quickActions")

    def verify_successful_login(self, username: str):
        self.verify_dashboard_loaded()
        self.is_dashboard_title_visible()
        self.is_welcome_message_visible()
        self.verify_welcome_message_contains_username(username)
        self.is_navigation_menu_visible()

    def _text_list(self, path: str) -> List[str]:
        items = self.resolver.resolve(self.PAGE_NAME, path)
        if not isinstance(items, list):
            raise DataPathNotFoundError(self.PAGE_NAME, path)
        return items

    def verify_navigation_items(self):
        for item in self._text_list("navigationItems"):
            self.driver.contains(item).assert_visible()

    def verify_quick_action_buttons(self):
        for button in self._text_list("quickActionButtons"):
            self.driver.contains(button).assert_visible()

    def get_page_load_timeout(self) -> int:
        return self.resolver.get_timeout(self.PAGE_NAME, "pageLoad")
