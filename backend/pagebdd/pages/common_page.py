from typing import Optional

from .base_page import BasePage

DEFAULT_ELEMENT_TIMEOUT_MS = 10000


class CommonPage(BasePage):
    """Widgets shared by every screen: spinner, notifications, modals"""

    PAGE_NAME = "common"
    URL_KEY = "homePage"
    STATIC_URL = "/"
    STATIC_SELECTORS = {
        "loadingSpinner": '.loading, .spinner, [data-testid="loading"]',
        "notification": '.notification, .toast, [data-testid="notification"]',
        "modal": '.modal, .dialog, [data-testid="modal"]',
        "closeButton": '.close, .close-btn, [data-testid="close"]',
        "confirmButton": '.confirm, .ok-btn, [data-testid="confirm"]',
        "cancelButton": '.cancel, .cancel-btn, [data-testid="cancel"]',
    }

    def _default_timeout(self) -> int:
        # Fixture-less pages fall back to the built-in timeout
        if self.definition.source == "fixture":
            return self.resolver.get_timeout(self.PAGE_NAME, "element")
        return DEFAULT_ELEMENT_TIMEOUT_MS

    def _timeout(self, timeout: Optional[int]) -> int:
        # 0 is an explicit timeout, only None means "use the default"
        return timeout if timeout is not None else self._default_timeout()

    def wait_for_loading_to_complete(self):
        self.get_element("loadingSpinner").assert_not_exists()

    def is_notification_visible(self):
        return self.is_element_visible("notification")

    def verify_notification_text(self, expected_text: str):
        self.element_contains_text("notification", expected_text)

    def is_modal_visible(self):
        return self.is_element_visible("modal")

    def close_modal(self):
        self.click_element("closeButton")

    def confirm_action(self):
        self.click_element("confirmButton")

    def cancel_action(self):
        self.click_element("cancelButton")

    def wait_for_element(self, selector_name: str, timeout: Optional[int] = None):
        return self.is_element_visible(selector_name, self._timeout(timeout))

    def wait_for_element_text(self, selector_name: str, text: str, timeout: Optional[int] = None):
        self.element_contains_text(selector_name, text, self._timeout(timeout))

    def scroll_to_element(self, selector_name: str):
        self.get_element(selector_name).scroll_into_view()

    def hover_over_element(self, selector_name: str):
        self.get_element(selector_name).hover()
