from typing import Callable, Dict

from ..pages.common_page import CommonPage
from .library import StepDefinitionLibrary


class CommonSteps(StepDefinitionLibrary):
    """Notifications, modals and loading indicators shared by all pages"""

    def __init__(self, session):
        super().__init__(session)
        self.common_page = CommonPage(self.driver, self.resolver, self.context)

    def _register_steps(self) -> Dict[str, Callable]:
        return {
            r"the page (?:should )?finish(?:es)? loading": self.loading_complete,
            r'I should see a notification (?:containing|saying) "([^"]+)"': self.notification_contains,
            r"I should see a modal(?: dialog)?": self.modal_visible,
            r"I confirm the action": self.confirm_action,
            r"I cancel the action": self.cancel_action,
            r"I close the modal": self.close_modal,
            r'the current URL should be "([^"]+)"': self.current_url_should_be,
        }

    def loading_complete(self):
        self.common_page.wait_for_loading_to_complete()

    def notification_contains(self, text: str):
        self.common_page.is_notification_visible()
        self.common_page.verify_notification_text(text)

    def modal_visible(self):
        self.common_page.is_modal_visible()

    def confirm_action(self):
        self.common_page.confirm_action()

    def cancel_action(self):
        self.common_page.cancel_action()

    def close_modal(self):
        self.common_page.close_modal()

    def current_url_should_be(self, expected_url: str):
        self.assertions.assert_url(self.driver.current_url(), expected_url)
