"""
Unit tests for page definitions and provider selection.
"""

import pytest

from pagebdd.errors import DataPathNotFoundError, FixtureNotFoundError, SelectorNotFoundError
from pagebdd.pages import (
    CommonPage,
    FixturePageDefinition,
    LoginPage,
    StaticPageDefinition,
    select_page_definition,
)


class TestSelectPageDefinition:
    """Test which provider a page gets."""

    def test_fixture_selectors_win(self, resolver):
        """Test that a fixture with selectors is used even when static ones exist."""
        definition = select_page_definition(
            "login", resolver, "loginPage",
            static_selectors={"usernameInput": "#static"}, static_url="/static",
        )

        assert isinstance(definition, FixturePageDefinition)
        assert definition.source == "fixture"
        assert definition.selector("usernameInput") == "#username"
        assert definition.url == "/login"

    def test_static_without_fixture(self, resolver):
        """Test the static fallback when the page has no fixture."""
        definition = select_page_definition(
            "common", resolver, "homePage",
            static_selectors={"modal": ".modal"}, static_url="/",
        )

        assert isinstance(definition, StaticPageDefinition)
        assert definition.source == "static"
        assert definition.url == "/"

    def test_static_when_fixture_has_no_selectors(self, resolver, write_fixture):
        """Test that a data-only fixture does not replace static selectors."""
        write_fixture("common", {"urls": {"homePage": "/home"}})

        definition = select_page_definition(
            "common", resolver, "homePage",
            static_selectors={"modal": ".modal"}, static_url="/",
        )

        assert definition.source == "static"

    def test_neither_available(self, resolver):
        """Test that a page with no fixture and no static selectors cannot be built."""
        with pytest.raises(FixtureNotFoundError):
            select_page_definition("checkout", resolver, "checkoutPage")

    def test_fixture_url_missing_fails_on_access(self, resolver):
        """Test that a missing URL key is reported when the URL is first used."""
        definition = select_page_definition("login", resolver, "signupPage")

        with pytest.raises(DataPathNotFoundError, match="urls.signupPage"):
            definition.url


class TestSelectorLookup:
    """Test logical selector lookup."""

    def test_unknown_static_selector(self):
        """Test SelectorNotFoundError names page and selector."""
        definition = StaticPageDefinition("common", "/", {"modal": ".modal"})

        with pytest.raises(SelectorNotFoundError) as exc_info:
            definition.selector("drawer")

        assert exc_info.value.page_name == "common"
        assert exc_info.value.selector_name == "drawer"

    def test_unknown_fixture_selector(self, resolver):
        """Test that fixture-backed pages raise the same error."""
        definition = FixturePageDefinition("login", resolver, "loginPage")

        with pytest.raises(SelectorNotFoundError, match="rememberMe"):
            definition.selector("rememberMe")

    def test_empty_selector_counts_as_missing(self):
        """Test that an empty locator string is not usable."""
        definition = StaticPageDefinition("common", "/", {"modal": ""})

        with pytest.raises(SelectorNotFoundError):
            definition.selector("modal")


class TestPageObjectsUseDefinition:
    """Test page objects built on each provider."""

    def test_login_page_is_fixture_backed(self, mock_driver, resolver, context):
        """Test that LoginPage reads the fixture selectors."""
        page = LoginPage(mock_driver, resolver, context)

        page.get_element("usernameInput")

        mock_driver.get.assert_called_with("#username", None)
        assert page.url == "/login"

    def test_common_page_is_static(self, mock_driver, resolver, context):
        """Test that CommonPage falls back to its class selectors."""
        page = CommonPage(mock_driver, resolver, context)

        page.close_modal()

        assert page.definition.source == "static"
        mock_driver.get.assert_called_with(CommonPage.STATIC_SELECTORS["closeButton"], None)
        mock_driver.elements[CommonPage.STATIC_SELECTORS["closeButton"]].click.assert_called_once()

    def test_unknown_selector_does_not_touch_driver(self, mock_driver, resolver, context):
        """Test that a bad selector name fails before the browser is used."""
        page = LoginPage(mock_driver, resolver, context)

        with pytest.raises(SelectorNotFoundError):
            page.click_element("rememberMe")

        mock_driver.get.assert_not_called()

    def test_explicit_definition(self, mock_driver, resolver, context):
        """Test that an injected definition replaces provider selection."""
        definition = StaticPageDefinition("login", "/alt", {"pageTitle": "h2"})
        page = LoginPage(mock_driver, resolver, context, definition=definition)

        page.visit()

        mock_driver.visit.assert_called_once_with("/alt")
