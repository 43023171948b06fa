"""
Pytest configuration and shared fixtures for pagebdd tests.
"""

import json
import pytest
from pathlib import Path
from unittest.mock import MagicMock, Mock
from typing import Dict, Any

from pagebdd.config import FrameworkConfig
from pagebdd.context import AssertionHelper, TestContext
from pagebdd.data import FixtureStore, PageDataResolver
from pagebdd.reporting import MemoryReportSink
from pagebdd.session import TestSession


# ==================== Fixture Documents ====================

LOGIN_FIXTURE: Dict[str, Any] = {
    "selectors": {
        "usernameInput": "#username",
        "passwordInput": "#password",
        "loginButton": "#login",
        "errorMessage": ".error-message",
        "successMessage": ".success-message",
        "pageTitle": "h1",
    },
    "expectedTexts": {"pageTitle": "Login"},
    "urls": {"loginPage": "/login"},
    "validUsers": [
        {"id": "csra", "password": None},
        {"id": "standard_user", "password": "secret_sauce"},
    ],
    "invalidUsers": [
        {"id": "locked_out_user", "password": "secret_sauce",
         "expectedErrorMessage": "Sorry, this user has been locked out."},
    ],
}

DASHBOARD_FIXTURE: Dict[str, Any] = {
    "selectors": {
        "dashboardTitle": "h1.dashboard",
        "welcomeMessage": ".welcome",
        "navigationMenu": ".nav",
        "logoutButton": ".logout",
        "userProfile": ".profile",
        "quickActions": ".actions",
    },
    "expectedTexts": {"dashboardTitle": "Dashboard"},
    "urls": {"dashboardPage": "/dashboard"},
    "timeouts": {"pageLoad": 30000, "element": 0},
    "navigationItems": ["Dashboard", "Reports"],
    "quickActionButtons": ["Create User"],
    "flags": {"enabled": False, "label": "", "owner": None},
}

ORDER_FIXTURE: Dict[str, Any] = {
    "selectors": {
        "productSelect": "#product",
        "quantityInput": "#quantity",
        "orderTypeSelect": "#orderType",
        "shippingAddressSelect": "#shippingAddress",
        "placeOrderButton": "#placeOrder",
        "orderConfirmation": ".order-confirmation",
        "orderNumber": ".order-number",
        "searchOrderInput": "#orderSearch",
        "searchButton": "#searchOrders",
        "orderHistoryTable": "table.order-history",
        "orderRow": "table.order-history tr",
        "orderStatus": ".order-status",
    },
    "urls": {"placeOrderPage": "/orders/new", "orderHistoryPage": "/orders/history"},
    "products": [
        {"id": "PROD-001", "name": "Wireless Mouse", "price": 29.99},
        {"id": "PROD-002", "name": "Keyboard", "price": 89.5},
    ],
    "orderTypes": [{"id": "STANDARD", "name": "Standard Delivery"}],
    "shippingAddresses": [{"id": "ADDR-HOME", "name": "Home", "city": "Springfield"}],
}

# Common page has no fixture on purpose: it falls back to static selectors
PAGE_FIXTURES = {
    "login": LOGIN_FIXTURE,
    "dashboard": DASHBOARD_FIXTURE,
    "order": ORDER_FIXTURE,
}


def write_page_fixture(fixtures_dir: Path, page_name: str, data: Any) -> Path:
    """Write <fixtures_dir>/pages/<page>Data.json"""
    path = fixtures_dir / "pages" / f"{page_name}Data.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def fixtures_dir(tmp_path) -> Path:
    """Temporary fixtures directory holding the login, dashboard and order pages."""
    root = tmp_path / "fixtures"
    for page_name, data in PAGE_FIXTURES.items():
        write_page_fixture(root, page_name, data)
    return root


@pytest.fixture
def write_fixture(fixtures_dir):
    """Add or replace a page fixture in the temporary fixtures directory."""
    def _write(page_name: str, data: Any) -> Path:
        return write_page_fixture(fixtures_dir, page_name, data)
    return _write


@pytest.fixture
def fixture_store(fixtures_dir) -> FixtureStore:
    return FixtureStore(fixtures_dir)


@pytest.fixture
def resolver(fixture_store) -> PageDataResolver:
    return PageDataResolver(fixture_store)


@pytest.fixture
def context() -> TestContext:
    return TestContext()


@pytest.fixture
def assertions(context) -> AssertionHelper:
    return AssertionHelper(context)


# ==================== Mock Driver Fixture ====================

class ElementRegistry(dict):
    """One mock element per selector, created on first use."""

    def __missing__(self, selector):
        element = MagicMock(name=f"element[{selector}]", unsafe=True)
        element.text.return_value = ""
        element.count.return_value = 1
        element.filter_text.return_value = element
        element.find.side_effect = lambda child: self[child]
        self[selector] = element
        return element


@pytest.fixture
def mock_driver():
    """Create a mock BrowserDriver; driver.elements maps selector -> element mock."""
    driver = MagicMock()
    elements = ElementRegistry()

    driver.elements = elements
    driver.get = Mock(side_effect=lambda selector, timeout=None: elements[selector])
    driver.contains = Mock(side_effect=lambda text, timeout=None: elements[f"text={text}"])
    driver.visit = Mock()
    driver.wait_for_ready = Mock()
    driver.current_url = Mock(return_value="http://localhost:3000/dashboard")
    driver.screenshot = Mock(return_value=b"fake_screenshot_data")
    driver.close = Mock()

    def set_text(selector: str, text: str):
        elements[selector].text.return_value = text

    driver.set_text = set_text

    return driver


# ==================== Session Fixtures ====================

@pytest.fixture
def config(fixtures_dir) -> FrameworkConfig:
    return FrameworkConfig(base_url="http://localhost:3000", fixtures_dir=fixtures_dir)


@pytest.fixture
def report_sink() -> MemoryReportSink:
    return MemoryReportSink()


@pytest.fixture
def session(config, mock_driver, report_sink) -> TestSession:
    """Session over the mock driver and the temporary fixtures."""
    return TestSession(config, mock_driver, report_sink=report_sink)
