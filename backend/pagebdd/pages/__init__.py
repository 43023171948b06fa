"""
Page Objects

Each page reads its URL and selectors from the page fixture (or from its
static declaration) and exposes page-level operations to step definitions.
"""

from .definitions import (
    PageDefinition,
    StaticPageDefinition,
    FixturePageDefinition,
    select_page_definition
)
from .base_page import BasePage
from .login_page import LoginPage
from .dashboard_page import DashboardPage
from .order_page import OrderPage
from .common_page import CommonPage

__all__ = [
    "PageDefinition",
    "StaticPageDefinition",
    "FixturePageDefinition",
    "select_page_definition",
    "BasePage",
    "LoginPage",
    "DashboardPage",
    "OrderPage",
    "CommonPage"
]
