import logging
from typing import Callable, Dict

from ..models import DataTable, OrderDetails
from ..pages.order_page import OrderPage
from .library import StepDefinitionLibrary, utc_timestamp

logger = logging.getLogger(__name__)

# Data table field -> (context key, attribute of the stored value or None)
STORED_ORDER_FIELDS = {
    "Product ID": ("selected_product", "id"),
    "Quantity": ("order_quantity", None),
    "Order Type": ("selected_order_type", "id"),
    "Shipping Address": ("selected_shipping_address", "id"),
}


def field_key(field: str) -> str:
    """'Product ID' -> 'product_id'"""
    return "_".join(field.lower().split())


class OrderSteps(StepDefinitionLibrary):
    """Order placement and order history steps"""

    def __init__(self, session):
        super().__init__(session)
        self.order_page = OrderPage(self.driver, self.resolver, self.context)

    def _register_steps(self) -> Dict[str, Callable]:
        return {
            # ============ PLACING ORDERS ============
            r"I am on the place order page": self.on_place_order_page,
            r"I place an order with the following details:?": self.place_order_with_details,
            r'I select product "([^"]+)"': self.select_product,
            r"I set quantity to (\d+)": self.set_quantity,
            r'I select order type "([^"]+)"': self.select_order_type,
            r'I select shipping address "([^"]+)"': self.select_shipping_address,
            r"I place the order": self.place_order,
            r"I extract the order number": self.extract_order_number,

            # ============ CONFIRMATION ============
            r"I should see order confirmation": self.should_see_confirmation,
            r"I should get a unique order number": self.should_get_order_number,
            r"the stored order details should contain:?": self.stored_details_should_contain,
            r"the complete order details should be stored": self.complete_details_stored,
            r"I can retrieve the order number for later use": self.retrieve_order_number,

            # ============ ORDER HISTORY ============
            r"I navigate to order history": self.navigate_to_history,
            r"I search for the generated order number": self.search_generated_order,
            r"I should see the order in search results": self.should_see_order_in_results,
            r'the order status should be "([^"]+)"': self.order_status_should_be,
        }

    def on_place_order_page(self):
        self.order_page.navigate_to_place_order()
        self.context.set("page_load_timestamp", utc_timestamp())

    def place_order_with_details(self, table: DataTable):
        order_data = table.rows_hash()
        self.context.set("order_data_table", order_data)

        order_number = self.order_page.complete_order_flow(
            order_data["Product ID"],
            int(order_data["Quantity"]),
            order_data["Order Type"],
            order_data["Shipping Address"],
        )
        self.context.set("generated_order_number", order_number)
        logger.info(f"Order placed successfully with number: {order_number}")

    def select_product(self, product_id: str):
        self.order_page.select_product(product_id)
        self.assertions.assert_and_store(
            "selected_product_id", self.context.get("selected_product").id, product_id
        )

    def set_quantity(self, quantity: str):
        self.order_page.set_quantity(int(quantity))
        self.assertions.assert_and_store("order_quantity_stored", self.context.get("order_quantity"), int(quantity))

    def select_order_type(self, order_type_id: str):
        self.order_page.select_order_type(order_type_id)
        self.assertions.assert_and_store(
            "selected_order_type_id", self.context.get("selected_order_type").id, order_type_id
        )

    def select_shipping_address(self, address_id: str):
        self.order_page.select_shipping_address(address_id)
        self.assertions.assert_and_store(
            "selected_shipping_address_id", self.context.get("selected_shipping_address").id, address_id
        )

    def place_order(self):
        self.order_page.place_order()
        self.context.set("order_placement_timestamp", utc_timestamp())

    def extract_order_number(self):
        order_number = self.order_page.extract_order_number()
        self.context.set("extracted_order_number", order_number)

    def should_see_confirmation(self):
        self.order_page.get_order_confirmation().assert_visible()
        self.context.set("confirmation_timestamp", utc_timestamp())

    def should_get_order_number(self):
        order_number = self.context.get("generated_order_number")
        if not isinstance(order_number, str) or not order_number:
            raise AssertionError(f"Expected a non-empty order number, got {order_number!r}")
        self.context.set("order_number_for_verification", order_number)

    def stored_details_should_contain(self, table: DataTable):
        for field, expected in table.rows_hash().items():
            if field not in STORED_ORDER_FIELDS:
                raise ValueError(f"Unknown order field: {field}")

            context_key, attribute = STORED_ORDER_FIELDS[field]
            stored = self.context.get(context_key)
            if attribute is None:
                actual, expected_value = stored, int(expected)
            else:
                actual, expected_value = getattr(stored, attribute), expected

            self.assertions.assert_and_store(f"order_field_{field_key(field)}", actual, expected_value)

    def complete_details_stored(self):
        order_details = self.context.get("complete_order_details")
        if not isinstance(order_details, OrderDetails):
            raise AssertionError(f"Stored order details have unexpected type {type(order_details).__name__}")

        self.context.set("verified_order_details", order_details)
        self.session.attach_json("Complete order details", order_details)

    def retrieve_order_number(self):
        order_number = self.context.get("generated_order_number")
        extracted = self.context.get("extracted_order_number")
        self.assertions.assert_and_store("retrieved_order_number", extracted, order_number)

        self.context.set_multiple({
            "order_number_for_api_call": order_number,
            "order_number_for_database_query": order_number,
            "order_number_for_email_verification": order_number,
        })

    def navigate_to_history(self):
        self.order_page.navigate_to_order_history()
        self.context.set("history_navigation_timestamp", utc_timestamp())

    def search_generated_order(self):
        order_number = self.context.get("generated_order_number")
        self.order_page.search_order(order_number)
        self.order_page.click_search_button()
        self.context.set("search_timestamp", utc_timestamp())

    def should_see_order_in_results(self):
        order_number = self.context.get("generated_order_number")
        self.order_page.verify_order_in_results(order_number)
        self.context.set("verification_timestamp", utc_timestamp())

    def order_status_should_be(self, expected_status: str):
        order_number = self.context.get("generated_order_number")
        actual_status = self.order_page.get_order_status(order_number)
        self.assertions.assert_and_store("order_status", actual_status, expected_status)
