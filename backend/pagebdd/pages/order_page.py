"""
Order Page
Place-order and order-history flows. Every selection is recorded in the test
context so later steps can assert on it without asking the browser again.

Context keys written here:
    selected_product, order_quantity, selected_order_type,
    selected_shipping_address, order_placed_timestamp,
    generated_order_number, complete_order_details, search_criteria,
    expected_order_number_in_results, order_status_<order number>
"""

import logging
from datetime import datetime, timezone

from ..models import AddressRecord, OrderDetails, OrderTypeRecord, ProductRecord
from .base_page import BasePage

logger = logging.getLogger(__name__)


class OrderPage(BasePage):
    PAGE_NAME = "order"
    URL_KEY = "placeOrderPage"
    HISTORY_URL_KEY = "orderHistoryPage"

    def navigate_to_place_order(self):
        self.visit()

    def select_product(self, product_id: str) -> ProductRecord:
        product = self.resolver.get_record(self.PAGE_NAME, "products", product_id, ProductRecord, "Product")
        self.context.set("selected_product", product)
        self.get_element("productSelect").select(product_id)
        return product

    def set_quantity(self, quantity: int):
        self.context.set("order_quantity", quantity)
        self.clear_and_type("quantityInput", str(quantity))

    def select_order_type(self, order_type_id: str) -> OrderTypeRecord:
        order_type = self.resolver.get_record(
            self.PAGE_NAME, "orderTypes", order_type_id, OrderTypeRecord, "Order type"
        )
        self.context.set("selected_order_type", order_type)
        self.get_element("orderTypeSelect").select(order_type_id)
        return order_type

    def select_shipping_address(self, address_id: str) -> AddressRecord:
        address = self.resolver.get_record(
            self.PAGE_NAME, "shippingAddresses", address_id, AddressRecord, "Shipping address"
        )
        self.context.set("selected_shipping_address", address)
        self.get_element("shippingAddressSelect").select(address_id)
        return address

    def place_order(self):
        self.context.set("order_placed_timestamp", datetime.now(timezone.utc).isoformat())
        self.click_element("placeOrderButton")

    def get_order_confirmation(self):
        return self.get_element("orderConfirmation")

    def calculate_total_amount(self) -> float:
        product: ProductRecord = self.context.get("selected_product")
        quantity: int = self.context.get("order_quantity")
        return product.price * quantity

    def extract_order_number(self) -> str:
        """Read the order number and store it with the complete order details"""
        order_number = self.get_element_text("orderNumber")
        if not order_number:
            raise AssertionError("Order confirmation shows an empty order number")

        self.context.set("generated_order_number", order_number)

        order_details = OrderDetails(
            orderNumber=order_number,
            product=self.context.get("selected_product"),
            quantity=self.context.get("order_quantity"),
            orderType=self.context.get("selected_order_type"),
            shippingAddress=self.context.get("selected_shipping_address"),
            timestamp=self.context.get("order_placed_timestamp"),
            totalAmount=self.calculate_total_amount(),
        )
        self.context.set("complete_order_details", order_details)

        logger.info(f"Order {order_number} placed, total {order_details.totalAmount}")
        return order_number

    def complete_order_flow(self, product_id: str, quantity: int,
                            order_type_id: str, address_id: str) -> str:
        """Select everything, place the order and return the new order number"""
        self.select_product(product_id)
        self.set_quantity(quantity)
        self.select_order_type(order_type_id)
        self.select_shipping_address(address_id)
        self.place_order()

        self.get_order_confirmation().assert_visible()
        return self.extract_order_number()

    def navigate_to_order_history(self):
        url = self.resolver.get_url(self.PAGE_NAME, self.HISTORY_URL_KEY)
        logger.info(f"Visiting order history ({url})")
        self.driver.visit(url)

    def search_order(self, search_criteria: str):
        self.context.set("search_criteria", search_criteria)
        self.clear_and_type("searchOrderInput", search_criteria)

    def click_search_button(self):
        self.click_element("searchButton")

    def verify_order_in_results(self, expected_order_number: str):
        self.context.set("expected_order_number_in_results", expected_order_number)
        self.element_contains_text("orderHistoryTable", expected_order_number)

    def get_order_status(self, order_number: str) -> str:
        status_cell = (
            self.get_element("orderRow")
            .filter_text(order_number)
            .find(self.definition.selector("orderStatus"))
        )
        status = status_cell.text().strip()
        self.context.set(f"order_status_{order_number}", status)
        return status

    def get_stored_order_details(self) -> OrderDetails:
        return self.context.get("complete_order_details")

    def get_stored_order_number(self) -> str:
        return self.context.get("generated_order_number")
