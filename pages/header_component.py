from typing import Annotated
from playwright.sync_api import Locator
from locators.element_locator import ElementLocator
from locators.native_attributes import FindsBy
from enums.how import How
from wrappers.search_context import SearchContext
from wrappers.smart_element import SmartElement


class HeaderComponent:
    """Application header shared by the inventory and cart pages."""

    title: Annotated[SmartElement, ElementLocator(class_name="app_logo")]
    cart_link: Annotated[Locator, ElementLocator(class_name="shopping_cart_link")]
    cart_badge: Annotated[SmartElement, FindsBy(How.CSS, "[data-test='shopping-cart-badge']")]
    menu_button: Annotated[SmartElement, ElementLocator(id="react-burger-menu-btn")]

    def __init__(self, context: SearchContext):
        self.context = context

    def open_cart(self):
        self.cart_link.click()

    def get_cart_count(self) -> int:
        if self.cart_badge.count() == 0:
            return 0
        return int(self.cart_badge.inner_text())
