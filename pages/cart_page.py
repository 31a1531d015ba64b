from typing import Annotated
from decorators.class_decorators import page_object
from locators.element_locator import ElementLocator
from locators.native_attributes import FindsBy
from enums.how import How
from pages.header_component import HeaderComponent
from wrappers.smart_element import SmartElement
from wrappers.smart_element_list import SmartElementList
from wrappers.smart_page import SmartPage


class CartItem:
    """A cart row, built inside the row element it was found in."""

    name: Annotated[SmartElement, ElementLocator(class_name="inventory_item_name")]
    remove_button: Annotated[SmartElement, ElementLocator(tag_name="button")]

    def __init__(self, context):
        self.context = context


@page_object
class CartPage(SmartPage):
    url = "cart.html"

    header: HeaderComponent
    title: Annotated[SmartElement, FindsBy(How.CSS, "span[data-test='title']")]
    items: Annotated[SmartElementList[CartItem, "CartPage"], ElementLocator(class_name="cart_item")]
    checkout_button: Annotated[SmartElement, ElementLocator(id="checkout")]

    def get_item_names(self) -> list[str]:
        return [item.name.inner_text() for item in self.items]

    def remove_product(self, product_name: str):
        for item in self.items:
            if item.name.inner_text() == product_name:
                item.remove_button.click()
                return
        raise LookupError(f"Product '{product_name}' is not in the cart")
