from typing import Annotated
from decorators.class_decorators import element_locator
from locators.element_locator import ElementLocator
from locators.native_attributes import FindsBy
from enums.how import How
from wrappers.smart_element import SmartElement


@element_locator(class_name="inventory_item")
class ProductItem(SmartElement):
    """One product card; its fields are searched inside the card only."""

    name: Annotated[SmartElement, ElementLocator(class_name="inventory_item_name")]
    price: Annotated[SmartElement, ElementLocator(class_name="inventory_item_price")]
    image: Annotated[SmartElement, ElementLocator(tag_name="img")]
    add_to_cart_button: Annotated[SmartElement, FindsBy(How.CSS, "button[data-test^='add-to-cart']")]
    remove_button: Annotated[SmartElement, FindsBy(How.CSS, "button[data-test^='remove']")]

    def get_name(self) -> str:
        return self.name.inner_text()

    def add_to_cart(self):
        self.add_to_cart_button.click()
