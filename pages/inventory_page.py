from typing import Annotated, Optional
from decorators.class_decorators import page_object
from locators.element_locator import ElementLocator
from pages.header_component import HeaderComponent
from pages.product_item import ProductItem
from wrappers.smart_element import SmartElement
from wrappers.smart_element_list import SmartElementList
from wrappers.smart_expect import expect
from wrappers.smart_page import SmartPage

INVENTORY_PAGE_HEADER = 'Swag Labs'


@page_object
class InventoryPage(SmartPage):
    url = "inventory.html"

    header: HeaderComponent
    products: SmartElementList[ProductItem, "InventoryPage"]
    sort_select: Annotated[SmartElement, ElementLocator(class_name="product_sort_container")]

    def find_product(self, product_name: str) -> Optional[ProductItem]:
        for product in self.products:
            if product.get_name() == product_name:
                return product
        return None

    def add_product_to_cart(self, product_name: str):
        product = self.find_product(product_name)
        if product is None:
            raise LookupError(f"Product '{product_name}' is not listed")
        product.add_to_cart()

    def verify_page(self):
        expect(self.header.title).to_have_text(INVENTORY_PAGE_HEADER)
        expect(self.products.resolve().first).to_be_visible()
