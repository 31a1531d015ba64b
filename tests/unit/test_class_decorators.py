import pytest
from typing import Annotated
from builders.errors import UnsupportedPropertyTypeError
from builders.smart_page_builder import DEFAULT_LOCATOR_ATTRIBUTE, SmartPageBuilder
from decorators.class_decorators import element_locator, page_object
from locators.element_locator import ElementLocator
from wrappers.smart_element import SmartElement
from wrappers.smart_page import SmartPage


def test_element_locator_sets_class_default():
    @element_locator(class_name="card", tag_name="div")
    class Card(SmartElement):
        pass

    assert getattr(Card, DEFAULT_LOCATOR_ATTRIBUTE) == ElementLocator(tag_name="div", class_name="card")


def test_element_locator_is_inherited():
    @element_locator(id="base")
    class Base(SmartElement):
        pass

    class Derived(Base):
        pass

    assert getattr(Derived, DEFAULT_LOCATOR_ATTRIBUTE) == ElementLocator(id="base")


def test_page_object_derives_plan_with_given_builder():
    builder = SmartPageBuilder()

    @page_object(builder=builder)
    class AccountPage(SmartPage):
        email: Annotated[SmartElement, ElementLocator(id="email")]

    assert builder.is_cached(AccountPage)
    assert builder.get_plan(AccountPage).property_names() == ["email"]


def test_page_object_bare_uses_default_builder():
    from builders.smart_page_builder import default_page_builder

    @page_object
    class OrdersPage(SmartPage):
        orders: Annotated[SmartElement, ElementLocator(class_name="order")]

    assert default_page_builder.is_cached(OrdersPage)


def test_page_object_resolves_references_to_itself():
    from wrappers.smart_element_list import SmartElementList

    builder = SmartPageBuilder()

    @page_object(builder=builder)
    class TreePage(SmartPage):
        nodes: SmartElementList[SmartElement, "TreePage"]

    assert builder.get_plan(TreePage).properties[0].item_type is SmartElement


def test_page_object_reports_declaration_errors():
    with pytest.raises(UnsupportedPropertyTypeError):
        @page_object(builder=SmartPageBuilder())
        class BrokenPage(SmartPage):
            title: str
