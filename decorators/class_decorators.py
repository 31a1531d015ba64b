from builders.smart_page_builder import DEFAULT_LOCATOR_ATTRIBUTE, default_page_builder
from locators.element_locator import ElementLocator


def element_locator(**fields):
    """
    Attaches a default ElementLocator to an element or fragment class.
    Properties of that type without their own ElementLocator use it.
    Example:
        @element_locator(class_name="inventory_item")
        class ProductItem(SmartElement): ...
    """
    attribute = ElementLocator(**fields)

    def decorate(cls):
        setattr(cls, DEFAULT_LOCATOR_ATTRIBUTE, attribute)
        return cls

    return decorate


def page_object(cls=None, *, builder=None):
    """
    Registers a page type: its construction plan is derived when the class
    is defined, so declaration errors surface at import time.
    Usable bare (@page_object) or with a builder (@page_object(builder=...)).
    """

    def decorate(page_type):
        (builder or default_page_builder).get_plan(page_type)
        return page_type

    if cls is None:
        return decorate
    return decorate(cls)
