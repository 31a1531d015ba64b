from playwright.sync_api import expect as pw_expect
from wrappers.smart_element import SmartElement
from wrappers.smart_element_list import SmartElementList
from wrappers.smart_page import SmartPage


def unwrap(actual):
    """Return the Playwright object behind a framework wrapper."""
    if isinstance(actual, (SmartElement, SmartElementList)):
        return actual.resolve()
    if isinstance(actual, SmartPage):
        return actual.page
    return actual


def expect(actual, message: str = None):
    """
    Playwright expect() that also accepts SmartElement, SmartElementList
    and SmartPage objects.
    """
    return pw_expect(unwrap(actual), message)
