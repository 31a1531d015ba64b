from typing import Protocol, runtime_checkable
from playwright.sync_api import Page


@runtime_checkable
class SearchContext(Protocol):
    """Anything elements can be searched in: a Page, a Frame, a Locator or an element proxy."""

    def locator(self, selector: str, **kwargs): ...


# Full browser handle; accepted wherever a search context is
DRIVER_TYPES = (Page,)


def is_search_context_type(value) -> bool:
    """True if 'value' is a class whose instances can act as a search context."""
    if value is SearchContext:
        return True
    if not isinstance(value, type):
        return False
    if issubclass(value, DRIVER_TYPES):
        return True
    return issubclass(value, SearchContext)
