import json
from dataclasses import dataclass
from playwright.sync_api import Locator
from enums.how import How

# Selector used when an element has no locators and its scope is a whole page
DOCUMENT_ROOT_SELECTOR = ":root"


def _quote(value: str) -> str:
    return json.dumps(value)


@dataclass(frozen=True)
class By:
    """
    A single lookup strategy: how to find an element and the value to look for.
    Equality is by value, so two strategies built from the same metadata
    compare equal no matter where they came from.
    """
    how: How
    value: str

    @classmethod
    def id(cls, value: str) -> "By":
        return cls(How.ID, value)

    @classmethod
    def name(cls, value: str) -> "By":
        return cls(How.NAME, value)

    @classmethod
    def tag_name(cls, value: str) -> "By":
        return cls(How.TAG_NAME, value)

    @classmethod
    def class_name(cls, value: str) -> "By":
        return cls(How.CLASS_NAME, value)

    @classmethod
    def link_text(cls, value: str) -> "By":
        return cls(How.LINK_TEXT, value)

    @classmethod
    def partial_link_text(cls, value: str) -> "By":
        return cls(How.PARTIAL_LINK_TEXT, value)

    @classmethod
    def css(cls, value: str) -> "By":
        return cls(How.CSS, value)

    @classmethod
    def xpath(cls, value: str) -> "By":
        return cls(How.XPATH, value)

    @property
    def selector(self) -> str:
        """Playwright selector string for this strategy."""
        if self.how is How.ID:
            return f"id={self.value}"
        if self.how is How.NAME:
            return f"[name={_quote(self.value)}]"
        if self.how is How.TAG_NAME:
            return f"css={self.value}"
        if self.how is How.CLASS_NAME:
            return f"[class~={_quote(self.value)}]"
        if self.how is How.LINK_TEXT:
            return f"a:text-is({_quote(self.value)})"
        if self.how is How.PARTIAL_LINK_TEXT:
            return f"a:has-text({_quote(self.value)})"
        if self.how is How.CSS:
            return f"css={self.value}"
        return f"xpath={self.value}"

    def find(self, context) -> Locator:
        return context.locator(self.selector)

    def __str__(self):
        return f"By.{self.how.name.lower()}: {self.value}"


class ByChained:
    """
    Several strategies evaluated left to right as one.
    Every following strategy narrows the matches of the previous ones,
    so an element must satisfy all of them.
    """

    def __init__(self, *bys: By):
        if not bys:
            raise ValueError("ByChained needs at least one locator")
        self.bys = tuple(bys)

    def find(self, context) -> Locator:
        locator = self.bys[0].find(context)
        for by in self.bys[1:]:
            locator = locator.and_(by.find(context))
        return locator

    def __eq__(self, other):
        return isinstance(other, ByChained) and self.bys == other.bys

    def __hash__(self):
        return hash(self.bys)

    def __str__(self):
        return f"By.chained([{', '.join(str(by) for by in self.bys)}])"

    __repr__ = __str__


def find_with_locators(context, locators) -> Locator:
    """
    Resolves the first of the assigned locators against the search context.
    Without locators the element is its own scope: an element-like context
    is returned as is, a page-like context yields its document root.
    """
    if locators:
        return locators[0].find(context)

    if _is_element_like(context):
        return context if isinstance(context, Locator) else context.resolve()
    return context.locator(DOCUMENT_ROOT_SELECTOR)


def _is_element_like(context) -> bool:
    if isinstance(context, Locator):
        return True
    return callable(getattr(type(context), "resolve", None))
