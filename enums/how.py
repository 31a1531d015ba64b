from enum import Enum


class How(Enum):
    """Native lookup mechanisms understood by the locator layer."""
    ID = "id"
    NAME = "name"
    TAG_NAME = "tag name"
    CLASS_NAME = "class name"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    CSS = "css selector"
    XPATH = "xpath"
