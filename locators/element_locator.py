from dataclasses import dataclass
from typing import Optional
from locators.by import By


@dataclass(frozen=True)
class ElementLocator:
    """
    Framework locator metadata attached to a page property:

        username: Annotated[SmartElement, ElementLocator(id="user-name")]

    Every populated field becomes one lookup strategy.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    tag_name: Optional[str] = None
    class_name: Optional[str] = None
    text: Optional[str] = None


# Field order is significant: strategies are emitted in this order
_FIELD_FACTORIES = (
    ("id", By.id),
    ("name", By.name),
    ("tag_name", By.tag_name),
    ("class_name", By.class_name),
    ("text", By.link_text),
)


def get_element_locators(attribute: Optional[ElementLocator]) -> list[By]:
    """
    Converts locator metadata into an ordered list of strategies:
    id, name, tag name, class, link text. Empty fields are skipped.
    """
    locators = []
    if attribute is None:
        return locators

    for field_name, factory in _FIELD_FACTORIES:
        value = getattr(attribute, field_name)
        if value:
            locators.append(factory(value))

    return locators
