import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union
from enums.how import How
from locators.by import By

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FindsBy:
    """
    Native find metadata. Several may be attached to one property;
    lower priority values are evaluated first.
    """
    how: Union[How, str]
    using: Optional[str]
    priority: int = 0


def get_locator(attribute: FindsBy) -> Optional[By]:
    """Translates a native attribute into a strategy, or None if 'how' is unknown."""
    how = attribute.how
    if not isinstance(how, How):
        try:
            how = How(str(how).lower())
        except ValueError:
            logger.debug("Ignoring unsupported find mechanism %r", attribute.how)
            return None

    return By(how, attribute.using)


def merge_native_locators(locators: list[By], native_attributes: Iterable[FindsBy]) -> list[By]:
    """
    Appends native strategies to the resolved ones.
    Entries with an empty or missing 'using' value are dropped, the rest are sorted by priority
    and any strategy already present is skipped, so resolved entries win.
    """
    merged = list(locators)
    candidates = sorted((a for a in native_attributes if a.using),
                        key=lambda a: a.priority)

    for attribute in candidates:
        locator = get_locator(attribute)
        if locator is not None and locator not in merged:
            merged.append(locator)

    return merged
