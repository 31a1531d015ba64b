from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

PARENT_ARGUMENT = "parent"
ROOT_ARGUMENT = "root"


class PropertyKind(Enum):
    ELEMENT = "single-element"
    ELEMENT_COLLECTION = "element-collection"
    NESTED_PAGE = "nested-page"


@dataclass(frozen=True)
class ConstructorPlan:
    """How to allocate a type: the factory and which context it receives, if any."""
    factory: Callable
    argument: Optional[str] = None

    def invoke(self, parent, root):
        if self.argument is None:
            return self.factory()
        if self.argument == ROOT_ARGUMENT:
            return self.factory(root)
        return self.factory(parent)


@dataclass(frozen=True)
class PropertyPlan:
    name: str
    kind: PropertyKind
    declared_type: Any
    target_type: type
    constructor: ConstructorPlan
    locators: tuple = ()
    item_type: Optional[type] = None
    item_plan: Optional["ConstructionPlan"] = None
    nested_plan: Optional["ConstructionPlan"] = None


@dataclass(frozen=True)
class ConstructionPlan:
    """Cached description of how one page type is built."""
    page_type: type
    constructor: ConstructorPlan
    properties: tuple = ()

    def property_names(self) -> list[str]:
        return [prop.name for prop in self.properties]
