import logging
import threading
import typing
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional
from builders.construction_plan import (ConstructionPlan, ConstructorPlan,
                                        PropertyKind, PropertyPlan)
from builders.errors import (PageBuilderError, UnresolvableConstructorError,
                             UnsupportedPropertyTypeError)
from utils.type_utils import PropertyInfo, get_class_origin, get_public_properties
from wrappers.search_context import SearchContext

logger = logging.getLogger(__name__)

OnBuilt = Optional[Callable[[Any], None]]

# Types from these modules are never page types
TYPING_MODULES = ("builtins", "types", "typing", "collections.abc")


class PageBuilderBase(ABC):
    """
    Builds page objects from their declared shape.

    The shape of every page type is walked once into an immutable ConstructionPlan
    which is cached by type; building an instance only replays the plan:
    allocate the type, create each property and report the finished object
    to the completion callback.

    Subclasses supply everything that depends on the automation library:
    which types are elements, how locators are derived and assigned, which
    constructor to call and with what context.
    """

    def __init__(self):
        self._plans: dict[type, ConstructionPlan] = {}
        self._lock = threading.Lock()
        self._derivation = threading.local()

    # -----------------------------------------------------------------
    # Library specific hooks
    # -----------------------------------------------------------------

    @abstractmethod
    def get_constructor(self, item_type: type, parent_type: type,
                        root_available: bool) -> Optional[ConstructorPlan]:
        """Pick the constructor of 'item_type' and the context argument it receives."""

    @abstractmethod
    def get_element_locators(self, element_type: type, metadata: tuple) -> tuple:
        """Merged locators for a property from its annotation metadata."""

    @abstractmethod
    def assign_locators(self, control, locators: tuple):
        """Hand the merged locators to a freshly created element or collection."""

    @abstractmethod
    def is_element_type(self, declared_type: type) -> bool:
        pass

    @abstractmethod
    def get_property_proxy_type(self, declared_type: type) -> type:
        """The concrete type to instantiate for a declared element type."""

    @abstractmethod
    def get_element_collection_type(self) -> type:
        pass

    @abstractmethod
    def get_default_item_type(self) -> type:
        """Item type of a collection declared without type arguments."""

    # -----------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------

    def create_page(self, page_type: type) -> Callable[..., Any]:
        """
        Returns a reusable construction function for 'page_type':
            construct(search_context, on_built=None) -> page instance
        """
        plan = self.get_plan(page_type)

        def construct(context, on_built: OnBuilt = None):
            return self.build(plan, context, on_built)

        return construct

    def get_plan(self, page_type: type) -> ConstructionPlan:
        plan = self._plans.get(page_type)
        if plan is not None:
            logger.debug("Using cached construction plan for %s", page_type.__name__)
            return plan

        try:
            plan = self._derive_plan(page_type)
        except PageBuilderError as e:
            # Report once, from the outermost derivation
            if not self._in_progress():
                logger.error("Cannot derive construction plan for %s: %s",
                             getattr(page_type, "__name__", page_type), e)
            raise

        with self._lock:
            # First stored plan wins, later derivations are identical anyway
            return self._plans.setdefault(page_type, plan)

    def is_cached(self, page_type: type) -> bool:
        return page_type in self._plans

    def build(self, plan: ConstructionPlan, context, on_built: OnBuilt = None):
        """Build a page instance from 'plan' inside 'context'."""
        return self._build_instance(plan, plan.constructor, context, context, on_built)

    # -----------------------------------------------------------------
    # Plan derivation
    # -----------------------------------------------------------------

    def _derive_plan(self, page_type: type) -> ConstructionPlan:
        in_progress = self._in_progress()
        if page_type in in_progress:
            raise PageBuilderError(
                f"Page type {page_type.__name__} contains itself through its properties")

        in_progress.add(page_type)
        try:
            logger.debug("Deriving construction plan for %s", page_type.__name__)
            constructor = self.get_constructor(page_type, SearchContext, False)
            if constructor is None:
                raise UnresolvableConstructorError(page_type)

            properties = tuple(self._derive_property(page_type, info)
                               for info in self._get_properties(page_type))
            return ConstructionPlan(page_type, constructor, properties)
        finally:
            in_progress.discard(page_type)

    def _in_progress(self) -> set:
        if not hasattr(self._derivation, "types"):
            self._derivation.types = set()
        return self._derivation.types

    @staticmethod
    def _get_properties(owner_type: type) -> list[PropertyInfo]:
        try:
            return get_public_properties(owner_type)
        except NameError as e:
            raise PageBuilderError(
                f"Cannot resolve property annotations of {owner_type.__name__}: {e}") from e

    def _derive_property(self, owner_type: type, info: PropertyInfo) -> PropertyPlan:
        origin = get_class_origin(info.declared_type)
        if origin is None:
            raise UnsupportedPropertyTypeError(owner_type, info.name, info.declared_type)

        if issubclass(origin, self.get_element_collection_type()):
            return self._derive_collection(owner_type, info, origin)

        if self.is_element_type(origin):
            return self._derive_element(owner_type, info, origin)

        if origin.__module__ in TYPING_MODULES:
            raise UnsupportedPropertyTypeError(owner_type, info.name, info.declared_type)

        return PropertyPlan(
            name=info.name,
            kind=PropertyKind.NESTED_PAGE,
            declared_type=info.declared_type,
            target_type=origin,
            constructor=self._select_constructor(origin, owner_type, info.name),
            nested_plan=self.get_plan(origin))

    def _derive_element(self, owner_type: type, info: PropertyInfo, origin: type) -> PropertyPlan:
        proxy_type = self.get_property_proxy_type(origin)

        # Element types that declare their own properties are scoped fragments
        nested_plan = self.get_plan(proxy_type) if self._get_properties(proxy_type) else None

        return PropertyPlan(
            name=info.name,
            kind=PropertyKind.ELEMENT,
            declared_type=info.declared_type,
            target_type=proxy_type,
            constructor=self._select_constructor(proxy_type, owner_type, info.name),
            locators=self.get_element_locators(proxy_type, info.metadata),
            nested_plan=nested_plan)

    def _derive_collection(self, owner_type: type, info: PropertyInfo, origin: type) -> PropertyPlan:
        type_arguments = typing.get_args(info.declared_type)
        item_type = get_class_origin(type_arguments[0]) if type_arguments else self.get_default_item_type()
        if item_type is None:
            raise UnsupportedPropertyTypeError(owner_type, info.name, info.declared_type)
        if self.is_element_type(item_type):
            item_type = self.get_property_proxy_type(item_type)

        return PropertyPlan(
            name=info.name,
            kind=PropertyKind.ELEMENT_COLLECTION,
            declared_type=info.declared_type,
            target_type=origin,
            constructor=self._select_constructor(origin, owner_type, info.name),
            locators=self.get_element_locators(item_type, info.metadata),
            item_type=item_type,
            item_plan=self._get_item_plan(item_type))

    def _get_item_plan(self, item_type: type) -> Optional[ConstructionPlan]:
        # Items are built on enumeration, so a type may list items of its own type
        if item_type in self._in_progress():
            return None
        return self.get_plan(item_type)

    def _select_constructor(self, item_type: type, owner_type: type, property_name: str) -> ConstructorPlan:
        constructor = self.get_constructor(item_type, owner_type, True)
        if constructor is None:
            raise UnresolvableConstructorError(item_type, property_name)
        return constructor

    # -----------------------------------------------------------------
    # Assembly
    # -----------------------------------------------------------------

    def _build_instance(self, plan: ConstructionPlan, constructor: ConstructorPlan,
                        parent, root, on_built: OnBuilt):
        instance = constructor.invoke(parent, root)
        self._populate(instance, plan.properties, root, on_built)

        if on_built is not None:
            on_built(instance)
        return instance

    def _populate(self, instance, properties: tuple, root, on_built: OnBuilt):
        for prop in properties:
            setattr(instance, prop.name, self._create_property(prop, instance, root, on_built))

    def _create_property(self, prop: PropertyPlan, parent, root, on_built: OnBuilt):
        if prop.kind is PropertyKind.NESTED_PAGE:
            return self._build_instance(prop.nested_plan, prop.constructor, parent, root, on_built)

        control = prop.constructor.invoke(parent, root)
        self.assign_locators(control, prop.locators)

        if prop.kind is PropertyKind.ELEMENT_COLLECTION:
            self._configure_collection(control, prop, parent, on_built)

        elif prop.nested_plan is not None:
            self._populate(control, prop.nested_plan.properties, root, on_built)
            if on_built is not None:
                on_built(control)

        return control

    def _configure_collection(self, collection, prop: PropertyPlan, owner, on_built: OnBuilt):
        item_type = prop.item_type
        item_plan = prop.item_plan

        def create_item(context):
            return self.build(item_plan or self.get_plan(item_type), context, on_built)

        collection.set_item_factory(create_item)
        collection.set_owner(owner)
