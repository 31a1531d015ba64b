import inspect
import logging
from typing import Optional
from playwright.sync_api import Locator
from builders.construction_plan import PARENT_ARGUMENT, ROOT_ARGUMENT, ConstructorPlan
from builders.page_builder_base import PageBuilderBase
from locators.by import ByChained
from locators.element_locator import ElementLocator, get_element_locators
from locators.native_attributes import FindsBy, merge_native_locators
from utils.type_utils import get_constructor_parameters, unwrap_optional
from wrappers.search_context import is_search_context_type
from wrappers.smart_element import SmartElement
from wrappers.smart_element_list import SmartElementList

logger = logging.getLogger(__name__)

# Class attribute holding the default locator set by @element_locator
DEFAULT_LOCATOR_ATTRIBUTE = "_default_element_locator"

POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class SmartPageBuilder(PageBuilderBase):
    """
    Page builder following Playwright rules:
    - Properties declared as Locator are created as SmartElement proxies.
    - ElementLocator fields and FindsBy attributes become By strategies,
      several of them are chained into one.
    - Nested objects are constructed with a Page, Frame, Locator or element
      proxy as their only argument, or without arguments.
    """

    def get_element_locators(self, element_type: type, metadata: tuple) -> tuple:
        attribute = next((m for m in metadata if isinstance(m, ElementLocator)), None)
        if attribute is None:
            attribute = getattr(element_type, DEFAULT_LOCATOR_ATTRIBUTE, None)

        native_attributes = [m for m in metadata if isinstance(m, FindsBy)]
        locators = merge_native_locators(get_element_locators(attribute), native_attributes)

        if len(locators) > 1:
            return (ByChained(*locators),)
        return tuple(locators)

    def assign_locators(self, control, locators: tuple):
        update_locators = getattr(control, "update_locators", None)
        if update_locators is None:
            logger.debug("%s does not accept locators, skipping", type(control).__name__)
            return
        update_locators(list(locators))

    def is_element_type(self, declared_type: type) -> bool:
        return issubclass(declared_type, (Locator, SmartElement))

    def get_property_proxy_type(self, declared_type: type) -> type:
        if issubclass(declared_type, Locator):
            return SmartElement
        return declared_type

    def get_element_collection_type(self) -> type:
        return SmartElementList

    def get_default_item_type(self) -> type:
        return SmartElement

    def get_constructor(self, item_type: type, parent_type: type,
                        root_available: bool) -> Optional[ConstructorPlan]:
        parameters = get_constructor_parameters(item_type)
        if parameters is None:
            return None

        # The context is the first positional parameter, any further ones must be optional
        if parameters and parameters[0].kind in POSITIONAL_KINDS \
                and _accepts_search_context(parameters[0].annotation) \
                and _all_optional(parameters[1:]):
            # Objects nested in a plain page are relative to the root context,
            # objects nested in a search context are relative to it
            if root_available and not is_search_context_type(parent_type):
                return ConstructorPlan(item_type, ROOT_ARGUMENT)
            return ConstructorPlan(item_type, PARENT_ARGUMENT)

        if _all_optional(parameters):
            return ConstructorPlan(item_type)

        return None


def _all_optional(parameters) -> bool:
    return all(parameter.default is not inspect.Parameter.empty for parameter in parameters)


def _accepts_search_context(annotation) -> bool:
    if annotation is inspect.Parameter.empty:
        return True
    return any(is_search_context_type(option) for option in unwrap_optional(annotation))


default_page_builder = SmartPageBuilder()
