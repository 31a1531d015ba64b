import logging
import time
from playwright.sync_api import Locator
from helpers.test_context import get_config
from locators.by import find_with_locators
from utils.config_utils import get_step_delay_seconds
from utils.web_utils import highlight_element, reset_element_style
from wrappers.search_context import SearchContext

logger = logging.getLogger(__name__)


class SmartElement:
    """
    SmartElement is a lazy proxy around a Playwright Locator:
    - It is created with the search context it lives in and receives its
      locators afterwards through update_locators(); nothing is queried then.
    - The Playwright Locator is resolved on every use, so the proxy survives
      page reloads and re-renders.
    - Locator methods (e.g. .fill(), .click()) are proxied transparently,
      with optional highlight and step delay from the run configuration.
    - It is a search context itself, so child elements can be scoped to it.
    """

    def __init__(self, context: SearchContext):
        self.context = context
        self.locators = []

    def update_locators(self, locators):
        self.locators = list(locators)

    def resolve(self) -> Locator:
        locator = find_with_locators(self.context, self.locators)
        logger.debug("Resolved %s to %s", self, locator)
        return locator

    def locator(self, selector: str, **kwargs) -> Locator:
        return self.resolve().locator(selector, **kwargs)

    @property
    def page(self):
        return self.resolve().page

    def __getattr__(self, item):
        # Attributes looked up before __init__ ran or dunder probes are not proxied
        if item.startswith("__") or item in ("context", "locators"):
            raise AttributeError(item)

        target = getattr(self.resolve(), item)

        if callable(target):
            def wrapper(*args, **kwargs):
                locator = self.resolve()
                element_style = self._highlight_element_with_delay(locator)

                try:
                    return getattr(locator, item)(*args, **kwargs)
                finally:
                    self._restore_element_style(locator, element_style)
            return wrapper
        return target

    def __str__(self):
        locators = ", ".join(str(locator) for locator in self.locators)
        return f"<{self.__class__.__name__} locators=[{locators}]>"

    __repr__ = __str__

    def _highlight_element_with_delay(self, locator: Locator):
        config = get_config()
        step_delay_seconds = get_step_delay_seconds(config)

        if config.get("highlight"):
            element_style = highlight_element(locator)
            time.sleep(step_delay_seconds)
            return element_style

        elif step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)

        return None

    def _restore_element_style(self, locator: Locator, element_style):
        config = get_config()

        if config.get("highlight") and locator.count() > 0:
            reset_element_style(locator, element_style)
