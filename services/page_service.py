import logging
from playwright.sync_api import Page
from builders.smart_page_builder import default_page_builder

logger = logging.getLogger(__name__)


class PageService:
    """
    Test glue around the page builder: creates page objects for a live
    Playwright page, opens them and remembers the current one.
    """

    def __init__(self, page: Page, builder=None):
        self.page = page
        self.builder = builder or default_page_builder
        self.current_page = None

    def create_page(self, page_type, context=None):
        construct = self.builder.create_page(page_type)
        return construct(context if context is not None else self.page, self._on_built)

    def open_page(self, page_type, url: str = None):
        page_object = self.create_page(page_type)
        page_object.goto(url)
        self.current_page = page_object
        return page_object

    def switch_to(self, page_type):
        """Create 'page_type' for the already displayed page and make it current."""
        self.current_page = self.create_page(page_type)
        return self.current_page

    @staticmethod
    def _on_built(instance):
        logger.debug("Built %s", type(instance).__name__)

        # Looked up on the type so element proxies do not forward the lookup
        hook = getattr(type(instance), "on_built", None)
        if callable(hook):
            instance.on_built()
