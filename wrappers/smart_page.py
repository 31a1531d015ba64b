from urllib.parse import urljoin
from playwright.sync_api import Page
from helpers.test_context import get_config
from wrappers.search_context import SearchContext


class SmartPage:
    """
    SmartPage is the base class for page objects created by the page builder:
    - It keeps the search context the page was built in.
    - Transparent proxying of page methods (e.g. .reload(), .title()).
    - goto() opens the page 'url' relative to the configured 'demo_base_url'.
    - on_built() is called by PageService once every property is assigned.
    """

    # Page address relative to the configured base url
    url = None

    def __init__(self, context: SearchContext):
        self.context = context

    @property
    def page(self) -> Page:
        if isinstance(self.context, Page):
            return self.context
        return self.context.page

    def goto(self, url: str = None, **kwargs):
        base_url = get_config().get("demo_base_url") or ""
        target = url if url is not None else urljoin(base_url, self.url or "")
        return self.page.goto(target, **kwargs)

    def on_built(self):
        pass

    def __getattr__(self, item):
        if item.startswith("__") or item in ("context", "page"):
            raise AttributeError(item)
        return getattr(self.page, item)

    def __str__(self):
        return f"<SmartPage {self.__class__.__name__}>"

    __repr__ = __str__
