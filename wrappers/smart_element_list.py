import logging
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union
from playwright.sync_api import Locator
from locators.by import find_with_locators
from wrappers.search_context import SearchContext

logger = logging.getLogger(__name__)

E = TypeVar("E")
P = TypeVar("P")


class SmartElementList(Generic[E, P]):
    """
    Lazily enumerated collection of items of type E found inside a page of type P.

        products: SmartElementList[ProductItem, "InventoryPage"]

    Matches are counted and wrapped only when the list is used; every item is
    created by the item factory assigned by the page builder.
    """

    def __init__(self, context: SearchContext):
        self.context = context
        self.locators = []
        self.owner: Optional[P] = None
        self._item_factory: Optional[Callable[[Locator], E]] = None

    def update_locators(self, locators):
        self.locators = list(locators)

    def set_item_factory(self, item_factory: Callable[[Locator], E]):
        self._item_factory = item_factory

    def set_owner(self, owner: P):
        self.owner = owner

    def resolve(self) -> Locator:
        return find_with_locators(self.context, self.locators)

    def count(self) -> int:
        return self.resolve().count()

    def __len__(self):
        return self.count()

    def __iter__(self) -> Iterator[E]:
        locator = self.resolve()
        for index in range(locator.count()):
            yield self._create_item(locator.nth(index))

    def __getitem__(self, index: Union[int, slice]) -> Union[E, list[E]]:
        locator = self.resolve()
        indexes = range(locator.count())

        if isinstance(index, slice):
            return [self._create_item(locator.nth(i)) for i in indexes[index]]

        try:
            position = indexes[index]
        except IndexError:
            raise IndexError(f"{self} has {len(indexes)} item(s), index {index} is out of range") from None
        return self._create_item(locator.nth(position))

    def first(self) -> Optional[E]:
        return next(iter(self), None)

    def _create_item(self, locator: Locator) -> E:
        if self._item_factory is None:
            return locator
        return self._item_factory(locator)

    def __str__(self):
        locators = ", ".join(str(locator) for locator in self.locators)
        return f"<SmartElementList locators=[{locators}]>"

    __repr__ = __str__
