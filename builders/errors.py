class PageBuilderError(Exception):
    """Base class for page construction failures."""


class UnresolvableConstructorError(PageBuilderError):
    """The type has neither a search-context constructor nor a zero-argument one."""

    def __init__(self, item_type, property_name: str = None):
        self.item_type = item_type
        self.property_name = property_name
        location = f" for property '{property_name}'" if property_name else ""
        super().__init__(
            f"Cannot construct {getattr(item_type, '__name__', item_type)}{location}: "
            f"no constructor takes a single search context argument or no arguments")


class UnsupportedPropertyTypeError(PageBuilderError):
    """A page property is declared with a type the builder cannot classify."""

    def __init__(self, page_type, property_name: str, declared_type):
        self.page_type = page_type
        self.property_name = property_name
        self.declared_type = declared_type
        super().__init__(
            f"Property '{property_name}' of page {page_type.__name__} has unsupported type {declared_type!r}")
