import inspect
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Optional, Union


@dataclass(frozen=True)
class PropertyInfo:
    name: str
    declared_type: Any
    metadata: tuple = ()


def split_annotated(hint) -> tuple:
    """Annotated[T, m1, m2] -> (T, (m1, m2)); any other hint -> (hint, ())."""
    if typing.get_origin(hint) is Annotated:
        args = typing.get_args(hint)
        return args[0], tuple(args[1:])
    return hint, ()


def has_public_setter(owner: type, name: str) -> bool:
    attribute = inspect.getattr_static(owner, name, None)
    if isinstance(attribute, property):
        return attribute.fset is not None
    return True


def get_public_properties(owner: type) -> list[PropertyInfo]:
    """
    Returns annotated public instance properties of a class, base classes first.
    ClassVar annotations and read-only properties are skipped.
    Raises NameError if an annotation cannot be resolved.
    """
    # Class decorators run before the owner name is bound in its module
    hints = typing.get_type_hints(owner, localns={owner.__name__: owner}, include_extras=True)
    properties = []

    for name, hint in hints.items():
        if name.startswith("_"):
            continue

        declared_type, metadata = split_annotated(hint)
        if typing.get_origin(declared_type) is ClassVar or declared_type is ClassVar:
            continue
        if not has_public_setter(owner, name):
            continue

        properties.append(PropertyInfo(name, declared_type, metadata))

    return properties


def get_class_origin(declared_type) -> Optional[type]:
    """The runtime class behind a hint: List[int] -> list, MyPage -> MyPage, Union -> None."""
    origin = declared_type if isinstance(declared_type, type) else typing.get_origin(declared_type)
    if not isinstance(origin, type) or origin is types.UnionType:
        return None
    return origin


def get_constructor_parameters(item_type: type) -> Optional[list[inspect.Parameter]]:
    """
    Parameters of the type's constructor with annotations resolved where possible.
    Returns None when the type has no inspectable constructor.
    """
    try:
        signature = inspect.signature(item_type)
    except (TypeError, ValueError):
        return None

    try:
        hints = typing.get_type_hints(item_type.__init__)
    except (NameError, TypeError, AttributeError):
        hints = {}

    parameters = []
    for parameter in signature.parameters.values():
        if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if parameter.name in hints:
            parameter = parameter.replace(annotation=hints[parameter.name])
        parameters.append(parameter)

    return parameters


def unwrap_optional(annotation) -> tuple:
    """Optional[X] / X | None -> (X,); other unions -> all members; plain hint -> (hint,)."""
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return tuple(arg for arg in typing.get_args(annotation) if arg is not type(None))
    return (annotation,)
