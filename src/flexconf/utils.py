import inspect
import types
from typing import Any, Union, get_args, get_origin

from .exceptions import InvalidConfigClassError


def is_optional(field_type: Any) -> bool:
    origin = get_origin(field_type)
    if origin is Union or origin is types.UnionType:
        return type(None) in get_args(field_type)
    return field_type is None or field_type is type(None)


def unwrap_optional(field_type: Any) -> Any:
    origin = get_origin(field_type)
    if origin is Union or origin is types.UnionType:
        type_args = [t for t in get_args(field_type) if t is not type(None)]
        if len(type_args) == 1:
            return type_args[0]
    return field_type


def ensure_implements(config_class: Any, *capabilities: type) -> None:
    """Raise unless ``config_class`` is a concrete subclass of every capability."""

    name = getattr(config_class, "__name__", repr(config_class))
    if not isinstance(config_class, type):
        raise InvalidConfigClassError(f"Expected a config class, got {name}")

    missing = [c.__name__ for c in capabilities if not issubclass(config_class, c)]
    if missing:
        raise InvalidConfigClassError(
            f"{name} must implement: {', '.join(missing)}"
        )

    if inspect.isabstract(config_class):
        abstract = ", ".join(sorted(config_class.__abstractmethods__))
        raise InvalidConfigClassError(
            f"{name} leaves abstract methods unimplemented: {abstract}"
        )
