from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import (
    TypeVar,
    cast,
    dataclass_transform,
    overload,
)

from .exceptions import InvalidConfigClassError
from .types import ConfigClass, ConfigSpec, FieldDeserializer, FieldSerializer

_T = TypeVar("_T")

def _apply_config(
    cls: type[_T],
    *,
    field_name_mappings: Mapping[str, str] | None,
    field_deserializers: Mapping[str, FieldDeserializer] | None,
    field_serializers: Mapping[str, FieldSerializer] | None,
) -> type[_T]:
    if "__dataclass_fields__" not in cls.__dict__:
        cls = dataclass(cls)

    spec = ConfigSpec(
        field_mappings=dict(field_name_mappings or {}),
        field_deserializers=dict(field_deserializers or {}),
        field_serializers=dict(field_serializers or {}),
    )

    field_names = {f.name for f in fields(cast(type, cls))}
    unknown = sorted(
        (
            set(spec.field_mappings)
            | set(spec.field_deserializers)
            | set(spec.field_serializers)
        )
        - field_names
    )
    if unknown:
        raise InvalidConfigClassError(
            f"{cls.__name__} has no fields named: {', '.join(unknown)}"
        )

    cast(type[ConfigClass[_T]], cls).__config__ = spec
    return cls


@overload
def configclass(cls: type[_T]) -> type[_T]: ...


@overload
def configclass(
    *,
    field_name_mappings: Mapping[str, str] | None = None,
    field_deserializers: Mapping[str, FieldDeserializer] | None = None,
    field_serializers: Mapping[str, FieldSerializer] | None = None,
) -> Callable[[type[_T]], type[_T]]: ...


@dataclass_transform()
def configclass(
    cls: type[_T] | None = None,
    *,
    field_name_mappings: Mapping[str, str] | None = None,
    field_deserializers: Mapping[str, FieldDeserializer] | None = None,
    field_serializers: Mapping[str, FieldSerializer] | None = None,
) -> type[_T] | Callable[[type[_T]], type[_T]]:
    """
    Turn a class into a dataclass carrying file-mapping metadata.

    Args:
        field_name_mappings: field name -> key used in config files.
        field_deserializers: field name -> callable applied to the raw value
            read from a file.
        field_serializers: field name -> callable applied to the value
            before it is written.
    """

    if cls is not None:
        return _apply_config(
            cls,
            field_name_mappings=field_name_mappings,
            field_deserializers=field_deserializers,
            field_serializers=field_serializers,
        )

    def decorator(inner_cls: type[_T]) -> type[_T]:
        return _apply_config(
            inner_cls,
            field_name_mappings=field_name_mappings,
            field_deserializers=field_deserializers,
            field_serializers=field_serializers,
        )

    return decorator
