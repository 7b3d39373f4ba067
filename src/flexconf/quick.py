"""Ready-made config types for getting a project going quickly."""

from collections.abc import Mapping, Sequence
from dataclasses import MISSING, Field, dataclass, fields, is_dataclass
from pathlib import Path
from typing import Any, ClassVar, Self, get_origin, get_type_hints

from .capabilities import CommandlineConfig, FileConfig
from .exceptions import ArgumentError, InvalidConfigClassError, SchemaError
from .types import ConfigSpec
from .utils import is_optional, unwrap_optional

_EMPTY_SPEC = ConfigSpec()

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True)
class FlagConfig(CommandlineConfig):
    """Every argument that starts with ``--`` and contains no ``:``.

    Handy for arbitrary on/off options when writing a dedicated
    `CommandlineConfig` is not worth it yet.
    """

    flags: tuple[str, ...] = ()

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> Self:
        return cls(
            tuple(arg for arg in args if arg.startswith("--") and ":" not in arg)
        )

    def has(self, flag: str) -> bool:
        return flag in self.flags

    def __contains__(self, flag: object) -> bool:
        return flag in self.flags


def _flag_for(field_name: str) -> str:
    return "--" + field_name.replace("_", "-")


def _has_default(field: Field[Any]) -> bool:
    return field.default is not MISSING or field.default_factory is not MISSING


class DataclassConfig(FileConfig, CommandlineConfig):
    """
    Implements every capability from the fields of a dataclass.

    Files hold a flat mapping of field keys to values (the first document of
    a YAML stream). Every field must be present in the file. On the command
    line each ``bool`` field ``foo_bar`` is switched on by the exact token
    ``--foo-bar``; other fields keep their defaults.

    Set ``strict_arguments = True`` to reject unknown ``--`` tokens with
    `ArgumentError` instead of ignoring them.

    Example:
        @configclass
        class AppConfig(DataclassConfig):
            verbose: bool = False
            output_dir: Path = Path("out")
    """

    strict_arguments: ClassVar[bool] = False

    @classmethod
    def _fields(cls) -> tuple[Field[Any], ...]:
        if not is_dataclass(cls):
            raise InvalidConfigClassError(
                f"{cls.__name__} must be a dataclass; decorate it with @configclass"
            )
        return fields(cls)

    @classmethod
    def _spec(cls) -> ConfigSpec:
        return getattr(cls, "__config__", _EMPTY_SPEC)

    @classmethod
    def from_mapping(cls, data: Any) -> Self:
        if not isinstance(data, Mapping):
            raise SchemaError(
                f"'{cls.__name__}' expects a mapping, got {type(data).__name__}"
            )

        spec = cls._spec()
        resolved_types = get_type_hints(cls)
        kwargs = {}

        for field in cls._fields():
            key = spec.field_mappings.get(field.name, field.name)

            if key not in data:
                raise SchemaError(f"Missing config key '{key}' for '{cls.__name__}'")

            value = data[key]

            if field.name in spec.field_deserializers:
                value = spec.field_deserializers[field.name](value)
            else:
                value = _convert_field_value(value, resolved_types[field.name], key)

            kwargs[field.name] = value

        return cls(**kwargs)

    def to_mapping(self) -> dict[str, Any]:
        spec = self._spec()
        data: dict[str, Any] = {}

        for field in self._fields():
            key = spec.field_mappings.get(field.name, field.name)
            value = getattr(self, field.name)

            if field.name in spec.field_serializers:
                value = spec.field_serializers[field.name](value)
            elif isinstance(value, Path):
                value = str(value)
            elif isinstance(value, tuple):
                value = list(value)
            data[key] = value

        return data

    @classmethod
    def from_yaml(cls, documents: list[Any]) -> Self:
        if not documents:
            raise SchemaError(f"'{cls.__name__}' found no YAML document to read")
        return cls.from_mapping(documents[0])

    def to_yaml(self) -> list[Any]:
        return [self.to_mapping()]

    @classmethod
    def from_json(cls, value: Any) -> Self:
        return cls.from_mapping(value)

    def to_json(self) -> dict[str, Any]:
        return self.to_mapping()

    @classmethod
    def from_toml(cls, table: Mapping[str, Any]) -> Self:
        return cls.from_mapping(table)

    def to_toml(self) -> dict[str, Any]:
        return self.to_mapping()

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> Self:
        resolved_types = get_type_hints(cls)
        flag_fields = {
            _flag_for(field.name): field
            for field in cls._fields()
            if unwrap_optional(resolved_types[field.name]) is bool
        }

        if cls.strict_arguments:
            unknown = [a for a in args if a.startswith("--") and a not in flag_fields]
            if unknown:
                raise ArgumentError(f"Unrecognized flags: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for flag, field in flag_fields.items():
            if flag in args:
                kwargs[field.name] = True
            elif not _has_default(field):
                kwargs[field.name] = False

        missing = [
            field.name
            for field in cls._fields()
            if field.name not in kwargs and not _has_default(field)
        ]
        if missing:
            raise InvalidConfigClassError(
                f"{cls.__name__} needs defaults for non-flag fields: {', '.join(missing)}"
            )

        return cls(**kwargs)


def _convert_field_value(value: Any, field_type: Any, key: str) -> Any:
    if value is None:
        if is_optional(field_type) or field_type is Any:
            return None
        raise SchemaError(f"Config key '{key}' must not be null")

    field_type = unwrap_optional(field_type)

    if field_type is Any:
        return value

    if field_type is bool:
        if not isinstance(value, bool):
            raise SchemaError(
                f"Config key '{key}' must be a boolean, got {type(value).__name__}"
            )
        return value

    container = get_origin(field_type) or field_type
    if container in _SEQUENCE_TYPES:
        if not isinstance(value, (list, tuple)):
            raise SchemaError(
                f"Config key '{key}' must be a sequence, got {type(value).__name__}"
            )
        return container(value)

    if not isinstance(field_type, type) or isinstance(value, field_type):
        if field_type in (int, float) and isinstance(value, bool):
            raise SchemaError(f"Config key '{key}' must be a number, got bool")
        return value

    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise SchemaError(
            f"Config key '{key}' must be {field_type.__name__}, "
            f"got {type(value).__name__}"
        )

    if field_type is int and isinstance(value, float) and not value.is_integer():
        raise SchemaError(f"Config key '{key}' must be an integer, got {value!r}")

    try:
        return field_type(value)
    except (TypeError, ValueError) as exc:
        raise SchemaError(
            f"Config key '{key}' cannot be read as {field_type.__name__}: {value!r}"
        ) from exc
