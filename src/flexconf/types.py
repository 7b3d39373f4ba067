from collections.abc import Callable, Mapping
from dataclasses import Field, dataclass, field
from typing import Any, ClassVar, Protocol, TypeAlias, TypeVar, runtime_checkable

from .format.config_format import ConfigFormat, Format

FieldDeserializer: TypeAlias = Callable[[Any], Any]

FieldSerializer: TypeAlias = Callable[[Any], Any]

_T_co = TypeVar("_T_co", covariant=True)


@dataclass(frozen=True)
class ConfigSpec:
    field_mappings: Mapping[str, str] = field(default_factory=dict)
    field_deserializers: Mapping[str, FieldDeserializer] = field(default_factory=dict)
    field_serializers: Mapping[str, FieldSerializer] = field(default_factory=dict)


@runtime_checkable
class ConfigClass(Protocol[_T_co]):
    __dataclass_fields__: ClassVar[dict[str, Field[Any]]]
    __config__: ClassVar[ConfigSpec]


@dataclass(frozen=True)
class FormatBinding:
    """Ties a file format to the capability contract that reads and writes it.

    ``load`` builds a value of the given class from a parsed document and
    ``dump`` turns a value back into a document.
    """

    format: ConfigFormat
    capability: type
    load: Callable[[type, Any], Any]
    dump: Callable[[Any], Any]

    @property
    def tag(self) -> Format:
        return self.format.tag

    @property
    def extensions(self) -> tuple[str, ...]:
        return self.format.extensions
