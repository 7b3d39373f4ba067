import logging

from .capabilities import (
    CommandlineConfig,
    FileConfig,
    JsonConfig,
    TomlConfig,
    YamlConfig,
)
from .decorator import configclass
from .exceptions import (
    AggregateDispatchError,
    ArgumentError,
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    InvalidConfigClassError,
    SchemaError,
    SerializationError,
    UnknownFormatError,
)
from .files import (
    DEFAULT_PATHS,
    ConfigFiles,
    load_from_arguments,
    load_from_file,
    load_from_json,
    load_from_toml,
    load_from_yaml,
    save_to_file,
)
from .format import Format
from .quick import DataclassConfig, FlagConfig
from .registry import FormatRegistry, default_bindings
from .types import FieldDeserializer, FieldSerializer, FormatBinding

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AggregateDispatchError",
    "ArgumentError",
    "CommandlineConfig",
    "ConfigError",
    "ConfigFiles",
    "ConfigIOError",
    "ConfigParseError",
    "DEFAULT_PATHS",
    "DataclassConfig",
    "FieldDeserializer",
    "FieldSerializer",
    "FileConfig",
    "FlagConfig",
    "Format",
    "FormatBinding",
    "FormatRegistry",
    "InvalidConfigClassError",
    "JsonConfig",
    "SchemaError",
    "SerializationError",
    "TomlConfig",
    "UnknownFormatError",
    "YamlConfig",
    "configclass",
    "default_bindings",
    "load_from_arguments",
    "load_from_file",
    "load_from_json",
    "load_from_toml",
    "load_from_yaml",
    "save_to_file",
]
