from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

from flexconf import CommandlineConfig, FileConfig, SchemaError, YamlConfig
from flexconf.types import ConfigClass


@dataclass
class SwitchConfig(FileConfig, CommandlineConfig):
    """Single boolean config that remembers which format built it."""

    test: bool = False
    source: str | None = field(default=None, compare=False)

    @classmethod
    def from_arguments(cls, args: Any) -> "SwitchConfig":
        return cls(test="--test" in args, source="args")

    @classmethod
    def from_yaml(cls, documents: list[Any]) -> "SwitchConfig":
        return cls(test=_require_bool(documents[0]["test"]), source="yaml")

    def to_yaml(self) -> list[Any]:
        return [{"test": self.test}]

    @classmethod
    def from_json(cls, value: Any) -> "SwitchConfig":
        return cls(test=_require_bool(value["test"]), source="json")

    def to_json(self) -> Any:
        return {"test": self.test}

    @classmethod
    def from_toml(cls, table: Any) -> "SwitchConfig":
        return cls(test=_require_bool(table["test"]), source="toml")

    def to_toml(self) -> Any:
        return {"test": self.test}


@dataclass
class UnrenderableConfig(SwitchConfig):
    """Produces documents none of the formats can serialize."""

    def to_yaml(self) -> list[Any]:
        return [{"test": object()}]

    def to_json(self) -> Any:
        return {"test": object()}

    def to_toml(self) -> Any:
        return {"test": object()}


class YamlOnlyConfig(YamlConfig):
    def __init__(self, test: bool) -> None:
        self.test = test

    @classmethod
    def from_yaml(cls, documents: list[Any]) -> "YamlOnlyConfig":
        return cls(documents[0]["test"])

    def to_yaml(self) -> list[Any]:
        return [{"test": self.test}]


def _require_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise SchemaError(f"'test' must be a boolean, got {type(value).__name__}")
    return value


def as_config_class(cls: type[Any]) -> type[ConfigClass[Any]]:
    return cast(type[ConfigClass[Any]], cls)


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path
