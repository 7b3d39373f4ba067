"""Capability contracts a config class opts into.

A config class subclasses the contracts for the sources it can be built
from. Each file contract pairs a ``from_<format>`` classmethod, which builds
a value from a parsed document, with a ``to_<format>`` method producing the
document back. ``save_<format>`` renders the whole text before opening the
target file, so a value that cannot be rendered never clobbers an existing
file.

Example::

    @dataclass
    class AppConfig(FileConfig):
        debug: bool = False

        @classmethod
        def from_yaml(cls, documents):
            return cls(debug=documents[0]["debug"])

        def to_yaml(self):
            return [{"debug": self.debug}]

        ...  # from_json/to_json, from_toml/to_toml
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Self

from .format import JSONFormat, TOMLFormat, YAMLFormat


class CommandlineConfig(ABC):
    @classmethod
    @abstractmethod
    def from_arguments(cls, args: Sequence[str]) -> Self:
        """Build a config from process arguments.

        Only exact-match tokens are expected; a flag that is absent resolves
        to its default rather than failing.
        """


class YamlConfig(ABC):
    @classmethod
    @abstractmethod
    def from_yaml(cls, documents: list[Any]) -> Self:
        """Build a config from the documents of a parsed YAML stream."""

    @abstractmethod
    def to_yaml(self) -> list[Any]: ...

    def save_yaml(
        self,
        path: Path | str,
        *,
        format: YAMLFormat | None = None,
        encoding: str = "utf-8",
    ) -> None:
        (format or YAMLFormat()).write(Path(path), self.to_yaml(), encoding=encoding)


class JsonConfig(ABC):
    @classmethod
    @abstractmethod
    def from_json(cls, value: Any) -> Self:
        """Build a config from a parsed JSON value."""

    @abstractmethod
    def to_json(self) -> Any: ...

    def save_json(
        self,
        path: Path | str,
        *,
        format: JSONFormat | None = None,
        encoding: str = "utf-8",
    ) -> None:
        (format or JSONFormat()).write(Path(path), self.to_json(), encoding=encoding)


class TomlConfig(ABC):
    @classmethod
    @abstractmethod
    def from_toml(cls, table: Mapping[str, Any]) -> Self:
        """Build a config from a parsed TOML table."""

    @abstractmethod
    def to_toml(self) -> Mapping[str, Any]: ...

    def save_toml(
        self,
        path: Path | str,
        *,
        format: TOMLFormat | None = None,
        encoding: str = "utf-8",
    ) -> None:
        (format or TOMLFormat()).write(Path(path), self.to_toml(), encoding=encoding)


class FileConfig(YamlConfig, JsonConfig, TomlConfig):
    """A config that can be loaded from any supported file format."""
