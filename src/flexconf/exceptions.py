from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .format.config_format import Format


class ConfigError(Exception):
    """Base class for every error raised by flexconf."""


class ConfigIOError(ConfigError):
    """A config file could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access config file '{path}': {reason}")


class ConfigParseError(ConfigError):
    """Text is not a well-formed document of the attempted format."""

    def __init__(self, fmt: Format, reason: str, path: Path | None = None) -> None:
        self.format = fmt
        self.reason = reason
        self.path = path
        where = f" in '{path}'" if path is not None else ""
        super().__init__(f"Malformed {fmt} document{where}: {reason}")


class SchemaError(ConfigError):
    """A parsed document lacks an expected field or holds a wrongly typed one."""


class SerializationError(ConfigError):
    """A config value could not be rendered in the requested format."""

    def __init__(self, fmt: Format, reason: str) -> None:
        self.format = fmt
        self.reason = reason
        super().__init__(f"Cannot render config as {fmt}: {reason}")


class AggregateDispatchError(ConfigError):
    """Every registered format failed to parse a file of unknown format."""

    def __init__(
        self, path: Path, failures: Sequence[tuple[Format, ConfigParseError]]
    ) -> None:
        self.path = path
        self.failures = list(failures)
        details = "; ".join(f"{fmt}: {exc.reason}" for fmt, exc in self.failures)
        super().__init__(f"No registered format could parse '{path}' ({details})")


class InvalidConfigClassError(ConfigError, TypeError):
    pass


class UnknownFormatError(ConfigError, ValueError):
    pass


class ArgumentError(ConfigError):
    """Strict command-line parsing met a token it does not recognize."""
