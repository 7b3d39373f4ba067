"""Load and save config values from files without branching on format.

The format of a file is taken from its extension when the extension is
known. Otherwise each registered format is tried in registration order
(YAML, JSON, TOML by default) and the first one that parses wins, even if a
later one would parse the text as well. A JSON object is valid YAML too, so
an extensionless JSON file is handled by the YAML path. A flat TOML file
such as `test = true` is valid YAML as well: it parses as a single string
document, so an extensionless TOML file reaches the YAML path and fails
there with `SchemaError` instead of being tried as TOML. Give TOML files
a `.toml` extension, or leave YAML out of the bindings.

Saving renders the full text before writing, but the write itself is not
atomic: a crash in the middle of it can leave a truncated file behind.
"""

import logging
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeVar

from .capabilities import CommandlineConfig
from .exceptions import (
    AggregateDispatchError,
    ConfigError,
    ConfigParseError,
    SchemaError,
    UnknownFormatError,
)
from .format import Format
from .format.config_format import read_text
from .registry import FormatRegistry, default_registry
from .types import FormatBinding
from .utils import ensure_implements

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PATHS: Mapping[Format, str] = MappingProxyType(
    {
        Format.YAML: "config.yml",
        Format.JSON: "config.json",
        Format.TOML: "config.toml",
    }
)


class ConfigFiles:
    """Dispatch config loading and saving to the right format."""

    def __init__(
        self,
        default_paths: Mapping[Format, Path | str] | None = None,
        *,
        bindings: Iterable[FormatBinding] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """
        Args:
            default_paths: file used for a format when no path is given.
                Entries override `DEFAULT_PATHS`.
            bindings: formats to support, in trial order. Defaults to YAML,
                JSON and TOML.
            encoding: text encoding of config files.
        """

        self._registry = (
            default_registry() if bindings is None else FormatRegistry(bindings)
        )
        if not self._registry:
            raise ValueError("At least one format binding is required")

        paths = dict(DEFAULT_PATHS) | dict(default_paths or {})
        self._default_paths = {fmt: Path(path) for fmt, path in paths.items()}
        self._encoding = encoding

    @property
    def formats(self) -> list[Format]:
        return list(self._registry)

    def default_path(self, fmt: Format) -> Path:
        if fmt not in self._default_paths:
            raise UnknownFormatError(f"No default path configured for {fmt}")
        return self._default_paths[fmt]

    def detect_format(self, path: Path | str) -> Format | None:
        binding = self._registry.for_extension(Path(path).suffix)
        return binding.tag if binding is not None else None

    def _binding(self, fmt: Format) -> FormatBinding:
        if not self._registry.is_registered(fmt):
            raise UnknownFormatError(f"Format {fmt} is not registered")
        return self._registry[fmt]

    def load_from_format(
        self, config_class: type[T], fmt: Format, path: Path | str | None = None
    ) -> T:
        binding = self._binding(fmt)
        ensure_implements(config_class, binding.capability)

        resolved = Path(path) if path is not None else self.default_path(fmt)
        logger.debug("Loading %s from %s as %s", config_class.__name__, resolved, fmt)
        document = binding.format.read(resolved, encoding=self._encoding)
        return self._build(config_class, binding, document, resolved)

    def load_yaml(self, config_class: type[T], path: Path | str | None = None) -> T:
        return self.load_from_format(config_class, Format.YAML, path)

    def load_json(self, config_class: type[T], path: Path | str | None = None) -> T:
        return self.load_from_format(config_class, Format.JSON, path)

    def load_toml(self, config_class: type[T], path: Path | str | None = None) -> T:
        return self.load_from_format(config_class, Format.TOML, path)

    def load_from_file(self, config_class: type[T], path: Path | str) -> T:
        """
        Load a config without knowing the file format up front.

        A recognized extension decides the format. Otherwise every
        registered format is tried in order; a format that parses but whose
        document does not fit `config_class` raises `SchemaError` at once.
        """

        bindings = self._registry.get_all_registered()
        ensure_implements(config_class, *(b.capability for b in bindings))

        path = Path(path)
        fmt = self.detect_format(path)
        if fmt is not None:
            return self.load_from_format(config_class, fmt, path)

        text = read_text(path, self._encoding)
        failures: list[tuple[Format, ConfigParseError]] = []
        for binding in bindings:
            try:
                document = binding.format.loads(text, path)
            except ConfigParseError as exc:
                logger.debug("%s is not valid %s: %s", path, binding.tag, exc.reason)
                failures.append((binding.tag, exc))
                continue

            logger.debug(
                "Loading %s from %s as %s", config_class.__name__, path, binding.tag
            )
            return self._build(config_class, binding, document, path)

        raise AggregateDispatchError(path, failures)

    def save_as(
        self, config: Any, fmt: Format, path: Path | str | None = None
    ) -> Path:
        binding = self._binding(fmt)
        ensure_implements(type(config), binding.capability)

        resolved = Path(path) if path is not None else self.default_path(fmt)
        binding.format.write(resolved, binding.dump(config), encoding=self._encoding)
        logger.debug("Saved %s to %s as %s", type(config).__name__, resolved, fmt)
        return resolved

    def save_to_file(self, config: Any, path: Path | str) -> Path:
        """Save by extension, falling back to the first registered format."""

        fmt = self.detect_format(path) or self._registry.first().tag
        return self.save_as(config, fmt, path)

    @staticmethod
    def _build(
        config_class: type[T], binding: FormatBinding, document: Any, path: Path
    ) -> T:
        try:
            return binding.load(config_class, document)
        except ConfigError:
            raise
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise SchemaError(
                f"{config_class.__name__} cannot be built from the {binding.tag} "
                f"document in '{path}': {exc!r}"
            ) from exc


def load_from_yaml(config_class: type[T], path: Path | str | None = None) -> T:
    return ConfigFiles().load_yaml(config_class, path)


def load_from_json(config_class: type[T], path: Path | str | None = None) -> T:
    return ConfigFiles().load_json(config_class, path)


def load_from_toml(config_class: type[T], path: Path | str | None = None) -> T:
    return ConfigFiles().load_toml(config_class, path)


def load_from_file(config_class: type[T], path: Path | str) -> T:
    return ConfigFiles().load_from_file(config_class, path)


def save_to_file(config: Any, path: Path | str) -> Path:
    return ConfigFiles().save_to_file(config, path)


def load_from_arguments(config_class: type[T], args: Sequence[str] | None = None) -> T:
    """
    Build a config from command-line arguments.

    Args:
        config_class: a `CommandlineConfig` subclass.
        args: arguments to inspect; defaults to `sys.argv[1:]`. The config
            class receives a tuple copy.
    """

    ensure_implements(config_class, CommandlineConfig)
    snapshot = tuple(sys.argv[1:] if args is None else args)
    return config_class.from_arguments(snapshot)  # type: ignore[attr-defined]
