from collections.abc import Iterable
from operator import methodcaller
from typing import Any

from .capabilities import JsonConfig, TomlConfig, YamlConfig
from .format import Format, JSONFormat, TOMLFormat, YAMLFormat
from .types import FormatBinding


class FormatRegistry(dict[Format, FormatBinding]):
    """Ordered table of format bindings; insertion order is the trial order."""

    def __init__(self, bindings: Iterable[FormatBinding] = ()) -> None:
        super().__init__()
        for binding in bindings:
            self.register(binding)

    def register(self, binding: FormatBinding) -> None:
        if binding.tag in self:
            raise ValueError(f"Format {binding.tag} is already registered")
        self[binding.tag] = binding

    def get_all_registered(self) -> list[FormatBinding]:
        return list(self.values())

    def is_registered(self, fmt: Format) -> bool:
        return fmt in self

    def for_extension(self, suffix: str) -> FormatBinding | None:
        suffix = suffix.lower()
        for binding in self.values():
            if suffix in binding.extensions:
                return binding
        return None

    def first(self) -> FormatBinding:
        return next(iter(self.values()))


def _load_yaml(config_class: Any, documents: Any) -> Any:
    return config_class.from_yaml(documents)


def _load_json(config_class: Any, value: Any) -> Any:
    return config_class.from_json(value)


def _load_toml(config_class: Any, table: Any) -> Any:
    return config_class.from_toml(table)


def default_bindings(*, toml_none_value: str | None = "null") -> list[FormatBinding]:
    return [
        FormatBinding(YAMLFormat(), YamlConfig, _load_yaml, methodcaller("to_yaml")),
        FormatBinding(JSONFormat(), JsonConfig, _load_json, methodcaller("to_json")),
        FormatBinding(
            TOMLFormat(none_value=toml_none_value),
            TomlConfig,
            _load_toml,
            methodcaller("to_toml"),
        ),
    ]


def default_registry() -> FormatRegistry:
    return FormatRegistry(default_bindings())
