from collections.abc import Mapping
from typing import Any

import rtoml

from .config_format import ConfigFormat, Format


class TOMLFormat(ConfigFormat):
    """Read and write TOML configuration files."""

    tag = Format.TOML
    extensions = (".toml",)
    parse_errors = (rtoml.TomlParsingError,)
    dump_errors = (rtoml.TomlSerializationError, TypeError)

    def __init__(self, none_value: str | None = "null") -> None:
        """
        Args:
            none_value: controls how `None` values are serialized.
                `none_value=None` means `None` values are ignored.
        """
        self.none_value = none_value

    def _parse(self, text: str) -> dict[str, Any]:
        return rtoml.loads(text, none_value=self.none_value)

    def _dump(self, document: Mapping[str, Any]) -> str:
        if not isinstance(document, Mapping):
            raise TypeError(
                f"a TOML document must be a table, got {type(document).__name__}"
            )
        return rtoml.dumps(dict(document), none_value=self.none_value)
