from __future__ import annotations

import json
from typing import Any

from .config_format import ConfigFormat, Format


class JSONFormat(ConfigFormat):
    """Read and write JSON configuration files.

    The document is a single JSON value, usually an object.
    """

    tag = Format.JSON
    extensions = (".json",)
    parse_errors = (json.JSONDecodeError,)

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def _parse(self, text: str) -> Any:
        return json.loads(text)

    def _dump(self, document: Any) -> str:
        return json.dumps(document, indent=self.indent, allow_nan=False)
