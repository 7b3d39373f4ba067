from typing import Any

import yaml

from .config_format import ConfigFormat, Format


class YAMLFormat(ConfigFormat):
    """Read and write YAML configuration files.

    A YAML stream can hold several documents, so the document shape here is
    a list with one entry per ``---`` separated document.
    """

    tag = Format.YAML
    extensions = (".yml", ".yaml")
    parse_errors = (yaml.YAMLError,)
    dump_errors = (yaml.YAMLError, TypeError)

    def __init__(self, sort_keys: bool = False) -> None:
        self.sort_keys = sort_keys

    def _parse(self, text: str) -> list[Any]:
        return list(yaml.safe_load_all(text))

    def _dump(self, document: list[Any]) -> str:
        if not isinstance(document, list):
            raise TypeError(
                f"expected a list of YAML documents, got {type(document).__name__}"
            )
        return yaml.safe_dump_all(
            document,
            default_flow_style=False,
            sort_keys=self.sort_keys,
            allow_unicode=True,
        )
