from abc import ABC, abstractmethod
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar

from ..exceptions import ConfigIOError, ConfigParseError, SerializationError


class Format(StrEnum):
    YAML = "yaml"
    JSON = "json"
    TOML = "toml"


def read_text(path: Path, encoding: str = "utf-8") -> str:
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ConfigIOError(path, f"not valid {encoding} text") from exc
    except OSError as exc:
        raise ConfigIOError(path, exc.strerror or str(exc)) from exc


def write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    # Not atomic: a crash during the write can leave a truncated file.
    try:
        path.write_text(text, encoding=encoding)
    except OSError as exc:
        raise ConfigIOError(path, exc.strerror or str(exc)) from exc


class ConfigFormat(ABC):
    """A config file format: its tag, file extensions, parser and renderer.

    Subclasses implement ``_parse`` and ``_dump`` on top of a parsing library
    and list the library errors that mean "malformed input" in
    ``parse_errors`` and "cannot render" in ``dump_errors``.
    """

    tag: ClassVar[Format]
    extensions: ClassVar[tuple[str, ...]]
    parse_errors: ClassVar[tuple[type[Exception], ...]] = ()
    dump_errors: ClassVar[tuple[type[Exception], ...]] = (TypeError, ValueError)

    @abstractmethod
    def _parse(self, text: str) -> Any: ...

    @abstractmethod
    def _dump(self, document: Any) -> str: ...

    def loads(self, text: str, path: Path | None = None) -> Any:
        try:
            return self._parse(text)
        except self.parse_errors as exc:
            raise ConfigParseError(self.tag, str(exc), path) from exc

    def dumps(self, document: Any) -> str:
        try:
            return self._dump(document)
        except self.dump_errors as exc:
            raise SerializationError(self.tag, str(exc)) from exc

    def read(self, path: Path, *, encoding: str = "utf-8") -> Any:
        return self.loads(read_text(path, encoding), path)

    def write(self, path: Path, document: Any, *, encoding: str = "utf-8") -> None:
        # Render fully before touching the file so a failed render leaves it intact.
        text = self.dumps(document)
        write_text(path, text, encoding)
