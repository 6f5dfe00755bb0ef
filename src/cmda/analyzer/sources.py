# topmark:header:start
#
#   project      : CMDA
#   file         : sources.py
#   file_relpath : src/cmda/analyzer/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Object sources: lazy, single-pass iterators over digital objects.

An object source is any iterator of `DigitalObject`. It is consumed exactly
once by the analyzer and is not restartable.

Sources:
    - `DirObjectSource`: walks a directory and decodes one object per file
      (``.json`` via `json`, ``.toml`` via `tomlkit`).
    - `IterableObjectSource`: wraps an in-memory iterable (API and tests).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator, Protocol

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cmda.config.logging import get_logger
from cmda.core.errors import ConfigurationError, ObjectLoadError
from cmda.model.objects import DigitalObject

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmda.config.logging import CmdaLogger

logger: CmdaLogger = get_logger(__name__)


class ObjectSource(Protocol):
    """Protocol for forward-only sources of digital objects."""

    def __iter__(self) -> Iterator[DigitalObject]:
        """Return the iterator itself."""
        ...

    def __next__(self) -> DigitalObject:
        """Return the next object or raise ``StopIteration`` when exhausted."""
        ...


def load_object(path: Path) -> DigitalObject:
    """Read and decode a single object file.

    Args:
        path (Path): Path to a ``.json`` or ``.toml`` object document.

    Returns:
        DigitalObject: The decoded object.

    Raises:
        ObjectLoadError: If the file cannot be read, parsed, or is malformed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ObjectLoadError(f"Cannot read object file {path}: {e}") from e

    data: Any
    try:
        if path.suffix.lower() == ".toml":
            data = tomlkit.parse(text).unwrap()
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, TomlkitParseError) as e:
        raise ObjectLoadError(f"Cannot decode object file {path}: {e}") from e

    try:
        return DigitalObject.from_dict(data)
    except ObjectLoadError as e:
        raise ObjectLoadError(f"{path}: {e}") from e


class DirObjectSource:
    """Iterate over object files found under a directory.

    Files are visited in sorted path order so that, for a fixed directory,
    content model numbering is stable across runs.

    Args:
        dir (str | Path): Directory holding object files.
        pattern (str): Glob pattern selecting object files.
        recursive (bool): Descend into subdirectories.

    Raises:
        ConfigurationError: If ``dir`` does not exist or is not a directory.
    """

    def __init__(self, dir: str | Path, *, pattern: str = "*.json", recursive: bool = True) -> None:
        self.dir: Path = Path(dir)
        self.pattern: str = pattern
        self.recursive: bool = recursive
        if not self.dir.is_dir():
            raise ConfigurationError(f"Object source directory not found: {self.dir}")
        self._iter: Iterator[DigitalObject] = self._walk()

    def _walk(self) -> Iterator[DigitalObject]:
        paths = self.dir.rglob(self.pattern) if self.recursive else self.dir.glob(self.pattern)
        for path in sorted(p for p in paths if p.is_file()):
            logger.trace("Loading object file %s", path)
            yield load_object(path)

    def __iter__(self) -> Iterator[DigitalObject]:
        return self

    def __next__(self) -> DigitalObject:
        return next(self._iter)


class IterableObjectSource:
    """Adapt any iterable of objects to the object source protocol."""

    def __init__(self, objects: Iterable[DigitalObject]) -> None:
        self._iter: Iterator[DigitalObject] = iter(objects)

    def __iter__(self) -> Iterator[DigitalObject]:
        return self

    def __next__(self) -> DigitalObject:
        return next(self._iter)
