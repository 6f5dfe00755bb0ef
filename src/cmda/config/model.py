# topmark:header:start
#
#   project      : CMDA
#   file         : model.py
#   file_relpath : src/cmda/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable analyzer configuration.

Configuration is layered: the runtime defaults from `load_defaults_dict` are
merged with an optional TOML file, and CLI options are applied last via
`AnalyzerConfig.with_overrides`.

Example ``cmda.toml``::

    output_dir = "out"
    encoding = "UTF-8"

    [classifier]
    name = "default"
    pid_prefix = "demo:CModel"

    [object_source]
    name = "dir"
    dir = "objects"
    pattern = "*.json"

    [serializer]
    name = "toml"

Relative paths are resolved against the current working directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cmda.config.io import get_string_value_or_none, get_table_value, load_toml_dict, merge_tables
from cmda.config.keys import Toml
from cmda.config.logging import get_logger
from cmda.constants import DEFAULT_ENCODING
from cmda.core.errors import ConfigurationError

if TYPE_CHECKING:
    from cmda.config.io import TomlTable
    from cmda.config.logging import CmdaLogger

logger: CmdaLogger = get_logger(__name__)

_KNOWN_ROOT_KEYS: frozenset[str] = frozenset(
    {
        Toml.KEY_OUTPUT_DIR,
        Toml.KEY_ENCODING,
        Toml.SECTION_CLASSIFIER,
        Toml.SECTION_OBJECT_SOURCE,
        Toml.SECTION_SERIALIZER,
    }
)


def load_defaults_dict() -> TomlTable:
    """Return CMDA's runtime defaults as a new, mutable dict."""
    return {
        Toml.KEY_ENCODING: DEFAULT_ENCODING,
        Toml.SECTION_CLASSIFIER: {Toml.KEY_NAME: "default"},
        Toml.SECTION_OBJECT_SOURCE: {Toml.KEY_NAME: "dir"},
        Toml.SECTION_SERIALIZER: {Toml.KEY_NAME: "json"},
    }


@dataclass(frozen=True)
class ComponentSpec:
    """Names a pluggable component and the keyword options to build it with.

    Attributes:
        name (str): Built-in component name or ``"package.module:Attribute"``.
        options (dict[str, Any]): Keyword arguments for the component factory.
    """

    name: str
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_table(cls, section: str, table: TomlTable) -> ComponentSpec:
        """Build a spec from a TOML section (``name`` plus options).

        Raises:
            ConfigurationError: If ``name`` is missing.
        """
        name: str | None = get_string_value_or_none(table, Toml.KEY_NAME)
        if not name:
            raise ConfigurationError(f"Missing '{Toml.KEY_NAME}' in [{section}]")
        options: dict[str, Any] = {k: v for k, v in table.items() if k != Toml.KEY_NAME}
        return cls(name=name, options=options)

    def with_options(self, **options: Any) -> ComponentSpec:
        """Return a copy with ``options`` merged in (``None`` values are ignored)."""
        merged: dict[str, Any] = dict(self.options)
        merged.update({k: v for k, v in options.items() if v is not None})
        return replace(self, options=merged)


@dataclass(frozen=True)
class AnalyzerConfig:
    """Resolved configuration for one analyzer run.

    Attributes:
        output_dir (Path | None): Output directory; required to run an analysis.
        encoding (str): Text encoding for artifacts and membership lists.
        classifier (ComponentSpec): Classifier to construct.
        object_source (ComponentSpec): Object source to construct.
        serializer (ComponentSpec): Serializer to construct.
    """

    output_dir: Path | None
    encoding: str
    classifier: ComponentSpec
    object_source: ComponentSpec
    serializer: ComponentSpec

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> AnalyzerConfig:
        """Build a configuration from defaults merged with ``data``.

        Args:
            data (TomlTable): Parsed TOML document (may be empty).

        Returns:
            AnalyzerConfig: The resolved configuration.

        Raises:
            ConfigurationError: If a value has the wrong shape.
        """
        for key in data:
            if key not in _KNOWN_ROOT_KEYS:
                logger.warning("Ignoring unknown configuration key: %s", key)

        merged: TomlTable = merge_tables(load_defaults_dict(), data)
        output_dir: str | None = get_string_value_or_none(merged, Toml.KEY_OUTPUT_DIR)
        encoding: str = get_string_value_or_none(merged, Toml.KEY_ENCODING) or DEFAULT_ENCODING
        try:
            "".encode(encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding: {encoding}") from e

        return cls(
            output_dir=Path(output_dir) if output_dir else None,
            encoding=encoding,
            classifier=ComponentSpec.from_table(
                Toml.SECTION_CLASSIFIER, get_table_value(merged, Toml.SECTION_CLASSIFIER)
            ),
            object_source=ComponentSpec.from_table(
                Toml.SECTION_OBJECT_SOURCE, get_table_value(merged, Toml.SECTION_OBJECT_SOURCE)
            ),
            serializer=ComponentSpec.from_table(
                Toml.SECTION_SERIALIZER, get_table_value(merged, Toml.SECTION_SERIALIZER)
            ),
        )

    def with_overrides(
        self,
        *,
        output_dir: str | Path | None = None,
        source_dir: str | Path | None = None,
        pattern: str | None = None,
        serializer: str | None = None,
    ) -> AnalyzerConfig:
        """Return a copy with command-line overrides applied.

        Args:
            output_dir (str | Path | None): Replaces ``output_dir``.
            source_dir (str | Path | None): Sets the ``dir`` option of the object source.
            pattern (str | None): Sets the ``pattern`` option of the object source.
            serializer (str | None): Replaces the serializer (its options are dropped).

        Returns:
            AnalyzerConfig: The updated configuration.
        """
        cfg: AnalyzerConfig = self
        if output_dir is not None:
            cfg = replace(cfg, output_dir=Path(output_dir))
        if source_dir is not None or pattern is not None:
            cfg = replace(
                cfg,
                object_source=cfg.object_source.with_options(
                    **{
                        Toml.KEY_DIR: str(source_dir) if source_dir is not None else None,
                        Toml.KEY_PATTERN: pattern,
                    }
                ),
            )
        if serializer is not None and serializer != cfg.serializer.name:
            cfg = replace(cfg, serializer=ComponentSpec(name=serializer))
        return cfg

    def require_output_dir(self) -> Path:
        """Return the output directory.

        Raises:
            ConfigurationError: If no output directory is configured.
        """
        if self.output_dir is None:
            raise ConfigurationError(f"Missing required setting: {Toml.KEY_OUTPUT_DIR}")
        return self.output_dir


def load_config(path: Path | None = None) -> AnalyzerConfig:
    """Load the configuration from ``path`` (or defaults only when ``None``).

    Raises:
        ConfigurationError: If the file is missing or invalid.
    """
    data: TomlTable = load_toml_dict(path) if path is not None else {}
    return AnalyzerConfig.from_toml_dict(data)
