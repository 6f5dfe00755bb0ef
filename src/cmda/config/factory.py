# topmark:header:start
#
#   project      : CMDA
#   file         : factory.py
#   file_relpath : src/cmda/config/factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component registry and factory for pluggable analyzer components.

Three kinds of components are configurable: ``classifier``, ``object_source``
and ``serializer``. A `ComponentSpec` names either a built-in component
registered here or any importable callable as ``"package.module:Attribute"``;
its options are passed as keyword arguments.

Typical usage:
    ```python
    from cmda.config.factory import ComponentRegistry

    ComponentRegistry.register("classifier", "mine", MyClassifier)
    try:
        ...
    finally:
        ComponentRegistry.unregister("classifier", "mine")
    ```

Warning:
    Mutations operate on a registry shared across the process. In tests, wrap
    them in try/finally to ensure cleanup.
"""

from __future__ import annotations

import importlib
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Final, Mapping

from cmda.analyzer.classifier import DefaultClassifier
from cmda.analyzer.serializers import JsonSerializer, TomlSerializer
from cmda.analyzer.sources import DirObjectSource
from cmda.config.logging import get_logger
from cmda.core.errors import CmdaError, ConfigurationError

if TYPE_CHECKING:
    from cmda.config.logging import CmdaLogger
    from cmda.config.model import ComponentSpec

logger: CmdaLogger = get_logger(__name__)

Factory = Callable[..., Any]

COMPONENT_KINDS: Final[tuple[str, ...]] = ("classifier", "object_source", "serializer")


class ComponentRegistry:
    """Process-wide registry of built-in component factories, keyed by kind and name."""

    _lock = RLock()
    _factories: dict[str, dict[str, Factory]] = {
        "classifier": {"default": DefaultClassifier},
        "object_source": {"dir": DirObjectSource},
        "serializer": {"json": JsonSerializer, "toml": TomlSerializer},
    }

    @classmethod
    def _check_kind(cls, kind: str) -> None:
        if kind not in COMPONENT_KINDS:
            raise ValueError(f"Unknown component kind: {kind}")

    @classmethod
    def names(cls, kind: str) -> tuple[str, ...]:
        """Return the registered names for ``kind`` (sorted)."""
        cls._check_kind(kind)
        with cls._lock:
            return tuple(sorted(cls._factories[kind]))

    @classmethod
    def get(cls, kind: str, name: str) -> Factory | None:
        """Return the factory registered as ``name`` for ``kind``, if any."""
        cls._check_kind(kind)
        with cls._lock:
            return cls._factories[kind].get(name)

    @classmethod
    def as_mapping(cls, kind: str) -> Mapping[str, Factory]:
        """Return a read-only mapping of the factories registered for ``kind``."""
        cls._check_kind(kind)
        with cls._lock:
            return MappingProxyType(dict(cls._factories[kind]))

    @classmethod
    def register(cls, kind: str, name: str, factory: Factory) -> None:
        """Register ``factory`` under ``name``.

        Raises:
            ValueError: If ``name`` is already registered for ``kind``.
        """
        cls._check_kind(kind)
        with cls._lock:
            if name in cls._factories[kind]:
                raise ValueError(f"{kind} '{name}' is already registered")
            cls._factories[kind][name] = factory

    @classmethod
    def unregister(cls, kind: str, name: str) -> bool:
        """Remove a registered factory. Returns True if it was present."""
        cls._check_kind(kind)
        with cls._lock:
            return cls._factories[kind].pop(name, None) is not None


def resolve_factory(kind: str, name: str) -> Factory:
    """Resolve a component name to a factory.

    Args:
        kind (str): Component kind.
        name (str): Registered name or ``"package.module:Attribute"``.

    Returns:
        Factory: The callable that builds the component.

    Raises:
        ConfigurationError: If the name is neither registered nor importable.
    """
    factory: Factory | None = ComponentRegistry.get(kind, name)
    if factory is not None:
        return factory

    module_name, sep, attr = name.partition(":")
    if not sep or not module_name or not attr:
        known: str = ", ".join(ComponentRegistry.names(kind))
        raise ConfigurationError(
            f"Unknown {kind} '{name}' (built-in: {known}; or use 'package.module:Attribute')"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import {kind} module '{module_name}': {e}") from e
    try:
        factory = getattr(module, attr)
    except AttributeError as e:
        raise ConfigurationError(f"Module '{module_name}' has no attribute '{attr}'") from e
    if not callable(factory):
        raise ConfigurationError(f"{kind} '{name}' is not callable")
    return factory


def construct(kind: str, spec: ComponentSpec) -> Any:
    """Build the component described by ``spec``.

    Args:
        kind (str): Component kind (``classifier``, ``object_source`` or ``serializer``).
        spec (ComponentSpec): Name and keyword options.

    Returns:
        Any: The constructed component.

    Raises:
        ConfigurationError: If the component cannot be resolved or rejects its options.
    """
    factory: Factory = resolve_factory(kind, spec.name)
    logger.debug("Constructing %s '%s' with options %r", kind, spec.name, spec.options)
    try:
        return factory(**spec.options)
    except CmdaError:
        raise
    except TypeError as e:
        raise ConfigurationError(f"Invalid options for {kind} '{spec.name}': {e}") from e
