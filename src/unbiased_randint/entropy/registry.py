"""Byte source registry and config-driven source construction.

Built-in sources (``system``, ``mock_uniform``, ``fixed``) register
themselves at import time with ``@register_entropy_source``. Sources shipped
by other packages are picked up from the ``unbiased_randint.entropy_sources``
entry-point group the first time a name is not found::

    [project.entry-points."unbiased_randint.entropy_sources"]
    hwrng = "my_package.sources:HardwareSource"

:meth:`EntropySourceRegistry.build` turns a :class:`RandintConfig` into a
ready source, wrapped in a fallback when ``fallback_mode`` asks for one.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

from unbiased_randint.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from unbiased_randint.config import RandintConfig
    from unbiased_randint.entropy.base import EntropySource

logger = logging.getLogger("unbiased_randint")

_ENTRY_POINT_GROUP = "unbiased_randint.entropy_sources"


def _discover_plugins(known: set[str]) -> dict[str, type[EntropySource]]:
    """Load entry-point sources whose names are not in *known*.

    A plugin that fails to import is logged and skipped.
    """
    found: dict[str, type[EntropySource]] = {}
    try:
        eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
    except Exception:  # Broken metadata must not break lookups of built-ins
        logger.warning("Failed to read entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
        return found

    for ep in eps:
        if ep.name in known:
            continue
        try:
            found[ep.name] = ep.load()
        except Exception:  # One bad plugin must not block the others
            logger.warning("Skipping byte source plugin %r (%s)", ep.name, ep.value, exc_info=True)
    logger.debug("Discovered byte source plugins: %s", sorted(found) or "(none)")
    return found


class EntropySourceRegistry:
    """Maps ``RandintConfig.entropy_source_type`` names to source classes."""

    _sources: ClassVar[dict[str, type[EntropySource]]] = {}
    _plugins_scanned: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Decorator that registers a source class under *name*."""

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._sources[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def _scan_plugins(cls) -> None:
        if not cls._plugins_scanned:
            cls._plugins_scanned = True
            cls._sources.update(_discover_plugins(set(cls._sources)))

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Return the source class registered as *name*.

        Raises:
            ConfigValidationError: If no built-in or plugin source has that name.
        """
        if name not in cls._sources:
            cls._scan_plugins()
        if name not in cls._sources:
            raise ConfigValidationError(
                f"Unknown entropy source {name!r}; available: {', '.join(cls.names())}"
            )
        return cls._sources[name]

    @classmethod
    def names(cls) -> list[str]:
        """Sorted names of every known source, plugins included."""
        cls._scan_plugins()
        return sorted(cls._sources)

    @classmethod
    def build(cls, config: RandintConfig) -> EntropySource:
        """Construct the configured source, adding a fallback if configured.

        ``fallback_mode="error"`` returns the primary source as is; ``"system"``
        and ``"mock_uniform"`` wrap it in a
        :class:`~unbiased_randint.entropy.fallback.FallbackEntropySource`.
        """
        primary = cls.get(config.entropy_source_type).from_config(config)
        if config.fallback_mode == "error":
            return primary

        from unbiased_randint.entropy.fallback import FallbackEntropySource

        fallback = cls.get(config.fallback_mode).from_config(config)
        return FallbackEntropySource(primary, fallback)


register_entropy_source = EntropySourceRegistry.register
