"""Icon extractor plugin system.

Each pack names an extractor type; the ExtractorRegistry maps that type to
a factory building the extractor:

- path: files from local paths or URLs
- svg: SVG files with inline content
- svg_sprite: symbols inside SVG sprites
- manual: icons listed in the config
- font: web-font manifests (codepoints, json, yaml)
- iconify: remote Iconify collections

Usage:
    from iconpacks.extractors import ExtractorRegistry

    extractors = ExtractorRegistry.default()
    extractor = extractors.create("svg")
    icons = extractor.discover_icons(pack)
"""

import threading
from typing import Any, Callable, Optional

from iconpacks.errors import ConfigError

from .base import IconExtractor, SourcesConfig
from .files import PathExtractor, SvgExtractor, SvgSpriteExtractor
from .finder import FoundFile, IconFinder, sanitize_icon_id
from .font import FontExtractor
from .iconify import API_ENDPOINT, IconifyClient, IconifyExtractor
from .manual import ManualExtractor

ExtractorFactory = Callable[[], IconExtractor]


class ExtractorRegistry:
    """Maps extractor type tags to factories.

    Extractor instances are created once per type and reused; extractors
    keep no per-pack state.
    """

    def __init__(self):
        self._factories: dict[str, ExtractorFactory] = {}
        self._instances: dict[str, IconExtractor] = {}
        self._lock = threading.Lock()

    def register(self, extractor_type: str, factory: ExtractorFactory) -> None:
        """Register (or replace) the factory for an extractor type."""
        self._factories[extractor_type] = factory
        self._instances.pop(extractor_type, None)

    def create(self, extractor_type: str) -> IconExtractor:
        """Get the extractor for a type.

        Raises:
            ConfigError: If no extractor is registered for the type
        """
        with self._lock:
            if extractor_type not in self._instances:
                factory = self._factories.get(extractor_type)
                if factory is None:
                    raise ConfigError(f"Unknown extractor type '{extractor_type}'")
                self._instances[extractor_type] = factory()
            return self._instances[extractor_type]

    def close(self) -> None:
        """Release resources held by created extractors (HTTP clients)."""
        with self._lock:
            instances = list(self._instances.values())
            self._instances.clear()
        for extractor in instances:
            extractor.close()

    def types(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, extractor_type: str) -> bool:
        return extractor_type in self._factories

    @classmethod
    def default(
        cls, iconify_client: Optional[Any] = None, logger: Any = None
    ) -> "ExtractorRegistry":
        """Registry with all built-in extractors.

        Args:
            iconify_client: Client for the iconify extractor (IconifyClient by default)
            logger: structlog-style logger passed to every extractor
        """
        registry = cls()
        registry.register("path", lambda: PathExtractor(logger=logger))
        registry.register("svg", lambda: SvgExtractor(logger=logger))
        registry.register("svg_sprite", lambda: SvgSpriteExtractor(logger=logger))
        registry.register("manual", lambda: ManualExtractor(logger=logger))
        registry.register("font", lambda: FontExtractor(logger=logger))
        registry.register(
            "iconify", lambda: IconifyExtractor(client=iconify_client, logger=logger)
        )
        return registry


__all__ = [
    "API_ENDPOINT",
    "ExtractorRegistry",
    "FontExtractor",
    "FoundFile",
    "IconExtractor",
    "IconFinder",
    "IconifyClient",
    "IconifyExtractor",
    "ManualExtractor",
    "PathExtractor",
    "SourcesConfig",
    "SvgExtractor",
    "SvgSpriteExtractor",
    "sanitize_icon_id",
]
