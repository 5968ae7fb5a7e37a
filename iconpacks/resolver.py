"""Resolve ``pack_id:icon_id`` references into renderables.

Usage:
    from iconpacks import IconResolver, PacksConfig

    resolver = IconResolver.from_config(PacksConfig.from_yaml(path))
    renderable = resolver.resolve("my_icons:home", {"size": 32})
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Mapping, Optional

import structlog

from iconpacks.cache import IconCache
from iconpacks.config.types import IconPackDefinition, PacksConfig
from iconpacks.errors import ConfigError, IconNotFoundError, PackNotFoundError
from iconpacks.extractors import ExtractorRegistry
from iconpacks.icon import IconMetadata
from iconpacks.identifier import IconIdentifier
from iconpacks.registry import IconPackRegistry
from iconpacks.renderable import RenderableBuilder, ResolvedRenderable


class IconResolver:
    """Looks up packs, discovers their icons through the cache, and builds
    renderables for callers."""

    def __init__(
        self,
        registry: IconPackRegistry,
        cache: Optional[IconCache] = None,
        extractors: Optional[ExtractorRegistry] = None,
        builder: Optional[RenderableBuilder] = None,
        logger: Any = None,
        max_workers: int = 4,
    ):
        """Initialize resolver.

        Args:
            registry: Pack definitions
            cache: Discovery cache (a fresh one if None)
            extractors: Extractor factories (built-ins if None)
            builder: Renderable builder
            logger: structlog-style logger
            max_workers: Threads used to discover packs in list_icons
        """
        self.registry = registry
        self.cache = cache if cache is not None else IconCache()
        self.extractors = (
            extractors if extractors is not None else ExtractorRegistry.default(logger=logger)
        )
        self.builder = builder or RenderableBuilder()
        self.logger = logger or structlog.get_logger(__name__)
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: PacksConfig, **kwargs) -> "IconResolver":
        return cls(IconPackRegistry.from_config(config), **kwargs)

    def discover(self, pack: IconPackDefinition) -> dict[str, IconMetadata]:
        """Icons of a pack, from cache or fresh discovery.

        Raises:
            ConfigError: If the pack config is unusable for its extractor
        """
        extractor = self.extractors.create(pack.extractor_type)
        return self.cache.get_or_discover(pack.pack_id, pack, extractor)

    def _find(self, identifier: str) -> tuple[IconMetadata, IconPackDefinition]:
        parsed = IconIdentifier.parse(identifier)
        not_found = IconNotFoundError(f"Icon not found: {parsed.full_id}")

        try:
            pack = self.registry.get(parsed.pack_id)
        except PackNotFoundError:
            raise not_found from None
        if not pack.enabled:
            raise not_found

        icon = self.discover(pack).get(parsed.icon_id)
        if icon is None:
            raise not_found
        return icon, pack

    def get_icon(self, identifier: str) -> IconMetadata:
        """Metadata for one icon.

        Raises:
            MalformedIdentifierError: If the reference is not ``pack:icon``
            IconNotFoundError: If the pack or the icon does not exist
        """
        icon, _ = self._find(identifier)
        return icon

    def resolve(
        self, identifier: str, settings: Optional[Mapping[str, Any]] = None
    ) -> ResolvedRenderable:
        """Resolve a reference into a renderable.

        Args:
            identifier: ``pack_id:icon_id``
            settings: Caller settings, overriding pack defaults and icon data

        Raises:
            MalformedIdentifierError: If the reference is not ``pack:icon``
            IconNotFoundError: If the pack or the icon does not exist
            ConfigError: If the pack cannot be discovered
        """
        icon, pack = self._find(identifier)
        return self.builder.build(icon, pack, settings)

    def preview(self, identifier: str, size: int = 48) -> ResolvedRenderable:
        icon, pack = self._find(identifier)
        return self.builder.build_preview(icon, pack, size)

    def _selected_packs(self, pack_ids: Optional[Iterable[str]]) -> list[IconPackDefinition]:
        if pack_ids is None:
            return self.registry.enabled()
        packs = []
        for pack_id in pack_ids:
            if pack_id in self.registry:
                pack = self.registry.get(pack_id)
                if pack.enabled:
                    packs.append(pack)
        return packs

    def _discover_or_skip(self, pack: IconPackDefinition) -> dict[str, IconMetadata]:
        try:
            return self.discover(pack)
        except ConfigError as e:
            self.logger.error("icon_pack_discovery_failed", pack_id=pack.pack_id, error=str(e))
            return {}

    def list_icons(
        self, pack_ids: Optional[Iterable[str]] = None
    ) -> dict[str, IconMetadata]:
        """All icons of the requested packs, keyed by full id.

        Disabled and unknown packs are skipped. A pack with a broken config
        is logged and skipped without affecting the others.

        Args:
            pack_ids: Packs to include; all enabled packs if None
        """
        packs = self._selected_packs(pack_ids)

        if len(packs) > 1 and self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                discovered = list(pool.map(self._discover_or_skip, packs))
        else:
            discovered = [self._discover_or_skip(pack) for pack in packs]

        icons = {}
        for pack_icons in discovered:
            for icon in pack_icons.values():
                icons[icon.full_id] = icon
        return icons

    def pack_options(self, include_description: bool = False) -> dict[str, str]:
        """``{pack_id: "Label (count)"}`` for packs with icons, sorted by label."""
        options = {}
        for pack in self.registry.enabled():
            icons = self._discover_or_skip(pack)
            if not icons:
                continue
            label = pack.label or pack.pack_id
            if include_description and pack.description:
                label = f"{label} - {pack.description}"
            options[pack.pack_id] = f"{label} ({len(icons)})"
        return dict(sorted(options.items(), key=lambda item: item[1].lower()))

    def close(self) -> None:
        """Close extractor resources such as the Iconify HTTP client."""
        self.extractors.close()

    def __enter__(self) -> "IconResolver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def invalidate(self, pack_id: Optional[str] = None) -> None:
        """Drop cached icons for one pack, or for all packs."""
        if pack_id is None:
            self.cache.clear()
        else:
            self.cache.invalidate(pack_id)
