"""iconpacks - pluggable icon packs resolved from ``pack_id:icon_id`` references."""

from iconpacks.cache import DiscoveryCacheEntry, IconCache
from iconpacks.config.types import IconPackDefinition, PackSetting, PacksConfig
from iconpacks.errors import (
    ConfigError,
    DuplicatePackError,
    IconNotFoundError,
    IconPackError,
    InvalidIconError,
    MalformedIdentifierError,
    PackNotFoundError,
)
from iconpacks.extractors import ExtractorRegistry, IconExtractor, IconifyClient
from iconpacks.icon import IconMetadata
from iconpacks.identifier import IconIdentifier
from iconpacks.registry import IconPackRegistry
from iconpacks.renderable import RenderableBuilder, ResolvedRenderable
from iconpacks.resolver import IconResolver

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DiscoveryCacheEntry",
    "DuplicatePackError",
    "ExtractorRegistry",
    "IconCache",
    "IconExtractor",
    "IconIdentifier",
    "IconMetadata",
    "IconNotFoundError",
    "IconPackDefinition",
    "IconPackError",
    "IconPackRegistry",
    "IconResolver",
    "IconifyClient",
    "InvalidIconError",
    "MalformedIdentifierError",
    "PackNotFoundError",
    "PackSetting",
    "PacksConfig",
    "RenderableBuilder",
    "ResolvedRenderable",
]
