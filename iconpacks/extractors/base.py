"""Base classes for icon extractors.

An extractor discovers the concrete icons a pack provides. Every extractor
type is a strategy with the same contract:

- discover_icons(pack) returns a fresh {icon_id: IconMetadata} mapping
- discovery reads only the pack definition and the outside world (files,
  HTTP); caching is the caller's job
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import structlog

from iconpacks.errors import ConfigError, InvalidIconError, MalformedIdentifierError
from iconpacks.icon import IconMetadata
from iconpacks.identifier import IconIdentifier

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition


@dataclass(frozen=True)
class SourcesConfig:
    """Config for extractors reading a list of file patterns or URLs."""

    sources: tuple[str, ...]

    @classmethod
    def from_config(cls, extractor_id: str, config: dict) -> "SourcesConfig":
        return cls(sources=tuple(require_list(extractor_id, config, "sources")))


class IconExtractor(ABC):
    """Base class for all icon extractors."""

    extractor_id: str = ""
    label: str = ""
    description: str = ""

    def __init__(self, logger: Any = None):
        """Initialize extractor.

        Args:
            logger: structlog-style logger; defaults to this module's logger
        """
        self.logger = logger or structlog.get_logger(__name__)

    @abstractmethod
    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        """Enumerate the icons the pack provides.

        Args:
            pack: Pack definition holding the extractor config

        Returns:
            Mapping of icon id to metadata

        Raises:
            ConfigError: If the pack config misses a required value
        """
        pass

    def close(self) -> None:
        """Release resources held by the extractor. Nothing by default."""

    def create_icon(
        self,
        pack: "IconPackDefinition",
        icon_id: str,
        source: Optional[str] = None,
        group: Optional[str] = None,
        data: Optional[dict] = None,
        label: str = "",
        template: Optional[str] = None,
    ) -> IconMetadata:
        """Build metadata for one icon of the pack.

        Raises:
            InvalidIconError: If the icon id cannot form a valid reference
        """
        try:
            identifier = IconIdentifier(pack.pack_id, icon_id)
        except MalformedIdentifierError as e:
            raise InvalidIconError(
                f"Extractor {self.extractor_id} produced an invalid icon for "
                f"pack {pack.pack_id}: {e}"
            ) from e
        return IconMetadata(
            identifier=identifier,
            label=label,
            group=group or "",
            source=source,
            data=data or {},
            template=template,
        )

    def add_icon(
        self,
        icons: dict[str, IconMetadata],
        pack: "IconPackDefinition",
        icon_id: str,
        **kwargs,
    ) -> None:
        """Create an icon and add it unless the id is invalid or taken.

        The first icon discovered under an id wins.
        """
        if icon_id in icons:
            self.logger.debug(
                "duplicate_icon_skipped", pack_id=pack.pack_id, icon_id=icon_id
            )
            return
        try:
            icons[icon_id] = self.create_icon(pack, icon_id, **kwargs)
        except InvalidIconError as e:
            self.logger.warning("invalid_icon_skipped", pack_id=pack.pack_id, error=str(e))


def require_list(extractor_id: str, config: dict, key: str) -> list:
    """Return ``config[key]`` as a non-empty list.

    Raises:
        ConfigError: Naming the key and the extractor when it is missing
    """
    value = (config or {}).get(key)
    if isinstance(value, str):
        value = [value]
    if not value or not isinstance(value, (list, tuple)):
        raise ConfigError(
            f"Missing or invalid `config: {key}` in your definition, "
            f"extractor {extractor_id} requires this value as a list"
        )
    return list(value)
