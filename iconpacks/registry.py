"""Registry of icon pack definitions."""

from typing import Iterator

import structlog

from iconpacks.config.types import IconPackDefinition, PacksConfig
from iconpacks.errors import DuplicatePackError, PackNotFoundError

logger = structlog.get_logger(__name__)


class IconPackRegistry:
    """Holds pack definitions loaded from configuration.

    Registration is expected at startup or on configuration reload, not
    concurrently with lookups.
    """

    def __init__(self, strict: bool = False):
        """Initialize registry.

        Args:
            strict: Raise DuplicatePackError instead of replacing a pack
                registered under the same id
        """
        self.strict = strict
        self._packs: dict[str, IconPackDefinition] = {}

    @classmethod
    def from_config(cls, config: PacksConfig, strict: bool = False) -> "IconPackRegistry":
        registry = cls(strict=strict)
        for pack in config.packs.values():
            registry.register(pack)
        return registry

    def register(self, definition: IconPackDefinition) -> None:
        """Add a pack, replacing any pack with the same id.

        Raises:
            ConfigError: If the definition is invalid
            DuplicatePackError: In strict mode, if the id is already taken
        """
        definition.validate()
        if definition.pack_id in self._packs:
            if self.strict:
                raise DuplicatePackError(
                    f"Icon pack '{definition.pack_id}' is already registered"
                )
            logger.debug("icon_pack_replaced", pack_id=definition.pack_id)
        self._packs[definition.pack_id] = definition

    def unregister(self, pack_id: str) -> None:
        self._packs.pop(pack_id, None)

    def get(self, pack_id: str) -> IconPackDefinition:
        """Get a pack by id.

        Raises:
            PackNotFoundError: If no pack has this id
        """
        try:
            return self._packs[pack_id]
        except KeyError:
            raise PackNotFoundError(f"Icon pack not found: {pack_id}") from None

    def all(self) -> list[IconPackDefinition]:
        """All packs in registration order."""
        return list(self._packs.values())

    def enabled(self) -> list[IconPackDefinition]:
        return [p for p in self._packs.values() if p.enabled]

    def __contains__(self, pack_id: str) -> bool:
        return pack_id in self._packs

    def __iter__(self) -> Iterator[IconPackDefinition]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._packs)
