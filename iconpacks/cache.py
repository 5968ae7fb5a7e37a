"""Per-pack cache of discovered icons."""

import hashlib
import json
import threading
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import structlog

from iconpacks.icon import IconMetadata

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition
    from iconpacks.extractors import IconExtractor

logger = structlog.get_logger(__name__)


@dataclass
class DiscoveryCacheEntry:
    """Icons discovered for one pack under one configuration."""

    pack_id: str
    fingerprint: str
    icons: dict[str, IconMetadata]
    created_at: float = field(default_factory=time.time)


def fingerprint(pack: "IconPackDefinition") -> str:
    """Hash of everything that changes what discovery returns."""
    payload = {
        "extractor": pack.extractor_type,
        "config": pack.config,
        "base_path": str(pack.base_path) if pack.base_path else None,
    }
    canonical = json.dumps(payload, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


class IconCache:
    """Memoizes extractor results per pack id and config fingerprint.

    At most one discovery runs per pack at a time; a second caller waits
    and reuses the first result. Different packs discover in parallel.
    """

    def __init__(self):
        self._entries: dict[str, DiscoveryCacheEntry] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self.hits = 0
        self.misses = 0

    def _lock_for(self, pack_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(pack_id)
            if lock is None:
                lock = self._locks[pack_id] = threading.Lock()
            return lock

    def _valid_entry(self, pack_id: str, current: str) -> Optional[DiscoveryCacheEntry]:
        entry = self._entries.get(pack_id)
        if entry is not None and entry.fingerprint == current:
            return entry
        return None

    def get_or_discover(
        self,
        pack_id: str,
        definition: "IconPackDefinition",
        extractor: "IconExtractor",
    ) -> dict[str, IconMetadata]:
        """Return cached icons for the pack, discovering them if needed.

        Extractor errors propagate and leave the cache untouched.
        """
        current = fingerprint(definition)

        entry = self._valid_entry(pack_id, current)
        if entry is not None:
            self.hits += 1
            return entry.icons

        with self._lock_for(pack_id):
            # Another caller may have finished discovery while we waited.
            entry = self._valid_entry(pack_id, current)
            if entry is not None:
                self.hits += 1
                return entry.icons

            self.misses += 1
            start = time.monotonic()
            icons = extractor.discover_icons(definition)
            self._entries[pack_id] = DiscoveryCacheEntry(
                pack_id=pack_id, fingerprint=current, icons=icons
            )
            logger.debug(
                "icons_discovered",
                pack_id=pack_id,
                count=len(icons),
                duration_ms=round((time.monotonic() - start) * 1000, 1),
            )
            return icons

    def get_entry(self, pack_id: str) -> Optional[DiscoveryCacheEntry]:
        return self._entries.get(pack_id)

    def invalidate(self, pack_id: str) -> None:
        """Drop the pack's entry; the next access re-discovers."""
        self._entries.pop(pack_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, pack_id: str) -> bool:
        return pack_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
