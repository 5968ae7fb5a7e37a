"""Discovered icon metadata."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from iconpacks.identifier import IconIdentifier


@dataclass(frozen=True)
class IconMetadata:
    """One icon found by an extractor.

    Never mutated after discovery; per-request settings produce a new
    context in the renderable instead.
    """

    identifier: IconIdentifier
    label: str = ""
    group: str = ""
    source: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)
    template: Optional[str] = None  # Overrides the pack template when set

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
        if not self.label:
            object.__setattr__(self, "label", humanize(self.identifier.icon_id))

    @property
    def pack_id(self) -> str:
        return self.identifier.pack_id

    @property
    def icon_id(self) -> str:
        return self.identifier.icon_id

    @property
    def full_id(self) -> str:
        return self.identifier.full_id

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.full_id,
            "pack_id": self.pack_id,
            "icon_id": self.icon_id,
            "label": self.label,
            "group": self.group,
            "source": self.source,
            "data": dict(self.data),
            "template": self.template,
        }


def humanize(icon_id: str) -> str:
    """``arrow-right`` -> ``Arrow right``."""
    words = icon_id.replace("_", " ").replace("-", " ").split()
    return " ".join(words).capitalize() if words else icon_id
