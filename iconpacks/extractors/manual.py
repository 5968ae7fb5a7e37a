"""Manual extractor: icons listed directly in the pack config."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from iconpacks.icon import IconMetadata

from .base import IconExtractor, require_list

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition


@dataclass(frozen=True)
class ManualConfig:
    icons: tuple[dict, ...]

    @classmethod
    def from_config(cls, extractor_id: str, config: dict) -> "ManualConfig":
        entries = require_list(extractor_id, config, "icons")
        return cls(icons=tuple(e for e in entries if isinstance(e, dict)))


class ManualExtractor(IconExtractor):
    """Put the list of icons directly in the config.

    Config schema:
    ```yaml
    extractor: manual
    config:
      icons:
        - name: logo
          source: https://example.com/logo.svg
          group: brand
    ```
    """

    extractor_id = "manual"
    label = "Manual"
    description = "Put the list of icons directly in the config."

    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        config = ManualConfig.from_config(self.extractor_id, pack.config)
        icons: dict[str, IconMetadata] = {}
        for entry in config.icons:
            name = str(entry.get("name") or "")
            extra = {
                k: v for k, v in entry.items()
                if k not in ("name", "source", "group", "label", "template")
            }
            self.add_icon(
                icons,
                pack,
                name,
                source=entry.get("source"),
                group=entry.get("group"),
                label=entry.get("label", ""),
                template=entry.get("template"),
                data=extra,
            )
        return icons
