"""Font extractor: icon names from web-font manifests.

Supported manifest files:
- .codepoints: "name codepoint" per line (Material Symbols style)
- .json: object whose keys are icon names
- .yml/.yaml: mapping whose keys are icon names
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import yaml

from iconpacks.errors import ConfigError
from iconpacks.icon import IconMetadata

from .base import IconExtractor, require_list

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition


@dataclass(frozen=True)
class FontConfig:
    sources: tuple[str, ...]
    offset: int = 0

    @classmethod
    def from_config(cls, extractor_id: str, config: dict) -> "FontConfig":
        message = (
            f"Invalid `config: offset` in your definition, extractor {extractor_id} "
            "requires a non-negative integer"
        )
        try:
            offset = int(config.get("offset") or 0)
        except (TypeError, ValueError) as e:
            raise ConfigError(message) from e
        if offset < 0:
            raise ConfigError(message)
        return cls(
            sources=tuple(require_list(extractor_id, config, "sources")),
            offset=offset,
        )


class FontExtractor(IconExtractor):
    """Provide icons from web-font manifests.

    Config schema:
    ```yaml
    extractor: font
    config:
      sources:
        - fonts/MaterialSymbols.codepoints
      offset: 0  # Drop the first N icons
    ```
    """

    extractor_id = "font"
    label = "Web Font"
    description = "Provide icons from web fonts."

    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        config = FontConfig.from_config(self.extractor_id, pack.config)
        base_path = pack.base_path or Path.cwd()

        entries: list[tuple[str, Optional[str]]] = []
        for filename in config.sources:
            path = base_path / Path(filename).expanduser()
            suffix = path.suffix.lower()
            if suffix == ".codepoints":
                entries.extend(self._codepoints(path))
            elif suffix == ".json":
                entries.extend((name, None) for name in self._json_keys(path))
            elif suffix in (".yml", ".yaml"):
                entries.extend((name, None) for name in self._yaml_keys(path))
            else:
                self.logger.warning(
                    "unsupported_font_source", pack_id=pack.pack_id, source=filename
                )

        icons: dict[str, IconMetadata] = {}
        for name, codepoint in entries[config.offset:]:
            data = {"content": codepoint} if codepoint else {}
            self.add_icon(icons, pack, name, data=data)
        return icons

    def _read(self, path: Path) -> str:
        try:
            return path.read_text()
        except OSError as e:
            self.logger.error("font_source_unreadable", path=str(path), error=str(e))
            return ""

    def _codepoints(self, path: Path) -> list[tuple[str, str]]:
        entries = []
        for line in self._read(path).splitlines():
            values = line.split()
            if len(values) < 2:
                continue
            entries.append((values[0], values[1]))
        return entries

    def _json_keys(self, path: Path) -> list[str]:
        content = self._read(path)
        if not content:
            return []
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            self.logger.error("font_source_invalid", path=str(path), error=str(e))
            return []
        return [str(k) for k in data] if isinstance(data, dict) else []

    def _yaml_keys(self, path: Path) -> list[str]:
        content = self._read(path)
        if not content:
            return []
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            self.logger.error("font_source_invalid", path=str(path), error=str(e))
            return []
        return [str(k) for k in data] if isinstance(data, dict) else []
