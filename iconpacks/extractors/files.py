"""Extractors reading icons from local files.

- path: any file type, one icon per file
- svg: one icon per SVG file, inner markup kept as ``content``
- svg_sprite: one icon per ``<symbol id>`` in sprite files
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TYPE_CHECKING

from iconpacks.icon import IconMetadata

from .base import IconExtractor, SourcesConfig
from .finder import FoundFile, IconFinder

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition


class PathExtractor(IconExtractor):
    """All files from one or many paths. Works for any file type.

    Config schema:
    ```yaml
    extractor: path
    config:
      sources:
        - icons/{icon_id}.png
        - icons_grouped/{group}/{icon_id}.png
    ```
    """

    extractor_id = "path"
    label = "Local path"
    description = "All files from one or many paths. Works for any file type."

    def find_files(self, pack: "IconPackDefinition") -> list[FoundFile]:
        config = SourcesConfig.from_config(self.extractor_id, pack.config)
        return IconFinder(pack.base_path).find(list(config.sources))

    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        icons: dict[str, IconMetadata] = {}
        for file in self.find_files(pack):
            self.add_icon(icons, pack, file.icon_id, source=file.source, group=file.group)
        return icons


class SvgExtractor(PathExtractor):
    """SVG files whose inner markup is exposed to templates as ``content``."""

    extractor_id = "svg"
    label = "SVG"
    description = "SVG files from one or many paths, with inline content."

    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        icons: dict[str, IconMetadata] = {}
        for file in self.find_files(pack):
            data = {}
            if file.path is not None:
                content = self.extract_svg(file.path)
                if content is None:
                    continue
                data["content"] = content
            self.add_icon(
                icons, pack, file.icon_id, source=file.source, group=file.group, data=data
            )
        return icons

    def extract_svg(self, path: Path) -> str | None:
        """Return the markup inside the root ``<svg>`` element.

        Returns:
            Inner markup, or None if the file is not valid XML
        """
        try:
            root = ET.fromstring(path.read_text())
        except (ET.ParseError, OSError, UnicodeDecodeError) as e:
            self.logger.error("svg_parse_failed", path=str(path), error=str(e))
            return None
        for element in root.iter():
            element.tag = _local_name(element.tag)
            for key in [k for k in element.attrib if k.startswith("{")]:
                element.set(_prefixed_name(key), element.attrib.pop(key))
        return "".join(ET.tostring(child, encoding="unicode") for child in root).strip()


class SvgSpriteExtractor(PathExtractor):
    """Open SVG sprite files and emit one icon per ``<symbol>``."""

    extractor_id = "svg_sprite"
    label = "SVG Sprite"
    description = "Open an SVG XML file and get the icons."

    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        icons: dict[str, IconMetadata] = {}
        for file in self.find_files(pack):
            if file.path is None:
                continue
            for symbol_id in self.extract_symbol_ids(file.path):
                self.add_icon(icons, pack, symbol_id, source=file.source, group=file.group)
        return icons

    def extract_symbol_ids(self, path: Path) -> list[str]:
        try:
            root = ET.fromstring(path.read_text())
        except (ET.ParseError, OSError, UnicodeDecodeError) as e:
            self.logger.error("svg_sprite_parse_failed", path=str(path), error=str(e))
            return []

        ids = []
        for element in root.iter():
            # Tags look like "{http://www.w3.org/2000/svg}symbol" when namespaced.
            if _local_name(element.tag) == "symbol" and element.get("id"):
                ids.append(element.get("id"))
        return ids


# Attribute prefixes HTML parsers understand inside inline SVG.
ATTRIBUTE_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
}


def _prefixed_name(key: str) -> str:
    """``{http://www.w3.org/1999/xlink}href`` -> ``xlink:href``; other namespaces are dropped."""
    namespace, _, local = key[1:].partition("}")
    prefix = ATTRIBUTE_PREFIXES.get(namespace)
    return f"{prefix}:{local}" if prefix else local


def _local_name(tag: str) -> str:
    """Tag name without its namespace, e.g. ``{http://www.w3.org/2000/svg}path`` -> ``path``."""
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else tag
