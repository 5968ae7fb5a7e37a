"""Configuration types for icon packs.

An icon pack is declared in YAML:

```yaml
packs:
  my_icons:
    label: My icons
    description: UI icons used everywhere.
    extractor: svg
    config:
      sources:
        - icons/{icon_id}.svg
        - icons_grouped/{group}/{icon_id}.svg
    settings:
      size:
        title: Size
        type: integer
        default: 32
    template: <img src="{{ source }}" width="{{ size }}" height="{{ size }}">
    library: my_theme/icons
```
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from iconpacks.errors import ConfigError

PACK_ID_PATTERN = re.compile(r"^[a-z0-9_]+$")


@dataclass(frozen=True)
class PackSetting:
    """A user-facing setting a pack template understands."""

    name: str
    title: str = ""
    type: str = "string"
    description: str = ""
    default: Any = None

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "PackSetting":
        return cls(
            name=name,
            title=data.get("title", name.replace("_", " ").title()),
            type=data.get("type", "string"),
            description=data.get("description", ""),
            default=data.get("default"),
        )


@dataclass(frozen=True)
class IconPackDefinition:
    """A named source of icons sharing one extractor and configuration."""

    pack_id: str
    extractor_type: str
    template: str
    label: str = ""
    description: str = ""
    config: dict[str, Any] = field(default_factory=dict)
    enabled: bool = True
    version: Optional[str] = None
    license: Optional[str] = None
    license_url: Optional[str] = None
    links: tuple[str, ...] = ()
    settings: dict[str, PackSetting] = field(default_factory=dict)
    preview: Optional[str] = None
    library: Optional[str] = None
    base_path: Optional[Path] = None

    @classmethod
    def from_dict(
        cls, pack_id: str, data: dict, base_path: Optional[Path] = None
    ) -> "IconPackDefinition":
        """Create from a parsed YAML mapping.

        ``extractor`` and ``extractor_type`` are both accepted. A relative
        ``base_path`` in the data is resolved against the given base path.
        """
        raw_settings = data.get("settings") or {}
        if not isinstance(raw_settings, dict):
            raise ConfigError(f"`settings` in icon pack {pack_id} must be a mapping")
        settings = {}
        for name, s_data in raw_settings.items():
            if not isinstance(s_data or {}, dict):
                raise ConfigError(
                    f"Setting `{name}` in icon pack {pack_id} must be a mapping"
                )
            settings[name] = PackSetting.from_dict(name, s_data or {})

        config = data.get("config") or {}
        if not isinstance(config, dict):
            raise ConfigError(f"`config` in icon pack {pack_id} must be a mapping")

        license_value = data.get("license")
        license_url = data.get("license_url")
        if isinstance(license_value, dict):
            license_url = license_url or license_value.get("url")
            license_value = license_value.get("name")

        path_value = data.get("base_path")
        if path_value:
            path = Path(path_value).expanduser()
            if not path.is_absolute() and base_path is not None:
                path = base_path / path
            base_path = path

        version = data.get("version")
        return cls(
            pack_id=pack_id,
            extractor_type=data.get("extractor_type") or data.get("extractor") or "",
            template=data.get("template") or "",
            label=data.get("label") or pack_id.replace("_", " ").title(),
            description=data.get("description", ""),
            config=dict(config),
            enabled=data.get("enabled", True),
            version=str(version) if version is not None else None,
            license=license_value,
            license_url=license_url,
            links=tuple(data.get("links") or ()),
            settings=settings,
            preview=data.get("preview"),
            library=data.get("library"),
            base_path=base_path,
        )

    def validate(self) -> None:
        """Check the pack-level fields every extractor relies on.

        Raises:
            ConfigError: If the id, template or extractor is invalid.
        """
        if not PACK_ID_PATTERN.match(self.pack_id or ""):
            raise ConfigError(
                f"Invalid icon pack id {self.pack_id!r}: must contain only "
                "lowercase letters, numbers, and underscores"
            )
        if not self.template:
            raise ConfigError(f"Missing `template` in icon pack {self.pack_id}")
        if not self.extractor_type:
            raise ConfigError(f"Missing `extractor` in icon pack {self.pack_id}")

    def setting_defaults(self) -> dict[str, Any]:
        """Default values declared in ``settings``, used as template context."""
        return {
            name: setting.default
            for name, setting in self.settings.items()
            if setting.default is not None
        }


@dataclass
class PacksConfig:
    """All icon packs declared in one configuration file."""

    packs: dict[str, IconPackDefinition] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict, base_path: Optional[Path] = None) -> "PacksConfig":
        """Create from dictionary (parsed YAML).

        Accepts either ``{"packs": {...}}`` or a bare mapping of packs.
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Icon packs configuration must be a mapping")
        raw_packs = data.get("packs", data) or {}
        if not isinstance(raw_packs, dict):
            raise ConfigError("`packs` must be a mapping of pack id to definition")
        packs = {}
        for pack_id, p_data in raw_packs.items():
            if not isinstance(p_data, dict):
                raise ConfigError(f"Icon pack {pack_id} must be a mapping")
            packs[pack_id] = IconPackDefinition.from_dict(pack_id, p_data, base_path)
        return cls(packs=packs)

    @classmethod
    def from_yaml(cls, path: Path) -> "PacksConfig":
        """Load from YAML file; relative sources resolve against its folder."""
        path = Path(path).expanduser()
        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        return cls.from_dict(data, base_path=path.parent.resolve())

    @classmethod
    def default(cls) -> "PacksConfig":
        """Load the packaged default configuration.

        Single source of truth: iconpacks/config/defaults/packs.yaml
        """
        from iconpacks.resources import get_default_packs_yaml, get_static_dir
        data = yaml.safe_load(get_default_packs_yaml()) or {}
        return cls.from_dict(data, base_path=get_static_dir())

    def get_enabled_packs(self) -> list[IconPackDefinition]:
        return [p for p in self.packs.values() if p.enabled]
