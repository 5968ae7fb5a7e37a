"""Icon pack configuration."""

from .types import IconPackDefinition, PackSetting, PacksConfig

__all__ = ["IconPackDefinition", "PackSetting", "PacksConfig"]
