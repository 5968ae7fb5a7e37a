"""Exceptions raised by the icon pack discovery and resolution layer."""


class IconPackError(Exception):
    """Base class for all iconpacks errors."""


class MalformedIdentifierError(IconPackError, ValueError):
    """Raised when a reference does not look like ``pack_id:icon_id``."""


class IconNotFoundError(IconPackError, LookupError):
    """Raised when a pack or an icon inside a pack cannot be found.

    Unknown packs and unknown icons raise the same error on purpose, so
    callers cannot probe which packs exist.
    """


class PackNotFoundError(IconNotFoundError):
    """Raised by the registry when no pack has the requested id."""


class ConfigError(IconPackError):
    """Raised when a pack definition misses a value its extractor needs."""


class DuplicatePackError(ConfigError):
    """Raised by a strict registry when a pack id is registered twice."""


class InvalidIconError(IconPackError):
    """Raised when an extractor produces icon data that cannot be used."""
