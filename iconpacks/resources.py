"""Resource loading utilities for iconpacks.

Uses importlib.resources for robust package data access that works
whether installed normally, editable, or bundled.
"""

import atexit
from contextlib import ExitStack
from functools import lru_cache
from importlib.resources import as_file, files
from pathlib import Path

# Preview template used when a pack does not declare its own ``preview``.
DEFAULT_PREVIEW_TEMPLATE = (
    '<img src="{{ source }}" title="{{ label }}" alt="{{ icon_id }}" '
    'width="{{ size }}" height="{{ size }}">'
)


@lru_cache
def get_default_config(name: str) -> str:
    """Load a default config file from iconpacks/config/defaults/.

    Args:
        name: Config filename (e.g., "packs.yaml")

    Returns:
        Config content as string
    """
    return files("iconpacks.config.defaults").joinpath(name).read_text()


def get_default_packs_yaml() -> str:
    """Get the default packs.yaml configuration."""
    return get_default_config("packs.yaml")


# Keeps a temporary extraction (zip imports) alive until interpreter exit.
_file_manager = ExitStack()
atexit.register(_file_manager.close)


@lru_cache(maxsize=1)
def get_static_dir() -> Path:
    """Directory holding the bundled icon files, valid for the process lifetime."""
    return Path(_file_manager.enter_context(as_file(files("iconpacks").joinpath("static"))))
