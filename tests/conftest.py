"""Shared pytest fixtures for iconpacks tests."""

import tempfile
from pathlib import Path

import pytest

from iconpacks.config.types import IconPackDefinition

SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M1 1h22"/></svg>'


def build_pack(pack_id: str = "demo", extractor: str = "svg", **kwargs) -> IconPackDefinition:
    """Helper to create test pack definitions."""
    data = {
        "extractor": extractor,
        "template": kwargs.pop("template", '<img src="{{ source }}">'),
        "config": kwargs.pop("config", {"sources": ["icons/{icon_id}.svg"]}),
    }
    data.update(kwargs)
    base_path = data.pop("base_path", None)
    return IconPackDefinition.from_dict(pack_id, data, base_path=base_path)


@pytest.fixture
def make_pack():
    """Factory for pack definitions."""
    return build_pack


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def icon_dir(temp_dir):
    """Directory with a few SVG icons under icons/ and icons_grouped/."""
    icons = temp_dir / "icons"
    icons.mkdir()
    for name in ("home", "arrow_up", "user profile"):
        (icons / f"{name}.svg").write_text(SVG)
    (icons / "notes.txt").write_text("not an icon")

    for group, names in {"actions": ["edit", "delete"], "media": ["play"]}.items():
        group_dir = temp_dir / "icons_grouped" / group
        group_dir.mkdir(parents=True)
        for name in names:
            (group_dir / f"{name}.svg").write_text(SVG)
    return temp_dir


@pytest.fixture
def sprite_file(temp_dir):
    """SVG sprite with three symbols."""
    path = temp_dir / "sprite.svg"
    path.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<symbol id="star" viewBox="0 0 24 24"><path d="M0 0"/></symbol>'
        '<symbol id="heart" viewBox="0 0 24 24"><path d="M0 0"/></symbol>'
        '<defs><symbol id="nested"><path d="M0 0"/></symbol></defs>'
        "<g id=\"not-a-symbol\"/>"
        "</svg>"
    )
    return path
