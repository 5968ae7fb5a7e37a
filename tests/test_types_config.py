"""Tests for iconpacks.config.types."""

from pathlib import Path

import pytest

from iconpacks.config.types import IconPackDefinition, PackSetting, PacksConfig
from iconpacks.errors import ConfigError


class TestPackSetting:
    """Test PackSetting dataclass."""

    def test_from_dict(self):
        """Test creating a setting from a dict."""
        setting = PackSetting.from_dict("size", {"title": "Size", "type": "integer", "default": 32})
        assert setting.title == "Size"
        assert setting.type == "integer"
        assert setting.default == 32

    def test_defaults(self):
        """Test defaults for a minimal setting."""
        setting = PackSetting.from_dict("stroke_width", {})
        assert setting.title == "Stroke Width"
        assert setting.type == "string"
        assert setting.default is None


class TestIconPackDefinition:
    """Test IconPackDefinition dataclass."""

    def test_from_dict(self):
        """Test creating a definition with all fields."""
        pack = IconPackDefinition.from_dict(
            "my_icons",
            {
                "label": "My icons",
                "description": "Icons",
                "extractor": "svg",
                "template": "<svg>{{ content }}</svg>",
                "config": {"sources": ["icons/{icon_id}.svg"]},
                "enabled": False,
                "version": 1.2,
                "license": {"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
                "links": ["https://example.com"],
                "settings": {"size": {"default": 24}},
                "preview": "<b>{{ icon_id }}</b>",
                "library": "theme/icons",
            },
        )
        assert pack.pack_id == "my_icons"
        assert pack.label == "My icons"
        assert pack.extractor_type == "svg"
        assert pack.enabled is False
        assert pack.version == "1.2"
        assert pack.license == "MIT"
        assert pack.license_url == "https://opensource.org/licenses/MIT"
        assert pack.links == ("https://example.com",)
        assert pack.settings["size"].default == 24
        assert pack.library == "theme/icons"

    def test_extractor_type_key(self):
        """Test that extractor_type is accepted as well as extractor."""
        pack = IconPackDefinition.from_dict("p", {"extractor_type": "path", "template": "t"})
        assert pack.extractor_type == "path"

    def test_default_label(self):
        """Test label derived from the pack id."""
        pack = IconPackDefinition.from_dict("material_symbols", {})
        assert pack.label == "Material Symbols"
        assert pack.enabled is True

    def test_relative_base_path(self, temp_dir):
        """Test base_path resolved against the config folder."""
        pack = IconPackDefinition.from_dict("p", {"base_path": "assets"}, base_path=temp_dir)
        assert pack.base_path == temp_dir / "assets"

    def test_setting_defaults(self):
        """Test collecting setting defaults."""
        pack = IconPackDefinition.from_dict(
            "p", {"settings": {"size": {"default": 24}, "title": {"type": "string"}}}
        )
        assert pack.setting_defaults() == {"size": 24}

    def test_validate_ok(self, make_pack):
        """Test a valid definition passes validation."""
        make_pack("demo_2").validate()

    @pytest.mark.parametrize("pack_id", ["Demo", "my-pack", "a:b", ""])
    def test_validate_bad_id(self, make_pack, pack_id):
        """Test ids must be lowercase letters, numbers and underscores."""
        with pytest.raises(ConfigError, match="Invalid icon pack id"):
            make_pack(pack_id).validate()

    def test_validate_missing_template(self, make_pack):
        """Test a pack without template is rejected."""
        with pytest.raises(ConfigError, match="template"):
            make_pack(template="").validate()

    def test_validate_missing_extractor(self, make_pack):
        """Test a pack without extractor is rejected."""
        with pytest.raises(ConfigError, match="extractor"):
            make_pack(extractor="").validate()


class TestPacksConfig:
    """Test PacksConfig loading."""

    def test_from_dict_with_packs_key(self):
        """Test loading from a packs: mapping."""
        config = PacksConfig.from_dict(
            {"packs": {"a": {"extractor": "svg"}, "b": {"extractor": "path"}}}
        )
        assert list(config.packs) == ["a", "b"]

    def test_from_dict_bare_mapping(self):
        """Test loading from a bare mapping of packs."""
        config = PacksConfig.from_dict({"a": {"extractor": "svg"}})
        assert config.packs["a"].extractor_type == "svg"

    def test_from_dict_rejects_non_mapping(self):
        """Test that a pack must be a mapping."""
        with pytest.raises(ConfigError):
            PacksConfig.from_dict({"packs": {"a": "svg"}})

    def test_from_yaml(self, temp_dir):
        """Test loading from a YAML file."""
        path = temp_dir / "packs.yaml"
        path.write_text(
            "packs:\n"
            "  demo:\n"
            "    extractor: svg\n"
            "    template: '<img src=\"{{ source }}\">'\n"
            "    config:\n"
            "      sources:\n"
            "        - 'icons/{icon_id}.svg'\n"
        )
        config = PacksConfig.from_yaml(path)
        pack = config.packs["demo"]
        assert pack.base_path == temp_dir.resolve()
        assert pack.config == {"sources": ["icons/{icon_id}.svg"]}

    def test_from_yaml_empty(self, temp_dir):
        """Test loading an empty file."""
        path = temp_dir / "packs.yaml"
        path.write_text("")
        assert PacksConfig.from_yaml(path).packs == {}

    def test_from_yaml_invalid(self, temp_dir):
        """Test invalid YAML raises ConfigError."""
        path = temp_dir / "packs.yaml"
        path.write_text("packs: [unclosed")
        with pytest.raises(ConfigError):
            PacksConfig.from_yaml(path)

    def test_default(self):
        """Test packaged defaults include the builtin pack."""
        config = PacksConfig.default()
        assert "builtin" in config.packs
        assert config.packs["builtin"].base_path is not None
        assert [p.pack_id for p in config.get_enabled_packs()] == ["builtin"]


class TestMalformedConfig:
    """Test configuration with the wrong shape raises ConfigError."""

    def test_top_level_list(self, temp_dir):
        """Test a YAML file whose top level is a list."""
        path = temp_dir / "packs.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            PacksConfig.from_yaml(path)

    def test_packs_list(self):
        """Test packs: given as a list."""
        with pytest.raises(ConfigError, match="packs"):
            PacksConfig.from_dict({"packs": ["demo"]})

    def test_settings_list(self):
        """Test settings: given as a list names the pack."""
        with pytest.raises(ConfigError, match="demo"):
            PacksConfig.from_dict(
                {"packs": {"demo": {"extractor": "svg", "template": "t", "settings": ["size"]}}}
            )

    def test_setting_scalar(self):
        """Test a setting that is not a mapping names the setting."""
        with pytest.raises(ConfigError, match="size"):
            IconPackDefinition.from_dict("demo", {"settings": {"size": 24}})

    def test_config_list(self):
        """Test config: given as a list."""
        with pytest.raises(ConfigError, match="config"):
            IconPackDefinition.from_dict("demo", {"config": ["icons/{icon_id}.svg"]})

    def test_empty_setting_allowed(self):
        """Test a setting declared without options."""
        pack = IconPackDefinition.from_dict("demo", {"settings": {"size": None}})
        assert pack.settings["size"].default is None
