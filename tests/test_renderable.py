"""Tests for iconpacks.renderable."""

from iconpacks.icon import IconMetadata
from iconpacks.identifier import IconIdentifier
from iconpacks.renderable import RenderableBuilder, ResolvedRenderable
from iconpacks.resources import DEFAULT_PREVIEW_TEMPLATE


def make_icon(data=None, template=None) -> IconMetadata:
    """Helper to create test icons."""
    return IconMetadata(
        identifier=IconIdentifier("demo", "home"),
        group="nav",
        source="icons/home.svg",
        data=data or {},
        template=template,
    )


class TestRenderableBuilder:
    """Tests for RenderableBuilder."""

    def test_identifier_fields(self, make_pack):
        """Test identifier fields are in the context."""
        pack = make_pack(label="Demo icons")
        renderable = RenderableBuilder().build(make_icon(), pack, {})
        assert renderable.context["pack_id"] == "demo"
        assert renderable.context["icon_id"] == "home"
        assert renderable.context["icon_full_id"] == "demo:home"
        assert renderable.context["source"] == "icons/home.svg"
        assert renderable.context["group"] == "nav"
        assert renderable.context["label"] == "Home"
        assert renderable.context["pack_label"] == "Demo icons"

    def test_settings_override_data(self, make_pack):
        """Test caller settings win over extractor data."""
        renderable = RenderableBuilder().build(make_icon({"width": 10}), make_pack(), {"width": 20})
        assert renderable.context["width"] == 20

    def test_data_overrides_pack_defaults(self, make_pack):
        """Test extractor data wins over pack setting defaults."""
        pack = make_pack(settings={"size": {"default": 24}, "color": {"default": "red"}})
        renderable = RenderableBuilder().build(make_icon({"size": 16}), pack, None)
        assert renderable.context["size"] == 16
        assert renderable.context["color"] == "red"

    def test_settings_override_pack_defaults(self, make_pack):
        """Test caller settings win over pack defaults."""
        pack = make_pack(settings={"size": {"default": 24}})
        renderable = RenderableBuilder().build(make_icon(), pack, {"size": 48})
        assert renderable.context["size"] == 48

    def test_settings_override_identifier_fields(self, make_pack):
        """Test caller settings win over identifier fields too."""
        renderable = RenderableBuilder().build(make_icon(), make_pack(), {"label": "Go home"})
        assert renderable.context["label"] == "Go home"

    def test_pack_template(self, make_pack):
        """Test the pack template is used by default."""
        renderable = RenderableBuilder().build(make_icon(), make_pack(template="<img>"), {})
        assert renderable.template == "<img>"

    def test_icon_template_override(self, make_pack):
        """Test an extractor template overrides the pack template."""
        renderable = RenderableBuilder().build(make_icon(template="<i>"), make_pack(template="<img>"), {})
        assert renderable.template == "<i>"

    def test_asset_ref(self, make_pack):
        """Test the pack library is surfaced untouched."""
        renderable = RenderableBuilder().build(make_icon(), make_pack(library="theme/icons"), {})
        assert renderable.asset_ref == "theme/icons"
        assert RenderableBuilder().build(make_icon(), make_pack(), {}).asset_ref is None

    def test_settings_not_mutated(self, make_pack):
        """Test caller settings and icon data are left unchanged."""
        settings = {"width": 20}
        icon = make_icon({"width": 10})
        RenderableBuilder().build(icon, make_pack(), settings)
        assert settings == {"width": 20}
        assert icon.data == {"width": 10}

    def test_preview_default_template(self, make_pack):
        """Test preview falls back to the default template."""
        renderable = RenderableBuilder().build_preview(make_icon({"content": "<path/>"}), make_pack(), 32)
        assert renderable.template == DEFAULT_PREVIEW_TEMPLATE
        assert renderable.context["size"] == 32
        assert renderable.context["label"] == "demo:home"
        assert renderable.context["content"] == "<path/>"
        assert renderable.context["extractor"] == "svg"

    def test_preview_pack_template(self, make_pack):
        """Test preview uses the pack preview template."""
        renderable = RenderableBuilder().build_preview(make_icon(), make_pack(preview="<b>"))
        assert renderable.template == "<b>"
        assert renderable.context["size"] == 48


class TestResolvedRenderable:
    """Tests for ResolvedRenderable."""

    def test_to_dict(self):
        """Test conversion to the output contract."""
        renderable = ResolvedRenderable(template="<img>", context={"a": 1}, asset_ref="lib")
        assert renderable.to_dict() == {"template": "<img>", "context": {"a": 1}, "asset_ref": "lib"}
