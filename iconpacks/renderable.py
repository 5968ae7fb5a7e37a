"""Turn resolved icons into markup-agnostic renderables."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional

from iconpacks.resources import DEFAULT_PREVIEW_TEMPLATE

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition
    from iconpacks.icon import IconMetadata


@dataclass
class ResolvedRenderable:
    """Template plus context, ready for a framework-specific renderer."""

    template: str
    context: dict[str, Any] = field(default_factory=dict)
    asset_ref: Optional[str] = None  # Stylesheet/script reference for the caller

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "template": self.template,
            "context": self.context,
            "asset_ref": self.asset_ref,
        }


class RenderableBuilder:
    """Builds renderables from icon metadata, pack and caller settings."""

    def base_context(self, icon: "IconMetadata", pack: "IconPackDefinition") -> dict[str, Any]:
        """Identifier fields every template can use."""
        return {
            "pack_id": icon.pack_id,
            "icon_id": icon.icon_id,
            "icon_full_id": icon.full_id,
            "source": icon.source,
            "group": icon.group,
            "label": icon.label,
            "pack_label": pack.label,
        }

    def build(
        self,
        icon: "IconMetadata",
        pack: "IconPackDefinition",
        settings: Optional[Mapping[str, Any]] = None,
    ) -> ResolvedRenderable:
        """Merge context and pick the template.

        Precedence, lowest to highest: identifier fields, pack setting
        defaults, extractor data, caller settings. Caller settings always
        win.
        """
        context = self.base_context(icon, pack)
        context.update(pack.setting_defaults())
        context.update(icon.data)
        context.update(settings or {})

        return ResolvedRenderable(
            template=icon.template or pack.template,
            context=context,
            asset_ref=pack.library,
        )

    def build_preview(
        self, icon: "IconMetadata", pack: "IconPackDefinition", size: int = 48
    ) -> ResolvedRenderable:
        """Small renderable for pickers and galleries."""
        context = {
            "label": icon.full_id,
            "icon_id": icon.icon_id,
            "pack_id": icon.pack_id,
            "extractor": pack.extractor_type,
            "source": icon.source,
            "content": icon.data.get("content"),
            "size": size,
        }
        return ResolvedRenderable(
            template=pack.preview or DEFAULT_PREVIEW_TEMPLATE,
            context=context,
            asset_ref=pack.library,
        )
