"""BM25 search over discovered icons."""

import re

from rank_bm25 import BM25L

from iconpacks.icon import IconMetadata

SEARCH_MIN_LENGTH = 2
SEARCH_MAX_RESULT = 20


def _tokenize_text(text: str) -> list[str]:
    """Tokenize text for BM25 indexing.

    Splits on whitespace and id separators (-, _, :, /, .).
    """
    return [t for t in re.split(r"[\s\-_:/.]+", text.lower()) if t]


class IconSearcher:
    """BM25 search over icons, for pickers and autocomplete."""

    def __init__(self, icons: dict[str, IconMetadata] | list[IconMetadata]):
        """Initialize searcher with icons.

        Args:
            icons: Icons keyed by full id (as returned by list_icons), or a list
        """
        self.icons = list(icons.values()) if isinstance(icons, dict) else list(icons)
        self.by_id = {icon.full_id: icon for icon in self.icons}
        if self.icons:
            self.corpus = [self._tokenize(icon) for icon in self.icons]
            self.bm25 = BM25L(self.corpus)
        else:
            self.corpus = []
            self.bm25 = None

    def _tokenize(self, icon: IconMetadata) -> list[str]:
        """Indexes on: icon id, pack id, group, label."""
        text = f"{icon.icon_id} {icon.pack_id} {icon.group} {icon.label}"
        return _tokenize_text(text)

    def search(self, query: str, limit: int = SEARCH_MAX_RESULT) -> list[IconMetadata]:
        """Search icons by query.

        Args:
            query: Keywords, or an exact ``pack:icon`` id
            limit: Maximum results to return

        Returns:
            Matching icons, ranked by relevance
        """
        query = query.strip()
        if not self.icons or len(query) < SEARCH_MIN_LENGTH:
            return []

        if query in self.by_id:
            return [self.by_id[query]]

        tokens = _tokenize_text(query)
        if not tokens:
            return []

        # BM25L scores every document above zero, so require a shared token.
        wanted = set(tokens)
        scores = self.bm25.get_scores(tokens)
        ranked = sorted(
            zip(self.icons, self.corpus, scores), key=lambda x: -x[2]
        )
        results = [icon for icon, doc, _ in ranked if wanted.intersection(doc)][:limit]
        if results:
            return results

        # Fallback to partial matches on the icon id.
        partial = [
            icon for icon in self.icons
            if any(token in icon.icon_id.lower() for token in tokens)
        ]
        return partial[:limit]

    def filter_by_pack(self, pack_ids: list[str]) -> "IconSearcher":
        """Create a new searcher limited to some packs."""
        return IconSearcher([icon for icon in self.icons if icon.pack_id in pack_ids])
