"""Locate icon files from source patterns.

A source is a path pattern relative to the pack's base path, an absolute
path pattern, or an http(s) URL. Patterns may contain:

- {icon_id}: part of the file name that becomes the icon id
- {group}: one directory level whose name becomes the icon group
- * and ** globs

Examples:
    icons/{icon_id}.svg
    icons/{group}/{icon_id}.svg
    assets/**/*.png
"""

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

import structlog

logger = structlog.get_logger(__name__)

ICON_ID_PATTERN = "{icon_id}"
GROUP_PATTERN = "{group}"
_WILDCARD_CHARS = ("*", "?", "[", "{")


@dataclass(frozen=True)
class FoundFile:
    """A file matched by a source pattern."""

    icon_id: str
    source: str  # Path relative to the base path, absolute path, or URL
    path: Optional[Path]  # Local file to read; None for URLs
    group: str = ""


def sanitize_icon_id(name: str) -> str:
    """Collapse every run of non-alphanumeric characters into ``-``."""
    return re.sub(r"[^A-Za-z0-9]+", "-", name).strip("-")


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


class IconFinder:
    """Find icon files matching source patterns."""

    def __init__(self, base_path: Optional[Path] = None):
        """Initialize finder.

        Args:
            base_path: Directory relative patterns resolve against.
                Defaults to the current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def find(self, sources: list[str]) -> list[FoundFile]:
        """Find files for all sources, in source order."""
        found = []
        for source in sources:
            found.extend(self.find_source(source))
        return found

    def find_source(self, source: str) -> list[FoundFile]:
        if is_url(source):
            return self._from_url(source)
        return self._from_local_pattern(source)

    def _from_url(self, source: str) -> list[FoundFile]:
        icon_id = sanitize_icon_id(PurePosixPath(urlparse(source).path).stem)
        if not icon_id:
            return []
        return [FoundFile(icon_id=icon_id, source=source, path=None)]

    def _from_local_pattern(self, source: str) -> list[FoundFile]:
        pattern = Path(source).expanduser()
        if not pattern.is_absolute():
            pattern = self.base_path / pattern

        # Split into a literal root and the wildcard remainder to glob.
        parts = pattern.parts
        split = len(parts) - 1
        for i, part in enumerate(parts):
            if any(c in part for c in _WILDCARD_CHARS):
                split = i
                break
        root = Path(*parts[:split])
        remainder = "/".join(parts[split:])

        if not root.is_dir():
            logger.debug("icon_source_missing", source=source, root=str(root))
            return []

        glob = remainder.replace(GROUP_PATTERN, "*").replace(ICON_ID_PATTERN, "*")
        matcher = _compile_matcher(remainder)

        found = []
        for path in sorted(root.glob(glob)):
            if not path.is_file():
                continue
            relative = path.relative_to(root).as_posix()
            match = matcher.fullmatch(relative)
            if not match:
                continue
            groups = match.groupdict()
            icon_id = sanitize_icon_id(groups.get("icon_id") or path.stem)
            if not icon_id:
                continue
            found.append(
                FoundFile(
                    icon_id=icon_id,
                    source=self._source_for(path),
                    path=path,
                    group=groups.get("group") or "",
                )
            )
        return found

    def _source_for(self, path: Path) -> str:
        try:
            return path.relative_to(self.base_path).as_posix()
        except ValueError:
            return path.as_posix()


def _compile_matcher(remainder: str) -> re.Pattern:
    """Regex matching a path relative to the glob root.

    {icon_id} and {group} become named groups; globs become wildcards.
    """
    regex = ""
    i = 0
    while i < len(remainder):
        if remainder.startswith(ICON_ID_PATTERN, i):
            regex += "(?P<icon_id>[^/]+?)" if "icon_id" not in regex else "[^/]+?"
            i += len(ICON_ID_PATTERN)
        elif remainder.startswith(GROUP_PATTERN, i):
            regex += "(?P<group>[^/]+)" if "?P<group>" not in regex else "[^/]+"
            i += len(GROUP_PATTERN)
        elif remainder.startswith("**/", i):
            regex += "(?:.*/)?"
            i += 3
        elif remainder.startswith("**", i):
            regex += ".*"
            i += 2
        elif remainder[i] == "*":
            regex += "[^/]*"
            i += 1
        elif remainder[i] == "?":
            regex += "[^/]"
            i += 1
        else:
            regex += re.escape(remainder[i])
            i += 1
    return re.compile(regex)
