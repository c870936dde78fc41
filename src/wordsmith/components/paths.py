from __future__ import annotations

from dataclasses import dataclass

from wordsmith.logging import get_logger

log = get_logger()

ASSETS_PATH_TAG = "@assets_path"
THEMES_PATH_TAG = "@themes_path"

@dataclass(frozen=True)
class PathTag:
    """
    Replace every occurrence of a literal marker with a directory path.

    The path is inserted verbatim. Characters that mean something in HTML
    (quotes, ampersands) are not escaped.
    """
    marker: str
    path: str

    def compile(self, text: str) -> str:
        log.info("compile %s: %r => %s", self.marker.lstrip("@"), self.marker, self.path)
        return text.replace(self.marker, self.path)

def assets_path(path: str) -> PathTag:
    return PathTag(ASSETS_PATH_TAG, path)

def themes_path(path: str) -> PathTag:
    return PathTag(THEMES_PATH_TAG, path)
