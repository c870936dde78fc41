from __future__ import annotations

import re
from typing import Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

HEADER_ID_PREFIX = "header-id-"

def _header_id(title: str) -> str:
    s = re.sub(r"[^\w\s-]", "", title.strip().lower())
    s = re.sub(r"\s+", "-", s)
    return HEADER_ID_PREFIX + s

def _build_markdown_parser() -> MarkdownIt:
    # Raw HTML stays enabled: themes and custom blocks rely on it.
    md = MarkdownIt("commonmark", {"html": True, "linkify": True, "breaks": False})
    md.enable(["table", "strikethrough", "linkify"])
    md.use(footnote_plugin)
    md.use(tasklists_plugin)
    md.use(deflist_plugin)
    md.use(anchors_plugin, min_level=1, max_level=6, slug_func=_header_id)
    return md

_MD_PARSER: Optional[MarkdownIt] = None

def _get_markdown_parser() -> MarkdownIt:
    global _MD_PARSER
    if _MD_PARSER is None:
        _MD_PARSER = _build_markdown_parser()
    return _MD_PARSER

def md_to_html(markdown: str) -> str:
    return _get_markdown_parser().render(markdown)
