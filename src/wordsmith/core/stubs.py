from __future__ import annotations

from typing import Dict

WS_YAML = """\
# Wordsmith configuration file
title: "Sample"
authors:
  - Name <name@email.com>
document:
  dimensions: [210, 297] # mm
  margins:
    left: 20.0
    top: 20.0
    right: 20.0
    bottom: 20.0
cover:
  file: "cover.jpg"
  dimensions: [210, 297]
  position:
    left: 0.0
    top: 0.0
    right: 0.0
    bottom: 0.0
"""

INTRO_MD = """\
# Introduction

Write your content in `content/`. Files are joined in filename order.

@info
Info, warn, danger and quote blocks become styled quotes.
@endinfo

Images live in the assets folder: `![cover](@assets_path/images/cover.jpg)`.

@break

# Next page

Everything after a break starts on a new page.
"""

BASE_HEAD_HTML = """\
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>
  blockquote { margin: 1em 0; padding: 0.5em 1em; border-left: 4px solid; }
  .cover img { object-fit: cover; }
</style>
"""

_THEME_TEMPLATE = """\
<style>
  body {{ background: {bg}; color: {fg}; font-family: Georgia, serif; }}
  a {{ color: {link}; }}
  .info-block {{ border-color: #2f80ed; background: {info}; }}
  .warn-block {{ border-color: #f2c94c; background: {warn}; }}
  .danger-block {{ border-color: #eb5757; background: {danger}; }}
  .quote-block {{ border-color: {fg}; font-style: italic; }}
</style>
"""

LIGHT_THEME_HTML = _THEME_TEMPLATE.format(
    bg="#ffffff", fg="#222222", link="#2f80ed",
    info="#eaf2fd", warn="#fdf6e0", danger="#fdeaea",
)

DARK_THEME_HTML = _THEME_TEMPLATE.format(
    bg="#1e1e1e", fg="#e0e0e0", link="#56a0ff",
    info="#1c2a3a", warn="#3a331c", danger="#3a1c1c",
)

# relative path -> content
PROJECT_FILES: Dict[str, str] = {
    "ws.yaml": WS_YAML,
    "content/01-intro.md": INTRO_MD,
    "themes/__base-head.html": BASE_HEAD_HTML,
    "themes/light.html": LIGHT_THEME_HTML,
    "themes/dark.html": DARK_THEME_HTML,
    "assets/images/.gitkeep": "",
}
