from __future__ import annotations

import html
from pathlib import Path
from typing import Callable, List, Tuple

from wordsmith.components.base import BREAK_PAGE_HTML
from wordsmith.config import DEFAULT_THEME, Config
from wordsmith.core.markdown import md_to_html
from wordsmith.errors import ThemeNotFound
from wordsmith.io.fs import iter_md_files, read_text_utf8, remove_file, reset_dir, write_text_utf8
from wordsmith.logging import get_logger
from wordsmith.pipeline.components import ComponentPipeline

log = get_logger()

HTML_FILE = "html.html"
BASE_HEAD_FILE = "__base-head.html"

def _mm(v: float) -> str:
    return f"{v:g}mm"

class DocumentAssembler:
    """
    Builds the single HTML document for a project:

        <project>/themes/<theme>.html        theme styles and markup
        <project>/themes/__base-head.html    shared head include
        <project>/assets/images/<cover>      cover image
        <project>/content/*.md               content, in filename order

    and writes it to <project>/output/html.html.
    """

    def __init__(
        self,
        config: Config,
        path: Path,
        theme: str = DEFAULT_THEME,
        converter: Callable[[str], str] = md_to_html,
    ):
        self.config = config
        self.path = path
        self.theme = theme
        self.converter = converter
        self.components = ComponentPipeline({
            "assets_path": str(path / "assets"),
            "themes_path": str(path / "themes"),
        })

    def get_output_path(self) -> Path:
        return self.path / "output"

    def get_output_file(self, name: str) -> Path:
        return self.get_output_path() / name

    def get_theme_file(self) -> Path:
        return self.path / "themes" / f"{self.theme}.html"

    def get_theme_html(self) -> str:
        theme_path = self.get_theme_file()
        if not theme_path.is_file():
            raise ThemeNotFound(str(theme_path))
        return read_text_utf8(theme_path)

    def get_theme_partial_file_html(self, name: str) -> str:
        return read_text_utf8(self.path / "themes" / name)

    def get_document_margin_style(self) -> str:
        doc_w, doc_h = self.config.document.dimensions.get_values()
        ml, mt, mr, mb = self.config.document.margins.get_values()
        return f"""
      <style>
        @page {{
          size: {_mm(doc_w)} {_mm(doc_h)};
        }}

        body {{
          padding-left: {_mm(ml)} !important;
          padding-right: {_mm(mr)} !important;
          padding-top: {_mm(mt)} !important;
          padding-bottom: {_mm(mb)} !important;
        }}

        h1 {{
          padding-top: {_mm(mt)} !important;
        }}
      </style>
    """

    def get_cover_html(self) -> str:
        """Cover image block, or the title as a heading when there is no image."""
        log.debug("Building cover")
        title = html.escape(self.config.title)
        cover = self.config.cover
        if cover is None:
            return f"<h1>{title}</h1>"

        image_src = self.path / "assets" / "images" / cover.filename
        if not image_src.is_file():
            log.warning("cover image not found, using title: %s", image_src)
            return f"<h1>{title}</h1>"

        w, h = cover.dimensions.get_values()
        return f"""
      <div style="width:{_mm(w)};height:{_mm(h)};" class="cover">
        <img src="{image_src}" style="width:{_mm(w)};height:{_mm(h)};" alt="{title}" />
      </div>
    """

    def get_content_html(self) -> str:
        """
        Convert every content/*.md file to HTML and join the fragments with a
        single space. Only @assets_path is resolved here; the remaining tags
        are compiled once over the whole document.
        """
        content: List[str] = []
        for p in iter_md_files(self.path / "content"):
            log.debug("Converting %s", p.name)
            raw = read_text_utf8(p)
            compiled = self.components.compile_tag_assets_path(raw)
            content.append(self.converter(compiled))
        return " ".join(content)

    def generate_html_file_content(self) -> str:
        log.debug("Generating HTML file content")
        parts = [
            '<!DOCTYPE html><head><meta charset="utf-8">',
            self.get_document_margin_style(),
            self.get_theme_partial_file_html(BASE_HEAD_FILE),
            self.get_theme_html(),
            "</head><body>",
            self.get_cover_html(),
            BREAK_PAGE_HTML,
            self.get_content_html(),
            "</body></html>",
        ]
        return self.components.compile_all("".join(parts))

    def build(self) -> Tuple[Path, str]:
        log.debug("Building doc with theme %s", self.theme)

        # checked before the output folder is touched
        if not self.get_theme_file().is_file():
            raise ThemeNotFound(str(self.get_theme_file()))

        reset_dir(self.get_output_path())

        html_file = self.get_output_file(HTML_FILE)
        content = self.generate_html_file_content()

        log.debug("Generating %s file", html_file)
        write_text_utf8(html_file, content)
        return html_file, content

    def clean_after_build(self) -> None:
        if remove_file(self.get_output_file(HTML_FILE)):
            log.debug("Generated HTML file removed")
