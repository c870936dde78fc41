from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict

from playwright.sync_api import sync_playwright

from wordsmith.logging import get_logger

log = get_logger()

_CHROMIUM_ARGS = [
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-sandbox",
]

class PdfRenderer:
    """Print an HTML file to PDF with headless Chromium."""

    def __init__(self, playwright_factory: Callable[[], Any] = sync_playwright):
        self._playwright_factory = playwright_factory

    def get_print_options(self) -> Dict[str, Any]:
        # Page size and margins come from the document's own @page rule.
        return {
            "landscape": False,
            "display_header_footer": False,
            "print_background": True,
            "prefer_css_page_size": True,
            "margin": {"top": "0", "right": "0", "bottom": "0", "left": "0"},
        }

    def generate(self, html_file: Path, pdf_file: Path) -> Path:
        pdf_file.parent.mkdir(parents=True, exist_ok=True)
        log.debug("Rendering %s -> %s", html_file, pdf_file)

        with self._playwright_factory() as p:
            browser = p.chromium.launch(headless=True, args=_CHROMIUM_ARGS)
            try:
                page = browser.new_page()
                page.goto(html_file.resolve().as_uri())
                page.wait_for_load_state("networkidle")
                page.pdf(path=str(pdf_file), **self.get_print_options())
            finally:
                browser.close()
        return pdf_file
