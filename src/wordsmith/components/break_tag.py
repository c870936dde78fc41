from __future__ import annotations

from dataclasses import dataclass

from wordsmith.components.base import BREAK_PAGE_HTML
from wordsmith.logging import get_logger

log = get_logger()

BREAK_TAG = "@break"

@dataclass(frozen=True)
class BreakTag:
    def compile(self, text: str) -> str:
        log.info("break_tag: %r", BREAK_TAG)
        return text.replace(BREAK_TAG, BREAK_PAGE_HTML)
