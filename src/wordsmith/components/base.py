from __future__ import annotations

from typing import Protocol

# Markup emitted for @break and between the cover and the content.
BREAK_PAGE_HTML = '<div style="page-break-after: always;"></div>'

class Component(Protocol):
    def compile(self, text: str) -> str:
        ...
