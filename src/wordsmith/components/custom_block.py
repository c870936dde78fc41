from __future__ import annotations

import re
from dataclasses import dataclass

from wordsmith.errors import InvalidComponentClosingTag
from wordsmith.logging import get_logger

log = get_logger()

BLOCK_KINDS = ("info", "warn", "danger", "quote")

# Groups: t = opening kind, c = content, e = raw closing tag.
# Non-greedy and not depth-aware, so blocks cannot be nested.
# A bare @end closes any kind.
_KINDS = "|".join(BLOCK_KINDS)
REG_TAG_BLOCK = re.compile(
    rf"@(?P<t>{_KINDS})(?P<c>.*?)(?P<e>@end(?:{_KINDS})?)",
    flags=re.DOTALL,
)

def _render(m: re.Match) -> str:
    return f'<blockquote class="{m.group("t")}-block">{m.group("c")}</blockquote>'

@dataclass(frozen=True)
class CustomBlock:
    """
    Turn `@info ... @endinfo` style blocks into styled blockquotes.

    Every match is validated before anything is replaced: one mismatched
    pair fails the whole text and no partial output is produced.
    Unterminated blocks do not match and pass through untouched.
    """

    def compile(self, text: str) -> str:
        log.info("custom_block: %r", REG_TAG_BLOCK.pattern)

        matches = list(REG_TAG_BLOCK.finditer(text))
        for m in matches:
            tag, end_tag = m.group("t"), m.group("e")
            log.debug("validating tag block: %s = %s?", tag, end_tag)
            if not end_tag.endswith(tag) and end_tag != "@end":
                raise InvalidComponentClosingTag(tag, end_tag)

        if not matches:
            return text
        return REG_TAG_BLOCK.sub(_render, text)
