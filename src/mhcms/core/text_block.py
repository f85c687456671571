"""Inline command and HTML-tag shorthand substitution for text blocks"""

import logging
import re
from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional


logger = logging.getLogger(__name__)

Command = Callable[[list[str]], str]

BUILTIN_COMMANDS: dict[str, Command] = {
    "year": lambda args: str(datetime.now().year),
}

DEFAULT_TAG_WHITELIST = (
    "kbd", "abbr", "b", "bdi", "bdo", "br", "code", "data", "time", "dfn", "em", "ti", "mark",
    "q", "rp", "rt", "rtc", "ruby", "s", "samp", "small", "span", "strong", "sub", "sup",
    "u", "var", "wbr", "del", "ins",
)

COMMAND_RE = re.compile(r'\[!(\w[\w\s-]*)\]')
# [tag content]; not an image alt text, not a link label followed by '(' or '['
TAG_RE = re.compile(r'(?<![!\]\\])\[(\w[\w-]*)(?:\s+([^\[\]]*))?\](?![(\[])')


def parse_text_block(
    text: str,
    commands: Optional[Mapping[str, Command]] = None,
    tag_whitelist: Iterable[str] = DEFAULT_TAG_WHITELIST,
    ) -> str:
    """Expand [!cmd args] commands, then [tag content] shorthands, in a single pass each."""
    available = {**BUILTIN_COMMANDS, **(commands or {})}
    allowed = frozenset(tag_whitelist)

    def run_command(m: re.Match) -> str:
        name, *args = m.group(1).split()
        if name not in available:
            logger.warning("Unknown command %r in %r", name, m.group(0))
            return m.group(0)
        return available[name](args)

    def expand_tag(m: re.Match) -> str:
        tag, content = m.group(1), m.group(2) or ""
        if tag not in allowed:
            logger.warning("Non-whitelisted HTML tag %r in %r", tag, m.group(0))
            return m.group(0)
        return f"<{tag}>{content}</{tag}>"

    expanded = COMMAND_RE.sub(run_command, text)
    return TAG_RE.sub(expand_tag, expanded)
