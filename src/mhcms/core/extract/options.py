"""Fenced code block info-string grammar: {lang key=value key='quoted' flag !flag}"""

import re
from typing import Optional

from mhcms.core.models import CodeBlockParagraph, OptionValue


# A quoted-value token is matched as one unit before any '=' splitting happens.
OPTION_TOKEN_RE = re.compile(
    r"""(?P<key>[^\s=]+)=(?P<quote>["'])(?P<quoted>.*?)(?P=quote)(?=\s|$)"""
    r"""|(?P<bare>\S+)"""
)
NUMBER_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')

TRUE_WORDS = {"true", "yes"}
FALSE_WORDS = {"false", "no"}


def coerce_scalar(value: str) -> OptionValue:
    """Coerce an unquoted option value to bool, int, float, or str (matching quotes stripped)."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    lowered = value.lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    if NUMBER_RE.match(value):
        if value.lstrip("+-").isdigit():
            return int(value)
        return float(value)
    return value


def _option_tokens(text: str) -> list[tuple[str, Optional[str], bool]]:
    """Tokenize option text into (head, value, quoted); value is None for bare tokens."""
    tokens = []
    for m in OPTION_TOKEN_RE.finditer(text):
        if m.group("key") is not None:
            tokens.append((m.group("key"), m.group("quoted"), True))
        else:
            head, sep, value = m.group("bare").partition("=")
            tokens.append((head, value if sep else None, False))
    return tokens


def parse_info_string(info: str) -> tuple[Optional[str], dict[str, OptionValue]]:
    """Parse a fence info-string into (language, options).

    ''                   -> (None, {})
    'python'             -> ('python', {})
    '{r name=x !eval}'   -> ('r', {'name': 'x', 'eval': False})
    A braced string without a usable language name is returned whole as the language.
    """
    info = info.strip()
    if not info:
        return None, {}
    if not (info.startswith("{") and info.endswith("}")):
        return info.split()[0], {}

    tokens = _option_tokens(info[1:-1])
    if not tokens:
        return info, {}
    language, value, _ = tokens[0]
    if value is not None or language.startswith("!"):
        return info, {}

    options: dict[str, OptionValue] = {}
    for head, value, quoted in tokens[1:]:
        if value is not None:
            options[head] = value if quoted else coerce_scalar(value)
        elif head.startswith("!"):
            if head[1:]:
                options[head[1:]] = False
        else:
            options[head] = True
    return language, options


def parse_code_block_paragraph(lines: list[str]) -> CodeBlockParagraph:
    """Parse fence-delimited lines (opening fence, body, closing fence) into a CodeBlockParagraph."""
    info = lines[0].lstrip().lstrip("`") if lines else ""
    language, options = parse_info_string(info)
    return CodeBlockParagraph(
        language=language,
        content="\n".join(lines[1:-1]),
        options=options,
    )
