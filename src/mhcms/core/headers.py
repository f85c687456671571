"""Header block extraction, key normalization and typed header decoding"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime

from mhcms.core.decoders import HeaderSchema, string_map
from mhcms.core.errors import CustomHeaderDecodeError, SeparatorNotFound
from mhcms.core.models import ArticleHeaders


logger = logging.getLogger(__name__)

SEPARATOR = "---"
HEADER_LINE_RE = re.compile(r'^(\w[\w\d_-]+[\w\d]):(.*)$')
_SEPARATOR_CHAR_RE = re.compile(r'[-_](.)')

# Raw keys that map onto ArticleHeaders fields and never reach the custom schema.
STANDARD_HEADER_KEYS = frozenset(
    {"date", "shortTitle", "path", "title", "subTitle", "tags", "authors", "customHeaders"}
)
# Values supplied at parse time; a header line with one of these keys is ignored.
PARSE_TIME_KEYS = frozenset({"date", "shortTitle", "path", "customHeaders"})


@dataclass(frozen=True)
class SeparatedText:
    """Header lines, the separator line itself, and body lines of one document."""
    header_lines: list[str]
    separator:    str
    body_lines:   list[str]

    def reassemble(self) -> str:
        """Rebuild the original document text."""
        return "\n".join([*self.header_lines, self.separator, *self.body_lines])


def separate_headers_and_content(text: str) -> SeparatedText:
    """Split text at the first line whose trimmed form starts with '---'."""
    lines = text.split("\n")
    for i, line in enumerate(lines):
        if line.strip().startswith(SEPARATOR):
            return SeparatedText(header_lines=lines[:i], separator=line, body_lines=lines[i + 1:])
    raise SeparatorNotFound("No header separator line ('---') found")


def camel_case_key(key: str) -> str:
    """Normalize a kebab-case or snake_case header key to camelCase ('Sub-Title' -> 'subTitle')."""
    return _SEPARATOR_CHAR_RE.sub(lambda m: m.group(1).upper(), key.lower())


def raw_headers_from_lines(lines: list[str]) -> dict[str, str]:
    """Map 'Key: value' lines to a {camelKey: value} dict; unrecognized lines are dropped."""
    headers: dict[str, str] = {}
    for line in lines:
        if not line.strip():
            continue
        m = HEADER_LINE_RE.match(line.rstrip())
        if not m:
            logger.warning("Unable to parse header line: %r", line)
            continue
        headers[camel_case_key(m.group(1).strip())] = m.group(2).strip()
    return headers


def _split_list(value: str | None) -> list[str]:
    """Split a comma-separated header value, dropping empty entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def decode_headers(
    raw: dict[str, str],
    date: datetime,
    short_title: str,
    path: str,
    custom_headers: HeaderSchema = string_map,
    ) -> ArticleHeaders:
    """Build ArticleHeaders from a raw header map plus parse-time metadata.

    Keys outside STANDARD_HEADER_KEYS are collected, in order, and passed to
    `custom_headers`; any error it raises becomes a CustomHeaderDecodeError.
    """
    for key in PARSE_TIME_KEYS & raw.keys():
        logger.debug("Header %r ignored; value is supplied at parse time", key)

    residual = {k: v for k, v in raw.items() if k not in STANDARD_HEADER_KEYS}
    try:
        decoded = custom_headers(residual)
    except CustomHeaderDecodeError:
        raise
    except (ValueError, TypeError, KeyError) as e:
        raise CustomHeaderDecodeError(f"Unable to parse custom headers: {residual}", residual) from e

    return ArticleHeaders(
        date=date,
        short_title=short_title,
        path=path,
        title=raw.get("title"),
        sub_title=raw.get("subTitle"),
        tags=_split_list(raw.get("tags")),
        authors=_split_list(raw.get("authors")),
        custom_headers=decoded,
    )
