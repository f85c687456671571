"""Article parsing: header/body separation, header decoding, content tree"""

from datetime import datetime

from mhcms.core.content import ArticleContent
from mhcms.core.decoders import HeaderSchema, string_map
from mhcms.core.errors import ArticleParseError, CustomHeaderDecodeError, SeparatorNotFound
from mhcms.core.headers import decode_headers, raw_headers_from_lines, separate_headers_and_content
from mhcms.core.models import Article


def get_article_contents(text: str) -> ArticleContent:
    """Return the body of an article as a depth-0 content node, skipping header decoding."""
    return ArticleContent(separate_headers_and_content(text).body_lines)


def parse_article(
    text: str,
    date: datetime,
    short_title: str,
    path: str,
    custom_headers: HeaderSchema = string_map,
    ) -> Article:
    """Parse one article document into typed headers and a lazy content tree.

    Raises ArticleParseError wrapping the first failure (missing separator or
    rejected custom headers).
    """
    try:
        separated = separate_headers_and_content(text)
    except SeparatorNotFound as e:
        raise ArticleParseError("Unable to separate headers and contents", path) from e

    raw = raw_headers_from_lines(separated.header_lines)
    try:
        headers = decode_headers(raw, date, short_title, path, custom_headers)
    except CustomHeaderDecodeError as e:
        raise ArticleParseError("Got errors when parsing headers", path) from e

    return Article(headers=headers, contents=ArticleContent(separated.body_lines))
