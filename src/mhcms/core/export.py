"""Serialization of parsed articles to JSON-ready dicts"""

from typing import Any, Mapping, Optional

from mhcms.core.content import ArticleContent
from mhcms.core.decoders import ObjectDecoder
from mhcms.core.models import Article, ArticleHeaders, Paragraph


def headers_to_dict(headers: ArticleHeaders) -> dict[str, Any]:
    """Dump headers with camelCase keys and an ISO-8601 date."""
    return headers.model_dump(mode="json", by_alias=True)


def paragraph_to_dict(paragraph: Paragraph) -> dict[str, Any]:
    """Dump a paragraph with its type tag; unset language/author are omitted."""
    data = paragraph.model_dump(mode="json")
    return {k: v for k, v in data.items() if v is not None or k == "content"}


def content_to_dict(
    content: ArticleContent,
    max_depth: int = 6,
    extra_decoders: Optional[Mapping[str, Optional[ObjectDecoder]]] = None,
    ) -> dict[str, Any]:
    """Nest sections down to max_depth; a node without sub-headings lists its paragraphs."""
    sections = list(content.sections()) if content.depth < max_depth else []
    if not sections or (len(sections) == 1 and sections[0].heading is None):
        return {"paragraphs": [paragraph_to_dict(p) for p in content.paragraphs(extra_decoders)]}
    return {
        "sections": [
            {"heading": s.heading, **content_to_dict(s.content, max_depth, extra_decoders)}
            for s in sections
        ]
    }


def article_to_dict(
    article: Article,
    max_depth: int = 6,
    extra_decoders: Optional[Mapping[str, Optional[ObjectDecoder]]] = None,
    ) -> dict[str, Any]:
    """Dump headers plus the nested content tree."""
    return {
        "headers": headers_to_dict(article.headers),
        "contents": content_to_dict(article.contents, max_depth, extra_decoders),
    }
