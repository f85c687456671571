"""Data models for parsed articles: headers and classified paragraphs"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from mhcms.core.content import ArticleContent


OptionValue = Union[bool, int, float, str]


class ArticleHeaders(BaseModel):
    """Typed header record; serializes with the camelCase keys of the raw header block."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    date:           datetime                # caller-supplied, never reparsed
    short_title:    str
    path:           str
    title:          Optional[str] = None
    sub_title:      Optional[str] = None
    tags:           list[str] = Field(default_factory=list)
    authors:        list[str] = Field(default_factory=list)
    custom_headers: Any = Field(default_factory=dict)


class _Paragraph(BaseModel):
    model_config = ConfigDict(frozen=True)


class EmptyParagraph(_Paragraph):
    type: Literal["empty"] = "empty"


class TextParagraph(_Paragraph):
    type: Literal["text"] = "text"
    content: str


class QuoteParagraph(_Paragraph):
    type: Literal["quote"] = "quote"
    content: str
    author: Optional[str] = None


class CodeBlockParagraph(_Paragraph):
    type: Literal["code-block"] = "code-block"
    language: Optional[str] = None
    content: str
    options: dict[str, OptionValue] = Field(default_factory=dict)


class ObjectParagraph(_Paragraph):
    """A fenced block tagged for parsing whose content decoded to a structured value."""
    type: Literal["object"] = "object"
    content: Any
    options: dict[str, OptionValue] = Field(default_factory=dict)


Paragraph = Annotated[
    Union[EmptyParagraph, TextParagraph, QuoteParagraph, CodeBlockParagraph, ObjectParagraph],
    Field(discriminator="type"),
]


@dataclass(frozen=True)
class Article:
    """One parsed document: typed headers plus the root content node."""
    headers:  ArticleHeaders
    contents: "ArticleContent"
