"""CLI command implementations"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from mhcms.config import Settings, load_config
from mhcms.core.content import ArticleContent
from mhcms.core.errors import ParseError
from mhcms.core.export import article_to_dict
from mhcms.core.models import Article, QuoteParagraph, TextParagraph
from mhcms.core.parse import parse_article
from mhcms.core.text_block import parse_text_block


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load(path: Path, day: Optional[str], short_title: Optional[str]) -> Article:
    """Read and parse one article file; date defaults to today, short title to the file stem."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Unable to read {path}", e)
    try:
        when = datetime.fromisoformat(day) if day else datetime.combine(date.today(), datetime.min.time())
    except ValueError as e:
        _fail(f"Invalid --date {day!r}", e)
    try:
        return parse_article(text, when, short_title or path.stem, str(path))
    except ParseError as e:
        _fail(e.pretty())


def _outline(content: ArticleContent, max_depth: int) -> list[str]:
    """Return heading lines indented two spaces per level."""
    lines = []
    if content.depth >= max_depth:
        return lines
    for section in content.sections():
        if section.heading is not None:
            lines.append("  " * content.depth + section.heading)
        lines.extend(_outline(section.content, max_depth))
    return lines


PathArg = Annotated[Path, typer.Argument(help="Article file to read")]
DateOpt = Annotated[Optional[str], typer.Option("--date", help="Article date (YYYY-MM-DD); defaults to today")]
TitleOpt = Annotated[Optional[str], typer.Option("--short-title", help="Short title; defaults to the file stem")]


def parse_cmd(
    path: PathArg,
    day: DateOpt = None,
    short_title: TitleOpt = None,
    depth: Annotated[Optional[int], typer.Option("--max-depth", help="Deepest section level to expand")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indentation")] = None,
    ):
    """Parse an article and print headers plus the section tree as JSON."""
    settings = _settings(overrides={"max_depth": depth, "indent": indent})
    article = _load(path, day, short_title)
    data = article_to_dict(article, settings.max_depth, settings.decoder_overrides())
    typer.echo(json.dumps(data, indent=settings.indent or None, ensure_ascii=False))


def outline_cmd(
    path: PathArg,
    depth: Annotated[Optional[int], typer.Option("--max-depth", help="Deepest section level to list")] = None,
    ):
    """Print the heading tree of an article."""
    settings = _settings(overrides={"max_depth": depth})
    article = _load(path, None, None)
    for line in _outline(article.contents, settings.max_depth):
        typer.echo(line)


def render_cmd(path: PathArg):
    """Expand inline commands and tag shorthands in the text and quote paragraphs of an article."""
    _settings()
    article = _load(path, None, None)
    blocks = []
    for paragraph in article.contents.paragraphs():
        if isinstance(paragraph, (TextParagraph, QuoteParagraph)):
            blocks.append(parse_text_block(paragraph.content))
    typer.echo("\n\n".join(blocks))
