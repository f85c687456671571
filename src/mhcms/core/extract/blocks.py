"""Paragraph segmentation and classification over body lines"""

import logging
import re
from typing import Iterator, Mapping, Optional, Sequence

from mhcms.core.decoders import DEFAULT_OBJECT_DECODERS, ObjectDecoder
from mhcms.core.extract.options import parse_code_block_paragraph
from mhcms.core.models import (
    CodeBlockParagraph,
    EmptyParagraph,
    ObjectParagraph,
    Paragraph,
    QuoteParagraph,
    TextParagraph,
)
from mhcms.core.utils.lines import has_content, is_blank, is_fence


logger = logging.getLogger(__name__)

PARSE_DIRECTIVE = "@parse"
QUOTE_MARKER_RE = re.compile(r'^\s*> ?')
ATTRIBUTION_RE = re.compile(r'^\s*-\s+(.*\S)\s*$')


def _decode_object(
    block: CodeBlockParagraph,
    decoders: Mapping[str, ObjectDecoder],
    ) -> Optional[ObjectParagraph]:
    """Decode a tagged code block with its language's decoder; None if not decodable."""
    decode = decoders.get(block.language) if block.language else None
    if decode is None:
        logger.debug("No object decoder registered for language %r", block.language)
        return None
    try:
        content = decode(block.content)
    except Exception as e:
        logger.debug("Object decode failed for language %r: %s", block.language, e)
        return None
    if content is None:
        return None
    options = {k: v for k, v in block.options.items() if k != PARSE_DIRECTIVE}
    return ObjectParagraph(content=content, options=options)


def _quote(lines: Sequence[str]) -> QuoteParagraph:
    """Strip quote markers and split a trailing '- Author' line off as the attribution."""
    stripped = [QUOTE_MARKER_RE.sub("", line, count=1) for line in lines]
    if len(stripped) > 1:
        m = ATTRIBUTION_RE.match(stripped[-1])
        if m:
            return QuoteParagraph(content="\n".join(stripped[:-1]), author=m.group(1))
    return QuoteParagraph(content="\n".join(stripped))


def post_process_paragraph_lines(
    lines: Sequence[str],
    object_decoders: Optional[Mapping[str, ObjectDecoder]] = None,
    ) -> Paragraph:
    """Classify one paragraph's lines.

    Precedence: empty, then fenced code block (turned into an object when
    tagged '@parse' and decodable), then quote when every line is quoted,
    then text.
    """
    if not has_content(lines):
        return EmptyParagraph()

    decoders = DEFAULT_OBJECT_DECODERS if object_decoders is None else object_decoders
    if len(lines) >= 2 and is_fence(lines[0]) and is_fence(lines[-1]):
        block = parse_code_block_paragraph(list(lines))
        if block.options.get(PARSE_DIRECTIVE):
            obj = _decode_object(block, decoders)
            if obj is not None:
                return obj
        return block

    if all(line.lstrip().startswith(">") for line in lines):
        return _quote(lines)

    return TextParagraph(content="\n".join(lines))


def iter_paragraphs(
    lines: Sequence[str],
    start: int = 0,
    end: Optional[int] = None,
    object_decoders: Optional[Mapping[str, ObjectDecoder]] = None,
    ) -> Iterator[Paragraph]:
    """Lazily yield classified paragraphs from lines[start:end].

    Blank lines end a paragraph unless inside a fence; a closing fence always
    ends the current paragraph.
    """
    end = len(lines) if end is None else end
    buffer: list[str] = []
    in_fence = False

    for i in range(start, end):
        line = lines[i]
        if is_blank(line):
            if in_fence:
                buffer.append(line)
            elif has_content(buffer):
                yield post_process_paragraph_lines(buffer, object_decoders)
                buffer = []
        elif is_fence(line):
            buffer.append(line)
            if in_fence:
                yield post_process_paragraph_lines(buffer, object_decoders)
                buffer = []
            in_fence = not in_fence
        else:
            buffer.append(line)

    if buffer:
        yield post_process_paragraph_lines(buffer, object_decoders)
