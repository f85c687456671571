"""Read-only content nodes over a shared line arena"""

import re
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence

from mhcms.core.decoders import ObjectDecoder, object_decoders
from mhcms.core.extract.blocks import iter_paragraphs
from mhcms.core.extract.sections import iter_sections
from mhcms.core.models import Paragraph


_SHARP_PREFIX_RE = re.compile(r'^#+\s*')


class ArticleContent:
    """A contiguous slice of body lines at a given heading depth (0 at the document root).

    Children share the parent's line tuple and only record their own index
    range. Both views are lazy and restartable: every call to sections() or
    paragraphs() starts a fresh scan of the owned range.
    """

    def __init__(
        self,
        lines: Sequence[str],
        depth: int = 0,
        start: int = 0,
        end: Optional[int] = None,
        ):
        self._lines = lines if isinstance(lines, tuple) else tuple(lines)
        self._start = start
        self._end = len(self._lines) if end is None else end
        self._depth = depth

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines[self._start:self._end]

    @property
    def content(self) -> str:
        """The owned lines joined with newlines."""
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return self._end - self._start

    def __repr__(self) -> str:
        return f"ArticleContent(depth={self._depth}, lines={self._start}:{self._end})"

    def sections(self) -> Iterator["Section"]:
        """Yield the sections headed by exactly depth+1 '#' markers."""
        for heading, start, end in iter_sections(self._lines, self._depth, self._start, self._end):
            yield Section(
                heading=heading,
                content=ArticleContent(self._lines, self._depth + 1, start, end),
            )

    def paragraphs(
        self,
        extra_decoders: Optional[Mapping[str, Optional[ObjectDecoder]]] = None,
        ) -> Iterator[Paragraph]:
        """Yield classified paragraphs; extra_decoders are merged over the defaults (None disables one)."""
        return iter_paragraphs(self._lines, self._start, self._end, object_decoders(extra_decoders))


@dataclass(frozen=True)
class Section:
    heading: Optional[str]      # None for the leading unheaded region
    content: ArticleContent

    @property
    def name(self) -> Optional[str]:
        if self.heading is None:
            return None
        return _SHARP_PREFIX_RE.sub("", self.heading).strip()
