"""Fence-aware splitting of body lines into sections at one heading depth"""

import re
from typing import Iterator, Optional, Sequence

from mhcms.core.utils.lines import has_content, is_fence


def heading_pattern(depth: int) -> re.Pattern:
    """Return the regex matching a heading of exactly depth+1 '#' markers."""
    return re.compile(rf'^#{{{depth + 1}}}\s+(.*)$')


def iter_sections(
    lines: Sequence[str],
    depth: int,
    start: int = 0,
    end: Optional[int] = None,
    ) -> Iterator[tuple[Optional[str], int, int]]:
    """Lazily yield (heading, region_start, region_end) for lines[start:end].

    A region runs from just after its heading line up to the next heading of
    the same depth. Regions holding only blank lines are skipped, headed or not.
    """
    end = len(lines) if end is None else end
    pattern = heading_pattern(depth)
    heading: Optional[str] = None
    region_start = start
    in_fence = False

    for i in range(start, end):
        line = lines[i]
        if is_fence(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        m = pattern.match(line)
        if m is None:
            continue
        if has_content(lines[region_start:i]):
            yield heading, region_start, i
        heading = m.group(1).strip()
        region_start = i + 1

    if has_content(lines[region_start:end]):
        yield heading, region_start, end
