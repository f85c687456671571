"""Shared line predicates for fence and blank-line detection"""

FENCE = "```"


def is_blank(line: str) -> bool:
    """Return True if the line holds only whitespace."""
    return line.strip() == ""


def is_fence(line: str) -> bool:
    """Return True if the line opens or closes a fenced code block (indent allowed)."""
    return line.lstrip().startswith(FENCE)


def has_content(lines) -> bool:
    """Return True if any line is non-blank."""
    return any(not is_blank(line) for line in lines)
