"""Parse error hierarchy with layered cause chains"""

from typing import Any, Optional


class ParseError(ValueError):
    """Base class for fatal, per-document parse failures."""

    def pretty(self) -> str:
        """Return the message followed by each chained cause, joined with ' / '."""
        parts = [str(self)]
        cause = self.__cause__
        while cause is not None:
            parts.append(str(cause))
            cause = cause.__cause__
        return " / ".join(parts)


class SeparatorNotFound(ParseError):
    """The document has no '---' line between header block and body."""


class CustomHeaderDecodeError(ParseError):
    """The residual (non-standard) headers were rejected by the custom header schema."""

    def __init__(self, message: str, headers: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.headers = dict(headers or {})


class ArticleParseError(ParseError):
    """Raised by parse_article, wrapping the first failure with article context."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{msg} ({self.path})" if self.path else msg
