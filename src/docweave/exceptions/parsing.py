"""Parsing-related exceptions: doc files and comment fragments."""

from pathlib import Path

from .base import DocweaveError


class ParsingError(DocweaveError):
    """Base class for errors raised while reading documentation input."""

    pass


class CommentParseError(ParsingError):
    """Raised when a doc comment or doc file is not well-formed XML."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Failed to parse doc comment from {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class DocFileError(ParsingError):
    """Raised when a documentation file cannot be accessed or read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read doc file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
