"""Exception hierarchy for docweave."""

from .base import DocweaveError
from .config import ConfigurationError, InvalidConfigError
from .parsing import CommentParseError, DocFileError, ParsingError

__all__ = [
    "DocweaveError",
    "ParsingError",
    "CommentParseError",
    "DocFileError",
    "ConfigurationError",
    "InvalidConfigError",
]
