"""Tests for the docweave exception hierarchy."""

from pathlib import Path

from docweave.exceptions import (
    CommentParseError,
    ConfigurationError,
    DocFileError,
    DocweaveError,
    InvalidConfigError,
    ParsingError,
)


class TestHierarchy:
    def test_parsing_errors(self):
        assert issubclass(CommentParseError, ParsingError)
        assert issubclass(DocFileError, ParsingError)
        assert issubclass(ParsingError, DocweaveError)

    def test_config_errors(self):
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(ConfigurationError, DocweaveError)


class TestMessages:
    def test_plain_message(self):
        assert str(DocweaveError("boom")) == "boom"

    def test_details_appended(self):
        error = DocFileError(Path("a.xml"), "permission denied")
        assert str(error) == "Cannot read doc file: a.xml (path=a.xml, reason=permission denied)"
        assert error.path == Path("a.xml")

    def test_comment_parse_error(self):
        error = CommentParseError("Widget.xml", "mismatched tag")
        assert error.details == {"source": "Widget.xml", "reason": "mismatched tag"}

    def test_invalid_config_error(self):
        error = InvalidConfigError("encoding", "", "must not be empty")
        assert error.message == "Invalid configuration for encoding: "
        assert error.reason == "must not be empty"
