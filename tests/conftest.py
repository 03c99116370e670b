"""Shared test fixtures for docweave tests."""

import logging
import os

import pytest
from rich.logging import RichHandler

from docweave.comments import CommentTree
from docweave.model.base import DocumentableEntity

SAMPLE_DOC_XML = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>Acme.Widgets</name>
    </assembly>
    <members>
        <member name="N:Acme.Widgets">
            <summary>Widgets and their parts.</summary>
        </member>
        <member name="T:Acme.Widgets.Widget">
            <summary>A spinning widget.</summary>
            <remarks>
                Use <see cref="M:Acme.Widgets.Widget.Spin(System.Int32)"/> to spin it.
            </remarks>
            <seealso cref="T:Acme.Widgets.Gear"/>
            <seealso href="https://example.com/widgets">Widget guide</seealso>
        </member>
        <member name="M:Acme.Widgets.Widget.Spin(System.Int32)">
            <summary>Spins the widget.</summary>
            <param name="turns">Number of turns.</param>
            <returns>The final angle.</returns>
            <exception cref="T:System.ArgumentOutOfRangeException">
                <paramref name="turns"/> is negative.
            </exception>
        </member>
        <member name="P:Acme.Widgets.Widget.Angle">
            <summary>Current angle.</summary>
            <value>Degrees, 0 to 359.</value>
        </member>
        <member name="F:Acme.Widgets.Widget.MaxTurns">
            <summary>Largest number of turns.</summary>
        </member>
        <member name="E:Acme.Widgets.Widget.Stopped">
            <summary>Raised when spinning stops.</summary>
        </member>
        <member name="T:Acme.Parts.Gear`1">
            <summary>A gear.</summary>
            <typeparam name="T">Tooth type.</typeparam>
        </member>
        <member name="!:Acme.Missing">
            <summary>Unresolved.</summary>
        </member>
    </members>
</doc>
"""


class SampleEntity(DocumentableEntity):
    """Minimal concrete entity for exercising the base class."""

    kind = "sample"


@pytest.fixture
def sample_doc_xml():
    """Text of a small XML documentation file."""
    return SAMPLE_DOC_XML


@pytest.fixture
def sample_doc_path(tmp_path):
    """The sample documentation file written to disk."""
    path = tmp_path / "Acme.Widgets.xml"
    path.write_text(SAMPLE_DOC_XML, encoding="utf-8")
    return path


@pytest.fixture
def make_entity():
    """Factory for bare entities."""

    def _make(id=None, **kwargs):
        return SampleEntity(id=id, **kwargs)

    return _make


@pytest.fixture
def hello_tree():
    """Comment tree with a summary and a padded remarks section."""
    return CommentTree.from_fragment("<summary>Hello</summary><remarks> World </remarks>")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and DOCWEAVE_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("DOCWEAVE_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove handlers installed by setup_logging and reset levels."""
    root = logging.getLogger()
    docweave_logger = logging.getLogger("docweave")
    level, docweave_level = root.level, docweave_logger.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    docweave_logger.setLevel(docweave_level)
