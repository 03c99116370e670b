"""Structured comment tree queried by tag name.

A CommentTree wraps the XML element of one documented member, e.g.::

    <member name="M:Acme.Widget.Spin(System.Int32)">
        <summary>Spins the widget.</summary>
        <param name="turns">Number of turns.</param>
    </member>

Only direct children are searched. Inner content is returned as markup
(nested ``<see/>``, ``<c>`` etc. are serialized back) and is never trimmed
here; trimming is the caller's job.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional
from xml.sax.saxutils import escape

from ..exceptions import CommentParseError


class CommentNode:
    """One tagged section of a doc comment."""

    def __init__(self, element: ET.Element) -> None:
        self.element = element

    @property
    def tag(self) -> str:
        return self.element.tag

    @property
    def inner_xml(self) -> str:
        """Text and serialized child markup, untrimmed."""
        parts = [escape(self.element.text or "")]
        for child in self.element:
            # tostring() includes the child's tail text
            parts.append(ET.tostring(child, encoding="unicode"))
        return "".join(parts)

    def get(self, attribute: str) -> Optional[str]:
        return self.element.get(attribute)

    def __repr__(self) -> str:
        return f"CommentNode(<{self.tag}>)"


class CommentTree:
    """Parsed doc comment of a single member."""

    def __init__(self, element: ET.Element) -> None:
        self.element = element

    @classmethod
    def from_fragment(cls, text: str, source: str = "<fragment>") -> CommentTree:
        """Parse a doc-comment fragment such as ``<summary>..</summary><remarks>..</remarks>``.

        Raises:
            CommentParseError: If the fragment is not well-formed XML
        """
        try:
            element = ET.fromstring(f"<member>{text}</member>")
        except ET.ParseError as e:
            raise CommentParseError(source, str(e)) from e
        return cls(element)

    @property
    def member_id(self) -> Optional[str]:
        """The ``name`` attribute of the member element, if any."""
        return self.element.get("name")

    def select_single(self, tag_name: str) -> Optional[CommentNode]:
        for child in self.element:
            if child.tag == tag_name:
                return CommentNode(child)
        return None

    def select_all(self, tag_name: str) -> list[CommentNode]:
        # literal tag match, not an ElementTree path
        return [CommentNode(child) for child in self.element if child.tag == tag_name]

    def __repr__(self) -> str:
        return f"CommentTree(member_id={self.member_id!r})"
