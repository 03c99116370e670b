"""Reader for compiler-generated XML documentation files.

Layout::

    <doc>
        <assembly><name>Acme.Widgets</name></assembly>
        <members>
            <member name="T:Acme.Widget"> ... </member>
            ...
        </members>
    </doc>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..exceptions import CommentParseError, DocFileError
from ..logging_config import get_logger
from .tree import CommentTree

logger = get_logger(__name__)


@dataclass
class DocFile:
    """Contents of one XML documentation file.

    Attributes:
        assembly_name: Value of ``<assembly><name>``, if present
        members: Member id -> comment tree, in document order
        source: Where the file was read from (for messages)
    """

    assembly_name: Optional[str] = None
    members: dict[str, CommentTree] = field(default_factory=dict)
    source: str = "<string>"

    def __len__(self) -> int:
        return len(self.members)


def read_doc_file(path: Path, encoding: str = "utf-8") -> DocFile:
    """Read and parse an XML documentation file from disk.

    Raises:
        DocFileError: If the file is missing or cannot be decoded
        CommentParseError: If the file is not a well-formed doc file
    """
    path = Path(path)
    if not path.is_file():
        raise DocFileError(path, "file does not exist")
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DocFileError(path, str(e)) from e
    return parse_doc_file(text, source=str(path))


def parse_doc_file(text: str, source: str = "<string>") -> DocFile:
    """Parse the text of an XML documentation file."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise CommentParseError(source, str(e)) from e

    if root.tag != "doc":
        raise CommentParseError(source, f"expected <doc> root element, got <{root.tag}>")

    doc_file = DocFile(assembly_name=root.findtext("assembly/name"), source=source)

    for element in root.iterfind("members/member"):
        member_id = element.get("name")
        if not member_id:
            logger.warning(f"Skipping <member> without a name in {source}")
            continue
        if member_id in doc_file.members:
            logger.warning(f"Duplicate member {member_id} in {source}, keeping the last one")
        doc_file.members[member_id] = CommentTree(element)

    logger.debug(f"Read {len(doc_file.members)} members from {source}")
    return doc_file
