"""Structured doc-comment trees and the XML doc-file reader."""

from .docfile import DocFile, parse_doc_file, read_doc_file
from .tree import CommentNode, CommentTree

__all__ = ["CommentNode", "CommentTree", "DocFile", "parse_doc_file", "read_doc_file"]
