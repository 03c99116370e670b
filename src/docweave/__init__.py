"""
docweave - documentation model for XML doc comments

Reads compiler-generated XML documentation files and builds a model of
documentable entities (namespaces, types, members) whose descriptive text is
derived from their structured doc comments.
"""

__version__ = "0.1.0"

from .builder import DocModel, ModelBuilder
from .comments import CommentTree, read_doc_file
from .config import ModelConfig, load_config
from .model import DocumentableEntity, SeeAlsoLink, TopicLink

__all__ = [
    "DocumentableEntity",  # Base of every model entity
    "SeeAlsoLink",
    "TopicLink",
    "CommentTree",
    "read_doc_file",
    "ModelBuilder",
    "DocModel",
    "ModelConfig",
    "load_config",
]
