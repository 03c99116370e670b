"""Base class for every documentable entity.

A documentable entity (namespace, type, member, topic) carries:
    - identity: ``id`` is the equality and hash key
    - display labels: ``name``, ``full_name``, ``normalized_id``
    - documentation text derived from a structured comment tree

Derivation happens on write: ``set_comment_tree`` stores the tree and, when
the tree is present, runs ``on_comment_tree_updated``. Assigning ``None``
stores it but leaves ``description`` and ``remarks`` untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from . import tags
from .links import SeeAlsoLink, TopicLink

if TYPE_CHECKING:
    from ..comments.tree import CommentTree


class DocumentableEntity(ABC):
    """Identity plus documentation text for one program element."""

    def __init__(
        self,
        id: Optional[str] = None,
        name: Optional[str] = None,
        full_name: Optional[str] = None,
        normalized_id: Optional[str] = None,
    ) -> None:
        self.id = id
        self.normalized_id = normalized_id
        self.name = name
        self.full_name = full_name
        self.description: Optional[str] = None
        self.remarks: Optional[str] = None
        self.topic_link: Optional[TopicLink] = None
        self.see_also_links: list[SeeAlsoLink] = []
        self._comment_tree: Optional[CommentTree] = None

    @property
    @abstractmethod
    def kind(self) -> str:
        """Short entity kind, e.g. ``"type"`` or ``"method"``."""

    @property
    def comment_tree(self) -> Optional[CommentTree]:
        return self._comment_tree

    def set_comment_tree(self, tree: Optional[CommentTree]) -> None:
        """Store the comment tree and re-derive documentation text from it."""
        self._comment_tree = tree
        if tree is not None:
            self.on_comment_tree_updated()

    def on_comment_tree_updated(self) -> None:
        """Derive text fields from the current comment tree.

        Subclasses extending this must call ``super().on_comment_tree_updated()``
        before deriving their own fields.
        """
        self.description = self.extract_tag_text(tags.SUMMARY)
        self.remarks = self.extract_tag_text(tags.REMARKS)

    def extract_tag_text(self, tag_name: str) -> Optional[str]:
        """Trimmed inner markup of the first ``tag_name`` child, or None."""
        if self._comment_tree is None:
            return None
        node = self._comment_tree.select_single(tag_name)
        if node is None:
            return None
        return node.inner_xml.strip()

    def add_see_also(self, link: SeeAlsoLink) -> None:
        self.see_also_links.append(link)

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if other is self:
            return True
        if not isinstance(other, DocumentableEntity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
