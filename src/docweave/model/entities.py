"""Concrete documentable entities.

Each subclass names its ``kind`` and, where the doc-comment format has
kind-specific tags, extends ``on_comment_tree_updated`` to derive them after
the base summary/remarks derivation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import tags
from .base import DocumentableEntity


@dataclass(frozen=True)
class ParameterDoc:
    """Documentation for one ``<param>`` or ``<typeparam>`` tag."""

    name: str
    description: str


@dataclass(frozen=True)
class ExceptionDoc:
    """Documentation for one ``<exception cref="...">`` tag."""

    cref: Optional[str]
    description: str


class NamespaceEntity(DocumentableEntity):
    """A namespace; groups the types declared in it."""

    kind = "namespace"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.types: list[TypeEntity] = []


class TypeEntity(DocumentableEntity):
    """A class, struct, interface, enum or delegate."""

    kind = "type"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.members: list[DocumentableEntity] = []
        self.type_parameters: list[ParameterDoc] = []

    def on_comment_tree_updated(self) -> None:
        super().on_comment_tree_updated()
        self.type_parameters = _named_docs(self, tags.TYPEPARAM)


class MethodEntity(DocumentableEntity):
    """A method, constructor or operator."""

    kind = "method"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.parameters: list[ParameterDoc] = []
        self.type_parameters: list[ParameterDoc] = []
        self.returns: Optional[str] = None
        self.exceptions: list[ExceptionDoc] = []

    def on_comment_tree_updated(self) -> None:
        super().on_comment_tree_updated()
        self.parameters = _named_docs(self, tags.PARAM)
        self.type_parameters = _named_docs(self, tags.TYPEPARAM)
        self.returns = self.extract_tag_text(tags.RETURNS)
        self.exceptions = _exception_docs(self)


class PropertyEntity(DocumentableEntity):
    """A property or indexer."""

    kind = "property"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.value: Optional[str] = None
        self.parameters: list[ParameterDoc] = []
        self.exceptions: list[ExceptionDoc] = []

    def on_comment_tree_updated(self) -> None:
        super().on_comment_tree_updated()
        self.value = self.extract_tag_text(tags.VALUE)
        # indexers document their arguments with <param>
        self.parameters = _named_docs(self, tags.PARAM)
        self.exceptions = _exception_docs(self)


class FieldEntity(DocumentableEntity):
    kind = "field"


class EventEntity(DocumentableEntity):
    kind = "event"


def _named_docs(entity: DocumentableEntity, tag_name: str) -> list[ParameterDoc]:
    tree = entity.comment_tree
    if tree is None:
        return []
    docs = []
    for node in tree.select_all(tag_name):
        name = node.get("name")
        if name is None:
            continue
        docs.append(ParameterDoc(name=name, description=node.inner_xml.strip()))
    return docs


def _exception_docs(entity: DocumentableEntity) -> list[ExceptionDoc]:
    tree = entity.comment_tree
    if tree is None:
        return []
    return [
        ExceptionDoc(cref=node.get("cref"), description=node.inner_xml.strip())
        for node in tree.select_all(tags.EXCEPTION)
    ]
