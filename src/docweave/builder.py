"""Build the documentation model from an XML documentation file.

Member id prefixes select the entity class:

    N:  namespace        M:  method / constructor / operator
    T:  type             P:  property / indexer
    F:  field            E:  event

``!:`` marks a reference the compiler could not resolve.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .comments.docfile import DocFile
from .comments.tree import CommentTree
from .config import ModelConfig
from .exceptions import DocweaveError
from .logging_config import get_logger
from .model import tags
from .model.base import DocumentableEntity
from .model.entities import (
    EventEntity,
    FieldEntity,
    MethodEntity,
    NamespaceEntity,
    PropertyEntity,
    TypeEntity,
)
from .model.links import SeeAlsoLink
from .normalize import normalize_id

logger = get_logger(__name__)

ENTITY_CLASSES: dict[str, type[DocumentableEntity]] = {
    "N": NamespaceEntity,
    "T": TypeEntity,
    "M": MethodEntity,
    "P": PropertyEntity,
    "F": FieldEntity,
    "E": EventEntity,
}

UNRESOLVED_PREFIX = "!"


def split_member_id(member_id: str) -> tuple[str, str, str]:
    """Split a member id into (prefix, full name, simple name).

    >>> split_member_id("M:Acme.Widget.Spin(System.Int32)")
    ('M', 'Acme.Widget.Spin', 'Spin')
    """
    prefix, sep, rest = member_id.partition(":")
    if not sep:
        return "", member_id, member_id
    # drops the parameter list and a conversion operator's "~ReturnType"
    full_name = rest.split("(", 1)[0]
    name = full_name.rsplit(".", 1)[-1]
    return prefix, full_name, name


def _declaring_name(full_name: str) -> Optional[str]:
    head, sep, _ = full_name.rpartition(".")
    return head if sep else None


class DocModel:
    """Entities built from one doc file, indexed by id."""

    def __init__(self, assembly_name: Optional[str] = None) -> None:
        self.assembly_name = assembly_name
        self._entities: dict[str, DocumentableEntity] = {}

    def add(self, entity: DocumentableEntity) -> None:
        self._entities[entity.id] = entity

    def get(self, member_id: str) -> Optional[DocumentableEntity]:
        return self._entities.get(member_id)

    @property
    def entities(self) -> list[DocumentableEntity]:
        return list(self._entities.values())

    @property
    def namespaces(self) -> list[NamespaceEntity]:
        return [e for e in self._entities.values() if isinstance(e, NamespaceEntity)]

    def of_kind(self, kind: str) -> list[DocumentableEntity]:
        return [e for e in self._entities.values() if e.kind == kind]

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[DocumentableEntity]:
        return iter(self._entities.values())

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._entities


class ModelBuilder:
    """Creates entities from doc-file members and links them together."""

    def __init__(self, config: Optional[ModelConfig] = None) -> None:
        self.config = config or ModelConfig()

    def build(self, doc_file: DocFile) -> DocModel:
        model = DocModel(assembly_name=doc_file.assembly_name)

        for member_id, tree in doc_file.members.items():
            entity = self.create_entity(member_id, tree)
            if entity is not None:
                model.add(entity)

        self._link(model)
        logger.debug(f"Built {len(model)} entities from {doc_file.source}")
        return model

    def create_entity(
        self, member_id: str, tree: Optional[CommentTree] = None
    ) -> Optional[DocumentableEntity]:
        """Create the entity for ``member_id``; None if the id is skipped.

        Raises:
            DocweaveError: For an unresolved id when ``skip_unresolved`` is off
        """
        prefix, full_name, name = split_member_id(member_id)

        if prefix == UNRESOLVED_PREFIX:
            if not self.config.skip_unresolved:
                raise DocweaveError(
                    f"Unresolved member reference: {member_id}", details={"id": member_id}
                )
            logger.debug(f"Skipping unresolved member {member_id}")
            return None

        entity_class = ENTITY_CLASSES.get(prefix)
        if entity_class is None:
            logger.warning(f"Skipping member with unknown id prefix: {member_id}")
            return None

        entity = entity_class(
            id=member_id,
            name=name,
            full_name=full_name,
            normalized_id=self._normalize(member_id),
        )
        entity.set_comment_tree(tree)
        if tree is not None:
            for node in tree.select_all(tags.SEEALSO):
                label = node.inner_xml.strip() or None
                entity.add_see_also(
                    SeeAlsoLink(cref=node.get("cref"), href=node.get("href"), label=label)
                )
        return entity

    def _normalize(self, member_id: str) -> str:
        return normalize_id(
            member_id,
            replacement=self.config.normalized_id_replacement,
            max_length=self.config.normalized_id_max_length,
            lowercase=self.config.lowercase_normalized_ids,
        )

    def _link(self, model: DocModel) -> None:
        """Attach members to their types and types to their namespaces.

        A type whose parent name is neither a documented type nor a documented
        namespace gets an implicit namespace, unless a documented type encloses
        that parent name (``T:Ns.Outer`` for ``T:Ns.Outer.Mid.Inner``); such a
        type is nested in an undocumented type and stays unattached.
        """
        type_names = {e.full_name for e in model.entities if isinstance(e, TypeEntity)}

        for entity in model.entities:
            if isinstance(entity, NamespaceEntity):
                continue
            parent_name = _declaring_name(entity.full_name)
            if parent_name is None:
                continue

            if isinstance(entity, TypeEntity):
                # nested types belong to the declaring type when it is documented
                outer = model.get(f"T:{parent_name}")
                if isinstance(outer, TypeEntity):
                    outer.members.append(entity)
                    continue
                namespace = model.get(f"N:{parent_name}")
                if namespace is None:
                    if _inside_type(parent_name, type_names):
                        logger.debug(f"No documented declaring type for {entity.id}")
                        continue
                    namespace = self.create_entity(f"N:{parent_name}")
                    model.add(namespace)
                namespace.types.append(entity)
            else:
                declaring = model.get(f"T:{parent_name}")
                if isinstance(declaring, TypeEntity):
                    declaring.members.append(entity)
                else:
                    logger.debug(f"No documented declaring type for {entity.id}")


def _inside_type(name: str, type_names: set[str]) -> bool:
    """True if some dotted prefix of ``name`` is a documented type."""
    head = _declaring_name(name)
    while head is not None:
        if head in type_names:
            return True
        head = _declaring_name(head)
    return False
