"""Documentation model: documentable entities and their links."""

from .base import DocumentableEntity
from .entities import (
    EventEntity,
    ExceptionDoc,
    FieldEntity,
    MethodEntity,
    NamespaceEntity,
    ParameterDoc,
    PropertyEntity,
    TypeEntity,
)
from .links import SeeAlsoLink, TopicLink

__all__ = [
    "DocumentableEntity",
    "NamespaceEntity",
    "TypeEntity",
    "MethodEntity",
    "PropertyEntity",
    "FieldEntity",
    "EventEntity",
    "ParameterDoc",
    "ExceptionDoc",
    "SeeAlsoLink",
    "TopicLink",
]
