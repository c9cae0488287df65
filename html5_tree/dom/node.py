"""
Node implementation for the document tree.
This module defines node identities, node payloads and the Node record stored in the arena.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Union

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"


class NodeType(IntEnum):
    """Node types as defined in the HTML5 specification (subset stored in the arena)."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9


@dataclass(frozen=True, order=True)
class NodeId:
    """
    Opaque identity of a node inside one document's arena.

    Ids are handed out sequentially by the arena and are never reused. Id 0
    always belongs to the document root.
    """
    value: int

    @classmethod
    def root(cls) -> 'NodeId':
        """Get the id reserved for the document root."""
        return cls(0)

    def is_root(self) -> bool:
        return self.value == 0

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"NodeId({self.value})"


@dataclass
class DocumentData:
    """Payload of the document root."""


@dataclass
class ElementData:
    """Payload of an element: tag name, attributes and namespace."""
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    namespace: str = HTML_NAMESPACE


@dataclass
class TextData:
    value: str


@dataclass
class CommentData:
    value: str


NodeData = Union[DocumentData, ElementData, TextData, CommentData]

_NODE_TYPES = {
    DocumentData: NodeType.DOCUMENT_NODE,
    ElementData: NodeType.ELEMENT_NODE,
    TextData: NodeType.TEXT_NODE,
    CommentData: NodeType.COMMENT_NODE,
}


class Node:
    """
    A node of the document tree.

    Nodes never reference each other directly. The parent and the children
    are stored as NodeIds and resolved through the arena that owns the node.
    """

    __slots__ = ("id", "parent", "children", "data")

    def __init__(self, data: NodeData):
        """
        Initialize a new Node.

        Args:
            data: The payload of the node

        Raises:
            TypeError: If data is not one of the known payload types
        """
        if type(data) not in _NODE_TYPES:
            raise TypeError(f"Unsupported node data: {type(data).__name__}")

        # Assigned by the arena when the node is stored
        self.id: Optional[NodeId] = None
        self.parent: Optional[NodeId] = None
        self.children: List[NodeId] = []
        self.data = data

    @classmethod
    def new_document(cls) -> 'Node':
        return cls(DocumentData())

    @classmethod
    def new_element(cls,
                    name: str,
                    attributes: Optional[Dict[str, str]] = None,
                    namespace: str = HTML_NAMESPACE) -> 'Node':
        """
        Create an element node.

        Args:
            name: Tag name of the element (e.g., "div", "p")
            attributes: Attribute mapping, copied so the caller's dict stays untouched
            namespace: Namespace URI of the element

        Returns:
            The new, not yet stored, element node
        """
        return cls(ElementData(name, dict(attributes or {}), namespace))

    @classmethod
    def new_text(cls, value: str) -> 'Node':
        return cls(TextData(value))

    @classmethod
    def new_comment(cls, value: str) -> 'Node':
        return cls(CommentData(value))

    @property
    def type(self) -> NodeType:
        """Get the DOM node type of this node."""
        return _NODE_TYPES[type(self.data)]

    def has_child_nodes(self) -> bool:
        return len(self.children) > 0

    def __repr__(self) -> str:
        data = self.data
        if isinstance(data, ElementData):
            return f"Node({self.id!r}, <{data.name}>, children={len(self.children)})"
        if isinstance(data, TextData):
            return f"Node({self.id!r}, #text={data.value[:30]!r})"
        if isinstance(data, CommentData):
            return f"Node({self.id!r}, #comment={data.value[:30]!r})"
        return f"Node({self.id!r}, #document, children={len(self.children)})"
