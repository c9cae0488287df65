"""
Document tree for the HTML5 parser.
This package provides the node arena and the document built on top of it.
"""

from .node import (
    HTML_NAMESPACE,
    CommentData,
    DocumentData,
    ElementData,
    Node,
    NodeData,
    NodeId,
    NodeType,
    TextData,
)
from .node_arena import NodeArena
from .document import MAX_PREFIX_LENGTH, Document
from .quirks import DocumentType, QuirksMode
from .exceptions import TreeInvariantError

__all__ = [
    'HTML_NAMESPACE', 'MAX_PREFIX_LENGTH', 'CommentData', 'Document', 'DocumentData',
    'DocumentType', 'ElementData', 'Node', 'NodeArena', 'NodeData', 'NodeId', 'NodeType',
    'QuirksMode', 'TextData', 'TreeInvariantError',
]
