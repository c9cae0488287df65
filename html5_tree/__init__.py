"""
html5-tree - the document tree store of an HTML5 parser.
"""

import logging

from html5_tree.dom import Document, DocumentType, Node, NodeId, QuirksMode, TreeInvariantError
from html5_tree.parser import build_document, parse_html

# Library use stays silent until the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "0.1.0"
__description__ = "Arena-backed document tree for HTML5 parsing"

__all__ = [
    'Document', 'DocumentType', 'Node', 'NodeId', 'QuirksMode', 'TreeInvariantError',
    'build_document', 'parse_html',
]
