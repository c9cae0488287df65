"""
html5lib front-end for the document tree.

html5lib performs tokenization and tree construction; this module copies the
tree it produces into a Document, node by node, through Document.add_node.
"""

import logging
from typing import List, Tuple, Union
from xml.dom import Node as DomNode

import html5lib

from .dom import Document, DocumentType, Node, NodeId, QuirksMode
from .utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


def parse_html(html: Union[str, bytes], doctype: DocumentType = DocumentType.HTML) -> Document:
    """
    Parse HTML content into a Document.

    Args:
        html: The HTML content to parse (bytes are decoded as UTF-8)
        doctype: Document type to record on the result

    Returns:
        The parsed Document, with quirks_mode taken from the parser
    """
    if isinstance(html, bytes):
        html = html.decode('utf-8', errors='replace')

    perf = PerformanceLogger(logger, "parser")
    logger.debug(f"Parsing HTML content (first 100 chars): {html[:100]!r}")

    perf.start("parse")
    parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
    parsed = parser.parse(html)
    perf.end("parse")

    perf.start("build")
    document = build_document(parsed, parser.compatMode, doctype)
    perf.end("build")

    return document


def build_document(dom,
                   compat_mode: str = "no quirks",
                   doctype: DocumentType = DocumentType.HTML) -> Document:
    """
    Copy a parsed xml.dom document into a new Document.

    Nodes are added in document order, so ids follow a pre-order walk of the
    source tree. Doctype nodes, processing instructions and other node kinds
    the arena does not store are skipped.

    Args:
        dom: Document produced by html5lib's "dom" tree builder
        compat_mode: html5lib compatMode string of the parse
        doctype: Document type to record on the result

    Returns:
        The new Document
    """
    document = Document(doctype=doctype, quirks_mode=QuirksMode.from_compat_mode(compat_mode))
    root_id = document.get_root().id

    pending: List[Tuple[object, NodeId]] = [(child, root_id) for child in reversed(dom.childNodes)]
    while pending:
        dom_node, parent_id = pending.pop()
        node = _convert_node(dom_node)
        if node is None:
            continue

        node_id = document.add_node(node, parent_id)
        pending.extend((child, node_id) for child in reversed(dom_node.childNodes))

    logger.debug(f"Built document with {len(document)} nodes (quirks mode: {document.quirks_mode.name})")
    return document


def _convert_node(dom_node):
    node_type = dom_node.nodeType

    if node_type == DomNode.ELEMENT_NODE:
        name = dom_node.localName or dom_node.tagName
        attributes = {attr_name: value for attr_name, value in dom_node.attributes.items()}
        if dom_node.namespaceURI:
            return Node.new_element(name, attributes, dom_node.namespaceURI)
        return Node.new_element(name, attributes)
    if node_type == DomNode.TEXT_NODE:
        return Node.new_text(dom_node.data)
    if node_type == DomNode.COMMENT_NODE:
        return Node.new_comment(dom_node.data)

    logger.debug(f"Skipping node of type {node_type} ({dom_node.nodeName})")
    return None
