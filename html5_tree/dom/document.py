"""
Document implementation for the document tree.
This module adds tree semantics (a root, attach and move operations, printing) on top of the node arena.
"""

import io
import logging
import sys
from typing import Optional, TextIO

from .exceptions import TreeInvariantError
from .node import CommentData, DocumentData, ElementData, Node, NodeId, TextData
from .node_arena import NodeArena
from .quirks import DocumentType, QuirksMode

logger = logging.getLogger(__name__)

# Printing stops descending once the indentation prefix grows past this many bytes (UTF-8)
MAX_PREFIX_LENGTH = 40


class Document:
    """
    A parsed HTML document stored as an arena of nodes.

    The root node (NodeId 0, DocumentData) is installed on creation and
    never gets a parent. All other nodes are created through add_node (or
    create_node, detached) and moved with relocate or append.
    """

    def __init__(self,
                 doctype: DocumentType = DocumentType.HTML,
                 quirks_mode: QuirksMode = QuirksMode.NO_QUIRKS):
        """
        Initialize a new Document holding only its root node.

        Args:
            doctype: Whether this is a regular HTML document or an iframe srcdoc document
            quirks_mode: Quirks mode computed by the parser front-end
        """
        self._arena = NodeArena()
        self._arena.add_node(Node.new_document())

        self.doctype = doctype
        self.quirks_mode = quirks_mode

        logger.debug(f"Document initialized (doctype: {doctype.name}, quirks mode: {quirks_mode.name})")

    def get_node_by_id(self, node_id: NodeId) -> Optional[Node]:
        """
        Get a node by id.

        Returns:
            The node, or None when no node with this id exists
        """
        return self._arena.get_node(node_id)

    def get_mut_node_by_id(self, node_id: NodeId) -> Optional[Node]:
        return self._arena.get_mut_node(node_id)

    def create_node(self, node: Node) -> NodeId:
        """
        Store a new node without attaching it anywhere.

        The node is unreachable from the root until it is attached with
        append or relocate.

        Returns:
            The id assigned to the node
        """
        return self._arena.add_node(node)

    def add_node(self, node: Node, parent_id: NodeId) -> NodeId:
        """
        Store a new node and attach it as the last child of a parent.

        Args:
            node: The node to add
            parent_id: Id of an existing node that becomes the parent

        Returns:
            The id assigned to the node

        Raises:
            TreeInvariantError: If the parent does not exist
        """
        self._require(parent_id)
        node_id = self._arena.add_node(node)
        self._arena.attach_node(parent_id, node_id)
        return node_id

    def append(self, node_id: NodeId, parent_id: NodeId) -> None:
        """
        Attach an existing node as the last child of a parent.

        Unlike relocate, the node is NOT removed from the children of its
        current parent. If it already has one it ends up listed under both,
        while its `parent` only names the new one. Callers use this to splice
        in subtrees built bottom-up from nodes that were never attached.

        Args:
            node_id: Id of the node to attach
            parent_id: Id of the new parent
        """
        self._arena.attach_node(parent_id, node_id)

    def relocate(self, node_id: NodeId, parent_id: NodeId) -> None:
        """
        Move a node from its current parent (if any) to the end of a new parent's children.

        Args:
            node_id: Id of the node to move
            parent_id: Id of the new parent

        Raises:
            TreeInvariantError: If the node or the new parent does not exist
        """
        node = self._require(node_id)
        new_parent = self._require(parent_id)

        if node.parent is not None:
            old_parent = self._require(node.parent)
            old_parent.children[:] = [child for child in old_parent.children if child != node_id]
            logger.debug(f"Relocating {node_id!r} from {node.parent!r} to {parent_id!r}")

        new_parent.children.append(node_id)
        node.parent = parent_id

    def get_root(self) -> Node:
        """
        Get the document root.

        Raises:
            TreeInvariantError: If the root is missing, which construction rules out
        """
        root = self._arena.get_node(NodeId.root())
        if root is None:
            raise TreeInvariantError("Root node not found", NodeId.root())
        return root

    def print_nodes(self, out: TextIO = None) -> None:
        """Write a flat dump of every node in the arena, including detached ones."""
        self._arena.print_nodes(out)

    def print_tree(self,
                   node: Node,
                   prefix: str,
                   last: bool,
                   out: TextIO = None,
                   max_prefix: int = MAX_PREFIX_LENGTH) -> None:
        """
        Print a node and all its descendants in a tree-like structure.

        Nodes are written depth-first in pre-order, children in the order of
        their parent's children list. Once the UTF-8 encoded incoming prefix
        is longer than `max_prefix` bytes the node is printed followed by a
        "..." line and its children are skipped.

        Args:
            node: The node to start from
            prefix: Indentation inherited from the ancestors
            last: Whether the node is the last of its siblings
            out: Text stream to write to (defaults to stdout)
            max_prefix: Prefix length in bytes beyond which descent stops

        Raises:
            TreeInvariantError: If a child id does not resolve to a node
        """
        out = out or sys.stdout
        connector = "└─ " if last else "├─ "
        out.write(f"{prefix}{connector}{self._label(node)}\n")

        if len(prefix.encode("utf-8")) > max_prefix:
            out.write("...\n")
            return

        child_prefix = prefix + ("   " if last else "│  ")
        count = len(node.children)
        for index, child_id in enumerate(node.children):
            child = self._require(child_id)
            self.print_tree(child, child_prefix, index == count - 1, out, max_prefix)

    def render(self, max_prefix: int = MAX_PREFIX_LENGTH) -> str:
        """
        Render the whole document as text.

        Args:
            max_prefix: Prefix length in bytes beyond which descent stops

        Returns:
            The tree dump starting at the root
        """
        buffer = io.StringIO()
        self.print_tree(self.get_root(), "", True, buffer, max_prefix)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        """Get the number of nodes ever created in this document, root included."""
        return len(self._arena)

    @staticmethod
    def _label(node: Node) -> str:
        data = node.data
        if isinstance(data, ElementData):
            attributes = "".join(f" {name}={value}" for name, value in data.attributes.items())
            return f"<{data.name}{attributes}>"
        if isinstance(data, TextData):
            return f'"{data.value}"'
        if isinstance(data, CommentData):
            return f"<!-- {data.value} -->"
        if isinstance(data, DocumentData):
            return "Document"
        raise TreeInvariantError(f"Unknown node data {type(data).__name__}", node.id)

    def _require(self, node_id: NodeId) -> Node:
        node = self._arena.get_node(node_id)
        if node is None:
            raise TreeInvariantError(f"Node {node_id!r} not found", node_id)
        return node
