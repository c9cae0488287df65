"""
Node arena for the document tree.
This module implements the append-only store that owns every node of a document.
"""

import logging
import sys
from typing import Iterator, List, Optional, TextIO

from .exceptions import TreeInvariantError
from .node import Node, NodeId

logger = logging.getLogger(__name__)


class NodeArena:
    """
    Append-only storage of nodes addressed by NodeId.

    The arena has no notion of a root or of traversal order. Nodes are never
    removed, so an id handed out by add_node stays valid for the life of the arena.
    """

    def __init__(self):
        """Initialize an empty arena."""
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        """Iterate over stored nodes in id order, detached ones included."""
        return iter(self._nodes)

    def add_node(self, node: Node) -> NodeId:
        """
        Store a node and assign it the next sequential id.

        Args:
            node: The node to store

        Returns:
            The id assigned to the node

        Raises:
            TreeInvariantError: If the node is already stored somewhere or the
                arena's id sequence is inconsistent
        """
        if node.id is not None:
            raise TreeInvariantError(f"Node is already stored as {node.id!r}", node.id)

        node_id = NodeId(len(self._nodes))
        if self._nodes and self._nodes[-1].id != NodeId(node_id.value - 1):
            raise TreeInvariantError(
                f"Last stored node carries {self._nodes[-1].id!r}, expected {NodeId(node_id.value - 1)!r}",
                node_id)

        node.id = node_id
        self._nodes.append(node)
        return node_id

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        """
        Get a node by id.

        Args:
            node_id: The id to look up

        Returns:
            The node, or None if this arena never produced the id
        """
        if 0 <= node_id.value < len(self._nodes):
            return self._nodes[node_id.value]
        return None

    def get_mut_node(self, node_id: NodeId) -> Optional[Node]:
        """
        Get a node by id for in-place modification.

        Nodes are mutable objects, so this is the same lookup as get_node. Callers
        that change `parent` or `children` directly take over the job of keeping
        both sides of the relationship consistent.
        """
        return self.get_node(node_id)

    def attach_node(self, parent_id: NodeId, child_id: NodeId) -> None:
        """
        Append a child to a parent's children and point the child at the parent.

        No check is made for cycles or for a previous parent; callers detach
        first when they need to move a node.

        Args:
            parent_id: Id of the new parent
            child_id: Id of the child to attach

        Raises:
            TreeInvariantError: If either id is unknown
        """
        parent = self._require(parent_id)
        child = self._require(child_id)

        parent.children.append(child_id)
        child.parent = parent_id

    def print_nodes(self, out: TextIO = None) -> None:
        """
        Write a flat dump of every stored node, reachable or not.

        Args:
            out: Text stream to write to (defaults to stdout)
        """
        out = out or sys.stdout
        for node in self._nodes:
            parent = node.parent.value if node.parent is not None else "-"
            children = ", ".join(str(child.value) for child in node.children)
            out.write(f"{node.id.value}: {node!r} parent={parent} children=[{children}]\n")

    def _require(self, node_id: NodeId) -> Node:
        node = self.get_node(node_id)
        if node is None:
            logger.error(f"Node {node_id!r} not found in arena of {len(self._nodes)} nodes")
            raise TreeInvariantError(f"Node {node_id!r} not found", node_id)
        return node
