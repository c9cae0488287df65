"""
Exceptions raised by the document tree.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .node import NodeId


class TreeInvariantError(RuntimeError):
    """
    Raised when the tree is found in a state that should be impossible by construction.

    This is never a recoverable condition: it means an id that must exist is
    missing, or the arena's bookkeeping is inconsistent.
    """

    def __init__(self, message: str, node_id: Optional['NodeId'] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            node_id: Optional id of the node the failing operation was working on
        """
        super().__init__(message)
        self.message = message
        self.node_id = node_id
