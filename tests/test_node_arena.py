"""
Node arena contract tests: sequential ids, lookups and raw attachment.
"""

import io

import pytest

from html5_tree.dom import (
    HTML_NAMESPACE,
    ElementData,
    Node,
    NodeArena,
    NodeId,
    NodeType,
    TextData,
    TreeInvariantError,
)


class TestNodeId:
    def test_root_is_zero(self):
        assert NodeId.root() == NodeId(0)
        assert NodeId.root().is_root()
        assert not NodeId(3).is_root()

    def test_ids_are_ordered_and_hashable(self):
        assert NodeId(1) < NodeId(2)
        assert sorted([NodeId(5), NodeId(1), NodeId(3)]) == [NodeId(1), NodeId(3), NodeId(5)]
        assert len({NodeId(1), NodeId(1), NodeId(2)}) == 2
        assert int(NodeId(7)) == 7


class TestNode:
    def test_element_factory(self):
        attributes = {"class": "intro"}
        node = Node.new_element("p", attributes)
        assert node.data == ElementData("p", {"class": "intro"}, HTML_NAMESPACE)
        assert node.type == NodeType.ELEMENT_NODE
        assert node.id is None
        assert node.parent is None
        assert node.children == []

    def test_element_copies_attributes(self):
        attributes = {"id": "a"}
        node = Node.new_element("div", attributes)
        attributes["id"] = "b"
        assert node.data.attributes == {"id": "a"}

    def test_text_and_comment_types(self):
        assert Node.new_text("x").type == NodeType.TEXT_NODE
        assert Node.new_comment("x").type == NodeType.COMMENT_NODE
        assert Node.new_document().type == NodeType.DOCUMENT_NODE

    def test_unknown_payload_rejected(self):
        with pytest.raises(TypeError):
            Node("not a payload")


class TestNodeArena:
    def test_new_arena_is_empty(self):
        arena = NodeArena()
        assert len(arena) == 0
        assert arena.get_node(NodeId.root()) is None

    def test_add_node_assigns_sequential_ids(self):
        arena = NodeArena()
        ids = [arena.add_node(Node.new_text(str(i))) for i in range(5)]
        assert ids == [NodeId(i) for i in range(5)]
        assert len(arena) == 5

    def test_lookup_returns_stored_node(self):
        arena = NodeArena()
        node = Node.new_text("hello")
        node_id = arena.add_node(node)
        assert arena.get_node(node_id) is node
        assert arena.get_mut_node(node_id) is node
        assert node.id == node_id
        assert node.data == TextData("hello")

    def test_unknown_id_is_absent(self):
        arena = NodeArena()
        arena.add_node(Node.new_document())
        assert arena.get_node(NodeId(1)) is None
        assert arena.get_node(NodeId(-1)) is None
        assert arena.get_mut_node(NodeId(42)) is None

    def test_adding_same_node_twice_fails(self):
        arena = NodeArena()
        node = Node.new_text("x")
        arena.add_node(node)
        with pytest.raises(TreeInvariantError):
            arena.add_node(node)
        assert len(arena) == 1

    def test_broken_id_sequence_fails(self):
        arena = NodeArena()
        stored = Node.new_text("x")
        arena.add_node(stored)
        stored.id = NodeId(5)
        with pytest.raises(TreeInvariantError):
            arena.add_node(Node.new_text("y"))
        assert len(arena) == 1

    def test_attach_node(self):
        arena = NodeArena()
        parent_id = arena.add_node(Node.new_element("div"))
        child_id = arena.add_node(Node.new_text("x"))
        arena.attach_node(parent_id, child_id)
        assert arena.get_node(parent_id).children == [child_id]
        assert arena.get_node(child_id).parent == parent_id

    def test_attach_does_not_detach(self):
        arena = NodeArena()
        first = arena.add_node(Node.new_element("div"))
        second = arena.add_node(Node.new_element("span"))
        child = arena.add_node(Node.new_text("x"))
        arena.attach_node(first, child)
        arena.attach_node(second, child)
        assert arena.get_node(first).children == [child]
        assert arena.get_node(second).children == [child]
        assert arena.get_node(child).parent == second

    def test_attach_unknown_ids_fails(self):
        arena = NodeArena()
        node_id = arena.add_node(Node.new_element("div"))
        with pytest.raises(TreeInvariantError) as exc_info:
            arena.attach_node(NodeId(9), node_id)
        assert exc_info.value.node_id == NodeId(9)
        with pytest.raises(TreeInvariantError):
            arena.attach_node(node_id, NodeId(9))
        assert arena.get_node(node_id).children == []

    def test_iteration_in_id_order(self):
        arena = NodeArena()
        nodes = [Node.new_text(str(i)) for i in range(3)]
        for node in nodes:
            arena.add_node(node)
        assert list(arena) == nodes

    def test_print_nodes_includes_detached(self):
        arena = NodeArena()
        parent_id = arena.add_node(Node.new_element("div"))
        child_id = arena.add_node(Node.new_text("x"))
        arena.add_node(Node.new_comment("loose"))
        arena.attach_node(parent_id, child_id)

        out = io.StringIO()
        arena.print_nodes(out)
        lines = out.getvalue().splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("0: ") and lines[0].endswith("parent=- children=[1]")
        assert lines[1].endswith("parent=0 children=[]")
        assert "#comment='loose'" in lines[2]
