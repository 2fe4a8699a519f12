"""
Unit tests for WeightedGraph construction, lookup and node toggling.
"""

import pytest

from pathfinder import Edge, Node, UnknownNodeError, WeightedGraph, new_graph


class TestAddNode:
    """Test node insertion."""

    def test_new_graph_is_empty(self):
        """A fresh graph has no nodes."""
        graph = new_graph()
        assert isinstance(graph, WeightedGraph)
        assert len(graph) == 0
        assert graph.nodes == ()

    def test_nodes_keep_insertion_order(self):
        """Nodes are listed in the order they were added."""
        graph = new_graph()
        for payload in ("Go", "Is", "Cool"):
            graph.add_node(payload)
        assert [n.payload for n in graph.nodes] == ["Go", "Is", "Cool"]

    def test_new_node_is_enabled_without_edges(self):
        """Added nodes start enabled with no outgoing edges."""
        graph = new_graph()
        graph.add_node("a")
        node = graph.node("a")
        assert node.disabled is False
        assert node.edges == []

    def test_duplicate_payload_resolves_to_first(self):
        """Duplicate payloads always resolve to the first node added."""
        graph = new_graph()
        graph.add_node("a")
        graph.add_node("a")
        assert len(graph) == 2
        assert graph.node("a") is graph.nodes[0]
        assert graph.node("a") is graph.node("a")

    def test_non_string_payloads(self):
        """Any hashable payload works as a key."""
        graph = new_graph()
        graph.add_node(1)
        graph.add_node((2, "x"))
        graph.add_edge(1, (2, "x"), 3)
        assert graph.shortest_path(1, (2, "x")).path == [1, (2, "x")]


class TestLookup:
    """Test payload lookup helpers."""

    def test_has_node(self, diamond):
        """has_node and `in` reflect membership."""
        assert diamond.has_node("a") is True
        assert diamond.has_node("z") is False
        assert "b" in diamond
        assert "z" not in diamond

    def test_node_unknown_raises(self, diamond):
        """Resolving an unknown payload raises UnknownNodeError."""
        with pytest.raises(UnknownNodeError) as exc_info:
            diamond.node("z")
        assert exc_info.value.payload == "z"
        assert "'z'" in str(exc_info.value)

    def test_unknown_node_error_is_lookup_error(self):
        """UnknownNodeError is a LookupError subclass."""
        assert issubclass(UnknownNodeError, LookupError)

    def test_repr_counts(self, diamond):
        """repr shows node and edge counts."""
        assert repr(diamond) == "WeightedGraph(nodes=4, edges=4)"


class TestAddEdge:
    """Test directed and bidirectional edge insertion."""

    def test_add_edge_appends_to_source(self, diamond):
        """Edges are stored on the source node in insertion order."""
        edges = diamond.node("a").edges
        assert [e.target.payload for e in edges] == ["b", "c"]
        assert [e.cost for e in edges] == [1.0, 10.0]
        assert all(isinstance(e, Edge) for e in edges)

    def test_add_edge_targets_graph_node(self, diamond):
        """Edge targets are the graph's own node objects."""
        edge = diamond.node("a").edges[0]
        assert edge.target is diamond.node("b")

    def test_add_edge_is_directed(self, diamond):
        """A directed edge does not add the reverse direction."""
        assert diamond.node("b").edges[0].target.payload == "d"
        assert all(e.target.payload != "a" for e in diamond.node("b").edges)

    def test_parallel_and_zero_cost_edges_allowed(self):
        """Parallel edges and zero costs are both accepted."""
        graph = new_graph()
        graph.add_node("a")
        graph.add_node("b")
        graph.add_edge("a", "b", 0)
        graph.add_edge("a", "b", 0)
        assert len(graph.node("a").edges) == 2

    def test_bidirectional_adds_two_edges(self):
        """A bidirectional edge is two independent directed edges."""
        graph = new_graph()
        graph.add_node("a")
        graph.add_node("b")
        graph.add_bidirectional_edge("a", "b", 12)
        assert [(e.target.payload, e.cost) for e in graph.node("a").edges] == [("b", 12.0)]
        assert [(e.target.payload, e.cost) for e in graph.node("b").edges] == [("a", 12.0)]

    @pytest.mark.parametrize("src,dst", [("z", "a"), ("a", "z"), ("y", "z")])
    def test_unknown_endpoint_raises(self, diamond, src, dst):
        """Unknown endpoints raise before any edge is added."""
        before = len(diamond.node("a").edges)
        with pytest.raises(UnknownNodeError):
            diamond.add_edge(src, dst, 1)
        assert len(diamond.node("a").edges) == before

    def test_bidirectional_unknown_raises(self, diamond):
        """Bidirectional edges fail fast on unknown payloads too."""
        with pytest.raises(UnknownNodeError):
            diamond.add_bidirectional_edge("a", "z", 1)


class TestToggleNode:
    """Test enabling and disabling nodes."""

    def test_disable_sets_flag(self, diamond):
        """disable_node marks the node disabled."""
        diamond.disable_node("b")
        assert diamond.is_disabled("b") is True
        assert diamond.is_disabled("a") is False

    def test_enable_clears_flag(self, diamond):
        """enable_node clears the disabled flag."""
        diamond.disable_node("b")
        diamond.enable_node("b")
        assert diamond.is_disabled("b") is False

    def test_disable_keeps_edges(self, diamond):
        """Disabling a node leaves its edges in place."""
        diamond.disable_node("b")
        assert len(diamond.node("b").edges) == 1
        assert diamond.node("a").edges[0].target.payload == "b"

    @pytest.mark.parametrize("method", ["enable_node", "disable_node", "is_disabled"])
    def test_unknown_payload_raises(self, diamond, method):
        """Toggling an unknown payload raises UnknownNodeError."""
        with pytest.raises(UnknownNodeError):
            getattr(diamond, method)("z")


class TestNodeRecord:
    """Test the Node record itself."""

    def test_nodes_hash_by_identity(self):
        """Nodes with equal payloads remain distinct."""
        first = Node(payload="a")
        second = Node(payload="a")
        assert first != second
        assert len({first, second}) == 2

    def test_repr_omits_edges(self):
        """Node repr does not recurse into edges."""
        node = Node(payload="a")
        node.edges.append(Edge(target=node, cost=1.0))
        assert repr(node) == "Node(payload='a', disabled=False)"
