import pytest

from mst_forest import Edge, EdgeTypeError


def test_edge_str_format():
    """Edges render as first-second:weight."""
    assert str(Edge("A", "B", 7)) == "A-B:7"
    assert str(Edge(1, 2, -3)) == "1-2:-3"


@pytest.mark.parametrize("weight, other_weight, expected", [
    (1, 2, -1),
    (2, 2, 0),
    (5, -1, 1),
])
def test_compare_to_uses_weight_only(weight, other_weight, expected):
    assert Edge("A", "B", weight).compare_to(Edge("X", "Y", other_weight)) == expected


def test_compare_to_rejects_non_edge():
    """Comparing with anything but an edge is an invalid argument."""
    with pytest.raises(EdgeTypeError):
        Edge("A", "B", 1).compare_to(1)

    with pytest.raises(TypeError):
        Edge("A", "B", 1).compare_to("A-B:1")


def test_rich_comparison_with_non_edge_raises_type_error():
    with pytest.raises(TypeError):
        _ = Edge("A", "B", 1) < 2


def test_sort_order_agrees_with_compare_to():
    edges = [Edge("A", "B", 3), Edge("B", "C", 1), Edge("C", "D", 3), Edge("D", "E", 0)]
    ordered = sorted(edges)

    assert [edge.weight for edge in ordered] == [0, 1, 3, 3]
    # stable: equal weights keep their insertion order
    assert ordered[2] is edges[0] and ordered[3] is edges[2]
    for first, second in zip(ordered, ordered[1:]):
        assert first.compare_to(second) <= 0
        assert first <= second


def test_equal_weight_edges_stay_distinct():
    first, second = Edge("A", "B", 1), Edge("A", "C", 1)

    assert first.compare_to(second) == 0
    assert first != second
    assert second not in [first]


def test_nodes_and_other_end():
    edge = Edge("A", "B", 1)

    assert edge.nodes == ("A", "B")
    assert edge.other_end("A") == "B"
    assert edge.other_end("B") == "A"
