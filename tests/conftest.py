import pytest

from mst_forest import Edge, Graph


@pytest.fixture
def make_graph():
    def _make_graph(vertices, edges, undirected=True) -> Graph:
        graph = Graph(undirected=undirected)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for first, second, weight in edges:
            graph.add_edge(Edge(first, second, weight))
        return graph

    return _make_graph
