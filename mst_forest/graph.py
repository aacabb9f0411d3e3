import os
import logging
import numpy as np

from operator import itemgetter
from typing import Hashable

from mst_forest.edge import Edge
from mst_forest.errors import DuplicateVertexError, EmptyGraphError

logger = logging.getLogger(__name__)


class Graph(object):
    undirected: bool

    __vertices: list
    __vertex_set: set
    __edges: list[Edge]

    def __init__(self, undirected: bool = True):
        self.undirected = undirected

        self.__vertices = list()
        self.__vertex_set = set()
        self.__edges = list()

    @property
    def vertices(self) -> tuple:
        return tuple(self.__vertices)

    @property
    def edges(self) -> tuple:
        return tuple(self.__edges)

    @property
    def is_spanning_tree(self) -> bool:
        if not self.__vertices or len(self.__edges) != len(self.__vertices) - 1:
            return False

        neighbours = {vertex: list() for vertex in self.__vertices}
        for edge in self.__edges:
            first, second = edge.nodes
            if first in self.__vertex_set and second in self.__vertex_set:
                neighbours[first].append(second)
                neighbours[second].append(first)

        reached = {self.__vertices[0]}
        stack = [self.__vertices[0]]
        while stack:
            for neighbour in neighbours[stack.pop()]:
                if neighbour not in reached:
                    reached.add(neighbour)
                    stack.append(neighbour)

        return len(reached) == len(self.__vertices)

    def add_vertex(self, vertex: Hashable) -> None:
        if vertex in self.__vertex_set:
            raise DuplicateVertexError("Vertex %r is already in the graph." % (vertex,))

        self.__vertices.append(vertex)
        self.__vertex_set.add(vertex)

    def add_edge(self, edge: Edge) -> None:
        self.__edges.append(edge)

    def get_minimum_spanning_trees(self) -> list["Graph"]:
        """
        Grows a minimum spanning tree from the first unassigned vertex, one vertex at a time, and starts a new tree
        whenever the frontier runs out of edges leading outside the current one. The graph itself is left untouched.

        :return: one tree per connected component, in the insertion order of their first vertices.
        """
        if not self.__vertices:
            raise EmptyGraphError("No vertices to span.")

        connected_edges = self.__index_connected_edges()

        trees = list()
        assigned_vertices = set()
        for root in self.__vertices:
            if root in assigned_vertices:
                continue

            tree = self.__span_component(root, connected_edges, assigned_vertices)
            assigned_vertices.update(tree.__vertices)
            trees.append(tree)

        logger.info(f"Built spanning forest of {len(trees)} trees over {len(self.__vertices)} vertices")
        return trees

    def weight(self) -> float:
        return sum(edge.weight for edge in self.__edges)

    def vertices_string(self) -> str:
        return ", ".join(str(vertex) for vertex in self.__vertices)

    def save(self, filename) -> None:
        """Writes the graph into a numpy ``.npz`` archive (numpy appends the extension when it is missing)."""
        vertices = np.empty((len(self.__vertices),), dtype=object)
        for index, vertex in enumerate(self.__vertices):
            vertices[index] = vertex

        edges = np.empty((len(self.__edges), 3), dtype=object)
        for index, edge in enumerate(self.__edges):
            edges[index, 0] = edge.vertex1
            edges[index, 1] = edge.vertex2
            edges[index, 2] = edge.weight

        np.savez(filename, vertices=vertices, edges=edges, undirected=np.array(self.undirected))

    @staticmethod
    def load(filename) -> "Graph":
        """
        Reads a graph written by ``save``; the ``.npz`` extension is appended the same way ``save`` appends it.

        Warning: archives are unpickled, load only files from a trusted source.
        """
        filename = os.fspath(filename)
        if not filename.endswith(".npz"):
            filename += ".npz"

        with np.load(filename, allow_pickle=True) as archive:
            graph = Graph(undirected=bool(archive["undirected"]))
            for vertex in archive["vertices"]:
                graph.add_vertex(vertex)
            for first, second, weight in archive["edges"]:
                graph.add_edge(Edge(first, second, weight))

        return graph

    def __index_connected_edges(self) -> dict:
        # vertex -> [(edge, far vertex)], edges keep their insertion order
        connected_edges = {vertex: list() for vertex in self.__vertices}
        for edge in self.__edges:
            first, second = edge.nodes
            if first not in self.__vertex_set or second not in self.__vertex_set:
                continue

            connected_edges[first].append((edge, second))
            if self.undirected and first != second:
                connected_edges[second].append((edge, edge.other_end(second)))

        return connected_edges

    def __span_component(self, root: Hashable, connected_edges: dict, assigned_vertices: set) -> "Graph":
        tree = Graph(undirected=self.undirected)
        frontier = list()

        last_vertex = root
        new_vertex_found = True
        while new_vertex_found:
            tree.__vertices.append(last_vertex)
            tree.__vertex_set.add(last_vertex)

            frontier.extend(connected_edges[last_vertex])
            frontier = [
                item for item in frontier if item[1] not in tree.__vertex_set and item[1] not in assigned_vertices
            ]
            frontier.sort(key=itemgetter(0))

            new_vertex_found = len(frontier) > 0
            if new_vertex_found:
                edge, last_vertex = frontier[0]
                tree.__edges.append(edge)

        logger.debug(f"Spanned component rooted at {root!r}: {len(tree)} vertices, {len(tree.__edges)} edges")
        return tree

    def __len__(self):
        return len(self.__vertices)

    def __contains__(self, vertex):
        return vertex in self.__vertex_set

    def __str__(self):
        edges = [str(edge) for edge in self.__edges]
        edges.append("--> %s" % self.weight())
        return " ".join(edges)

    def __repr__(self):
        return "Graph(vertices=%d, edges=%d, undirected=%s)" % (len(self.__vertices), len(self.__edges), self.undirected)
