from typing import Hashable

from mst_forest.errors import EdgeTypeError


class Edge(object):
    vertex1: Hashable
    vertex2: Hashable
    weight: float

    def __init__(self, vertex1: Hashable, vertex2: Hashable, weight: float):
        self.vertex1 = vertex1
        self.vertex2 = vertex2
        self.weight = weight

    @property
    def nodes(self) -> tuple:
        return self.vertex1, self.vertex2

    def other_end(self, vertex: Hashable) -> Hashable:
        return self.vertex2 if vertex == self.vertex1 else self.vertex1

    def compare_to(self, other: "Edge") -> int:
        if not isinstance(other, Edge):
            raise EdgeTypeError("Edge can be compared only with another edge, got %s." % type(other).__name__)

        return (self.weight > other.weight) - (self.weight < other.weight)

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight

    def __str__(self):
        return "%s-%s:%s" % (self.vertex1, self.vertex2, self.weight)

    def __repr__(self):
        return "Edge(%r, %r, %r)" % (self.vertex1, self.vertex2, self.weight)
