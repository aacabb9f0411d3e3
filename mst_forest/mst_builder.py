import logging
import numpy as np

from enum import Enum
from sklearn.preprocessing import normalize

from mst_forest import math_utils
from mst_forest.edge import Edge
from mst_forest.graph import Graph

logger = logging.getLogger(__name__)


class DistanceMeasure(Enum):
    EUCLIDEAN = math_utils.EUCLIDEAN
    QUADRATIC = math_utils.QUADRATIC
    COSINE = math_utils.COSINE


class MstBuilder(object):
    __data: np.ndarray

    def __init__(self, data: np.ndarray, use_normalization: bool = False):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError("Points should be passed as a 2D array, got %d dimensions." % data.ndim)
        if data.shape[0] < 1:
            raise ValueError("Count of points should be greater than 0.")

        self.__data = normalize(data) if use_normalization else data.copy()

    @property
    def points_count(self) -> int:
        return self.__data.shape[0]

    def complete_graph(self, distance_measure: DistanceMeasure = DistanceMeasure.EUCLIDEAN) -> Graph:
        distances = math_utils.pairwise_distances(self.__data, distance_measure.value)

        graph = Graph()
        for node in range(self.points_count):
            graph.add_vertex(node)
        for first_node, second_node in zip(*np.triu_indices(self.points_count, k=1)):
            graph.add_edge(Edge(int(first_node), int(second_node), float(distances[first_node, second_node])))

        return graph

    def build(self, distance_measure: DistanceMeasure = DistanceMeasure.EUCLIDEAN) -> Graph:
        logger.info(f"Building spanning tree over {self.points_count} points ({distance_measure.name.lower()})")

        trees = self.complete_graph(distance_measure).get_minimum_spanning_trees()

        assert len(trees) == 1 and trees[0].is_spanning_tree
        return trees[0]
