from mst_forest.edge import Edge
from mst_forest.graph import Graph
from mst_forest.mst_builder import MstBuilder, DistanceMeasure
from mst_forest.errors import GraphError, EdgeTypeError, DuplicateVertexError, EmptyGraphError
