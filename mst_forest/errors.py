class GraphError(Exception):
    pass


class EdgeTypeError(GraphError, TypeError):
    pass


class DuplicateVertexError(GraphError, ValueError):
    pass


class EmptyGraphError(GraphError, ValueError):
    pass
