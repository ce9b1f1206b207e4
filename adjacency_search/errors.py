class AdjacencySearchError(Exception):
    """Base class for every error raised by the maximum adjacency search."""


class MissingWeightError(AdjacencySearchError, ValueError):
    """No weight could be resolved for at least one edge."""


class InvalidWeightSourceError(AdjacencySearchError, TypeError):
    """The weight argument is of a type that cannot act as a weight source."""


class InvalidRootError(AdjacencySearchError, ValueError):
    """The root vertex is not in the graph."""


class InvalidGraphError(AdjacencySearchError, ValueError):
    """The graph or its assignment map cannot be searched."""


class QueueUnderflowError(AdjacencySearchError, RuntimeError):
    """Extraction from an empty priority queue."""
