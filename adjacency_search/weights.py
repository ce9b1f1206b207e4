from numbers import Number
from typing import Any, Callable, Dict, Hashable, Mapping, Tuple

import networkx as nx

from adjacency_search.errors import InvalidWeightSourceError, MissingWeightError

DEFAULT_WEIGHT_ATTR = 'weight'


class EdgeAttributeWeight:
    """
    Reads the weight from a networkx edge attribute (the graph's own weights).
    """
    __slots__ = ('attr',)

    def __init__(self, attr: str = DEFAULT_WEIGHT_ATTR):
        self.attr = attr

    def __call__(self, u, v, data: Dict[str, Any]):
        return data[self.attr]

    def validate(self, graph: nx.Graph):
        for u, v, data in graph.edges(data=True):
            if self.attr not in data:
                raise MissingWeightError(
                    f"edge ({u!r}, {v!r}) has no '{self.attr}' attribute; "
                    f"pass an explicit weight source (e.g. ConstantWeight(1))")


class EdgeMapWeight:
    """
    Out-of-band weights keyed by edge. Either orientation of (u, v) matches.
    """
    __slots__ = ('mapping',)

    def __init__(self, mapping: Mapping[Tuple[Hashable, Hashable], Any]):
        self.mapping = mapping

    def __call__(self, u, v, data=None):
        if (u, v) in self.mapping:
            return self.mapping[(u, v)]
        return self.mapping[(v, u)]

    def validate(self, graph: nx.Graph):
        for u, v in graph.edges():
            if (u, v) not in self.mapping and (v, u) not in self.mapping:
                raise MissingWeightError(
                    f"edge ({u!r}, {v!r}) is missing from the weight map")


class ConstantWeight:
    """
    Same weight for every edge; ConstantWeight(1) treats the graph as unweighted.
    """
    __slots__ = ('value',)

    def __init__(self, value=1):
        self.value = value

    def __call__(self, u, v, data=None):
        return self.value

    def validate(self, graph: nx.Graph):
        pass


class FunctionWeight:
    __slots__ = ('func',)

    def __init__(self, func: Callable):
        self.func = func

    def __call__(self, u, v, data=None):
        return self.func(u, v, data)

    def validate(self, graph: nx.Graph):
        pass


def resolve_weight_source(graph: nx.Graph, weight=None):
    """
    Turns the `weight` argument of the search into a validated weight source.

    Args:
        graph (nx.Graph): The graph the weights are looked up on.
        weight: One of
            None -> the graph's intrinsic 'weight' edge attribute,
            str -> the named edge attribute,
            number -> ConstantWeight(weight),
            mapping -> EdgeMapWeight(weight) keyed by (u, v),
            weight source / callable f(u, v, data) -> used as given.

    Returns:
        A weight source callable as source(u, v, data).

    Raises:
        MissingWeightError: if some edge has no weight under the resolved source.
        InvalidWeightSourceError: if `weight` has an unusable type.
    """
    if weight is None:
        source = EdgeAttributeWeight(DEFAULT_WEIGHT_ATTR)
    elif isinstance(weight, str):
        source = EdgeAttributeWeight(weight)
    elif isinstance(weight, (EdgeAttributeWeight, EdgeMapWeight, ConstantWeight, FunctionWeight)):
        source = weight
    elif isinstance(weight, Number):
        source = ConstantWeight(weight)
    elif isinstance(weight, Mapping):
        source = EdgeMapWeight(weight)
    elif callable(weight):
        source = FunctionWeight(weight)
    else:
        raise InvalidWeightSourceError(
            f"cannot use {type(weight).__name__} as a weight source")

    # all lookups are checked here so a bad weight never surfaces mid-traversal
    source.validate(graph)
    return source
