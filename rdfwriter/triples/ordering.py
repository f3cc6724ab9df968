"""
Linearizer - Deterministic depth-first ordering of graph nodes.

Nodes are listed deepest first: a node only appears after every
descendant reached through it on the first visit. Traversal starts from
each unvisited node in first-seen order, so the same triple sequence
always gives the same order.
"""

import logging
from collections.abc import Collection, Iterable, Sequence

from .graph import TripleGraph
from .model import Node, Triple

logger = logging.getLogger(__name__)


def post_order_keys(graph: TripleGraph) -> list[int]:
    """Return arena keys in depth-first post-order."""
    visited = [False] * len(graph.arena)
    order: list[int] = []

    for start in range(len(graph.arena)):
        if visited[start]:
            continue
        visited[start] = True
        # (node key, index of the next neighbor to look at)
        stack = [(start, 0)]
        while stack:
            key, position = stack[-1]
            neighbors = graph.adjacency[key]
            if position < len(neighbors):
                stack[-1] = (key, position + 1)
                child = neighbors[position]
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, 0))
            else:
                stack.pop()
                order.append(key)

    return order


def reachable_keys(
    graph: TripleGraph,
    starts: Iterable[int],
    exclude_predicates: Collection[str] = (),
) -> set[int]:
    """Return the keys reachable from ``starts`` (inclusive).

    Edges whose predicate is in ``exclude_predicates`` are not followed.
    """
    seen: set[int] = set()
    stack = list(starts)
    while stack:
        key = stack.pop()
        if key in seen:
            continue
        seen.add(key)
        if exclude_predicates:
            children = (
                graph.key(t.object)
                for t in graph.by_subject[key]
                if t.predicate.identifier not in exclude_predicates
            )
        else:
            children = iter(graph.adjacency[key])
        stack.extend(child for child in children if child not in seen)
    return seen


def topological_order(graph: TripleGraph) -> list[Node]:
    """Return every node of ``graph`` exactly once, deepest first."""
    return [graph.arena[k] for k in post_order_keys(graph)]


def sort_triples(triples: Sequence[Triple]) -> list[Triple]:
    """
    Order triples by the linearized position of their subject.

    The sort is stable: triples sharing a subject keep their input order.

    Args:
        triples: Triples as produced by the parser

    Returns:
        A new list with the same triples
    """
    graph = TripleGraph(triples)
    rank = {key: position for position, key in enumerate(post_order_keys(graph))}
    ordered = sorted(graph.triples, key=lambda t: rank[graph.key(t.subject)])
    logger.debug("Linearized %d triples over %d nodes", len(ordered), len(rank))
    return ordered
