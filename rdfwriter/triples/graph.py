"""
Triple Graph - Adjacency view, reverse index and root detection.

A triple (S, P, O) is a directed edge S -> O. Nodes are stored in an
arena in first-seen order (subject before object) and every structure
below is indexed by the arena key of the node.
"""

import logging
from collections.abc import Iterable, Sequence

from .model import Node, Triple

logger = logging.getLogger(__name__)


# =============================================================================
# NODE ARENA
# =============================================================================


class NodeArena:
    """Assigns stable integer keys to node objects."""

    def __init__(self):
        self.nodes: list[Node] = []
        self._keys: dict[Node, int] = {}

    def add(self, node: Node) -> int:
        """Return the key of ``node``, registering it when first seen."""
        if node is None:
            raise TypeError("triples must not contain None nodes")
        key = self._keys.get(node)
        if key is None:
            key = len(self.nodes)
            self._keys[node] = key
            self.nodes.append(node)
        return key

    def key(self, node: Node) -> int:
        return self._keys[node]

    def __contains__(self, node: Node) -> bool:
        return node in self._keys

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, key: int) -> Node:
        return self.nodes[key]


# =============================================================================
# DISJOINT SET
# =============================================================================


class DisjointSet:
    """
    Parent table over arena keys.

    ``parent[k]`` is the key of a subject that has ``k`` as object, or
    None when no other subject points at ``k``. Nodes whose parent stays
    None are the roots of the forest.
    """

    def __init__(self, size: int):
        self.parent: list[int | None] = [None] * size

    def union(self, parent: int, child: int) -> None:
        if parent == child:
            return
        if self.parent[child] is None:
            self.parent[child] = parent

    def roots(self) -> list[int]:
        return [key for key, parent in enumerate(self.parent) if parent is None]


# =============================================================================
# TRIPLE GRAPH
# =============================================================================


class TripleGraph:
    """
    Graph view over an ordered triple sequence.

    Attributes:
        arena: every subject and object node, keyed in first-seen order
        adjacency: key -> keys of the objects of its triples (parallel
            edges kept, leaf nodes get an empty list)
        by_subject: key -> triples where the node is the subject
    """

    def __init__(self, triples: Iterable[Triple]):
        self.triples: list[Triple] = list(triples)
        self.arena = NodeArena()
        self.adjacency: list[list[int]] = []
        self.by_subject: list[list[Triple]] = []

        for triple in self.triples:
            subject = self._register(triple.subject)
            obj = self._register(triple.object)
            if triple.predicate is None:
                raise TypeError("triples must not contain None nodes")
            self.adjacency[subject].append(obj)
            self.by_subject[subject].append(triple)

        logger.debug(
            "Built graph with %d nodes from %d triples", len(self.arena), len(self.triples)
        )

    def _register(self, node: Node) -> int:
        key = self.arena.add(node)
        if key == len(self.adjacency):
            self.adjacency.append([])
            self.by_subject.append([])
        return key

    @property
    def nodes(self) -> list[Node]:
        return self.arena.nodes

    def key(self, node: Node) -> int:
        return self.arena.key(node)

    def adjacency_view(self) -> dict[Node, list[Node]]:
        """Return the adjacency list keyed by node objects."""
        nodes = self.arena.nodes
        return {nodes[k]: [nodes[c] for c in children] for k, children in enumerate(self.adjacency)}

    def reverse_index(self) -> dict[Node, list[Triple]]:
        """Return node -> triples where it is the subject, for nodes that have any."""
        nodes = self.arena.nodes
        return {nodes[k]: list(ts) for k, ts in enumerate(self.by_subject) if ts}

    def properties(self, node: Node) -> list[Triple]:
        if node not in self.arena:
            return []
        return self.by_subject[self.arena.key(node)]

    def disjoint_set(self) -> DisjointSet:
        dsu = DisjointSet(len(self.arena))
        for subject, children in enumerate(self.adjacency):
            for child in children:
                dsu.union(subject, child)
        return dsu

    def roots(self) -> list[Node]:
        """Nodes that are never the object of another subject, in first-seen order."""
        return [self.arena[k] for k in self.disjoint_set().roots()]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def build_graph(triples: Sequence[Triple]) -> TripleGraph:
    """Build the adjacency view and reverse index of ``triples``."""
    return TripleGraph(triples)


def get_adjacency_list(triples: Sequence[Triple]) -> dict[Node, list[Node]]:
    """Quick function returning node -> adjacent object nodes."""
    return TripleGraph(triples).adjacency_view()


def find_roots(triples: Sequence[Triple]) -> list[Node]:
    """Quick function returning the root nodes of ``triples``."""
    return TripleGraph(triples).roots()
