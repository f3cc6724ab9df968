"""
Triple Model - Nodes and triples handed to the writer by a parser.

Nodes compare by identity: two nodes carrying the same identifier are
different graph vertices unless they are the very same object.
"""

from dataclasses import dataclass
from enum import Enum

# =============================================================================
# RDF VOCABULARY
# =============================================================================

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

RDF_TYPE = RDF_NS + "type"
RDF_NODE_ID = RDF_NS + "nodeID"
RDF_RESOURCE = RDF_NS + "resource"

# Predicates describing the element itself rather than its content
STRUCTURAL_PREDICATES = frozenset({RDF_TYPE, RDF_NODE_ID, RDF_RESOURCE})


# =============================================================================
# NODES AND TRIPLES
# =============================================================================


class NodeType(str, Enum):
    """Kind of a graph node."""

    IRI = "iri"
    BLANK = "blank"
    LITERAL = "literal"
    RESOURCE_LITERAL = "resource_literal"


@dataclass(eq=False)
class Node:
    """A graph vertex: an IRI, a blank node label or a literal value."""

    identifier: str
    node_type: NodeType

    @property
    def is_iri(self) -> bool:
        return self.node_type is NodeType.IRI

    @property
    def is_blank(self) -> bool:
        return self.node_type is NodeType.BLANK

    def describe(self) -> str:
        """N-Triples-like form used in log and report messages."""
        if self.node_type is NodeType.LITERAL:
            return f'"{self.identifier}"'
        if self.is_blank:
            return f"_:{self.identifier}"
        return f"<{self.identifier}>"

    def __repr__(self) -> str:
        return f"Node({self.node_type.value}:{self.identifier!r})"


@dataclass(frozen=True, eq=False)
class Triple:
    """A subject-predicate-object statement."""

    subject: Node
    predicate: Node
    object: Node


# =============================================================================
# CONVENIENCE CONSTRUCTORS
# =============================================================================


def iri(identifier: str) -> Node:
    """Create an IRI node."""
    return Node(identifier, NodeType.IRI)


def blank(label: str) -> Node:
    """Create a blank node."""
    return Node(label, NodeType.BLANK)


def literal(value: str) -> Node:
    """Create a literal node."""
    return Node(value, NodeType.LITERAL)


def resource(identifier: str) -> Node:
    """Create a node referenced through rdf:resource."""
    return Node(identifier, NodeType.RESOURCE_LITERAL)
