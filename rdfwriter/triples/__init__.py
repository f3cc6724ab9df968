"""
Triples Module - RDF/XML serialization of triple graphs.

Components:
- model.py: Nodes and triples
- graph.py: Adjacency view, reverse index and root detection
- ordering.py: Deterministic depth-first linearization
- namespaces.py: prefix:localName abbreviation
- renderer.py: Nested element rendering
- serializer.py: Document assembly and file output
- validator.py: Structural pre-check
"""

from .errors import (
    DuplicateNodeID,
    EmptyFragment,
    MalformedIdentifier,
    MissingOrAmbiguousType,
    NamespaceError,
    RDFWriterError,
    UnresolvedNamespace,
)
from .graph import TripleGraph, build_graph, find_roots, get_adjacency_list
from .model import RDF_NS, Node, NodeType, Triple, blank, iri, literal, resource
from .namespaces import invert_namespaces, shorten_uri
from .ordering import sort_triples, topological_order
from .renderer import NodeRenderer, render_node
from .serializer import RDFXMLWriter, triples_to_string, write_to_file
from .validator import TripleValidator, ValidationResult, validate_triples

__all__ = [
    # Model
    "RDF_NS",
    "Node",
    "NodeType",
    "Triple",
    "blank",
    "iri",
    "literal",
    "resource",
    # Graph
    "TripleGraph",
    "build_graph",
    "find_roots",
    "get_adjacency_list",
    "sort_triples",
    "topological_order",
    # Namespaces
    "invert_namespaces",
    "shorten_uri",
    # Rendering
    "NodeRenderer",
    "render_node",
    "RDFXMLWriter",
    "triples_to_string",
    "write_to_file",
    # Validator
    "TripleValidator",
    "ValidationResult",
    "validate_triples",
    # Errors
    "RDFWriterError",
    "NamespaceError",
    "MalformedIdentifier",
    "EmptyFragment",
    "UnresolvedNamespace",
    "MissingOrAmbiguousType",
    "DuplicateNodeID",
]
