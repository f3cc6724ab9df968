"""
Graph Loader - Turns rdflib graphs into writer triples.

rdflib is the parser collaborator: it reads Turtle, N-Triples, RDF/XML
and the other formats it supports, and this module maps its terms onto
``Node`` objects:

- every distinct URIRef/BNode used as a subject is a single node, shared
  by all the triples that mention it
- IRIs that only ever appear as objects become rdf:resource references,
  except rdf:type objects which name the element
- literals get a fresh node per occurrence
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDF
from rdflib.util import guess_format

from ..triples.model import RDF_NS, Node, NodeType, Triple

logger = logging.getLogger(__name__)


class GraphLoader:
    """
    Converts an rdflib Graph into an ordered list of triples.

    Triples are emitted sorted by their N-Triples form so that the same
    graph always yields the same sequence.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._nodes: dict = {}
        self._subjects = set(graph.subjects())

    def _node(self, term, predicate=None) -> Node:
        if isinstance(term, Literal):
            return Node(str(term), NodeType.LITERAL)
        if isinstance(term, URIRef) and term not in self._subjects and predicate != RDF.type:
            return Node(str(term), NodeType.RESOURCE_LITERAL)

        node = self._nodes.get(term)
        if node is None:
            node_type = NodeType.BLANK if isinstance(term, BNode) else NodeType.IRI
            node = Node(str(term), node_type)
            self._nodes[term] = node
        return node

    def triples(self) -> list[Triple]:
        """Return the graph's statements as writer triples."""
        predicates: dict[URIRef, Node] = {}
        result = []
        for s, p, o in sorted(self.graph, key=lambda t: tuple(term.n3() for term in t)):
            predicate = predicates.setdefault(p, Node(str(p), NodeType.IRI))
            result.append(Triple(self._node(s), predicate, self._node(o, p)))

        logger.info("Loaded %d triples (%d shared nodes)", len(result), len(self._nodes))
        return result

    def namespaces(self, used_only: bool = True) -> dict[str, str]:
        """
        Return the prefix -> namespace bindings of the graph.

        Args:
            used_only: Keep only namespaces that some predicate or rdf:type
                object starts with (rdflib binds many defaults)
        """
        bindings = {prefix: str(uri) for prefix, uri in self.graph.namespaces() if prefix}
        if not used_only:
            return bindings

        names = {str(p) for p in self.graph.predicates()}
        names.update(str(o) for o in self.graph.objects(None, RDF.type))
        return {
            prefix: uri
            for prefix, uri in bindings.items()
            if uri == RDF_NS or any(name.startswith(uri) for name in names)
        }


def load_graph(graph: Graph) -> tuple[list[Triple], dict[str, str]]:
    """Quick function returning (triples, namespaces) for an rdflib graph."""
    loader = GraphLoader(graph)
    return loader.triples(), loader.namespaces()


def load_file(
    path: Path | str, format: str | None = None, extra_namespaces: Mapping[str, str] | None = None
) -> tuple[list[Triple], dict[str, str]]:
    """
    Parse an RDF file with rdflib.

    Args:
        path: Input file
        format: rdflib parser name, guessed from the suffix when None
        extra_namespaces: Additional prefix -> uri bindings; declarations of
            the file win on conflicts

    Returns:
        Tuple of (triples, namespace mapping)
    """
    path = Path(path)
    format = format or guess_format(str(path)) or "turtle"

    graph = Graph()
    graph.parse(path, format=format)
    logger.info("Parsed %s as %s (%d statements)", path, format, len(graph))

    triples, namespaces = load_graph(graph)
    if extra_namespaces:
        namespaces = {**dict(extra_namespaces), **namespaces}
    return triples, namespaces
