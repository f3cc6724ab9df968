"""
Node Renderer - Writes a node and its properties as nested RDF/XML.

Taking the following element as an example:

    <spdx:License rdf:nodeID="ID" rdf:about="https://sample.com#lic">
        <spdx:name>
            Apache License 2.0
        </spdx:name>
        <spdx:seeAlso rdf:resource="https://sample.com#other"/>
    </spdx:License>

the tag name comes from the node's single rdf:type triple, the
attributes from its rdf:nodeID triple and its IRI, and every other
property becomes a child element. Rendering runs on an explicit work
stack so the nesting depth is not limited by the interpreter.
"""

import logging
from collections import Counter
from collections.abc import Mapping
from xml.sax.saxutils import escape

from .errors import DuplicateNodeID, MissingOrAmbiguousType
from .graph import TripleGraph
from .model import RDF_NODE_ID, RDF_TYPE, STRUCTURAL_PREDICATES, Node, NodeType, Triple
from .namespaces import rdf_prefix, shorten_uri

logger = logging.getLogger(__name__)

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def escape_attribute(value: str) -> str:
    return escape(value, _ATTRIBUTE_ENTITIES)


class NodeRenderer:
    """
    Renders nodes of a triple graph as RDF/XML elements.

    A node with properties is written in full only once per renderer.
    Later references to it (a second parent or the back edge of a cycle)
    become ``rdf:resource`` references for IRIs and ``rdf:nodeID``
    references for blank nodes.
    """

    def __init__(self, graph: TripleGraph, inverse: Mapping[str, str], tab: str = "    "):
        """
        Initialize the renderer.

        Args:
            graph: Graph built from the (linearized) triples
            inverse: Namespace URI -> prefix lookup
            tab: Indentation unit
        """
        self.graph = graph
        self.inverse = inverse
        self.tab = tab
        self.rdf = rdf_prefix(inverse)
        self.rendered: set[int] = set()
        self._in_degree = Counter(
            child for children in graph.adjacency for child in children
        )

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def is_rendered(self, node: Node) -> bool:
        return node in self.graph.arena and self.graph.key(node) in self.rendered

    def render(self, node: Node, depth: int = 1) -> str:
        """
        Render ``node`` as a top-level element at ``depth``.

        Raises:
            MissingOrAmbiguousType, DuplicateNodeID, NamespaceError
        """
        lines: list[str] = []
        self._mark(node)
        # Work items: ("line", text) or ("node", node, depth, top_level)
        # or ("property", triple, depth)
        stack: list[tuple] = [("node", node, depth, True)]

        while stack:
            item = stack.pop()
            kind = item[0]
            if kind == "line":
                lines.append(item[1])
            elif kind == "node":
                _, current, level, top_level = item
                stack.extend(self._open_node(current, level, top_level, lines))
            else:
                _, triple, level = item
                stack.extend(self._open_property(triple, level, lines))

        return "\n".join(lines)

    # =========================================================================
    # NODE ELEMENTS
    # =========================================================================

    def _open_node(
        self, node: Node, depth: int, top_level: bool, lines: list[str]
    ) -> list[tuple]:
        """Emit the opening tag of ``node`` and return its pending work, reversed."""
        properties = self.graph.properties(node)

        type_triples = [t for t in properties if t.predicate.identifier == RDF_TYPE]
        if len(type_triples) != 1:
            raise MissingOrAmbiguousType(node.identifier, len(type_triples))
        node_id_triples = [t for t in properties if t.predicate.identifier == RDF_NODE_ID]
        if len(node_id_triples) > 1:
            raise DuplicateNodeID(node.identifier, len(node_id_triples))

        tag_name = shorten_uri(type_triples[0].object.identifier, self.inverse)

        attributes = ""
        if node_id_triples:
            attributes += self._attribute("nodeID", node_id_triples[0].object.identifier)
        elif node.is_blank and self._needs_node_id(node, top_level):
            attributes += self._attribute("nodeID", node.identifier)
        if node.is_iri:
            attributes += self._attribute("about", node.identifier)

        indent = self.tab * depth
        lines.append(f"{indent}<{tag_name}{attributes}>")

        pending: list[tuple] = [("line", f"{indent}</{tag_name}>")]
        content = [t for t in properties if t.predicate.identifier not in STRUCTURAL_PREDICATES]
        pending.extend(("property", triple, depth + 1) for triple in reversed(content))
        return pending

    def _needs_node_id(self, node: Node, top_level: bool) -> bool:
        """A blank node needs a label when something references it besides its parent."""
        references = self._in_degree[self.graph.key(node)]
        return references >= (1 if top_level else 2)

    def _attribute(self, name: str, value: str) -> str:
        return f' {self.rdf}:{name}="{escape_attribute(value)}"'

    def _mark(self, node: Node) -> None:
        if node in self.graph.arena:
            self.rendered.add(self.graph.key(node))

    # =========================================================================
    # PROPERTY ELEMENTS
    # =========================================================================

    def _open_property(self, triple: Triple, depth: int, lines: list[str]) -> list[tuple]:
        """Emit a property element; return the nested work it needs, reversed."""
        predicate = shorten_uri(triple.predicate.identifier, self.inverse)
        obj = triple.object
        indent = self.tab * depth

        if obj.node_type is NodeType.RESOURCE_LITERAL:
            lines.append(f"{indent}<{predicate}{self._attribute('resource', obj.identifier)}/>")
            return []

        if not self.graph.properties(obj):
            lines.append(f"{indent}<{predicate}>")
            lines.append(f"{indent}{self.tab}{escape(obj.identifier)}")
            lines.append(f"{indent}</{predicate}>")
            return []

        if self.is_rendered(obj):
            lines.append(f"{indent}<{predicate}{self._reference(obj)}/>")
            return []

        self._mark(obj)
        lines.append(f"{indent}<{predicate}>")
        return [("line", f"{indent}</{predicate}>"), ("node", obj, depth + 1, False)]

    def _reference(self, node: Node) -> str:
        """Attribute pointing at an element that was already written."""
        if node.is_blank:
            explicit = [
                t for t in self.graph.properties(node) if t.predicate.identifier == RDF_NODE_ID
            ]
            label = explicit[0].object.identifier if explicit else node.identifier
            return self._attribute("nodeID", label)
        return self._attribute("resource", node.identifier)


def render_node(
    node: Node, graph: TripleGraph, inverse: Mapping[str, str], depth: int = 1, tab: str = "    "
) -> str:
    """Quick function to render a single node."""
    return NodeRenderer(graph, inverse, tab).render(node, depth)
