"""
Triple Serializer - Serializes triple sequences to RDF/XML documents.

Pipeline: linearize the triples, invert the namespace mapping, index
properties by subject, find the root nodes and render each of them
inside a single ``rdf:RDF`` element.
"""

import logging
import os
from collections import Counter
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .graph import TripleGraph
from .model import RDF_NS, NodeType, Triple
from .namespaces import DEFAULT_RDF_PREFIX, invert_namespaces, normalize_namespace, rdf_prefix
from .ordering import sort_triples
from .renderer import NodeRenderer, escape_attribute

logger = logging.getLogger(__name__)

DEFAULT_TAB = "    "
DEFAULT_FILE_MODE = 0o644


# =============================================================================
# DOCUMENT ENVELOPE
# =============================================================================


def declared_namespaces(
    namespaces: Mapping[str, str], declare_rdf: bool = True
) -> dict[str, str]:
    """Namespace declarations of the document, RDF added first when missing.

    When the mapping binds ``rdf`` to another namespace, RDF is declared
    under the first free prefix of ``rdf1``, ``rdf2``, ...
    """
    declared = {prefix: str(uri) for prefix, uri in namespaces.items()}
    rdf_declared = normalize_namespace(RDF_NS) in invert_namespaces(declared)
    if not declare_rdf or rdf_declared:
        return declared

    prefix = DEFAULT_RDF_PREFIX
    suffix = 0
    while prefix in declared:
        suffix += 1
        prefix = f"{DEFAULT_RDF_PREFIX}{suffix}"
    if prefix != DEFAULT_RDF_PREFIX:
        logger.warning(
            "Prefix %s is bound to %s; declaring the RDF namespace as %s",
            DEFAULT_RDF_PREFIX,
            declared[DEFAULT_RDF_PREFIX],
            prefix,
        )
    return {prefix: RDF_NS, **declared}


def get_root_tag(namespaces: Mapping[str, str], tab: str, rdf: str = DEFAULT_RDF_PREFIX) -> str:
    """Opening ``rdf:RDF`` tag with one xmlns attribute per line."""
    root_tag = f"<{rdf}:RDF"
    for prefix, uri in namespaces.items():
        root_tag += f'\n{tab}xmlns:{prefix}="{escape_attribute(uri)}"'
    return root_tag + ">"


# =============================================================================
# TRIPLE SERIALIZER
# =============================================================================


def triples_to_string(
    triples: Sequence[Triple],
    namespaces: Mapping[str, str],
    tab: str = DEFAULT_TAB,
    declare_rdf: bool = True,
) -> str:
    """
    Serialize triples to an RDF/XML document.

    Args:
        triples: Triples as produced by the parser
        namespaces: Mapping of prefix to namespace URI
        tab: Indentation unit
        declare_rdf: Declare the RDF namespace when the mapping lacks it

    Returns:
        The RDF/XML document

    Raises:
        RDFWriterError: The first node or identifier that cannot be written
    """
    ordered = sort_triples(triples)
    declared = declared_namespaces(namespaces, declare_rdf)
    inverse = invert_namespaces(declared)
    graph = TripleGraph(ordered)
    roots = graph.roots()

    renderer = NodeRenderer(graph, inverse, tab)
    elements = [renderer.render(root, 1) for root in roots]

    # Subjects no root reaches: cycle members and nodes referenced only through
    # rdf:type. Each starts from its first input subject
    detached = 0
    for triple in triples:
        if not renderer.is_rendered(triple.subject):
            elements.append(renderer.render(triple.subject, 1))
            detached += 1
    if detached:
        logger.warning("Rendered %d detached subject(s) without a root node", detached)

    logger.info(
        "Serialized %d triples as %d top-level elements", len(ordered), len(elements)
    )
    rdf = rdf_prefix(inverse)
    body = "".join(element + "\n" for element in elements)
    return f"{get_root_tag(declared, tab, rdf)}\n{body}</{rdf}:RDF>"


def write_to_file(
    triples: Sequence[Triple],
    namespaces: Mapping[str, str],
    tab: str,
    path: Path | str,
    mode: int = DEFAULT_FILE_MODE,
    declare_rdf: bool = True,
) -> Path:
    """
    Serialize triples and write the document to ``path``.

    File-system errors propagate unchanged. Nothing is written when
    serialization fails.
    """
    content = triples_to_string(triples, namespaces, tab, declare_rdf)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    os.chmod(path, mode)

    logger.info("Wrote %d triples to %s", len(triples), path)
    return path


class RDFXMLWriter:
    """
    Writes triple sequences as RDF/XML with fixed formatting options.

    Usually built from ``Settings.writer``.
    """

    def __init__(
        self,
        tab: str = DEFAULT_TAB,
        file_mode: int = DEFAULT_FILE_MODE,
        declare_rdf_namespace: bool = True,
    ):
        self.tab = tab
        self.file_mode = file_mode
        self.declare_rdf_namespace = declare_rdf_namespace

    @classmethod
    def from_settings(cls, settings) -> "RDFXMLWriter":
        writer = settings.writer
        return cls(
            tab=writer.tab,
            file_mode=writer.file_mode,
            declare_rdf_namespace=writer.declare_rdf_namespace,
        )

    def to_string(self, triples: Sequence[Triple], namespaces: Mapping[str, str]) -> str:
        return triples_to_string(triples, namespaces, self.tab, self.declare_rdf_namespace)

    def to_file(
        self, triples: Sequence[Triple], namespaces: Mapping[str, str], path: Path | str
    ) -> Path:
        return write_to_file(
            triples, namespaces, self.tab, path, self.file_mode, self.declare_rdf_namespace
        )

    def get_statistics(self, triples: Sequence[Triple]) -> dict[str, Any]:
        """
        Get statistics about the triple graph.

        Returns:
            Dictionary with node, root and predicate counts
        """
        graph = TripleGraph(triples)
        predicates = Counter(t.predicate.identifier for t in graph.triples)
        node_types = Counter(node.node_type.value for node in graph.nodes)

        return {
            "total_triples": len(graph.triples),
            "total_nodes": len(graph.nodes),
            "subjects": sum(1 for ts in graph.by_subject if ts),
            "roots": len(graph.roots()),
            "node_types": {kind.value: node_types.get(kind.value, 0) for kind in NodeType},
            "predicates": dict(predicates.most_common(20)),
        }
