"""
Triple Validator - Checks that a triple set can be written as RDF/XML.

Collects every problem the renderer would stop at, instead of failing
on the first one, so a whole input can be reported at once.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import NamespaceError
from .graph import TripleGraph
from .model import RDF_NODE_ID, RDF_TYPE, STRUCTURAL_PREDICATES, NodeType, Triple
from .namespaces import invert_namespaces, shorten_uri
from .ordering import reachable_keys
from .serializer import declared_namespaces

logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATION RESULT
# =============================================================================


@dataclass
class ValidationResult:
    """Result of triple validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: dict[str, Any] = field(default_factory=dict)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def summary(self) -> str:
        """Get a summary of the validation result."""
        status = "VALID" if self.is_valid else "INVALID"
        return f"Validation {status}: {len(self.errors)} errors, {len(self.warnings)} warnings"


# =============================================================================
# TRIPLE VALIDATOR
# =============================================================================


class TripleValidator:
    """
    Validates triples against the constraints of the RDF/XML writer.

    Performs:
    - Type validation (exactly one rdf:type per subject)
    - Node ID validation (at most one rdf:nodeID per subject)
    - Namespace validation (every type and predicate abbreviates)
    - Literal and connectivity checks (warnings only)
    """

    def __init__(self, namespaces: Mapping[str, str], declare_rdf: bool = True):
        """
        Initialize the validator.

        Args:
            namespaces: Mapping of prefix to namespace URI
            declare_rdf: Whether the writer adds the RDF namespace itself
        """
        self.inverse = invert_namespaces(declared_namespaces(namespaces, declare_rdf))

    def validate(self, triples: Sequence[Triple]) -> ValidationResult:
        """
        Validate a triple sequence.

        Args:
            triples: Triples to check

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)
        graph = TripleGraph(triples)

        self._check_not_empty(graph, result)
        self._check_subjects(graph, result)
        self._check_namespaces(graph, result)
        self._check_literals(graph, result)
        self._check_connectivity(graph, result)

        result.info["triple_count"] = len(graph.triples)
        result.info["subject_count"] = sum(1 for ts in graph.by_subject if ts)
        result.info["root_count"] = len(graph.roots())

        logger.info("Validation complete: %s", result.summary())
        return result

    def _check_not_empty(self, graph: TripleGraph, result: ValidationResult) -> None:
        if not graph.triples:
            result.add_warning("No triples to serialize")

    def _check_subjects(self, graph: TripleGraph, result: ValidationResult) -> None:
        """Check rdf:type and rdf:nodeID cardinality of every subject."""
        for key, properties in enumerate(graph.by_subject):
            if not properties:
                continue
            node = graph.arena[key]
            types = sum(1 for t in properties if t.predicate.identifier == RDF_TYPE)
            if types != 1:
                result.add_error(f"{node.describe()} has {types} rdf:type triples, expected 1")
            node_ids = sum(1 for t in properties if t.predicate.identifier == RDF_NODE_ID)
            if node_ids > 1:
                result.add_error(f"{node.describe()} has {node_ids} rdf:nodeID triples")

    def _check_namespaces(self, graph: TripleGraph, result: ValidationResult) -> None:
        """Check that every tag name the renderer needs can be abbreviated."""
        seen: set[str] = set()
        for triple in graph.triples:
            if triple.predicate.identifier == RDF_TYPE:
                candidates = [triple.object.identifier]
            elif triple.predicate.identifier in STRUCTURAL_PREDICATES:
                continue
            else:
                candidates = [triple.predicate.identifier]
            for uri in candidates:
                if uri in seen:
                    continue
                seen.add(uri)
                try:
                    shorten_uri(uri, self.inverse)
                except NamespaceError as e:
                    result.add_error(str(e))

    def _check_literals(self, graph: TripleGraph, result: ValidationResult) -> None:
        for triple in graph.triples:
            obj = triple.object
            if obj.node_type is NodeType.LITERAL and obj.identifier == "":
                result.add_warning(
                    f"Empty literal for {triple.predicate.describe()} on {triple.subject.describe()}"
                )

    def _check_connectivity(self, graph: TripleGraph, result: ValidationResult) -> None:
        """Warn about subjects no root reaches through content properties.

        These are written as extra top-level elements: cycle members and
        nodes referenced only through rdf:type.
        """
        root_keys = [graph.key(node) for node in graph.roots()]
        reached = reachable_keys(graph, root_keys, STRUCTURAL_PREDICATES)
        detached = [
            graph.arena[k] for k, ts in enumerate(graph.by_subject) if ts and k not in reached
        ]
        if detached:
            result.add_warning(
                f"{len(detached)} subject(s) are detached (not reachable from a root), "
                f"first: {detached[0].describe()}"
            )
        result.info["detached_count"] = len(detached)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_triples(triples: Sequence[Triple], namespaces: Mapping[str, str]) -> ValidationResult:
    """Quick function to validate triples."""
    return TripleValidator(namespaces).validate(triples)
