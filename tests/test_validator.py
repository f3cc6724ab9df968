"""Tests for the structural pre-check."""

from __future__ import annotations

from rdfwriter.triples.model import RDF_TYPE, Triple, blank, iri, literal
from rdfwriter.triples.validator import TripleValidator, ValidationResult, validate_triples

from .conftest import DC, EX, NAMESPACES, node_id, prop, typed


def test_valid_triples() -> None:
    a = iri(EX + "a")
    triples = [typed(a, "Thing"), Triple(a, iri(DC + "title"), literal("Hello"))]

    result = validate_triples(triples, NAMESPACES)

    assert result.is_valid
    assert result.errors == []
    assert result.info["triple_count"] == 2
    assert result.info["subject_count"] == 1
    assert result.info["root_count"] == 1
    assert result.summary() == "Validation VALID: 0 errors, 0 warnings"


def test_collects_every_error() -> None:
    a, b = iri(EX + "a"), blank("b")
    triples = [
        prop(a, "name", literal("untyped")),
        typed(b, "Thing"),
        node_id(b, "one"),
        node_id(b, "two"),
        Triple(b, iri("http://other.org#p"), literal("x")),
    ]

    result = TripleValidator(NAMESPACES).validate(triples)

    assert not result.is_valid
    assert len(result.errors) == 3
    assert any("rdf:type" in error for error in result.errors)
    assert any("rdf:nodeID" in error for error in result.errors)
    assert any("http://other.org" in error for error in result.errors)


def test_unresolvable_type_is_reported_once() -> None:
    a, b = iri(EX + "a"), iri(EX + "b")
    unknown = "http://other.org#Kind"
    triples = [
        Triple(a, iri(EX + "p"), literal("x")),
        Triple(a, iri(RDF_TYPE), iri(unknown)),
        Triple(b, iri(RDF_TYPE), iri(unknown)),
    ]

    result = validate_triples(triples, NAMESPACES)

    assert result.errors == [
        f"declaration of namespace http://other.org not found in the namespace mapping "
        f"(URI: {unknown})"
    ]


def test_warnings_do_not_invalidate() -> None:
    a, b = iri(EX + "a"), iri(EX + "b")
    triples = [
        typed(a, "T"),
        prop(a, "p", b),
        typed(b, "T"),
        prop(b, "p", a),
        prop(b, "note", literal("")),
    ]

    result = validate_triples(triples, NAMESPACES)

    assert result.is_valid
    assert len(result.warnings) == 2
    assert result.info["detached_count"] == 2
    assert result.info["root_count"] == 0


def test_type_only_reference_is_detached() -> None:
    a, thing = iri(EX + "a"), iri(EX + "Thing")
    triples = [
        Triple(a, iri(RDF_TYPE), thing),
        Triple(thing, iri(RDF_TYPE), iri(EX + "Class")),
        prop(thing, "label", literal("Thing")),
    ]

    result = validate_triples(triples, NAMESPACES)

    assert result.is_valid
    assert result.info["root_count"] == 1
    assert result.info["detached_count"] == 1
    assert result.warnings == [
        f"1 subject(s) are detached (not reachable from a root), first: <{EX}Thing>"
    ]


def test_empty_input_warns() -> None:
    result = validate_triples([], NAMESPACES)

    assert result.is_valid
    assert result.warnings == ["No triples to serialize"]


def test_validation_result_helpers() -> None:
    result = ValidationResult(is_valid=True)
    result.add_warning("careful")
    result.add_error("broken")

    assert not result.is_valid
    assert result.summary() == "Validation INVALID: 1 errors, 1 warnings"
