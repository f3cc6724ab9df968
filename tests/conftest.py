"""Shared fixtures for the rdfwriter test suite."""

from __future__ import annotations

import pytest
from lxml import etree

from rdfwriter.triples.model import RDF_NS, RDF_NODE_ID, RDF_TYPE, Node, Triple, iri, literal

EX = "http://ex.org#"
DC = "http://purl.org/dc/elements/1.1/"

NAMESPACES = {
    "rdf": RDF_NS,
    "ex": EX,
    "dc": DC,
}


@pytest.fixture
def namespaces() -> dict[str, str]:
    return dict(NAMESPACES)


def typed(subject: Node, class_name: str) -> Triple:
    """rdf:type triple pointing at ex:<class_name>."""
    return Triple(subject, iri(RDF_TYPE), iri(EX + class_name))


def prop(subject: Node, name: str, obj: Node) -> Triple:
    """Triple with predicate ex:<name>."""
    return Triple(subject, iri(EX + name), obj)


def node_id(subject: Node, label: str) -> Triple:
    return Triple(subject, iri(RDF_NODE_ID), literal(label))


def parse_document(document: str) -> etree._Element:
    """Parse serializer output; fails the test on malformed XML."""
    return etree.fromstring(document.encode("utf-8"))


def rdf(name: str) -> str:
    return f"{{{RDF_NS}}}{name}"


def ex(name: str) -> str:
    return f"{{{EX}}}{name}"
