"""Tests for prefix:localName abbreviation."""

from __future__ import annotations

import pytest

from rdfwriter.triples.errors import (
    EmptyFragment,
    MalformedIdentifier,
    NamespaceError,
    UnresolvedNamespace,
)
from rdfwriter.triples.namespaces import invert_namespaces, rdf_prefix, shorten_uri, split_uri

from .conftest import NAMESPACES


@pytest.fixture
def inverse() -> dict[str, str]:
    return invert_namespaces(NAMESPACES)


def test_invert_trims_hash() -> None:
    inverse = invert_namespaces({"ex": "http://ex.org#", "dc": "http://purl.org/dc/elements/1.1/"})

    assert inverse == {"http://ex.org": "ex", "http://purl.org/dc/elements/1.1/": "dc"}


def test_invert_first_prefix_wins() -> None:
    inverse = invert_namespaces({"a": "http://ex.org#", "b": "http://ex.org#"})

    assert inverse == {"http://ex.org": "a"}


def test_shorten_hash_namespace(inverse) -> None:
    assert shorten_uri("http://ex.org#Thing", inverse) == "ex:Thing"
    assert shorten_uri("http://www.w3.org/1999/02/22-rdf-syntax-ns#type", inverse) == "rdf:type"


def test_shorten_slash_namespace(inverse) -> None:
    assert shorten_uri("http://purl.org/dc/elements/1.1/title", inverse) == "dc:title"


def test_split_prefers_last_hash() -> None:
    assert split_uri("http://ex.org/a#b") == ("http://ex.org/a", "b")
    assert split_uri("http://ex.org/a/b") == ("http://ex.org/a/", "b")


def test_malformed_identifier(inverse) -> None:
    with pytest.raises(MalformedIdentifier) as excinfo:
        shorten_uri("urn:isbn:123", inverse)

    assert excinfo.value.identifier == "urn:isbn:123"


def test_empty_fragment(inverse) -> None:
    with pytest.raises(EmptyFragment):
        shorten_uri("http://ex.org#", inverse)
    with pytest.raises(EmptyFragment):
        shorten_uri("http://ex.org#  ", inverse)


def test_unresolved_namespace(inverse) -> None:
    with pytest.raises(UnresolvedNamespace) as excinfo:
        shorten_uri("http://other.org#name", inverse)

    assert excinfo.value.namespace == "http://other.org"
    assert isinstance(excinfo.value, NamespaceError)
    assert isinstance(excinfo.value, ValueError)


def test_rdf_prefix_follows_mapping() -> None:
    assert rdf_prefix(invert_namespaces(NAMESPACES)) == "rdf"
    renamed = {"r": "http://www.w3.org/1999/02/22-rdf-syntax-ns#"}
    assert rdf_prefix(invert_namespaces(renamed)) == "r"
    assert rdf_prefix({}) == "rdf"
