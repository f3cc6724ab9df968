"""
Namespace Resolver - Abbreviates absolute IRIs to ``prefix:localName``.

The namespace is everything up to the last ``#``. Identifiers without a
``#`` fall back to the last ``/``, so slash namespaces such as Dublin
Core (``http://purl.org/dc/elements/1.1/``) resolve too.
"""

from collections.abc import Mapping

from .errors import EmptyFragment, MalformedIdentifier, UnresolvedNamespace
from .model import RDF_NS

DEFAULT_RDF_PREFIX = "rdf"


def normalize_namespace(uri: str) -> str:
    """Namespace key used for lookups: surrounding whitespace and '#' trimmed."""
    return uri.strip().strip("#")


def invert_namespaces(namespaces: Mapping[str, str]) -> dict[str, str]:
    """
    Build the namespace -> prefix lookup.

    Args:
        namespaces: Mapping of prefix to namespace URI

    Returns:
        Mapping of normalized namespace URI to prefix. When two prefixes
        share a namespace the first one declared wins.
    """
    inverse: dict[str, str] = {}
    for prefix, uri in namespaces.items():
        inverse.setdefault(normalize_namespace(str(uri)), prefix)
    return inverse


def split_uri(uri: str) -> tuple[str, str]:
    """Split ``uri`` into (normalized namespace, local name)."""
    index = uri.rfind("#")
    if index != -1:
        namespace = uri[:index]
    else:
        index = uri.rfind("/")
        if index == -1:
            raise MalformedIdentifier(uri)
        namespace = uri[: index + 1]
    local_name = uri[index + 1 :].strip("#").strip()
    return normalize_namespace(namespace), local_name


def shorten_uri(uri: str, inverse: Mapping[str, str]) -> str:
    """
    Abbreviate ``uri`` using the namespace -> prefix lookup.

    Raises:
        MalformedIdentifier: no separator in ``uri``
        EmptyFragment: nothing after the separator
        UnresolvedNamespace: namespace not declared
    """
    namespace, local_name = split_uri(uri)
    if not local_name:
        raise EmptyFragment(uri)
    prefix = inverse.get(namespace)
    if prefix is None:
        raise UnresolvedNamespace(uri, namespace)
    return f"{prefix}:{local_name}"


def rdf_prefix(inverse: Mapping[str, str]) -> str:
    """Prefix bound to the RDF namespace, ``rdf`` if none is."""
    return inverse.get(normalize_namespace(RDF_NS), DEFAULT_RDF_PREFIX)
