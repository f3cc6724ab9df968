"""Errors raised while turning triples into RDF/XML."""


class RDFWriterError(ValueError):
    """Base class for every serialization failure."""

    def __init__(self, identifier: str, message: str):
        super().__init__(message)
        self.identifier = identifier
        self.message = message


class NamespaceError(RDFWriterError):
    """An identifier could not be abbreviated to prefix:localName."""


class MalformedIdentifier(NamespaceError):
    """Identifier has no '#' or '/' separating namespace and local name."""

    def __init__(self, identifier: str):
        super().__init__(
            identifier,
            f"URI doesn't have two parts of type schemaName:tagName. URI: {identifier}",
        )


class EmptyFragment(NamespaceError):
    """Local name after the separator is empty."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"URI {identifier} has an empty local name")


class UnresolvedNamespace(NamespaceError):
    """Namespace of an identifier is not bound to any prefix."""

    def __init__(self, identifier: str, namespace: str):
        super().__init__(
            identifier,
            f"declaration of namespace {namespace} not found in the namespace mapping "
            f"(URI: {identifier})",
        )
        self.namespace = namespace


class MissingOrAmbiguousType(RDFWriterError):
    """A rendered node does not have exactly one rdf:type triple."""

    def __init__(self, identifier: str, count: int):
        super().__init__(
            identifier,
            f"node {identifier} must have exactly 1 rdf:type triple, found {count}",
        )
        self.count = count


class DuplicateNodeID(RDFWriterError):
    """A rendered node has more than one rdf:nodeID triple."""

    def __init__(self, identifier: str, count: int):
        super().__init__(
            identifier,
            f"node {identifier} must have at most 1 rdf:nodeID triple, found {count}",
        )
        self.count = count
