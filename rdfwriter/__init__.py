"""
rdfwriter - Serializes RDF triple graphs as indented RDF/XML.
"""

__version__ = "0.1.0"
