"""
Extension Neutrality Model Package

Decides whether an ontology of classified primitives stays stable when
extended by arbitrary, mutually disagreeing interpretive frameworks.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Concrete domain ontologies
    - Which frameworks a domain considers legitimate
    - Storage or persisted state

This package defines the LOGICAL MODEL only.

The only executable decision is the classification scan.
Neutrality itself is established through the equivalence property,
never by enumerating frameworks.
"""

__version__ = "0.1.0"
