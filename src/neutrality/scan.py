"""
Classification Scan: the single executable decision surface.

Replaces the unbounded quantification over frameworks that defines
neutrality with one linear pass over the ontology itself.

The scan is pure, total and deterministic. It cannot fail.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from neutrality.model import Primitive, PrimitiveKind


def find_non_neutral(ontology: Iterable[Primitive]) -> Optional[Primitive]:
    """Return the first causal or normative primitive, or None."""
    for primitive in ontology:
        if primitive.kind is not PrimitiveKind.NEUTRAL:
            return primitive
    return None


def non_neutral_primitives(ontology: Iterable[Primitive]) -> List[Primitive]:
    """All causal or normative primitives, in ontology order."""
    return [p for p in ontology if p.kind is not PrimitiveKind.NEUTRAL]


def contains_causal_or_normative(ontology: Iterable[Primitive]) -> bool:
    """
    True if at least one primitive has a kind other than NEUTRAL.

    Args:
        ontology: Ontology or any iterable of Primitive

    Returns:
        False for the empty ontology and for all-neutral ontologies,
        True as soon as one causal or normative primitive is seen.
    """
    return find_non_neutral(ontology) is not None
