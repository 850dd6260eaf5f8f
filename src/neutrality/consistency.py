"""
Extension consistency and neutrality.

An ontology is *extension inconsistent* with a framework when the
framework denies some primitive the ontology contains.

An ontology is *neutral* (extension stable) when no admissible framework
produces an extension inconsistency. That statement ranges over an open
set of frameworks and is NOT executable as written.

IMPORTANT:
    Do not decide neutrality by enumerating frameworks.
    `is_neutral` reads the classification scan through the
    equivalence property (see neutrality.axioms), which holds
    whenever both domain axioms hold for the caller's domain.

    `is_stable_under` only answers the bounded question for an
    explicit, finite family of frameworks.
"""

from __future__ import annotations

from typing import Iterable, List

from neutrality.framework import DEFAULT_POLICY, AdmissibilityPolicy, Framework
from neutrality.model import Primitive
from neutrality.scan import contains_causal_or_normative


def denied_members(ontology: Iterable[Primitive], framework: Framework) -> List[Primitive]:
    """Members of the ontology the framework denies, in ontology order."""
    return [p for p in ontology if framework.denies(p)]


def extension_inconsistent(ontology: Iterable[Primitive], framework: Framework) -> bool:
    """
    True if the framework denies at least one member of the ontology.

    Total for any Framework, since `denies` answers for every primitive.
    """
    return any(framework.denies(p) for p in ontology)


def is_stable_under(ontology: Iterable[Primitive], frameworks: Iterable[Framework],
                    policy: AdmissibilityPolicy = DEFAULT_POLICY) -> bool:
    """
    Bounded stability: no admissible framework in `frameworks` conflicts.

    Inadmissible frameworks are ignored. This is not neutrality: it only
    quantifies over the frameworks supplied.
    """
    members = tuple(ontology)
    for framework in frameworks:
        if policy.admits(framework) and extension_inconsistent(members, framework):
            return False
    return True


def is_neutral(ontology: Iterable[Primitive]) -> bool:
    """
    Neutrality via the equivalence property.

    Valid only in domains where framework relativity and the
    undisputed status of neutral primitives both hold.
    """
    return not contains_causal_or_normative(ontology)
