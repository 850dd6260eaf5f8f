"""
Domain Axioms and the Equivalence Property.

Two assumed facts bound where the model applies. Neither is derived from
the data model and the classification scan never checks them.

    FRAMEWORK_RELATIVITY:
        Every causal or normative primitive is denied by at least one
        admissible framework.

    NEUTRAL_PRIMITIVES_UNDISPUTED:
        No admissible framework denies a neutral primitive.

EQUIVALENCE PROPERTY:
    For every ontology S, given both axioms:

        Neutral(S)  <=>  contains_causal_or_normative(S) is False

    Forward:  a non-neutral witness is denied by some admissible
              framework (relativity), and that framework conflicts
              with S.
    Backward: every member of S is neutral, and no admissible
              framework denies a neutral primitive, so no framework
              conflicts with S. The empty ontology is the trivial case.

A caller who cannot establish both axioms for their domain must treat the
equivalence as inapplicable. Nothing here forces a check on them.

FrameworkFamily models a *finite* domain of frameworks so that the axioms
and the equivalence can be exercised concretely. Checking a finite family
says nothing about the open space of frameworks in a real domain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from neutrality.framework import DEFAULT_POLICY, AdmissibilityPolicy, Framework
from neutrality.model import Primitive


class DomainAxiom(Enum):
    """The two assumptions the equivalence property rests on."""

    FRAMEWORK_RELATIVITY = "framework_relativity"
    NEUTRAL_PRIMITIVES_UNDISPUTED = "neutral_primitives_undisputed"

    @property
    def statement(self) -> str:
        return _STATEMENTS[self]


_STATEMENTS = {
    DomainAxiom.FRAMEWORK_RELATIVITY:
        "Every causal or normative primitive is denied by some admissible framework.",
    DomainAxiom.NEUTRAL_PRIMITIVES_UNDISPUTED:
        "No admissible framework denies a neutral primitive.",
}


@dataclass(frozen=True)
class AxiomViolation:
    """
    A breach of one axiom, visible inside a finite framework family.

    Properties:
        axiom: The axiom that fails
        primitive: The primitive it fails on
        framework: The offending framework (None when the breach is an
            absence, i.e. no framework denies a non-neutral primitive)
    """

    axiom: DomainAxiom
    primitive: Primitive
    framework: Optional[Framework] = None

    def describe(self) -> str:
        target = f"{self.primitive.kind.value}:{self.primitive.id}"
        if self.axiom is DomainAxiom.FRAMEWORK_RELATIVITY:
            return f"No admissible framework denies {target}"
        label = (self.framework.name if self.framework else None) or "<unnamed>"
        return f"Framework {label} denies neutral primitive {target}"


@dataclass(frozen=True)
class FrameworkFamily:
    """
    Finite collection of frameworks under one admissibility policy.

    Properties:
        frameworks: Tuple of Framework values
        policy: AdmissibilityPolicy applied uniformly to all of them
    """

    frameworks: Tuple[Framework, ...] = field(default_factory=tuple)
    policy: AdmissibilityPolicy = DEFAULT_POLICY

    def __post_init__(self):
        object.__setattr__(self, "frameworks", tuple(self.frameworks))

    def __iter__(self):
        return iter(self.frameworks)

    def __len__(self) -> int:
        return len(self.frameworks)

    def admissible(self) -> List[Framework]:
        return [f for f in self.frameworks if self.policy.admits(f)]

    def denying_witness(self, primitive: Primitive) -> Optional[Framework]:
        """First admissible framework that denies the primitive, if any."""
        for framework in self.admissible():
            if framework.denies(primitive):
                return framework
        return None

    def violations(self, primitives: Iterable[Primitive]) -> List[AxiomViolation]:
        """
        Axiom breaches within this family, restricted to `primitives`.

        Each distinct primitive is examined once, in first-seen order.
        """
        found: List[AxiomViolation] = []
        admissible = self.admissible()
        seen = set()
        for primitive in primitives:
            if primitive in seen:
                continue
            seen.add(primitive)

            if primitive.is_neutral:
                for framework in admissible:
                    if framework.denies(primitive):
                        found.append(AxiomViolation(
                            DomainAxiom.NEUTRAL_PRIMITIVES_UNDISPUTED, primitive, framework
                        ))
            elif not any(f.denies(primitive) for f in admissible):
                found.append(AxiomViolation(DomainAxiom.FRAMEWORK_RELATIVITY, primitive))
        return found

    def satisfies_axioms(self, primitives: Iterable[Primitive]) -> bool:
        return not self.violations(primitives)


def relativity_witness(primitive: Primitive) -> Framework:
    """
    The minimal framework denying one non-neutral primitive.

    Raises:
        ValueError: If the primitive is neutral (no admissible framework
            may deny it)
    """
    if primitive.is_neutral:
        raise ValueError(f"Neutral primitive '{primitive.id}' has no relativity witness")
    return Framework.from_sets(denied=[primitive], name=f"denies:{primitive.kind.value}:{primitive.id}")


def canonical_family(primitives: Iterable[Primitive],
                     policy: AdmissibilityPolicy = DEFAULT_POLICY) -> FrameworkFamily:
    """
    A finite family satisfying both axioms over `primitives`, provided
    `policy` admits every framework in it (the permissive default does).
    A stricter policy may filter out relativity witnesses.

    One relativity witness per distinct non-neutral primitive, plus a
    framework affirming every neutral primitive.
    """
    distinct = list(dict.fromkeys(primitives))
    frameworks = [relativity_witness(p) for p in distinct if not p.is_neutral]
    frameworks.append(Framework.from_sets(
        affirmed=[p for p in distinct if p.is_neutral],
        name="affirms:neutral",
    ))
    return FrameworkFamily(frameworks=tuple(frameworks), policy=policy)
