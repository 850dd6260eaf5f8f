"""
Framework Model

An interpretive framework assigns each primitive one of three outcomes:
affirmed, denied, or silent.

Frameworks are finite, explicit lookups. Every primitive absent from the
lookup is SILENT, so `affirms` and `denies` are total predicates over the
whole primitive domain.

ARCHITECTURAL RULE:
    A framework never both affirms and denies the same primitive.
    This is enforced at construction time. An inconsistent
    framework cannot be built.

Admissibility is a strategy object. The model ships a single permissive
policy (every consistent framework is admissible); a narrower,
domain-specific policy can be substituted without touching the rest of
the model.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Mapping, Optional

from neutrality.model import Primitive

logger = logging.getLogger(__name__)


class FrameworkConsistencyError(Exception):
    """Raised when a framework would both affirm and deny a primitive."""
    pass


class Verdict(Enum):
    """Outcome a framework assigns to a single primitive."""

    AFFIRMED = "affirmed"
    DENIED = "denied"
    SILENT = "silent"


@dataclass(frozen=True)
class Framework:
    """
    Finite, internally consistent interpretive stance.

    Properties:
        affirmed:
            Primitives the framework affirms
        denied:
            Primitives the framework denies
        name:
            Optional label used in reports and error messages

    INVARIANT:
        affirmed and denied are disjoint.

    Example:
        Framework.from_sets(
            affirmed=[neutral("entity_A")],
            denied=[causal("A_caused_B")],
            name="sceptic",
        )
    """

    affirmed: FrozenSet[Primitive] = field(default_factory=frozenset)
    denied: FrozenSet[Primitive] = field(default_factory=frozenset)
    name: Optional[str] = None

    def __post_init__(self):
        affirmed = frozenset(self.affirmed)
        denied = frozenset(self.denied)
        conflicts = affirmed & denied
        if conflicts:
            ids = ", ".join(sorted(f"{p.kind.value}:{p.id}" for p in conflicts))
            label = self.name or "<unnamed>"
            logger.debug("Rejected framework %s: conflicting verdicts on %s", label, ids)
            raise FrameworkConsistencyError(
                f"Framework {label} both affirms and denies: {ids}"
            )
        object.__setattr__(self, "affirmed", affirmed)
        object.__setattr__(self, "denied", denied)

    @classmethod
    def from_sets(cls, affirmed: Iterable[Primitive] = (), denied: Iterable[Primitive] = (),
                  name: Optional[str] = None) -> "Framework":
        return cls(affirmed=frozenset(affirmed), denied=frozenset(denied), name=name)

    @classmethod
    def from_verdicts(cls, verdicts: Mapping[Primitive, Verdict],
                      name: Optional[str] = None) -> "Framework":
        """
        Build a framework from an explicit primitive -> Verdict lookup.

        SILENT entries are accepted and simply dropped.

        Raises:
            TypeError: If a value is not a Verdict
        """
        affirmed = set()
        denied = set()
        for primitive, verdict in verdicts.items():
            if not isinstance(verdict, Verdict):
                raise TypeError(f"Expected Verdict for {primitive!r}, got {type(verdict).__name__}")
            if verdict is Verdict.AFFIRMED:
                affirmed.add(primitive)
            elif verdict is Verdict.DENIED:
                denied.add(primitive)
        return cls(affirmed=frozenset(affirmed), denied=frozenset(denied), name=name)

    def verdict(self, primitive: Primitive) -> Verdict:
        if primitive in self.denied:
            return Verdict.DENIED
        if primitive in self.affirmed:
            return Verdict.AFFIRMED
        return Verdict.SILENT

    def affirms(self, primitive: Primitive) -> bool:
        return primitive in self.affirmed

    def denies(self, primitive: Primitive) -> bool:
        return primitive in self.denied

    def is_silent_on(self, primitive: Primitive) -> bool:
        return self.verdict(primitive) is Verdict.SILENT


class AdmissibilityPolicy:
    """
    Strategy deciding which frameworks count as legitimate.

    Subclasses override `admits`. The base class admits nothing.
    """

    def admits(self, framework: Framework) -> bool:
        return False

    def __call__(self, framework: Framework) -> bool:
        return self.admits(framework)


class PermissivePolicy(AdmissibilityPolicy):
    """
    Every internally consistent framework is admissible.

    Consistency is already guaranteed by Framework construction,
    so this admits every Framework value.
    """

    def admits(self, framework: Framework) -> bool:
        return isinstance(framework, Framework)


DEFAULT_POLICY = PermissivePolicy()
