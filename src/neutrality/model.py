"""
Core Ontology Model Objects

Defines the fundamental data structures of the neutrality model.

These are pure value types representing:
    - Primitive kinds (classification tags)
    - Primitives (classified atomic assertions)
    - Ontologies (the unit of analysis)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about frameworks or admissibility
        - Are immutable
        - Compare structurally
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple


class PrimitiveKind(Enum):
    """
    Classification tag attached to every primitive.

    This enumeration is closed. No other kind is representable.

        CAUSAL:    "A caused B"
        NORMATIVE: "X is obligated to Y"
        NEUTRAL:   pure existence or identity claims ("entity_A")
    """

    CAUSAL = "causal"
    NORMATIVE = "normative"
    NEUTRAL = "neutral"

    @classmethod
    def parse(cls, text: str) -> "PrimitiveKind":
        """
        Resolve a kind from its textual name.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises:
            ValueError: If the text names no kind
        """
        if isinstance(text, cls):
            return text
        normalized = str(text).strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        valid = ", ".join(k.value for k in cls)
        raise ValueError(f"Unknown primitive kind '{text}' (expected one of: {valid})")


@dataclass(frozen=True)
class Primitive:
    """
    A classified atomic assertion.

    Properties:
        kind:
            PrimitiveKind tag
        id:
            Opaque identifier, never interpreted
            Examples: "entity_A", "A_caused_B", "X_obligated_to_Y"

    IMPORTANT:
        Equality is structural. Two primitives are the same primitive
        exactly when kind and id both match. The same id under two
        different kinds is two different primitives.
    """

    kind: PrimitiveKind
    id: str

    @property
    def is_neutral(self) -> bool:
        return self.kind is PrimitiveKind.NEUTRAL


def causal(primitive_id: str) -> Primitive:
    return Primitive(PrimitiveKind.CAUSAL, primitive_id)


def normative(primitive_id: str) -> Primitive:
    return Primitive(PrimitiveKind.NORMATIVE, primitive_id)


def neutral(primitive_id: str) -> Primitive:
    return Primitive(PrimitiveKind.NEUTRAL, primitive_id)


@dataclass(frozen=True)
class Ontology:
    """
    Ordered, possibly-empty sequence of primitives. The unit of analysis.

    Any sequence is a valid ontology, including the empty one.
    Repeats are permitted.

    ARCHITECTURAL RULE:
        Order is kept for display only.
        Every defined property (scan, consistency, neutrality)
        depends on membership alone.

    Properties:
        primitives:
            Tuple of Primitive values
        name:
            Optional label used in reports
    """

    primitives: Tuple[Primitive, ...] = field(default_factory=tuple)
    name: Optional[str] = None

    def __post_init__(self):
        # Any iterable in, tuple stored
        object.__setattr__(self, "primitives", tuple(self.primitives))

    @classmethod
    def of(cls, *primitives: Primitive, name: Optional[str] = None) -> "Ontology":
        return cls(primitives=primitives, name=name)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]], name: Optional[str] = None) -> "Ontology":
        """
        Build an ontology from (kind, id) pairs.

        Args:
            pairs: Iterable of (kind name or PrimitiveKind, id)
            name: Optional ontology label

        Raises:
            ValueError: If a kind is not recognised
        """
        return cls(
            primitives=tuple(Primitive(PrimitiveKind.parse(kind), pid) for kind, pid in pairs),
            name=name,
        )

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def __contains__(self, primitive: object) -> bool:
        return primitive in self.primitives

    def is_empty(self) -> bool:
        return not self.primitives

    def members(self) -> frozenset:
        """Distinct primitives, ignoring order and repeats."""
        return frozenset(self.primitives)

    def count(self, kind: PrimitiveKind) -> int:
        return sum(1 for p in self.primitives if p.kind is kind)

    def of_kind(self, kind: PrimitiveKind) -> List[Primitive]:
        return [p for p in self.primitives if p.kind is kind]

    def get_primitive(self, primitive_id: str) -> Optional[Primitive]:
        """
        Retrieve the first primitive with the given id.

        Args:
            primitive_id: Primitive identifier

        Returns:
            Primitive or None if not found
        """
        for primitive in self.primitives:
            if primitive.id == primitive_id:
                return primitive
        return None
