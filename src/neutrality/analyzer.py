"""
Ontology Analyzer — Read-only diagnostics for an ontology.

This module provides lightweight analysis of Ontology objects:
    - Inventory of primitives by kind
    - Non-neutral witnesses found by the classification scan
    - Neutrality verdict (through the equivalence property)
    - Warning flags for suspicious descriptions

IMPORTANT: It does NOT modify the ontology and does NOT consult any
framework. It only produces reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from neutrality.consistency import is_neutral
from neutrality.model import Ontology, Primitive, PrimitiveKind
from neutrality.scan import contains_causal_or_normative, non_neutral_primitives


@dataclass
class OntologyReport:
    """Analysis report for a single ontology."""

    ontology_name: Optional[str]
    total_primitives: int = 0
    distinct_primitives: int = 0

    # Inventory
    kind_counts: Dict[PrimitiveKind, int] = field(default_factory=dict)
    duplicate_primitives: Set[Primitive] = field(default_factory=set)
    ambiguous_ids: Set[str] = field(default_factory=set)  # Same id, several kinds

    # Decision
    non_neutral: List[Primitive] = field(default_factory=list)
    contains_causal_or_normative: bool = False
    neutral: bool = True

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def witness(self) -> Optional[Primitive]:
        return self.non_neutral[0] if self.non_neutral else None


def analyze_ontology(ontology: Ontology) -> OntologyReport:
    """
    Inventory an ontology and record the scan verdict.

    Checks for:
    - Primitive counts per kind
    - Repeated primitives and ids used under more than one kind
    - Causal or normative primitives that break neutrality

    Returns an OntologyReport with metrics and warnings.
    """
    report = OntologyReport(ontology_name=ontology.name)

    report.total_primitives = len(ontology)
    report.distinct_primitives = len(ontology.members())
    report.kind_counts = {kind: ontology.count(kind) for kind in PrimitiveKind}

    occurrences = Counter(ontology)
    report.duplicate_primitives = {p for p, n in occurrences.items() if n > 1}

    kinds_by_id: Dict[str, Set[PrimitiveKind]] = {}
    for primitive in occurrences:
        kinds_by_id.setdefault(primitive.id, set()).add(primitive.kind)
    report.ambiguous_ids = {pid for pid, kinds in kinds_by_id.items() if len(kinds) > 1}

    report.non_neutral = non_neutral_primitives(ontology)
    report.contains_causal_or_normative = contains_causal_or_normative(ontology)
    report.neutral = is_neutral(ontology)

    if ontology.is_empty():
        report.add_warning("Empty ontology: neutral by vacuity")

    if report.duplicate_primitives:
        ids = sorted(f"{p.kind.value}:{p.id}" for p in report.duplicate_primitives)
        report.add_warning(f"Repeated primitives: {', '.join(ids)}")

    if report.ambiguous_ids:
        report.add_warning(
            f"Identifiers used under several kinds: {', '.join(sorted(report.ambiguous_ids))}"
        )

    return report
