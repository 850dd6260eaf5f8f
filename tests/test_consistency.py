"""
Tests for extension consistency and bounded stability.
"""

import pytest

from neutrality.consistency import (
    denied_members,
    extension_inconsistent,
    is_neutral,
    is_stable_under,
)
from neutrality.framework import AdmissibilityPolicy, Framework
from neutrality.model import Ontology, causal, neutral, normative


@pytest.fixture
def mixed():
    return Ontology.of(neutral("entity_E"), causal("A_caused_B"), normative("X_obligated_to_Y"))


class TestExtensionInconsistent:

    def test_denied_member_conflicts(self, mixed):
        f = Framework.from_sets(denied=[causal("A_caused_B")])
        assert extension_inconsistent(mixed, f)

    def test_denial_of_non_member_does_not_conflict(self, mixed):
        f = Framework.from_sets(denied=[causal("C_caused_D")])
        assert not extension_inconsistent(mixed, f)

    def test_affirmation_never_conflicts(self, mixed):
        f = Framework.from_sets(affirmed=list(mixed))
        assert not extension_inconsistent(mixed, f)

    def test_silent_framework_never_conflicts(self, mixed):
        assert not extension_inconsistent(mixed, Framework())

    def test_empty_ontology_never_conflicts(self):
        f = Framework.from_sets(denied=[causal("A_caused_B"), neutral("entity_E")])
        assert not extension_inconsistent(Ontology(), f)

    def test_denied_members(self, mixed):
        f = Framework.from_sets(denied=[normative("X_obligated_to_Y"), causal("A_caused_B")])
        assert denied_members(mixed, f) == [causal("A_caused_B"), normative("X_obligated_to_Y")]


class TestStability:

    def test_stable_under_empty_family(self, mixed):
        assert is_stable_under(mixed, [])

    def test_one_conflicting_framework_breaks_stability(self, mixed):
        frameworks = [Framework(), Framework.from_sets(denied=[normative("X_obligated_to_Y")])]
        assert not is_stable_under(mixed, frameworks)

    def test_inadmissible_frameworks_are_ignored(self, mixed):
        class RejectDeniers(AdmissibilityPolicy):
            def admits(self, framework):
                return not framework.denied

        frameworks = [Framework.from_sets(denied=[causal("A_caused_B")])]
        assert not is_stable_under(mixed, frameworks)
        assert is_stable_under(mixed, frameworks, policy=RejectDeniers())

    def test_accepts_generator_ontology(self):
        frameworks = [Framework.from_sets(denied=[causal("b")])] * 2
        assert not is_stable_under((p for p in [causal("b")]), frameworks)


class TestIsNeutral:

    def test_neutral_reads_scan(self, mixed):
        assert not is_neutral(mixed)
        assert is_neutral(Ontology.of(neutral("entity_A"), neutral("entity_B")))
        assert is_neutral(Ontology())
