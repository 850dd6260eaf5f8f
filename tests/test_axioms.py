"""
Tests for the domain axioms over finite framework families.
"""

import pytest

from neutrality.axioms import (
    AxiomViolation,
    DomainAxiom,
    FrameworkFamily,
    canonical_family,
    relativity_witness,
)
from neutrality.framework import AdmissibilityPolicy, Framework
from neutrality.model import Ontology, causal, neutral, normative


class TestDomainAxiom:

    def test_two_axioms(self):
        assert len(list(DomainAxiom)) == 2

    def test_statements(self):
        assert "denied by some admissible framework" in DomainAxiom.FRAMEWORK_RELATIVITY.statement
        assert "neutral" in DomainAxiom.NEUTRAL_PRIMITIVES_UNDISPUTED.statement


class TestRelativityWitness:

    @pytest.mark.parametrize("primitive", [causal("A_caused_B"), normative("X_obligated_to_Y")])
    def test_witness_denies_only_its_primitive(self, primitive):
        f = relativity_witness(primitive)
        assert f.denied == frozenset({primitive})
        assert not f.affirmed
        assert primitive.id in f.name

    def test_neutral_primitive_has_no_witness(self):
        with pytest.raises(ValueError, match="Neutral primitive"):
            relativity_witness(neutral("entity_A"))


class TestFrameworkFamily:

    def test_relativity_violation_reported(self):
        family = FrameworkFamily(frameworks=(Framework(),))
        violations = family.violations([causal("A_caused_B")])
        assert violations == [AxiomViolation(DomainAxiom.FRAMEWORK_RELATIVITY, causal("A_caused_B"))]
        assert "No admissible framework denies causal:A_caused_B" == violations[0].describe()

    def test_neutral_denial_reported(self):
        sceptic = Framework.from_sets(denied=[neutral("entity_A")], name="sceptic")
        family = FrameworkFamily(frameworks=(sceptic,))
        violations = family.violations([neutral("entity_A")])
        assert len(violations) == 1
        assert violations[0].axiom is DomainAxiom.NEUTRAL_PRIMITIVES_UNDISPUTED
        assert violations[0].framework is sceptic
        assert "sceptic" in violations[0].describe()

    def test_repeated_primitives_examined_once(self):
        family = FrameworkFamily()
        violations = family.violations([causal("x"), causal("x")])
        assert len(violations) == 1

    def test_denying_witness(self):
        denier = Framework.from_sets(denied=[causal("x")])
        family = FrameworkFamily(frameworks=(Framework(), denier))
        assert family.denying_witness(causal("x")) is denier
        assert family.denying_witness(causal("y")) is None

    def test_inadmissible_frameworks_do_not_count(self):
        class NoneAdmissible(AdmissibilityPolicy):
            pass

        denier = Framework.from_sets(denied=[causal("x"), neutral("e")])
        family = FrameworkFamily(frameworks=(denier,), policy=NoneAdmissible())
        assert family.admissible() == []
        violations = family.violations([causal("x"), neutral("e")])
        assert [v.axiom for v in violations] == [DomainAxiom.FRAMEWORK_RELATIVITY]

    def test_family_is_iterable(self):
        family = FrameworkFamily(frameworks=[Framework(), Framework(name="b")])
        assert isinstance(family.frameworks, tuple)
        assert len(family) == 2
        assert [f.name for f in family] == [None, "b"]


class TestCanonicalFamily:

    def test_satisfies_axioms(self):
        o = Ontology.of(neutral("entity_E"), causal("A_caused_B"), normative("X_obligated_to_Y"))
        family = canonical_family(o)
        assert family.satisfies_axioms(o)

    def test_one_witness_per_distinct_non_neutral(self):
        o = Ontology.of(causal("a"), causal("a"), normative("b"), neutral("c"))
        family = canonical_family(o)
        # two witnesses plus the neutral affirmer
        assert len(family) == 3

    def test_stricter_policy_can_break_relativity(self):
        class NeutralAffirmerOnly(AdmissibilityPolicy):
            def admits(self, framework):
                return framework.name == "affirms:neutral"

        primitives = [causal("c"), neutral("e")]
        assert canonical_family(primitives).satisfies_axioms(primitives)

        strict = canonical_family(primitives, policy=NeutralAffirmerOnly())
        violations = strict.violations(primitives)
        assert [v.axiom for v in violations] == [DomainAxiom.FRAMEWORK_RELATIVITY]
        assert violations[0].primitive == causal("c")

    def test_empty_input(self):
        family = canonical_family([])
        assert len(family) == 1
        assert family.satisfies_axioms([])
