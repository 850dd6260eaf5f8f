"""
Example ontologies used by the verification entry point and the tests.

Each scenario pairs an ontology with the scan result it must produce.
"""
from dataclasses import dataclass
from typing import List

from neutrality.model import Ontology, causal, neutral, normative


@dataclass(frozen=True)
class Scenario:
    ontology: Ontology
    expected_scan: bool

    @property
    def name(self) -> str:
        return self.ontology.name or "<unnamed>"


def build_example_scenarios() -> List[Scenario]:
    return [
        Scenario(Ontology.of(name="empty"), expected_scan=False),
        Scenario(
            Ontology.of(neutral("entity_A"), neutral("entity_B"), name="entities_only"),
            expected_scan=False,
        ),
        Scenario(Ontology.of(causal("A_caused_B"), name="single_causal"), expected_scan=True),
        Scenario(Ontology.of(normative("X_obligated_to_Y"), name="single_normative"), expected_scan=True),
        Scenario(
            Ontology.of(neutral("entity_E"), causal("A_caused_B"), name="mixed"),
            expected_scan=True,
        ),
    ]
