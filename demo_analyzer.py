"""
Demo: Run the analyzer on the example ontologies and print each report.
"""

from neutrality.examples import build_example_scenarios
from neutrality.analyzer import analyze_ontology
from neutrality.serialization import ontology_to_yaml
from neutrality.verify import format_report


if __name__ == "__main__":
    for scenario in build_example_scenarios():
        report = analyze_ontology(scenario.ontology)
        print()
        print("=" * 70)
        print(format_report(report))
        print("=" * 70)

    # Also save the mixed example to YAML for inspection
    mixed = build_example_scenarios()[-1].ontology
    with open("example_ontology_output.yaml", "w") as f:
        f.write(ontology_to_yaml(mixed))
    print("✅ Ontology exported to example_ontology_output.yaml")
