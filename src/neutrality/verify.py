"""
Verification entry point.

Without arguments, runs the built-in example scenarios through the
classification scan and prints a confirmation line.

With an ontology description file, prints the analysis report and,
when --expect is given, checks the verdict.

Exit status:
    0  verification succeeded
    1  verification failed
    2  input could not be read
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from neutrality.analyzer import OntologyReport, analyze_ontology
from neutrality.csv_parser import CSVParseError, parse_csv_file
from neutrality.examples import build_example_scenarios
from neutrality.model import Ontology, PrimitiveKind
from neutrality.scan import contains_causal_or_normative
from neutrality.serialization import SerializationError, ontology_from_json, ontology_from_yaml

logger = logging.getLogger(__name__)

CONFIRMATION = "All neutrality checks passed."

_FORMATS_BY_EXTENSION = {
    ".csv": "csv",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


def detect_format(path: str) -> str:
    ext = os.path.splitext(path)[1].lower()
    return _FORMATS_BY_EXTENSION.get(ext, "yaml")


def load_ontology(path: str, fmt: Optional[str] = None) -> Ontology:
    """
    Load an ontology description from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError / UnicodeDecodeError: If the file can't be read as UTF-8 text
        CSVParseError / SerializationError: If the description is invalid
    """
    fmt = fmt or detect_format(path)
    logger.debug("Loading %s as %s", path, fmt)
    if fmt == "csv":
        return parse_csv_file(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Ontology file not found: {path}")

    ontology = ontology_from_json(content) if fmt == "json" else ontology_from_yaml(content)
    if ontology.name is None:
        ontology = Ontology(ontology.primitives, name=os.path.splitext(os.path.basename(path))[0])
    return ontology


def run_example_scenarios() -> List[str]:
    """Returns a failure message per scenario whose scan result is wrong."""
    failures = []
    for scenario in build_example_scenarios():
        result = contains_causal_or_normative(scenario.ontology)
        logger.debug("Scenario %s: scan=%s", scenario.name, result)
        if result != scenario.expected_scan:
            failures.append(
                f"{scenario.name}: expected {scenario.expected_scan}, got {result}"
            )
    return failures


def format_report(report: OntologyReport) -> str:
    lines = [
        f"Ontology: {report.ontology_name or '<unnamed>'}",
        f"  Primitives:  {report.total_primitives} ({report.distinct_primitives} distinct)",
    ]
    for kind in PrimitiveKind:
        lines.append(f"  {kind.value.capitalize():<12} {report.kind_counts.get(kind, 0)}")
    lines.append(f"  Causal/normative present: {'YES' if report.contains_causal_or_normative else 'NO'}")
    if report.witness is not None:
        lines.append(f"    Witness: {report.witness.kind.value}:{report.witness.id}")
    lines.append(f"  Verdict: {'NEUTRAL' if report.neutral else 'NOT NEUTRAL'}")
    for i, warning in enumerate(report.warnings, 1):
        lines.append(f"  Warning {i}: {warning}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neutrality-verify",
        description="Check whether an ontology is neutral under framework extension",
    )
    parser.add_argument("ontology", nargs="?", help="Ontology description (CSV, YAML or JSON)")
    parser.add_argument("--format", choices=["csv", "yaml", "json"],
                        help="Description format (default: from file extension)")
    parser.add_argument("--expect", choices=["neutral", "non-neutral"],
                        help="Fail unless the verdict matches")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.ontology is None:
        failures = run_example_scenarios()
        if failures:
            for failure in failures:
                print(f"FAILED {failure}")
            return 1
        print(CONFIRMATION)
        return 0

    try:
        ontology = load_ontology(args.ontology, args.format)
    except (OSError, UnicodeDecodeError, CSVParseError, SerializationError) as e:
        logger.error("%s", e)
        return 2

    report = analyze_ontology(ontology)
    print(format_report(report))

    if args.expect is not None:
        expected_neutral = args.expect == "neutral"
        if report.neutral != expected_neutral:
            print(f"FAILED expected {args.expect}")
            return 1
        print(CONFIRMATION)
    return 0


if __name__ == "__main__":
    sys.exit(main())
