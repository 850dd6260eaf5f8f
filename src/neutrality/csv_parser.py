"""
CSV Parser for ontology descriptions (Raw Input → Ontology).

CSV Format:
    kind, id

    kind: causal | normative | neutral (case-insensitive)
    id:   opaque primitive identifier

Syntax Notes:
    - Extra columns are ignored
    - Rows whose cells are all blank are skipped
    - Repeated rows are kept (ontologies permit repeats) but reported
      with a UserWarning
"""

import csv
import logging
import os
import warnings
from dataclasses import dataclass
from io import StringIO
from typing import List, Optional

from neutrality.model import Ontology, Primitive, PrimitiveKind

logger = logging.getLogger(__name__)


class CSVParseError(Exception):
    """Raised when CSV parsing fails."""
    pass


@dataclass
class CSVRow:
    """Parsed CSV row."""
    line: int
    kind: str
    id: str


def _parse_csv_rows(csv_content: str) -> List[CSVRow]:
    """Parse CSV content into structured rows."""
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        raise CSVParseError("CSV is empty")

    fieldnames = [(name or '').strip().lower() for name in reader.fieldnames]
    reader.fieldnames = fieldnames

    required_columns = ['kind', 'id']
    missing = [col for col in required_columns if col not in fieldnames]
    if missing:
        raise CSVParseError(f"Missing required columns: {missing}")

    rows = []
    for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is line 1)
        kind = (row.get('kind') or '').strip()
        pid = (row.get('id') or '').strip()
        if not kind and not pid:
            continue
        rows.append(CSVRow(line=row_num, kind=kind, id=pid))

    return rows


def _row_to_primitive(row: CSVRow) -> Primitive:
    if not row.id:
        raise CSVParseError(f"Error parsing row {row.line}: missing id")
    try:
        kind = PrimitiveKind.parse(row.kind)
    except ValueError as e:
        raise CSVParseError(f"Error parsing row {row.line}: {e}")
    return Primitive(kind=kind, id=row.id)


def parse_csv_string(csv_content: str, ontology_name: Optional[str] = None) -> Ontology:
    """
    Parse CSV content into an Ontology.

    Args:
        csv_content: CSV as string
        ontology_name: Optional name for the ontology

    Returns:
        Ontology in row order

    Raises:
        CSVParseError: If the header or any row is invalid
    """
    rows = _parse_csv_rows(csv_content)
    primitives = [_row_to_primitive(row) for row in rows]

    seen = set()
    for row, primitive in zip(rows, primitives):
        if primitive in seen:
            warnings.warn(
                f"Repeated primitive {primitive.kind.value}:{primitive.id} on row {row.line}",
                UserWarning,
            )
        seen.add(primitive)

    logger.debug("Parsed %d primitives from CSV", len(primitives))
    return Ontology(primitives=tuple(primitives), name=ontology_name)


def parse_csv_file(filepath: str, ontology_name: Optional[str] = None) -> Ontology:
    """
    Parse CSV file into an Ontology.

    Args:
        filepath: Path to CSV file
        ontology_name: Optional name (defaults to the file's base name)

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVParseError: If parsing fails
    """
    try:
        with open(filepath, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    if ontology_name is None:
        ontology_name = os.path.splitext(os.path.basename(filepath))[0]

    return parse_csv_string(content, ontology_name=ontology_name)


__all__ = [
    "parse_csv_string",
    "parse_csv_file",
    "CSVParseError",
]
