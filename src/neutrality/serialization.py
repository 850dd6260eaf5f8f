"""
Serialization helpers for ontology and framework descriptions.

Provides JSON/YAML input and output via an intermediate dict representation.
These are description formats handed to the verification entry point,
not a persistence layer.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from neutrality.framework import Framework, FrameworkConsistencyError
from neutrality.model import Ontology, Primitive, PrimitiveKind


class SerializationError(Exception):
    """Raised when a description document is malformed."""
    pass


def primitive_to_dict(p: Primitive) -> Dict[str, Any]:
    return {"kind": p.kind.value, "id": p.id}


def primitive_from_dict(d: Any) -> Primitive:
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a mapping for a primitive, got {type(d).__name__}")
    if "kind" not in d or "id" not in d:
        raise SerializationError(f"Primitive needs 'kind' and 'id': {d!r}")
    try:
        kind = PrimitiveKind.parse(d["kind"])
    except ValueError as e:
        raise SerializationError(str(e))
    pid = d["id"]
    if pid is None or not str(pid).strip():
        raise SerializationError(f"Primitive needs a non-blank 'id': {d!r}")
    return Primitive(kind=kind, id=str(pid))


def _primitive_list(d: Dict[str, Any], key: str) -> List[Primitive]:
    items = d.get(key) or []
    if not isinstance(items, list):
        raise SerializationError(f"'{key}' must be a list")
    return [primitive_from_dict(item) for item in items]


def ontology_to_dict(o: Ontology) -> Dict[str, Any]:
    return {
        "name": o.name,
        "primitives": [primitive_to_dict(p) for p in o.primitives],
    }


def ontology_from_dict(d: Any) -> Ontology:
    if not isinstance(d, dict):
        raise SerializationError("Ontology document must be a mapping")
    return Ontology(primitives=tuple(_primitive_list(d, "primitives")), name=d.get("name"))


def framework_to_dict(f: Framework) -> Dict[str, Any]:
    def ordered(primitives):
        return [primitive_to_dict(p) for p in sorted(primitives, key=lambda p: (p.kind.value, p.id))]

    return {
        "name": f.name,
        "affirms": ordered(f.affirmed),
        "denies": ordered(f.denied),
    }


def framework_from_dict(d: Any) -> Framework:
    if not isinstance(d, dict):
        raise SerializationError("Framework document must be a mapping")
    affirmed = _primitive_list(d, "affirms")
    denied = _primitive_list(d, "denies")
    try:
        return Framework.from_sets(affirmed=affirmed, denied=denied, name=d.get("name"))
    except FrameworkConsistencyError as e:
        raise SerializationError(str(e)) from e


def _load_json(s: str) -> Any:
    try:
        return json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e


def _load_yaml(s: str) -> Any:
    try:
        return yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}") from e


def ontology_to_json(o: Ontology) -> str:
    return json.dumps(ontology_to_dict(o), sort_keys=True)


def ontology_from_json(s: str) -> Ontology:
    return ontology_from_dict(_load_json(s))


def ontology_to_yaml(o: Ontology) -> str:
    return yaml.safe_dump(ontology_to_dict(o), sort_keys=False)


def ontology_from_yaml(s: str) -> Ontology:
    return ontology_from_dict(_load_yaml(s))


def framework_to_json(f: Framework) -> str:
    return json.dumps(framework_to_dict(f), sort_keys=True)


def framework_from_json(s: str) -> Framework:
    return framework_from_dict(_load_json(s))


def framework_to_yaml(f: Framework) -> str:
    return yaml.safe_dump(framework_to_dict(f), sort_keys=False)


def framework_from_yaml(s: str) -> Framework:
    return framework_from_dict(_load_yaml(s))
