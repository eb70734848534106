"""Schema validation for submitted receipt payloads."""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_receipt_payload(data: dict) -> None:
    """Validate receipt payload shape against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("receipt")
    jsonschema.validate(data, schema)
