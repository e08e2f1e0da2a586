"""
Generator configuration.

An optional JSON file; every key is optional and command-line flags win:

    {
        "languages": ["rust", "python"],
        "output_dir": "build/generated",
        "strict": false,
        "services": ["MonsterStorage"]
    }
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

LANGUAGES = ["rust", "cpp", "python"]

# --- JSON Schema Definition ---
SCHEMA = {
    "type": "object",
    "properties": {
        "languages": {
            "type": "array",
            "items": {"type": "string", "enum": LANGUAGES},
        },
        "output_dir": {"type": "string"},
        "strict": {"type": "boolean"},
        "services": {
            "type": "array",
            "items": {"type": "string", "pattern": r"^\S+$"},
        },
    },
    "additionalProperties": False,
}


class ConfigError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("\n".join(errors))
        self.errors = errors


@dataclass
class GeneratorConfig:
    languages: List[str] = field(default_factory=lambda: list(LANGUAGES))
    output_dir: str = "build/generated"
    strict: bool = False
    services: Optional[List[str]] = None  # None keeps every service

    def wants(self, service_name: str) -> bool:
        return self.services is None or service_name in self.services


def validate_json_structure(data: Any, schema: Dict[str, Any], path: str = "") -> List[str]:
    """
    Recursively validates data against a simple JSON schema.
    """
    errors = []

    expected_type = schema.get("type")
    if expected_type:
        # bool is an int subclass, check it first
        if expected_type == "boolean" and not isinstance(data, bool):
            return [f"{path}: Expected boolean, got {type(data).__name__}"]
        elif expected_type == "object" and not isinstance(data, dict):
            return [f"{path}: Expected object, got {type(data).__name__}"]
        elif expected_type == "array" and not isinstance(data, list):
            return [f"{path}: Expected array, got {type(data).__name__}"]
        elif expected_type == "string" and not isinstance(data, str):
            return [f"{path}: Expected string, got {type(data).__name__}"]

    if "enum" in schema and data not in schema["enum"]:
        return [f"{path}: Value '{data}' is not in enum {schema['enum']}"]

    if "pattern" in schema and isinstance(data, str) and not re.match(schema["pattern"], data):
        return [f"{path}: Value '{data}' does not match {schema['pattern']}"]

    if expected_type == "object" and isinstance(data, dict):
        properties = schema.get("properties", {})
        for prop, sub_schema in properties.items():
            if prop in data:
                errors.extend(validate_json_structure(data[prop], sub_schema, f"{path}.{prop}" if path else prop))
        if schema.get("additionalProperties") is False:
            for key in data:
                if key not in properties:
                    errors.append(f"{path or '<root>'}: Unknown field '{key}'")

    if expected_type == "array" and isinstance(data, list) and "items" in schema:
        for i, item in enumerate(data):
            errors.extend(validate_json_structure(item, schema["items"], f"{path}[{i}]"))

    return errors


def validate_config(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of error messages. Empty list implies valid config.
    """
    errors = validate_json_structure(data, SCHEMA)
    if errors:
        return errors

    langs = data.get("languages", [])
    if "languages" in data and not langs:
        errors.append("languages: At least one language is required")
    dupes = sorted({l for l in langs if langs.count(l) > 1})
    if dupes:
        errors.append(f"languages: Duplicate entries {dupes}")
    return errors


def config_from_dict(data: Dict[str, Any]) -> GeneratorConfig:
    errors = validate_config(data)
    if errors:
        raise ConfigError(errors)
    config = GeneratorConfig()
    if "languages" in data:
        config.languages = list(data["languages"])
    if "output_dir" in data:
        config.output_dir = data["output_dir"]
    if "strict" in data:
        config.strict = data["strict"]
    if "services" in data:
        config.services = list(data["services"])
    return config


def load_config(path: str) -> GeneratorConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError([f"{path}: Invalid JSON: {e}"]) from e
    except UnicodeDecodeError as e:
        raise ConfigError([f"{path}: Not valid UTF-8: {e}"]) from e
    return config_from_dict(data)
