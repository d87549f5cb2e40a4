"""Read structured data files (JSON and YAML) for the schema validators."""

import json
from pathlib import Path

import yaml

from bizsite.validation.errors import ContentValidationError


def read_json(path: Path, error_cls: type[ContentValidationError] = ContentValidationError):
    """Parse a JSON file, raising ``error_cls`` if it is missing or malformed."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise error_cls(f"File not found: {path}", [f"{path}: file not found"]) from e
    except json.JSONDecodeError as e:
        raise error_cls(
            f"Invalid JSON in {path}: {e}", [f"{path}: line {e.lineno} column {e.colno}: {e.msg}"]
        ) from e


def read_yaml(path: Path, error_cls: type[ContentValidationError] = ContentValidationError):
    """Parse a YAML file, raising ``error_cls`` if it is missing or malformed.

    An empty document loads as an empty dict.
    """
    try:
        return yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except FileNotFoundError as e:
        raise error_cls(f"File not found: {path}", [f"{path}: file not found"]) from e
    except yaml.YAMLError as e:
        raise error_cls(f"Invalid YAML in {path}: {e}", [f"{path}: {e}"]) from e
