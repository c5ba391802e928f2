"""
JSON Schema export for editor and external-tool validation of config files.

The schema is derived from the Pydantic models and flattened into a single
draft-07 document with every ``$ref`` inlined, so that tools without
``$defs`` support can consume it.
"""

import copy
import json
from pathlib import Path
from typing import Any

from please_config import __version__
from please_config.schema import Config

JSON_SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"
SCHEMA_TITLE = "PleaseAI Configuration Schema"
SCHEMA_DESCRIPTION = "Configuration schema for the PleaseAI bot (.please/config.yml)"


def default_schema_id(version: str) -> str:
    """Get the stable document identifier for a schema version."""
    return f"urn:please-config:schema:{version}"


def build_json_schema(version: str = __version__, schema_id: str | None = None) -> dict[str, Any]:
    """Build the JSON Schema document describing ``Config``.

    Args:
        version: Version recorded in the document
        schema_id: Value for ``$id``; derived from the version if omitted

    Returns:
        JSON-serializable schema document
    """
    generated = Config.model_json_schema()
    definitions = generated.get("$defs", {})
    body = _inline_refs(generated, definitions)

    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": schema_id or default_schema_id(version),
        **body,
        "title": SCHEMA_TITLE,
        "description": SCHEMA_DESCRIPTION,
        "version": version,
    }


def _inline_refs(node: Any, definitions: dict[str, Any]) -> Any:
    if isinstance(node, dict):
        if "$ref" in node:
            name = node["$ref"].rsplit("/", 1)[-1]
            resolved = _inline_refs(copy.deepcopy(definitions[name]), definitions)
            siblings = {key: _inline_refs(value, definitions) for key, value in node.items() if key != "$ref"}
            return {**resolved, **siblings}
        return {key: _inline_refs(value, definitions) for key, value in node.items() if key != "$defs"}
    if isinstance(node, list):
        return [_inline_refs(item, definitions) for item in node]
    return node


def write_json_schema(output_path: Path, version: str = __version__) -> dict[str, Any]:
    """Write the schema document as pretty-printed JSON.

    Parent directories are created as needed.

    Returns:
        The document that was written
    """
    schema = build_json_schema(version=version)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
    return schema
