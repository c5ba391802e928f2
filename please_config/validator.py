"""Structural validation of parsed configuration documents.

Turns an arbitrary parsed document into a fully defaulted ``Config`` or a
``SchemaValidationError`` that lists every offending field path.
"""

from typing import Any

from pydantic import ValidationError

from please_config.exceptions import FieldIssue, SchemaValidationError
from please_config.schema import Config

ROOT_PATH = "(root)"

_EXPECTED_KIND = {
    "bool_type": "boolean",
    "int_type": "integer",
    "string_type": "string",
    "model_type": "mapping",
    "model_attributes_type": "mapping",
    "dict_type": "mapping",
    "tuple_type": "list",
    "list_type": "list",
}


def validate_config(raw: Any, source: str | None = None) -> Config:
    """Validate a parsed document and fill in every missing field.

    ``None`` (for example an empty YAML file) is treated as an empty document.
    Unknown keys are ignored and ``null`` values are treated as absent.

    Args:
        raw: Parsed document, normally the result of ``yaml.safe_load``
        source: Origin of the document, included in error messages

    Returns:
        Validated configuration

    Raises:
        SchemaValidationError: If any field has the wrong shape or type
    """
    if raw is None:
        raw = {}

    try:
        return Config.model_validate(raw)
    except ValidationError as e:
        raise SchemaValidationError(_collect_issues(e), source=source) from e


def _collect_issues(error: ValidationError) -> list[FieldIssue]:
    return [
        FieldIssue(path=_format_path(detail["loc"]), reason=_format_reason(detail))
        for detail in error.errors(include_url=False)
    ]


def _format_path(loc: tuple[int | str, ...]) -> str:
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def _format_reason(detail: Any) -> str:
    error_type = detail["type"]
    ctx = detail.get("ctx") or {}
    value = detail.get("input")

    if error_type in _EXPECTED_KIND:
        return f"expected {_EXPECTED_KIND[error_type]}, got {_describe_kind(value)}"
    if error_type == "enum":
        return f"expected one of {ctx.get('expected')}, got {value!r}"
    if error_type == "greater_than_equal":
        return f"expected integer >= {ctx.get('ge')}, got {value!r}"
    return str(detail["msg"])


def _describe_kind(value: Any) -> str:
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "list"
    if isinstance(value, dict):
        return "mapping"
    if value is None:
        return "null"
    return type(value).__name__
