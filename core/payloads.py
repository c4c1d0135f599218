# =============================================================================
# core/payloads.py  —  Input Model → Wire Format
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Splits a validated input model into the three pieces of an HTTP call:
#     - the path identifier (resource id interpolated into the URL)
#     - query parameters (for list/get calls)
#     - a JSON body (for create/update calls)
#
# ENCODING RULES:
#   - snake_case field names become camelCase keys.
#   - Fields left as None are dropped entirely.
#   - Query lists become one (key, value) pair per item, order preserved,
#     which httpx renders as repeated keys: ?gpuTypeId=A&gpuTypeId=B
#   - Query booleans render as "true"/"false".
#   - Bodies keep native JSON types (lists, objects, numbers, booleans).
# =============================================================================

from dataclasses import fields
from typing import Any
from urllib.parse import quote

from core.models import PATH_ID


def camel_case(name: str) -> str:
    """Convert a snake_case field name to the API's camelCase key."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def path_identifier(inputs: Any) -> str:
    """Return the URL-escaped resource id of a get/update/delete model."""
    for f in fields(inputs):
        if f.metadata.get(PATH_ID):
            return quote(getattr(inputs, f.name), safe="")
    raise ValueError(f"{type(inputs).__name__} has no path identifier")


def _supplied(inputs: Any):
    """Yield (camelCaseKey, value) for every supplied non-path field."""
    for f in fields(inputs):
        if f.metadata.get(PATH_ID):
            continue
        value = getattr(inputs, f.name)
        if value is not None:
            yield camel_case(f.name), value


def to_query_params(inputs: Any) -> list[tuple[str, str]]:
    """Encode the supplied filters of `inputs` as ordered query pairs."""
    params = []
    for key, value in _supplied(inputs):
        items = value if isinstance(value, list) else [value]
        for item in items:
            params.append((key, _query_value(item)))
    return params


def to_body(inputs: Any) -> dict[str, Any]:
    """Encode the supplied fields of `inputs` as a JSON-ready request body."""
    return {key: value for key, value in _supplied(inputs)}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
