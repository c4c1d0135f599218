# =============================================================================
# core/validation.py  —  Tool Argument Validation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Converts a raw argument mapping (as delivered by a tool call) into one of
#   the typed input dataclasses from core/models.py, or raises
#   pydantic.ValidationError listing every problem found.
#
#   The rules themselves live on the models (types, Literal enums,
#   ResourceId constraints, extra="forbid").  This runs before any network
#   call, so a rejected call never reaches RunPod.
# =============================================================================

from functools import lru_cache
from typing import Any, Mapping, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

__all__ = ["ValidationError", "validate_input"]

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(model: type) -> TypeAdapter:
    return TypeAdapter(model)


def validate_input(model: Type[T], arguments: Mapping[str, Any]) -> T:
    """Build a validated `model` instance from `arguments`.

    Args:
        model: One of the input dataclasses from core/models.py.
        arguments: Raw tool arguments keyed by snake_case field name.

    Returns:
        An instance of `model`.

    Raises:
        ValidationError: If any field is missing, blank, mistyped or unknown.
    """
    return _adapter(model).validate_python(dict(arguments))
