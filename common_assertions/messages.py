"""Failure message texts and lazy message resolution."""

from __future__ import annotations

from typing import Callable

FAILURE_MARKER: str = "[Assertion failed] - "

# Used when a lazy check fails and no message supplier was given.
NO_DETAILS: str = "No details provided"

DEFAULT_EXPRESSION_NAME: str = "expression"
DEFAULT_TEXT_NAME: str = "text"
DEFAULT_NOT_NULL_DETAIL: str = "The given object must not be null"

MUST_BE_TRUE: str = " must be true"
# Wording kept as-is; existing callers match on it.
MUST_BE_NULL: str = " must be null"
MUST_NOT_BE_EMPTY: str = " must not be null or empty"

MessageSupplier = Callable[[], object]


def failure_message(detail: str) -> str:
    """Prefix a message body with the failure marker."""
    return f"{FAILURE_MARKER}{detail}"


def named_message(name: str, suffix: str) -> str:
    """Build ``"<marker><name><suffix>"``, e.g. ``"... - count must be true"``."""
    return failure_message(f"{name}{suffix}")


def null_safe_get(message_supplier: MessageSupplier | None) -> str:
    """
    Resolve a lazy failure message.

    Invokes ``message_supplier`` exactly once. A missing supplier resolves
    to ``NO_DETAILS``. Exceptions raised by the supplier propagate.
    """
    if message_supplier is None:
        return failure_message(NO_DETAILS)
    return failure_message(str(message_supplier()))
