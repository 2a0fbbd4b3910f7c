"""
Precondition checks.

Each check evaluates one condition and either returns (the checked value,
or ``True`` for boolean checks) or raises ``PreconditionViolation``.

Variants are selected by argument:

    is_true(i > 0)                                     # default message
    is_true(i > 0, "i")                                # named
    is_true(i > 0, lambda: f"{i} must be positive")    # lazy
    is_true(i > 0, message_supplier=lambda: f"{i}")    # lazy, by keyword

A callable second argument is a message supplier, not a name. A supplier
is only invoked when the check fails, and then exactly once. Passing
``message_supplier=None`` explicitly selects the lazy variant without
details.

Checks hold no state and are safe to call from any thread.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NoReturn, TypeVar

from common_assertions.exceptions import PreconditionViolation
from common_assertions.logging_config import get_logger
from common_assertions.messages import (
    DEFAULT_EXPRESSION_NAME,
    DEFAULT_NOT_NULL_DETAIL,
    DEFAULT_TEXT_NAME,
    MUST_BE_NULL,
    MUST_BE_TRUE,
    MUST_NOT_BE_EMPTY,
    MessageSupplier,
    failure_message,
    named_message,
    null_safe_get,
)

__all__ = ["is_true", "not_null", "state", "not_empty"]

logger = get_logger("checks")

T = TypeVar("T")


class _Unset(Enum):
    """Marker type for an omitted ``message_supplier``.

    ``None`` is a meaningful supplier value (no details), so omission
    needs its own value.
    """

    NO_SUPPLIER = "no_supplier"


_NO_SUPPLIER = _Unset.NO_SUPPLIER

SupplierArg = MessageSupplier | None | _Unset


def _resolve_detail(
    check: str,
    given: str | MessageSupplier | None,
    message_supplier: SupplierArg,
    label: str = "name",
) -> tuple[str | None, SupplierArg]:
    """Split the second argument into a literal and a supplier."""
    if callable(given):
        if message_supplier is not _NO_SUPPLIER:
            raise TypeError(f"{check}() got two message suppliers")
        return None, given
    if given is not None and message_supplier is not _NO_SUPPLIER:
        raise TypeError(
            f"{check}() takes either a {label} or a message_supplier, not both"
        )
    return given, message_supplier


def _fail(message: str, check: str, subject: str | None = None) -> NoReturn:
    logger.debug(
        "precondition_violated",
        extra={"check": check, "subject": subject, "failure_message": message},
    )
    raise PreconditionViolation(message, check=check, subject=subject)


def is_true(
    expression: Any,
    name: str | MessageSupplier | None = None,
    *,
    message_supplier: SupplierArg = _NO_SUPPLIER,
) -> bool:
    """
    Assert that a boolean expression holds.

    Args:
        expression: Condition to check; evaluated once for truthiness.
        name: Field or expression name used in the failure message, or a
            message supplier.
        message_supplier: Zero-argument callable producing the message.
            Omitted by default; ``None`` means "No details provided".

    Returns:
        True.

    Raises:
        PreconditionViolation: If ``expression`` is falsy.
    """
    name, message_supplier = _resolve_detail("is_true", name, message_supplier)
    if not expression:
        if message_supplier is not _NO_SUPPLIER:
            _fail(null_safe_get(message_supplier), "is_true")
        subject = DEFAULT_EXPRESSION_NAME if name is None else name
        _fail(named_message(subject, MUST_BE_TRUE), "is_true", name)
    return True


def not_null(
    obj: T | None,
    name: str | MessageSupplier | None = None,
    *,
    message_supplier: SupplierArg = _NO_SUPPLIER,
) -> T:
    """
    Assert that an object is not None.

    Returns:
        ``obj`` itself, unchanged.

    Raises:
        PreconditionViolation: If ``obj`` is None.
    """
    name, message_supplier = _resolve_detail("not_null", name, message_supplier)
    if obj is None:
        if message_supplier is not _NO_SUPPLIER:
            _fail(null_safe_get(message_supplier), "not_null")
        if name is None:
            _fail(failure_message(DEFAULT_NOT_NULL_DETAIL), "not_null")
        _fail(named_message(name, MUST_BE_NULL), "not_null", name)
    return obj


def state(
    expression: Any,
    message: str | MessageSupplier | None = None,
    *,
    message_supplier: SupplierArg = _NO_SUPPLIER,
) -> bool:
    """
    Assert a condition on the caller's state, e.g. that an id is not
    already initialized.

    Exactly one message form must be given: a literal ``message``, or a
    supplier (positionally or as ``message_supplier``).

    Raises:
        PreconditionViolation: If ``expression`` is falsy.
        TypeError: If neither or both message forms are given.
    """
    message, message_supplier = _resolve_detail(
        "state", message, message_supplier, label="message"
    )
    if message is None and message_supplier is _NO_SUPPLIER:
        raise TypeError("state() requires a message or a message_supplier")
    if not expression:
        if message_supplier is not _NO_SUPPLIER:
            _fail(null_safe_get(message_supplier), "state")
        _fail(failure_message(message), "state")
    return True


def not_empty(
    text: str | None,
    name: str | MessageSupplier | None = None,
    *,
    message_supplier: SupplierArg = _NO_SUPPLIER,
) -> str:
    """
    Assert that text is neither None nor the empty string.

    Whitespace-only text is not empty.

    Returns:
        ``text`` itself, unchanged.

    Raises:
        PreconditionViolation: If ``text`` is None or has zero length.
    """
    name, message_supplier = _resolve_detail("not_empty", name, message_supplier)
    if text is None or len(text) == 0:
        if message_supplier is not _NO_SUPPLIER:
            _fail(null_safe_get(message_supplier), "not_empty")
        subject = DEFAULT_TEXT_NAME if name is None else name
        _fail(named_message(subject, MUST_NOT_BE_EMPTY), "not_empty", name)
    return text
