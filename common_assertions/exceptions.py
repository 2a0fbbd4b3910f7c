"""
Typed exceptions for precondition checks.

Callers catch by type, not by parsing messages. Every class carries a
``code`` class attribute for machine-readable identification, and the
violation carries the structured context of the failed check.

    PreconditionError (AssertionError)
    +-- PreconditionViolation

Both inherit from ``AssertionError`` so a failed check is handled the same
way as a failed ``assert`` statement. Unlike ``assert``, the checks raise
explicitly and are never stripped by ``python -O``.
"""

from __future__ import annotations


class PreconditionError(AssertionError):
    """Base exception for all precondition check errors."""

    code: str = "PRECONDITION_ERROR"


class PreconditionViolation(PreconditionError):
    """
    A checked condition did not hold.

    ``str(exc)`` is exactly the failure message, marker prefix included.
    """

    code: str = "PRECONDITION_VIOLATION"

    def __init__(self, message: str, *, check: str, subject: str | None = None):
        self.message = message
        self.check = check
        self.subject = subject
        super().__init__(message)
