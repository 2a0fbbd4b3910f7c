"""
Common Assertions - runtime precondition checks.

Fail-fast helpers that validate a condition and raise a
``PreconditionViolation`` with a descriptive message when it does not hold:
- Boolean truth (``is_true``)
- Non-null references (``not_null``)
- Object state (``state``)
- Non-empty text (``not_empty``)

Checks are stateless. On success they return the checked value unchanged.
"""

from common_assertions.assertions import is_true, not_empty, not_null, state
from common_assertions.exceptions import PreconditionError, PreconditionViolation

__version__ = "0.1.0"

__all__ = [
    "is_true",
    "not_null",
    "state",
    "not_empty",
    "PreconditionError",
    "PreconditionViolation",
]
