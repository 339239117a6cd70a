"""Phases of a single authentication attempt."""

from enum import Enum


class AuthPhase(str, Enum):
    """Ordered stages of an authentication attempt.

    BEFORE: Early gates (brute-force detection). A stop here ends the attempt.
    DURING: Identity resolution (credential check).
    AFTER: Policy gates that may downgrade a valid result, and side effects
        such as the password recovery hint. Always dispatched.
    """

    BEFORE = "before_authentication"
    DURING = "authentication"
    AFTER = "after_authentication"
