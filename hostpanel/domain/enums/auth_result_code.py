"""Outcome codes of an authentication attempt."""

from enum import Enum


class AuthResultCode(str, Enum):
    """Outcome code carried by an AuthResult.

    Only SUCCESS is a valid outcome. Every other code is a denial:
        FAILURE: Generic failure (data inconsistency, see logs).
        FAILURE_IDENTITY_NOT_FOUND: Reserved; unknown usernames are reported
            as FAILURE_CREDENTIAL_INVALID to prevent username enumeration.
        FAILURE_CREDENTIAL_INVALID: Empty fields or wrong username/password.
        FAILURE_UNCATEGORIZED: Policy rejection (suspended, expired,
            maintenance, blocked).
    """

    SUCCESS = "success"
    FAILURE = "failure"
    FAILURE_IDENTITY_NOT_FOUND = "failure_identity_not_found"
    FAILURE_CREDENTIAL_INVALID = "failure_credential_invalid"
    FAILURE_UNCATEGORIZED = "failure_uncategorized"
