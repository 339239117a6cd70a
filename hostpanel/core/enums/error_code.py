"""Reasons carried by DomainError.

Values are stable strings; request handlers map them to redirects (sign-in
page, own dashboard) and tests assert on them.
"""

from enum import Enum


class ErrorCode(Enum):
    """Why a guard refused a request."""

    # switch_user target lookup
    USER_NOT_FOUND = "user_not_found"

    # check_authentication: no acceptable identity
    NOT_AUTHENTICATED = "not_authenticated"
    MAINTENANCE_MODE = "maintenance_mode"

    # identity present but refused
    USER_TYPE_MISMATCH = "user_type_mismatch"
    EXTERNAL_LOGIN_REJECTED = "external_login_rejected"
    SWITCH_USER_NOT_ALLOWED = "switch_user_not_allowed"
