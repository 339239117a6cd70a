"""User-facing authentication messages.

These strings end up in AuthResult.messages or in guard failures and are
shown to the person signing in. They are deliberately generic: diagnostic
detail goes to the logger, never to these messages.

Usage:
    from hostpanel.domain.errors import AuthMessage

    return SetResult(result=AuthResult.failure(
        AuthResultCode.FAILURE_CREDENTIAL_INVALID,
        AuthMessage.INVALID_CREDENTIALS,
    ))
"""


class AuthMessage:
    """Authentication message constants.

    Message Categories:
        - Credential errors: INVALID_CREDENTIALS
        - Account policy: ACCOUNT_SUSPENDED, ACCOUNT_EXPIRED, UNEXPECTED_ERROR
        - Pipeline safety net: UNKNOWN_REASON
        - Brute-force detection: BLOCKED, MUST_WAIT (format with MM:SS)
        - Guards: NOT_AUTHENTICATED, EXTERNAL_LOGIN, SWITCH_USER_*
    """

    INVALID_CREDENTIALS = "Invalid credentials."
    UNKNOWN_REASON = "Unknown reason."

    ACCOUNT_SUSPENDED = "Your account has been suspended. Please contact your reseller."
    ACCOUNT_EXPIRED = "Your account is expired. Please contact your reseller."
    UNEXPECTED_ERROR = "An unexpected error occurred. Please contact your reseller."

    BLOCKED = "You have been blocked for {remaining} minutes."
    MUST_WAIT = "You must wait {remaining} minutes before the next attempt."

    PASSWORD_LOST = "Password lost?"

    NOT_AUTHENTICATED = "You must be signed in to access this page."
    MAINTENANCE_ACTIVE = "The panel is under maintenance. Only administrators can access it."
    USER_TYPE_MISMATCH = "You are not allowed to access this interface."
    EXTERNAL_LOGIN = "Requests from external sites are not allowed."

    SWITCH_USER_GUEST = "Guest users cannot become another user."
    SWITCH_USER_SELF = "You cannot switch to your own account."
    SWITCH_USER_FORBIDDEN = "This account switch is not allowed."
    SWITCH_USER_NOT_OWNED = "A reseller can only become one of its customers."
    SWITCH_USER_NOT_FOUND = "The requested account does not exist."
