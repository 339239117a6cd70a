"""Authentication domain events.

Sign-in (outcome events, published by AuthenticationService):
    - UserSignInSucceeded
    - UserSignInFailed

Credential maintenance:
    - PasswordHashUpgraded (legacy hash replaced by bcrypt after sign-in)

Presentation hooks:
    - SignInPageRendered (published by the web layer while rendering the
      sign-in page; listeners use it to queue page messages)
"""

from dataclasses import dataclass

from hostpanel.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Sign-in
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserSignInSucceeded(DomainEvent):
    """User signed in.

    Triggers:
    - LoggingEventHandler: Log success

    Attributes:
        user_id: Signed-in account.
        username: Signed-in account name.
        user_type: Account type value (admin, reseller, user).
    """

    user_id: int
    username: str
    user_type: str


@dataclass(frozen=True, kw_only=True)
class UserSignInFailed(DomainEvent):
    """User sign-in was denied.

    Triggers:
    - LoggingEventHandler: Log failure

    Attributes:
        username: Submitted username.
        reason: AuthResultCode value of the final result.
        user_id: Account ID if an identity was resolved before the denial
            (suspended, expired, maintenance).
        client_ip: Client IP address when known.
    """

    username: str
    reason: str
    user_id: int | None = None
    client_ip: str | None = None


# ═══════════════════════════════════════════════════════════════
# Credential maintenance
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PasswordHashUpgraded(DomainEvent):
    """Legacy password hash replaced with a bcrypt hash.

    Triggers:
    - LoggingEventHandler: Log upgrade

    Attributes:
        user_id: Account whose hash was upgraded.
        username: Account name.
        previous_algorithm: HashAlgorithm value of the replaced hash.
    """

    user_id: int
    username: str
    previous_algorithm: str


# ═══════════════════════════════════════════════════════════════
# Presentation hooks
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class SignInPageRendered(DomainEvent):
    """Sign-in page is being rendered.

    Attributes:
        path: Request path of the rendered page.
    """

    path: str = "/index.php"
