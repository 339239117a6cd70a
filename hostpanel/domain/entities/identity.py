"""Identity domain entities.

An Identity is the principal resolved by the credential check. It becomes the
session-stored principal only after a SUCCESS result survives every
after-authentication listener.

SuIdentity models an administrator or reseller temporarily acting as another
account ("switch user"). The assumed identity drives every access decision;
the real principal is kept so the operator can switch back.
"""

from dataclasses import dataclass, replace
from typing import Any

from hostpanel.domain.enums import UserType


def normalize_username(username: str) -> str:
    """Normalize a username for lookup and comparison.

    Usernames of customer accounts are domain names and may contain
    internationalized labels. They are compared in their IDNA (punycode)
    form, case-insensitively.

    Args:
        username: Raw submitted username.

    Returns:
        str: Stripped, IDNA-encoded, lower-cased username. Names that cannot
            be IDNA encoded (empty labels, over-long labels) are returned
            stripped and lower-cased.

    Example:
        >>> normalize_username(" Bücher.Example ")
        'xn--bcher-kva.example'
    """
    cleaned = username.strip().lower()
    if not cleaned:
        return cleaned
    try:
        return cleaned.encode("idna").decode("ascii")
    except UnicodeError:
        return cleaned


@dataclass(frozen=True, slots=True, kw_only=True)
class Identity:
    """Authenticated principal.

    Attributes:
        user_id: Unique account identifier.
        username: Unique login name (IDNA-encoded, lower case).
        user_type: Account type (admin, reseller, user).
        password_hash: Stored password hash. Empty once the identity is
            attached to an authentication result.
        email: Contact email address.
        created_by: Identifier of the owning account (0 for administrators).
    """

    user_id: int
    username: str
    user_type: UserType
    password_hash: str = ""
    email: str = ""
    created_by: int = 0

    def without_password(self) -> "Identity":
        """Return a copy with the password hash stripped."""
        return replace(self, password_hash="")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for session storage (password hash never included)."""
        return {
            "user_id": self.user_id,
            "username": self.username,
            "user_type": self.user_type.value,
            "email": self.email,
            "created_by": self.created_by,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class SuIdentity:
    """Identity of an operator acting as another account.

    Attributes:
        su_identity: Real principal. Itself an SuIdentity when an administrator
            became a reseller and then one of that reseller's customers.
        identity: Assumed principal.

    Example:
        >>> admin_as_reseller = SuIdentity(su_identity=admin, identity=reseller)
        >>> admin_as_reseller.user_type
        <UserType.RESELLER: 'reseller'>
        >>> admin_as_reseller.su_user_type
        <UserType.ADMIN: 'admin'>
    """

    su_identity: "Identity | SuIdentity"
    identity: Identity

    @property
    def user_id(self) -> int:
        return self.identity.user_id

    @property
    def username(self) -> str:
        return self.identity.username

    @property
    def user_type(self) -> UserType:
        return self.identity.user_type

    @property
    def email(self) -> str:
        return self.identity.email

    @property
    def created_by(self) -> int:
        return self.identity.created_by

    @property
    def su_user_id(self) -> int:
        return self.su_identity.user_id

    @property
    def su_username(self) -> str:
        return self.su_identity.username

    @property
    def su_user_type(self) -> UserType:
        return self.su_identity.user_type

    def to_dict(self) -> dict[str, Any]:
        """Serialize for session storage, nesting the real principal."""
        return {
            "su_identity": self.su_identity.to_dict(),
            "identity": self.identity.to_dict(),
        }


def identity_from_dict(data: dict[str, Any]) -> Identity | SuIdentity:
    """Rebuild an identity serialized with ``to_dict``.

    Args:
        data: Mapping produced by Identity.to_dict or SuIdentity.to_dict.

    Returns:
        Identity | SuIdentity: Rebuilt identity.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If the stored user type is unknown.
    """
    if "su_identity" in data:
        assumed = identity_from_dict(data["identity"])
        if isinstance(assumed, SuIdentity):
            raise ValueError("Assumed identity cannot itself be a switched identity")
        return SuIdentity(
            su_identity=identity_from_dict(data["su_identity"]),
            identity=assumed,
        )

    return Identity(
        user_id=int(data["user_id"]),
        username=data["username"],
        user_type=UserType(data["user_type"]),
        email=data.get("email", ""),
        created_by=int(data.get("created_by", 0)),
    )
