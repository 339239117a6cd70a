"""Password hashing service (adapter).

Implements PasswordHashingProtocol. New hashes are always bcrypt. Stored
hashes from older panel releases are still verified so their owners can sign
in once and get upgraded.

Supported formats:
    - bcrypt ($2a$, $2b$, $2y$): verified with bcrypt
    - Apache MD5 ($apr1$): verified with passlib
    - MD5-crypt ($1$): verified with passlib
    - Plain hex MD5 (32 hex digits): verified with passlib
    - Anything else: never matches, always needs rehash

Security:
    - All verifications are constant-time
    - Malformed hashes return False instead of raising
    - Passwords are truncated to bcrypt's 72-byte input limit
"""

import re

import bcrypt
from passlib.hash import apr_md5_crypt, hex_md5, md5_crypt

from hostpanel.domain.enums import HashAlgorithm

# bcrypt ignores input beyond 72 bytes; newer releases reject it outright
BCRYPT_MAX_PASSWORD_BYTES = 72

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
_PLAIN_MD5 = re.compile(r"[0-9a-fA-F]{32}")

_LEGACY_HANDLERS = {
    HashAlgorithm.APR1_MD5: apr_md5_crypt,
    HashAlgorithm.MD5_CRYPT: md5_crypt,
    HashAlgorithm.PLAIN_MD5: hex_md5,
}


def identify_hash(password_hash: str) -> HashAlgorithm:
    """Return the algorithm tag of a stored hash.

    Args:
        password_hash: Hash from the users table.

    Returns:
        HashAlgorithm: Detected format, UNKNOWN when nothing matches.

    Example:
        >>> identify_hash("$apr1$Rq1tNbYh$0vdDKnuv1bE4EX2AJd6ZR/")
        <HashAlgorithm.APR1_MD5: 'apr1_md5'>
    """
    if password_hash.startswith(_BCRYPT_PREFIXES):
        return HashAlgorithm.BCRYPT
    if password_hash.startswith("$apr1$"):
        return HashAlgorithm.APR1_MD5
    if password_hash.startswith("$1$"):
        return HashAlgorithm.MD5_CRYPT
    if _PLAIN_MD5.fullmatch(password_hash):
        return HashAlgorithm.PLAIN_MD5
    return HashAlgorithm.UNKNOWN


def _bcrypt_input(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordService:
    """Bcrypt hashing with verification of legacy formats.

    Usage:
        # Via dependency injection
        from hostpanel.core.container import get_password_service

        password_service = get_password_service()
        if password_service.verify_password(password, stored_hash):
            if password_service.needs_rehash(stored_hash):
                stored_hash = password_service.hash_password(password)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Higher values = more secure but slower.

        Raises:
            ValueError: If cost factor is outside 10-20.

        Note:
            Cost factor is logarithmic: each +1 doubles computation time.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...), 60
            characters long.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hash from database, any supported format.

        Returns:
            True if password matches hash, False otherwise (including
            unknown and malformed hashes).
        """
        algorithm = identify_hash(password_hash)

        if algorithm is HashAlgorithm.BCRYPT:
            # $2y$ (PHP) and $2b$ are the same algorithm
            if password_hash.startswith("$2y$"):
                password_hash = "$2b$" + password_hash[4:]
            try:
                return bcrypt.checkpw(_bcrypt_input(password), password_hash.encode("utf-8"))
            except ValueError:
                return False

        handler = _LEGACY_HANDLERS.get(algorithm)
        if handler is None:
            return False

        try:
            return bool(handler.verify(password, password_hash))
        except (ValueError, TypeError):
            return False

    def identify_hash(self, password_hash: str) -> HashAlgorithm:
        """Return the algorithm tag of a stored hash."""
        return identify_hash(password_hash)

    def needs_rehash(self, password_hash: str) -> bool:
        """Whether the stored hash must be replaced with bcrypt.

        True for every format except bcrypt, unknown formats included.
        """
        return identify_hash(password_hash).is_legacy
