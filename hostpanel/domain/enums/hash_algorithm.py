"""Password hash formats found in the users table.

Accounts migrated from older panel releases still carry MD5-based hashes.
They are verified as-is and upgraded to bcrypt on the next successful
sign-in.
"""

from enum import Enum


class HashAlgorithm(str, Enum):
    """Explicit tag for a stored password hash format."""

    BCRYPT = "bcrypt"  # $2a$, $2b$, $2y$
    APR1_MD5 = "apr1_md5"  # $apr1$ (Apache htpasswd)
    MD5_CRYPT = "md5_crypt"  # $1$
    PLAIN_MD5 = "plain_md5"  # 32 hex digits
    UNKNOWN = "unknown"

    @property
    def is_legacy(self) -> bool:
        """Whether hashes of this format must be upgraded to bcrypt."""
        return self is not HashAlgorithm.BCRYPT
