"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure provides the concrete implementation (bcrypt for new hashes,
plus verification of the MD5-based formats of older panel releases).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (PasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol

from hostpanel.domain.enums import HashAlgorithm


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self.password_service = password_service

        if self.password_service.verify_password(password, stored_hash):
            if self.password_service.needs_rehash(stored_hash):
                new_hash = self.password_service.hash_password(password)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password with the modern algorithm.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash of any known format.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise.

        Note:
            - Constant-time comparison (prevents timing attacks)
            - Returns False for unknown or malformed hashes (no exceptions)
        """
        ...

    def identify_hash(self, password_hash: str) -> HashAlgorithm:
        """Return the explicit algorithm tag of a stored hash."""
        ...

    def needs_rehash(self, password_hash: str) -> bool:
        """Whether a stored hash must be replaced by a modern hash.

        True for every format except bcrypt, unknown formats included.
        """
        ...
