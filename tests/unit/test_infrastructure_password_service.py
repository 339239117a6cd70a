"""Unit tests for PasswordService.

Tests cover:
- Hash format identification (explicit algorithm tags)
- bcrypt hashing and verification (cost factor 10 to keep tests fast)
- Legacy MD5-based verification through passlib
- Malformed and unknown hashes never raise
- needs_rehash for every non-bcrypt format
"""

import pytest
from passlib.hash import apr_md5_crypt, md5_crypt

from hostpanel.domain.enums import HashAlgorithm
from hostpanel.infrastructure.security import PasswordService, identify_hash

PLAIN_MD5_OF_PASSWORD = "5f4dcc3b5aa765d61d8327deb882cf99"


@pytest.fixture(scope="module")
def password_service():
    return PasswordService(cost_factor=10)


@pytest.mark.unit
class TestIdentifyHash:
    """Test algorithm detection."""

    @pytest.mark.parametrize(
        ("password_hash", "expected"),
        [
            ("$2a$10$abcdefghijklmnopqrstuu", HashAlgorithm.BCRYPT),
            ("$2b$12$abcdefghijklmnopqrstuu", HashAlgorithm.BCRYPT),
            ("$2y$10$abcdefghijklmnopqrstuu", HashAlgorithm.BCRYPT),
            ("$apr1$salt$checksum", HashAlgorithm.APR1_MD5),
            ("$1$salt$checksum", HashAlgorithm.MD5_CRYPT),
            (PLAIN_MD5_OF_PASSWORD, HashAlgorithm.PLAIN_MD5),
            ("$6$salt$sha512", HashAlgorithm.UNKNOWN),
            ("plaintext", HashAlgorithm.UNKNOWN),
            ("", HashAlgorithm.UNKNOWN),
        ],
    )
    def test_identify(self, password_hash, expected):
        assert identify_hash(password_hash) is expected

    def test_only_bcrypt_is_modern(self, password_service):
        """Test every format other than bcrypt needs a rehash."""
        assert password_service.needs_rehash("$2b$12$abcdefghijklmnopqrstuu") is False
        assert password_service.needs_rehash("$apr1$salt$checksum") is True
        assert password_service.needs_rehash("$6$salt$sha512") is True
        assert password_service.needs_rehash("") is True


@pytest.mark.unit
class TestBcrypt:
    """Test bcrypt hashing and verification."""

    def test_hash_and_verify(self, password_service):
        """Test a fresh hash verifies and is not a legacy hash."""
        # Act
        password_hash = password_service.hash_password("correct horse")

        # Assert
        assert password_hash.startswith("$2b$10$")
        assert len(password_hash) == 60
        assert password_service.verify_password("correct horse", password_hash)
        assert not password_service.verify_password("wrong horse", password_hash)
        assert password_service.needs_rehash(password_hash) is False

    def test_php_2y_prefix_is_accepted(self, password_service):
        """Test hashes written by PHP's password_hash() verify."""
        password_hash = password_service.hash_password("secret")
        php_hash = "$2y$" + password_hash[4:]

        assert password_service.verify_password("secret", php_hash)

    def test_long_password_is_truncated_consistently(self, password_service):
        """Test passwords beyond 72 bytes hash and verify."""
        long_password = "x" * 100
        password_hash = password_service.hash_password(long_password)

        assert password_service.verify_password(long_password, password_hash)

    def test_malformed_bcrypt_hash_returns_false(self, password_service):
        assert password_service.verify_password("secret", "$2b$10$tooshort") is False

    @pytest.mark.parametrize("cost_factor", [4, 9, 21])
    def test_cost_factor_bounds(self, cost_factor):
        with pytest.raises(ValueError):
            PasswordService(cost_factor=cost_factor)


@pytest.mark.unit
class TestLegacyFormats:
    """Test verification of hashes from older releases."""

    def test_apr1_md5(self, password_service):
        password_hash = apr_md5_crypt.hash("right")

        assert password_service.identify_hash(password_hash) is HashAlgorithm.APR1_MD5
        assert password_service.verify_password("right", password_hash)
        assert not password_service.verify_password("wrong", password_hash)

    def test_md5_crypt(self, password_service):
        password_hash = md5_crypt.hash("right")

        assert password_service.identify_hash(password_hash) is HashAlgorithm.MD5_CRYPT
        assert password_service.verify_password("right", password_hash)
        assert not password_service.verify_password("wrong", password_hash)

    def test_plain_md5(self, password_service):
        assert password_service.verify_password("password", PLAIN_MD5_OF_PASSWORD)
        assert not password_service.verify_password("Password", PLAIN_MD5_OF_PASSWORD)

    def test_malformed_legacy_hash_returns_false(self, password_service):
        assert password_service.verify_password("right", "$apr1$") is False

    def test_unknown_format_never_matches(self, password_service):
        assert password_service.verify_password("plaintext", "plaintext") is False
