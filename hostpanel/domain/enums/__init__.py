"""Domain enums for business logic.

Available Enums:
    - UserType: Account types (admin, reseller, user)
    - AuthResultCode: Outcome of an authentication attempt
    - AuthPhase: Stages of an authentication attempt
    - HashAlgorithm: Stored password hash formats
    - ConfigKey: Configuration keys read by listeners
"""

from hostpanel.domain.enums.auth_phase import AuthPhase
from hostpanel.domain.enums.auth_result_code import AuthResultCode
from hostpanel.domain.enums.config_key import ConfigKey
from hostpanel.domain.enums.hash_algorithm import HashAlgorithm
from hostpanel.domain.enums.user_type import UserType

__all__ = [
    "AuthPhase",
    "AuthResultCode",
    "ConfigKey",
    "HashAlgorithm",
    "UserType",
]
