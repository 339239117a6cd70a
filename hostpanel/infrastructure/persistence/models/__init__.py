"""Database models.

Importing this package registers every table on Base.metadata.
"""

from hostpanel.infrastructure.persistence.models.config import ConfigModel
from hostpanel.infrastructure.persistence.models.customer_account import (
    CustomerAccountModel,
)
from hostpanel.infrastructure.persistence.models.login_attempt import LoginAttemptModel
from hostpanel.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ConfigModel",
    "CustomerAccountModel",
    "LoginAttemptModel",
    "UserModel",
]
