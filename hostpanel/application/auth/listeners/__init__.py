"""Authentication listeners.

Default registration (phase, priority):
    BruteForceGuard        BEFORE   100  (only when BRUTEFORCE is enabled)
    CheckCredentials       DURING    99
    CheckMaintenanceMode   AFTER     99
    CheckCustomerAccount   AFTER     99  (registered after maintenance)
    PasswordRecovery       AFTER    -99

RehashPassword is not registered: CheckCredentials returns it as a
post-success action.
"""

from hostpanel.application.auth.listeners.brute_force_guard import BruteForceGuard
from hostpanel.application.auth.listeners.check_credentials import CheckCredentials
from hostpanel.application.auth.listeners.check_customer_account import (
    CheckCustomerAccount,
)
from hostpanel.application.auth.listeners.check_maintenance_mode import (
    CheckMaintenanceMode,
)
from hostpanel.application.auth.listeners.password_recovery import PasswordRecovery
from hostpanel.application.auth.listeners.rehash_password import RehashPassword

__all__ = [
    "BruteForceGuard",
    "CheckCredentials",
    "CheckCustomerAccount",
    "CheckMaintenanceMode",
    "PasswordRecovery",
    "RehashPassword",
]
