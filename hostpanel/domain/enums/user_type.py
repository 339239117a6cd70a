"""Account types of the control panel.

Type Hierarchy:
    admin > reseller > user

    - admin: Panel administrator, creates resellers
    - reseller: Sells hosting, creates and manages customer accounts
    - user: Hosting customer (the "client" interface)

Usage:
    from hostpanel.domain.enums import UserType

    if identity.user_type is UserType.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class UserType(str, Enum):
    """Account types of the control panel.

    String Enum:
        Values match the type column of the users table.
    """

    ADMIN = "admin"
    RESELLER = "reseller"
    USER = "user"

    @property
    def ui_level(self) -> str:
        """Interface directory for this account type.

        Customers use the "client" interface even though their account type is
        stored as "user".

        Returns:
            str: One of "admin", "reseller", "client".
        """
        if self is UserType.USER:
            return "client"
        return self.value
