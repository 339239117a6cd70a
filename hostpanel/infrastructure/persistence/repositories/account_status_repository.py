"""SqlAccountStatusStore - SQLAlchemy implementation.

Maps between domain AccountStatus entity and database CustomerAccountModel.
"""

from sqlalchemy import select

from hostpanel.domain.entities.account_status import AccountStatus
from hostpanel.infrastructure.persistence.database import Database
from hostpanel.infrastructure.persistence.models.customer_account import (
    CustomerAccountModel,
)


class SqlAccountStatusStore:
    """SQLAlchemy implementation of AccountStatusStore protocol."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def get_status(self, user_id: int) -> AccountStatus | None:
        """Get the status of the customer account owned by ``user_id``.

        Args:
            user_id: Account identifier of an ordinary user.

        Returns:
            AccountStatus if a customer account exists, None otherwise.
        """
        stmt = select(CustomerAccountModel).where(
            CustomerAccountModel.user_id == user_id
        )
        with self.database.get_session() as session:
            account_model = session.execute(stmt).scalar_one_or_none()
            if account_model is None:
                return None
            return self._to_domain(account_model)

    def _to_domain(self, account_model: CustomerAccountModel) -> AccountStatus:
        return AccountStatus(
            enabled=account_model.enabled,
            expires_at=account_model.expires_at,
        )
