"""SqlLoginAttemptStore - SQLAlchemy implementation.

Maps between domain LoginAttempt entity and database LoginAttemptModel.
"""

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from hostpanel.domain.entities.login_attempt import LoginAttempt
from hostpanel.infrastructure.persistence.database import Database
from hostpanel.infrastructure.persistence.models.login_attempt import LoginAttemptModel


class SqlLoginAttemptStore:
    """SQLAlchemy implementation of LoginAttemptStore protocol.

    Records are keyed by client IP address. Stale records are purged by the
    brute-force guard before each check rather than by a scheduled job.
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the database.

        Args:
            database: Database connection manager.
        """
        self.database = database

    def find_by_ip(self, ip_address: str) -> LoginAttempt | None:
        """Find the attempt record of a client IP address.

        Args:
            ip_address: Client IP address.

        Returns:
            LoginAttempt if found, None otherwise.
        """
        stmt = select(LoginAttemptModel).where(
            LoginAttemptModel.ip_address == ip_address
        )
        with self.database.get_session() as session:
            attempt_model = session.execute(stmt).scalar_one_or_none()
            if attempt_model is None:
                return None
            return self._to_domain(attempt_model)

    def create(self, ip_address: str, session_id: str | None, now: int) -> None:
        """Create a record holding one attempt.

        A concurrent request may insert the record between the caller's
        lookup and this insert; the attempt is then added to that record.

        Args:
            ip_address: Client IP address.
            session_id: Session of the attempt.
            now: Unix timestamp of the attempt.
        """
        try:
            with self.database.get_session() as session:
                session.add(
                    LoginAttemptModel(
                        ip_address=ip_address,
                        session_id=session_id,
                        login_count=1,
                        last_access=now,
                    )
                )
        except IntegrityError:
            self.increment(ip_address, now)

    def increment(self, ip_address: str, now: int) -> None:
        """Add one attempt to an existing record.

        Args:
            ip_address: Client IP address.
            now: Unix timestamp of the attempt.
        """
        stmt = (
            update(LoginAttemptModel)
            .where(LoginAttemptModel.ip_address == ip_address)
            .values(
                login_count=LoginAttemptModel.login_count + 1,
                last_access=now,
            )
        )
        with self.database.get_session() as session:
            session.execute(stmt)

    def purge_before(self, timestamp: int) -> int:
        """Delete records whose last attempt is older than ``timestamp``.

        Args:
            timestamp: Unix timestamp cut-off.

        Returns:
            int: Number of deleted records.
        """
        stmt = delete(LoginAttemptModel).where(
            LoginAttemptModel.last_access < timestamp
        )
        with self.database.get_session() as session:
            result = session.execute(stmt)
            return result.rowcount

    def _to_domain(self, attempt_model: LoginAttemptModel) -> LoginAttempt:
        """Convert database model to domain entity."""
        return LoginAttempt(
            ip_address=attempt_model.ip_address,
            session_id=attempt_model.session_id,
            login_count=attempt_model.login_count,
            last_access=attempt_model.last_access,
        )
