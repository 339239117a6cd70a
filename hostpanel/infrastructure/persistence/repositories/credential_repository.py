"""SqlCredentialStore - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain Identity entity and database UserModel.
"""

from sqlalchemy import func, select, update

from hostpanel.domain.entities.identity import Identity
from hostpanel.domain.enums import UserType
from hostpanel.infrastructure.persistence.database import Database
from hostpanel.infrastructure.persistence.models.user import UserModel


class SqlCredentialStore:
    """SQLAlchemy implementation of CredentialStore protocol.

    Each call runs in its own transaction; the sign-in pipeline never spans
    several queries in one unit of work.

    Attributes:
        database: Database providing sessions.

    Example:
        >>> store = SqlCredentialStore(database)
        >>> identity = store.find_by_username("admin")
        >>> identity.user_type
        <UserType.ADMIN: 'admin'>
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the database.

        Args:
            database: Database connection manager.
        """
        self.database = database

    def find_by_username(self, username: str) -> Identity | None:
        """Find account by normalized username.

        Stored names are compared in lower case, so rows written with
        capitals by older panel versions still match.

        Args:
            username: IDNA-encoded, lower-cased username.

        Returns:
            Identity including password hash if found, None otherwise.
        """
        stmt = select(UserModel).where(func.lower(UserModel.username) == username.lower())
        with self.database.get_session() as session:
            user_model = session.execute(stmt).scalar_one_or_none()
            if user_model is None:
                return None
            return self._to_domain(user_model)

    def find_by_id(self, user_id: int) -> Identity | None:
        """Find account by identifier.

        Args:
            user_id: Account identifier.

        Returns:
            Identity including password hash if found, None otherwise.
        """
        with self.database.get_session() as session:
            user_model = session.get(UserModel, user_id)
            if user_model is None:
                return None
            return self._to_domain(user_model)

    def update_password_hash(self, user_id: int, new_hash: str, new_status: str) -> None:
        """Replace password hash and processing status of an account.

        Args:
            user_id: Account identifier.
            new_hash: Replacement hash.
            new_status: Backend processing status.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_hash=new_hash, status=new_status)
        )
        with self.database.get_session() as session:
            session.execute(stmt)

    def _to_domain(self, user_model: UserModel) -> Identity:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Identity: Domain entity (password hash included).
        """
        return Identity(
            user_id=user_model.id,
            username=user_model.username,
            user_type=UserType(user_model.user_type),
            password_hash=user_model.password_hash,
            email=user_model.email,
            created_by=user_model.created_by,
        )
