"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from cost_tracker.domain.models import User
from cost_tracker.repositories.sqlalchemy.database import store_errors
from cost_tracker.repositories.sqlalchemy.orm_models import UserORM


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Persist a new user."""
        orm_user = UserORM(
            user_id=user.user_id,
            first_name=user.first_name,
            last_name=user.last_name,
            birthday=user.birthday,
        )
        with store_errors(self._db, "add user"):
            self._db.add(orm_user)
            self._db.commit()
            self._db.refresh(orm_user)
        return self._to_domain(orm_user)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve user by ID."""
        with store_errors(self._db, "read users"):
            orm_user = self._db.query(UserORM).filter(
                UserORM.user_id == user_id
            ).first()
        return self._to_domain(orm_user) if orm_user else None

    def exists(self, user_id: int) -> bool:
        """Check whether a user with this ID is registered."""
        with store_errors(self._db, "read users"):
            return self._db.query(
                self._db.query(UserORM).filter(UserORM.user_id == user_id).exists()
            ).scalar()

    def list_all(self) -> list[User]:
        """List all users."""
        with store_errors(self._db, "read users"):
            orm_users = self._db.query(UserORM).order_by(UserORM.user_id).all()
        return [self._to_domain(u) for u in orm_users]

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        """Convert ORM model to domain model."""
        return User(
            user_id=orm.user_id,
            first_name=orm.first_name,
            last_name=orm.last_name,
            birthday=orm.birthday,
        )
