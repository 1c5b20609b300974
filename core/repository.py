"""Repository classes for database operations.

`OwnedRepository` is the single place where per-row ownership is enforced:
every query it builds is filtered on the requesting user's id, so rows that
belong to someone else are indistinguishable from rows that do not exist.
API handlers never query owned tables directly.
"""

from datetime import date
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, Optional, List, Any
from core.exceptions import ConflictError
from database.models import Base, Meal, Profile, User

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None."""
        return self.session.get(self.model, id)

    def update(self, obj: T) -> T:
        """Commit changes to an existing object and refresh."""
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """Delete an object and commit."""
        self.session.delete(obj)
        self.session.commit()


class UserRepository(BaseRepository[User]):
    """Account lookups and creation."""

    def __init__(self, session: Session):
        super().__init__(User, session)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email.lower().strip()).first()

    def create_with_profile(self, email: str, password_hash: str, full_name: Optional[str] = None) -> User:
        """Create an account and its profile in one transaction.

        The profile copies the account's email and full name.

        Raises:
            ConflictError: If the email is already registered.
        """
        user = User(email=email.lower().strip(), password_hash=password_hash, full_name=full_name)
        try:
            self.session.add(user)
            self.session.flush()
            self.session.add(Profile(id=user.id, email=user.email, full_name=full_name))
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("Email already registered", field="email") from exc
        self.session.refresh(user)
        return user


class OwnedRepository(BaseRepository[T]):
    """Repository whose every query is scoped to one owner.

    Args:
        model: Model class with an owner column.
        session: Database session.
        owner_id: Id of the requesting user.
        owner_column: Name of the column holding the owner id.
    """

    def __init__(self, model: Type[T], session: Session, owner_id: str, owner_column: str = "user_id"):
        super().__init__(model, session)
        self.owner_id = owner_id
        self.owner_column = owner_column

    def query(self):
        """Base query restricted to the owner's rows."""
        return self.session.query(self.model).filter(getattr(self.model, self.owner_column) == self.owner_id)

    def get_by_id(self, id: Any) -> Optional[T]:
        return self.query().filter(self.model.id == id).first()

    def create(self, obj: T) -> T:
        setattr(obj, self.owner_column, self.owner_id)
        return super().create(obj)

    def delete_by_id(self, id: Any) -> bool:
        """Delete an owned row by primary key.

        Returns:
            True if a row was deleted, False if no owned row had that id.
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.delete(obj)
        return True


class MealRepository(OwnedRepository[Meal]):
    """Meals of a single user."""

    def __init__(self, session: Session, user_id: str):
        super().__init__(Meal, session, owner_id=user_id)

    def list_for_date(self, meal_date: date) -> List[Meal]:
        """Meals logged on `meal_date`, newest first."""
        return (
            self.query()
            .filter(Meal.meal_date == meal_date)
            .order_by(Meal.created_at.desc())
            .all()
        )

    def list_for_range(self, start: date, end: date) -> List[Meal]:
        """Meals logged between `start` and `end` inclusive, oldest date first."""
        return (
            self.query()
            .filter(Meal.meal_date >= start, Meal.meal_date <= end)
            .order_by(Meal.meal_date.asc(), Meal.created_at.asc())
            .all()
        )


class ProfileRepository(OwnedRepository[Profile]):
    """The single profile row of a user; its primary key is the owner id."""

    def __init__(self, session: Session, user_id: str):
        super().__init__(Profile, session, owner_id=user_id, owner_column="id")

    def get(self) -> Optional[Profile]:
        return self.get_by_id(self.owner_id)
