from sqlalchemy import select
from sqlalchemy.orm import Session

from voting_backend.database.core.security import hash_password
from voting_backend.database.entities import User


class UserDao:
    """Persistence operations on `User`."""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, name: str, email: str, password: str) -> User:
        """Add a user with a hashed password and flush it to obtain its id."""
        user = User(name=name, email=email, password=hash_password(password))
        self.db.add(user)
        self.db.flush()
        return user

    def get_by_email(self, email: str) -> User | None:
        return self.db.scalar(select(User).where(User.email == email))

    def email_exists(self, email: str) -> bool:
        return self.db.scalar(select(User.id).where(User.email == email)) is not None
