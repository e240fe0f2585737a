from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.errors import ConflictError
from ..models.user import User


class AccountStore:
    """Account records keyed by a unique email address."""

    def __init__(self, db: Session):
        self.db = db

    def create_account(self, account_name: str, email: str, password_hash: str) -> int:
        """Insert a new account and return its id; raises ConflictError on a taken email."""
        if self.find_by_email(email) is not None:
            raise ConflictError()

        new_user = User(
            account_name=account_name,
            email=email,
            password_hash=password_hash,
        )
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup; the unique index decides
            self.db.rollback()
            raise ConflictError()
        self.db.refresh(new_user)

        return new_user.id

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()
