import logging

from sqlalchemy.orm import Session

from ..core.errors import AuthenticationFailure
from ..core.security import Authenticator
from ..schemas.auth import SigninRequest, SignupRequest
from .account_store import AccountStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, authenticator: Authenticator):
        self.accounts = AccountStore(db)
        self.authenticator = authenticator

    def register_user(self, user_data: SignupRequest) -> int:
        """Register a new account and return its id."""
        hashed_password = self.authenticator.hash_password(user_data.password)

        user_id = self.accounts.create_account(
            account_name=user_data.account_name,
            email=user_data.email,
            password_hash=hashed_password,
        )
        logger.info(f"Created account {user_id}")

        return user_id

    def authenticate_user(self, login_data: SigninRequest) -> str:
        """Check credentials and return a session token."""
        user = self.accounts.find_by_email(login_data.email)

        # Unknown email and wrong password look the same to the client
        if not user or not self.authenticator.verify_password(
            login_data.password, user.password_hash
        ):
            logger.info("Rejected sign-in attempt")
            raise AuthenticationFailure()

        return self.authenticator.issue_token(user.id, user.email, user.account_name)
