from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Optional

from fastapi.security import HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, Field, ValidationError

from .config import Settings

# Session tokens always live for one hour
TOKEN_LIFETIME = timedelta(hours=1)

# Bearer scheme; missing credentials are reported by the identity dependency
bearer_scheme = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """Account identity carried inside a session token."""

    user_id: int = Field(alias="userId")
    email: str
    account_name: str = Field(alias="accountName")

    class Config:
        populate_by_name = True


class TokenStatus(str, Enum):
    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


class TokenVerification(BaseModel):
    status: TokenStatus
    identity: Optional[Identity] = None

    @property
    def is_valid(self) -> bool:
        return self.status is TokenStatus.VALID


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Authenticator:
    """Password hashing and session token signing bound to one server secret."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        bcrypt_rounds: int = 10,
        token_lifetime: timedelta = TOKEN_LIFETIME,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_lifetime = token_lifetime
        self.clock = clock
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=bcrypt_rounds,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Authenticator":
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            bcrypt_rounds=settings.BCRYPT_ROUNDS,
        )

    # Password utilities
    def hash_password(self, password: str) -> str:
        """Generate a salted bcrypt hash."""
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against its hash."""
        return self.pwd_context.verify(plain_password, hashed_password)

    # JWT utilities
    def issue_token(self, user_id: int, email: str, account_name: str) -> str:
        """Create a signed session token expiring one token lifetime from now."""
        issued_at = self.clock()
        to_encode = {
            "userId": user_id,
            "email": email,
            "accountName": account_name,
            "iat": issued_at,
            "exp": issued_at + self.token_lifetime,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenVerification:
        """Check signature and expiry, returning the embedded identity when both hold."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return TokenVerification(status=TokenStatus.EXPIRED)
        except JWTError:
            return TokenVerification(status=TokenStatus.INVALID)

        try:
            identity = Identity.model_validate(payload)
        except ValidationError:
            return TokenVerification(status=TokenStatus.INVALID)

        return TokenVerification(status=TokenStatus.VALID, identity=identity)
