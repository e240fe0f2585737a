from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import Authenticator, Identity
from ...services.auth_service import AuthService
from ...schemas.auth import (
    AccountNameResponse, SigninRequest, SigninResponse,
    SignupRequest, SignupResponse
)
from ..deps import get_authenticator, get_current_identity

router = APIRouter(tags=["Authentication"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: SignupRequest,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Create a new account."""
    auth_service = AuthService(db, authenticator)
    user_id = auth_service.register_user(user_data)

    return SignupResponse(message="Account created successfully!", user_id=user_id)


@router.post("/signin", response_model=SigninResponse)
def signin(
    login_data: SigninRequest,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Authenticate and return a session token."""
    auth_service = AuthService(db, authenticator)
    token = auth_service.authenticate_user(login_data)

    return SigninResponse(message="Sign-in successful!", token=token)


@router.get("/fetch-account-name", response_model=AccountNameResponse)
async def fetch_account_name(identity: Identity = Depends(get_current_identity)):
    """Return the display name carried in the caller's token."""
    return AccountNameResponse(account_name=identity.account_name)
