from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials

from ..core.errors import AuthenticationFailure, AuthorizationFailure
from ..core.security import Authenticator, Identity, bearer_scheme


def get_authenticator(request: Request) -> Authenticator:
    return request.app.state.authenticator


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    authenticator: Authenticator = Depends(get_authenticator),
) -> Identity:
    """Extract and verify the bearer token from the Authorization header."""
    if credentials is None:
        raise AuthenticationFailure("Authentication token required.")

    # Bad signature, malformed and expired tokens share one response
    verification = authenticator.verify_token(credentials.credentials)
    if not verification.is_valid:
        raise AuthorizationFailure()

    request.state.identity = verification.identity
    return verification.identity
