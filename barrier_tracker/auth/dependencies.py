import logging
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from barrier_tracker.auth.models import User
from barrier_tracker.auth.service import TokenService

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    """Dependency to get the token verifier."""
    return TokenService()


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    user = token_service.decode_token(credentials.credentials)
    if user is None:
        logger.info("Rejected bearer token")
        raise credentials_exception

    return user


# Type alias for cleaner dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
