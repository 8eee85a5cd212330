from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from barrier_tracker.config import settings
from barrier_tracker.auth.models import User


class TokenService:
    """
    Verifies access tokens minted by the hosted auth provider.

    Sign-up and login live with the provider; this service only needs the
    shared signing secret.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        audience: Optional[str] = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.audience = audience or settings.JWT_AUDIENCE

    def create_access_token(
        self,
        user_id: str,
        email: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Create a token shaped like the provider's (for local tooling and tests)."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=30)

        now = datetime.now(timezone.utc)
        to_encode = {
            "sub": user_id,
            "aud": self.audience,
            "role": "authenticated",
            "exp": now + expires_delta,
            "iat": now,
        }
        if email is not None:
            to_encode["email"] = email
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Optional[User]:
        """Decode and validate a JWT token. Returns the user if valid."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
            )
        except JWTError:
            return None

        if not payload.get("sub"):
            return None
        return User.from_claims(payload)
