from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Identity taken from a verified bearer token."""

    id: str
    email: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: dict) -> "User":
        """Build a user from decoded token claims."""
        return cls(
            id=claims["sub"],
            email=claims.get("email"),
            role=claims.get("role"),
        )
