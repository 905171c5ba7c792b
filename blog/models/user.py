"""
Request-scoped user identity

An identity exists only when a verified token was presented. Anonymous
requests carry ``None`` rather than an empty record.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, ConfigDict


class AuthenticatedUser(BaseModel):
    """Claims decoded from a verified Firebase ID token"""

    uid: str = Field(..., min_length=1)
    email: Optional[str] = None
    claims: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_claims(cls, decoded_token: dict[str, Any]) -> "AuthenticatedUser":
        return cls(
            uid=decoded_token.get("uid") or decoded_token.get("sub") or "",
            email=decoded_token.get("email"),
            claims=dict(decoded_token),
        )


# Request context identity: present-with-claims or absent
Identity = Optional[AuthenticatedUser]
