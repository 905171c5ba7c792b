"""
Identity verification against Firebase Authentication
"""

import asyncio

from firebase_admin import auth as firebase_auth

from blog.models.user import AuthenticatedUser


class InvalidTokenError(Exception):
    """The presented ID token could not be verified"""


async def verify_id_token(id_token: str) -> AuthenticatedUser:
    """
    Verify a Firebase ID token.

    Args:
        id_token: Opaque token taken from the ``authtoken`` header

    Returns:
        The identity described by the token's claims

    Raises:
        InvalidTokenError: For any verification failure (expired, malformed,
            revoked, missing uid). Callers do not distinguish the reasons.
    """
    try:
        decoded_token = await asyncio.to_thread(firebase_auth.verify_id_token, id_token)
        return AuthenticatedUser.from_claims(decoded_token)
    except Exception as e:
        raise InvalidTokenError(f"Firebase ID token verification failed: {e}") from e
