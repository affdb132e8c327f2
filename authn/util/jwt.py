"""Session token encoding.

Tokens are HS256 JWTs. The user ID travels in the standard ``sub`` claim;
``platform_id`` is the tenant the session was opened on.
"""

from datetime import datetime, timedelta, timezone

import jwt

from authn.config import AuthSettings


def create_token(
    user_id: str, email: str, platform_id: str | None, settings: AuthSettings
) -> str:
    """Sign a session token valid for ``settings.jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "platform_id": platform_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)
