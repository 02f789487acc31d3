from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: str, role: str, expires_delta: timedelta = timedelta(minutes=15)) -> str:
    """
    Generate JWT access token

    Tokens are normally issued by the external auth provider; this is used
    by tooling and tests that need a token the service will accept.

    Args:
        user_id: User id
        role: User role (student, manager, admin)
        expires_delta: Token lifetime

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict if valid and carrying user_id and role, None otherwise
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    if not payload.get("user_id") or not payload.get("role"):
        return None
    return payload
