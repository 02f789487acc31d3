"""
Admin API Key Authentication

Validates admin API keys for administration and notification dispatch
endpoints.
"""

from fastapi import Header, status

from config import ApplicationConfig
from occupeye.libs.result import Error
from occupeye.api.error import ClientError


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Used by the admin console and other internal services. Different from
    user JWT authentication - this is service-to-service auth.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if x_admin_api_key != ApplicationConfig.ADMIN_API_KEY:
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
