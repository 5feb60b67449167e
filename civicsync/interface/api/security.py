"""Bearer token authentication for routes."""

from fastapi import HTTPException, status

from civicsync.domain.service import JWTService
from civicsync.util.jwt import JWTError, TokenPayload

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    if authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        return token or None
    return None


def authenticate(jwt_service: JWTService, authorization: str | None) -> TokenPayload:
    """Verify the request's bearer token.

    Raises:
        HTTPException: 401 if no token was sent, 403 if it is invalid or expired
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )

    try:
        return jwt_service.verify_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
