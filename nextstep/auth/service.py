import logging
from typing import Optional

from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from nextstep.auth.schemas import Identity
from nextstep.core.config import IDENTITY_JWT_SECRET, IDENTITY_JWT_ALGORITHM

# Initialize logger and security tools
logger = logging.getLogger(__name__)
bearer = HTTPBearer()
optional_bearer = HTTPBearer(auto_error=False)


def decode_token(token: str) -> dict:
    """
    Decodes and validates a JWT issued by the identity provider.

    Args:
        token (str): JWT string.

    Returns:
        dict: Decoded payload.

    Raises:
        HTTPException: If token is invalid or expired.
    """
    try:
        return jwt.decode(
            token,
            IDENTITY_JWT_SECRET,
            algorithms=[IDENTITY_JWT_ALGORITHM],
            options={"verify_aud": False},
        )
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired authentication token")


def identity_from_token(token: str) -> Identity:
    payload = decode_token(token)
    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=401, detail="Token missing subject field")
    return Identity(id=str(subject), email=payload.get("email"), name=payload.get("name"))


def get_current_identity(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
) -> Identity:
    """
    Extracts the caller's identity from the bearer token.

    Raises:
        HTTPException: If the token is missing, invalid or lacks a subject.
    """
    return identity_from_token(creds.credentials)


def get_optional_identity(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(optional_bearer),
) -> Optional[Identity]:
    """Same as get_current_identity, but anonymous callers get None."""
    if creds is None:
        return None
    try:
        return identity_from_token(creds.credentials)
    except HTTPException:
        logger.info("Ignoring invalid bearer token on anonymous route")
        return None
