"""
JWT utilities for bearer token issuance and verification.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from voting_backend.database.config.config import settings

logger = logging.getLogger(__name__)


def new_token_id() -> str:
    """Unique identifier stored in the `jti` claim of every issued token."""
    return uuid.uuid4().hex


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Issue a signed JWT.

    Parameters
    ----------
    data : dict
        Claims to embed (`sub` and `jti` are expected).
    expires_delta : timedelta, optional
        Lifetime of the token. Defaults to `ACCESS_TOKEN_EXPIRE_MINUTES`.

    Returns
    -------
    str
        The encoded token.
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "iat": datetime.now(timezone.utc)})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> dict | None:
    """
    Decode and validate a JWT.

    Returns
    -------
    dict | None
        The claims when the signature and expiry are valid and both `sub` and
        `jti` are present, otherwise None.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.debug("Rejected bearer token: %s", e)
        return None
    if payload.get("sub") is None or payload.get("jti") is None:
        return None
    return payload
