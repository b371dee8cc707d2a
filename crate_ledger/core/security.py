import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, Mapping

from fastapi import HTTPException, status
from jose import JWTError, jwt

from crate_ledger.config import get_settings, UserAccount

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def lookup_pin(pin: str, users_by_pin: Mapping[str, UserAccount]) -> Optional[UserAccount]:
    """
    Looks up the user for a PIN code.
    This is a UI role switch, not a security boundary: no hashing, no lockout.
    """
    return users_by_pin.get((pin or "").strip())


def create_access_token(user: UserAccount, expires_minutes: Optional[int] = None) -> str:
    """Signs a bearer token carrying display name and role."""
    settings = get_settings()
    minutes = expires_minutes if expires_minutes is not None else settings.access_token_expire_minutes
    claims = {
        "sub": user.name,
        "role": user.role,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes),
    }
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verifies the JWT token with the configured secret.
    Returns the decoded token claims if valid.
    Raises HTTPException if invalid.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.warning(f"Token verification failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if payload.get("role") not in ("admin", "driver") or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload
