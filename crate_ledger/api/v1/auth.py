"""
Anmelde-API - PIN-Anmeldung und aktueller Benutzer
"""
import logging
from fastapi import APIRouter, HTTPException, status

from crate_ledger.api.deps import CurrentUser
from crate_ledger.config import get_settings
from crate_ledger.core.security import lookup_pin, create_access_token
from crate_ledger.schemas.auth import LoginRequest, TokenResponse, CurrentUserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Anmeldung"])


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest):
    """Meldet per PIN an und liefert ein Bearer Token."""
    user = lookup_pin(data.pin, get_settings().users_by_pin)
    if not user:
        logger.warning("Anmeldung mit ungültiger PIN")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Ungültige PIN"
        )

    logger.info(f"Angemeldet: {user.name} ({user.role})")
    return TokenResponse(
        access_token=create_access_token(user),
        user=CurrentUserResponse(name=user.name, role=user.role),
    )


@router.get("/me", response_model=CurrentUserResponse)
async def me(user: CurrentUser):
    """Gibt den angemeldeten Benutzer zurück."""
    return CurrentUserResponse(**user)
