"""
API Dependencies - Gemeinsame Abhängigkeiten für Endpoints
"""
from typing import Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from crate_ledger.database import get_db
from crate_ledger.core.security import verify_token
from crate_ledger.services.store import LedgerStore

# Type Alias für DB Session Dependency
DBSession = Annotated[Session, Depends(get_db)]

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login") # URL is just for Swagger UI hint


def get_store(db: DBSession) -> LedgerStore:
    """Datenspeicher für den aktuellen Request"""
    return LedgerStore(db)


Store = Annotated[LedgerStore, Depends(get_store)]


async def get_current_user(token: Annotated[str, Depends(oauth2_scheme)]):
    """
    Dependency für angemeldeten Benutzer.
    Liest Name und Rolle aus dem bei der PIN-Anmeldung ausgestellten Token.
    """
    payload = verify_token(token)
    return {
        "name": payload["sub"],
        "role": payload["role"],
    }


CurrentUser = Annotated[dict, Depends(get_current_user)]


def require_role(required_roles: list[str]):
    """
    Dependency Factory für Rollenprüfung.

    Verwendung:
        @router.delete("/{id}", dependencies=[Depends(require_role(["admin"]))])
    """
    async def check_role(user: CurrentUser):
        if user.get("role") not in required_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Keine Berechtigung für diese Aktion"
            )
        return user
    return check_role


AdminUser = Annotated[dict, Depends(require_role(["admin"]))]


# Pagination Parameter
class PaginationParams:
    """Standard Pagination Parameter"""
    def __init__(
        self,
        page: int = 1,
        page_size: int = 20,
        max_page_size: int = 100
    ):
        self.page = max(1, page)
        self.page_size = min(max(1, page_size), max_page_size)
        self.offset = (self.page - 1) * self.page_size


Pagination = Annotated[PaginationParams, Depends()]
