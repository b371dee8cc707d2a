"""
Pydantic Schemas für die Ladenkonto API
"""
from crate_ledger.schemas.partner import (
    PartnerBase, PartnerCreate, PartnerUpdate, PartnerResponse, PartnerListResponse,
)
from crate_ledger.schemas.crate_type import (
    CrateTypeCreate, CrateTypeUpdate, CrateTypeResponse, CrateTypeListResponse,
    CrateTypeUsageResponse,
)
from crate_ledger.schemas.movement import (
    MovementCreate, MovementResponse, MovementListResponse,
)
from crate_ledger.schemas.balance import BalanceRow, BalanceTableResponse
from crate_ledger.schemas.auth import LoginRequest, TokenResponse, CurrentUserResponse

__all__ = [
    "PartnerBase", "PartnerCreate", "PartnerUpdate", "PartnerResponse", "PartnerListResponse",
    "CrateTypeCreate", "CrateTypeUpdate", "CrateTypeResponse", "CrateTypeListResponse",
    "CrateTypeUsageResponse",
    "MovementCreate", "MovementResponse", "MovementListResponse",
    "BalanceRow", "BalanceTableResponse",
    "LoginRequest", "TokenResponse", "CurrentUserResponse",
]
