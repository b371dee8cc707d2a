"""
Pydantic Schemas für Salden
"""
from pydantic import BaseModel

from crate_ledger.schemas.crate_type import CrateTypeResponse


class BalanceRow(BaseModel):
    """Saldozeile eines Partners"""
    partner_id: str
    partner_name: str
    sums: dict[str, int | float]
    total: int | float


class BalanceTableResponse(BaseModel):
    """Saldentabelle: Spalten (Ladentypen) und Zeilen (Partner)"""
    crate_types: list[CrateTypeResponse]
    rows: list[BalanceRow]
