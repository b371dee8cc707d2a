"""
Pydantic Schemas für Ladenbewegungen
"""
import datetime as dt
from pydantic import BaseModel, Field, ConfigDict, field_validator

from crate_ledger.models.crate_type import normalize_crate_type_id
from crate_ledger.models.movement import Direction


class MovementCreate(BaseModel):
    """
    Schema zum Erfassen einer Bewegung.
    driver_name wird serverseitig aus dem angemeldeten Benutzer gesetzt.
    """
    partner_id: str = Field(..., min_length=1, description="Partner-ID")
    crate_type_id: str = Field(..., min_length=1, description="Ladentyp-ID")
    direction: Direction = Field(..., description="out = Ausgabe, in = Rückgabe")
    qty: int = Field(..., gt=0, description="Menge (positiv)")
    date: dt.date = Field(default_factory=dt.date.today, description="Datum")
    note: str | None = Field(None, description="Notiz, z.B. Belegnummer")

    @field_validator("crate_type_id", mode="before")
    @classmethod
    def normalize_crate_type(cls, v):
        return normalize_crate_type_id(v) if isinstance(v, str) else v

    @field_validator("note")
    @classmethod
    def blank_note(cls, v):
        if v is None:
            return None
        return v.strip() or None


class MovementResponse(BaseModel):
    """Schema für Bewegungs-Antwort"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    partner_id: str
    crate_type_id: str
    direction: Direction
    qty: int
    date: dt.date
    note: str | None
    driver_name: str | None
    created_at: dt.datetime | None = None

    # Expandierte Felder
    partner_name: str | None = None
    crate_type_label: str | None = None


class MovementListResponse(BaseModel):
    """Schema für Bewegungsliste"""
    items: list[MovementResponse]
    total: int
