"""
Pydantic Schemas für Ladentypen
"""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator

from crate_ledger.models.crate_type import normalize_crate_type_id


class CrateTypeCreate(BaseModel):
    """Schema zum Anlegen eines Ladentyps"""
    id: str = Field(..., min_length=1, max_length=20, description="Geschäftsschlüssel (z.B. M10)")
    label: str | None = Field(None, max_length=200, description="Bezeichnung, Standard = ID")
    archived: bool = Field(default=False)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v):
        return normalize_crate_type_id(v) if isinstance(v, str) else v


class CrateTypeUpdate(BaseModel):
    """Schema zum Aktualisieren eines Ladentyps"""
    label: str | None = Field(None, min_length=1, max_length=200)
    archived: bool | None = None

    @field_validator("label", mode="before")
    @classmethod
    def strip_label(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("label", "archived")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Feld darf nicht null sein")
        return v


class CrateTypeResponse(BaseModel):
    """Schema für Ladentyp-Antwort"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str
    archived: bool
    created_at: datetime | None = None


class CrateTypeListResponse(BaseModel):
    """Schema für Ladentyp-Liste"""
    items: list[CrateTypeResponse]
    total: int


class CrateTypeUsageResponse(BaseModel):
    """Anzahl der Bewegungen, die einen Ladentyp referenzieren"""
    crate_type_id: str
    movement_count: int
