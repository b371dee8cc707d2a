"""
Pydantic Schemas für Partner
"""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class PartnerBase(BaseModel):
    """Basis-Schema für Partner"""
    name: str = Field(..., min_length=1, max_length=200, description="Name (Pflichtfeld)")
    contact: str | None = Field(None, max_length=200, description="Telefon / E-Mail")
    note: str | None = Field(None, description="Notiz")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("contact", "note")
    @classmethod
    def blank_to_none(cls, v):
        return _blank_to_none(v)


class PartnerCreate(PartnerBase):
    """Schema zum Anlegen eines Partners"""
    pass


class PartnerUpdate(BaseModel):
    """Schema zum Aktualisieren eines Partners (Teil-Patch)"""
    name: str | None = Field(None, min_length=1, max_length=200)
    contact: str | None = Field(None, max_length=200)
    note: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        if v is None:
            raise ValueError("Name darf nicht leer sein")
        return v

    @field_validator("contact", "note")
    @classmethod
    def blank_to_none(cls, v):
        return _blank_to_none(v)


class PartnerResponse(BaseModel):
    """Schema für Partner-Antwort"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    contact: str | None
    note: str | None
    created_at: datetime | None = None


class PartnerListResponse(BaseModel):
    """Schema für Partner-Liste"""
    items: list[PartnerResponse]
    total: int
