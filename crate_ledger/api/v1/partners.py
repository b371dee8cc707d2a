"""
Partner-API - Endpoints für Kunden und Lieferanten
"""
from fastapi import APIRouter, status

from crate_ledger.api.deps import Store, CurrentUser, AdminUser
from crate_ledger.schemas.partner import (
    PartnerCreate, PartnerUpdate, PartnerResponse, PartnerListResponse,
)

router = APIRouter(prefix="/partners", tags=["Partner"])


@router.get("", response_model=PartnerListResponse)
def list_partners(store: Store, user: CurrentUser):
    """Partnerliste, sortiert nach Name."""
    partners = store.list_partners()
    return PartnerListResponse(
        items=[PartnerResponse.model_validate(p) for p in partners],
        total=len(partners),
    )


@router.get("/{partner_id}", response_model=PartnerResponse)
def get_partner(partner_id: str, store: Store, user: CurrentUser):
    """Einzelnen Partner abrufen."""
    return PartnerResponse.model_validate(store.get_partner(partner_id))


@router.post("", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
def create_partner(data: PartnerCreate, store: Store, user: AdminUser):
    """Neuen Partner anlegen (nur Admin)."""
    partner = store.add_partner(**data.model_dump())
    return PartnerResponse.model_validate(partner)


@router.patch("/{partner_id}", response_model=PartnerResponse)
def update_partner(partner_id: str, data: PartnerUpdate, store: Store, user: AdminUser):
    """Partner aktualisieren (nur Admin)."""
    partner = store.update_partner(partner_id, data.model_dump(exclude_unset=True))
    return PartnerResponse.model_validate(partner)


@router.delete("/{partner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_partner(partner_id: str, store: Store, user: AdminUser):
    """
    Partner löschen (nur Admin).
    Bewegungen bleiben erhalten und werden als gelöscht angezeigt.
    """
    store.delete_partner(partner_id)
    return None
