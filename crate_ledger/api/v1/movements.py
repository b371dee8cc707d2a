"""
Bewegungs-API - Erfassen, Filtern und Löschen von Ladenbewegungen
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, HTTPException, status

from crate_ledger.api.deps import Store, CurrentUser, AdminUser, Pagination
from crate_ledger.models.crate_type import normalize_crate_type_id
from crate_ledger.schemas.movement import (
    MovementCreate, MovementResponse, MovementListResponse,
)
from crate_ledger.services.ledger import filter_movements, partner_label, crate_type_label

router = APIRouter(prefix="/movements", tags=["Bewegungen"])


def _expand(movement, partners_by_id: dict, crate_types_by_id: dict) -> MovementResponse:
    response = MovementResponse.model_validate(movement)
    response.partner_name = partner_label(partners_by_id, movement.partner_id)
    response.crate_type_label = crate_type_label(crate_types_by_id, movement.crate_type_id)
    return response


@router.get("", response_model=MovementListResponse)
def list_movements(
    store: Store,
    user: CurrentUser,
    pagination: Pagination,
    partner_id: Optional[str] = None,
    crate_type_id: Optional[str] = None,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
):
    """
    Bewegungen abrufen, neueste zuerst.

    Filter:
    - **partner_id** / **crate_type_id**: nur wirksam, solange Partner/Typ existiert
    - **from_date** / **to_date**: Datumsbereich (inklusive)
    """
    partners, crate_types, movements = store.load_all()
    if crate_type_id:
        crate_type_id = normalize_crate_type_id(crate_type_id)
    partners_by_id = {p.id: p for p in partners}
    crate_types_by_id = {c.id: c for c in crate_types}

    filtered = filter_movements(
        movements, partner_id, crate_type_id, from_date, to_date,
        partners_by_id, crate_types_by_id,
    )
    page = filtered[pagination.offset:pagination.offset + pagination.page_size]

    return MovementListResponse(
        items=[_expand(m, partners_by_id, crate_types_by_id) for m in page],
        total=len(filtered),
    )


@router.post("", response_model=MovementResponse, status_code=status.HTTP_201_CREATED)
def create_movement(data: MovementCreate, store: Store, user: CurrentUser):
    """
    Neue Bewegung erfassen (alle Rollen).
    Der angemeldete Benutzer wird als Fahrer eingetragen.
    """
    partners_by_id = {p.id: p for p in store.list_partners()}
    crate_types_by_id = {c.id: c for c in store.list_crate_types()}

    if data.partner_id not in partners_by_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Bitte einen Partner auswählen"
        )
    crate_type = crate_types_by_id.get(data.crate_type_id)
    if crate_type is None or crate_type.archived:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Bitte einen aktiven Ladentyp auswählen"
        )

    movement = store.add_movement(**data.model_dump(), driver_name=user["name"])
    return _expand(movement, partners_by_id, crate_types_by_id)


@router.delete("/{movement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movement(movement_id: str, store: Store, user: AdminUser):
    """Bewegung löschen (nur Admin)."""
    store.delete_movement(movement_id)
    return None
