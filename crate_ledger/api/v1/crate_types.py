"""
Ladentyp-API - Anlegen, Archivieren und Löschen von Ladentypen
"""
from fastapi import APIRouter, status

from crate_ledger.api.deps import Store, CurrentUser, AdminUser
from crate_ledger.models.crate_type import normalize_crate_type_id
from crate_ledger.schemas.crate_type import (
    CrateTypeCreate, CrateTypeUpdate, CrateTypeResponse, CrateTypeListResponse,
    CrateTypeUsageResponse,
)

router = APIRouter(prefix="/crate-types", tags=["Ladentypen"])


@router.get("", response_model=CrateTypeListResponse)
def list_crate_types(store: Store, user: CurrentUser, include_archived: bool = True):
    """
    Ladentypen, sortiert nach ID.

    - **include_archived**: false liefert nur die für neue Bewegungen wählbaren Typen
    """
    crate_types = store.list_crate_types(include_archived=include_archived)
    return CrateTypeListResponse(
        items=[CrateTypeResponse.model_validate(c) for c in crate_types],
        total=len(crate_types),
    )


@router.post("", response_model=CrateTypeResponse, status_code=status.HTTP_201_CREATED)
def create_crate_type(data: CrateTypeCreate, store: Store, user: AdminUser):
    """Neuen Ladentyp anlegen (nur Admin). Doppelte ID -> 409."""
    crate_type = store.add_crate_type(data.id, label=data.label, archived=data.archived)
    return CrateTypeResponse.model_validate(crate_type)


@router.patch("/{crate_type_id}", response_model=CrateTypeResponse)
def update_crate_type(crate_type_id: str, data: CrateTypeUpdate, store: Store, user: AdminUser):
    """Ladentyp aktualisieren (nur Admin)."""
    crate_type = store.update_crate_type(crate_type_id, data.model_dump(exclude_unset=True))
    return CrateTypeResponse.model_validate(crate_type)


@router.post("/{crate_type_id}/archive", response_model=CrateTypeResponse)
def archive_crate_type(crate_type_id: str, store: Store, user: AdminUser):
    """Ladentyp archivieren (nur Admin)."""
    return CrateTypeResponse.model_validate(store.set_crate_type_archived(crate_type_id, True))


@router.post("/{crate_type_id}/restore", response_model=CrateTypeResponse)
def restore_crate_type(crate_type_id: str, store: Store, user: AdminUser):
    """Archivierten Ladentyp wiederherstellen (nur Admin)."""
    return CrateTypeResponse.model_validate(store.set_crate_type_archived(crate_type_id, False))


@router.get("/{crate_type_id}/usage", response_model=CrateTypeUsageResponse)
def crate_type_usage(crate_type_id: str, store: Store, user: CurrentUser):
    """Anzahl der Bewegungen mit diesem Typ (Warnhinweis vor dem Löschen)."""
    return CrateTypeUsageResponse(
        crate_type_id=normalize_crate_type_id(crate_type_id),
        movement_count=store.count_movements_for_crate_type(crate_type_id),
    )


@router.delete("/{crate_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_crate_type(crate_type_id: str, store: Store, user: AdminUser):
    """Ladentyp löschen (nur Admin). Historische Bewegungen bleiben bestehen."""
    store.delete_crate_type(crate_type_id)
    return None
