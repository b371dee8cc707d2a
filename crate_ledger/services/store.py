"""
Datenspeicher-Service - CRUD für Partner, Ladentypen und Bewegungen

Jede fehlgeschlagene Operation wird zurückgerollt und als StoreError
gemeldet, damit keine Teiländerung in der Session verbleibt.
"""
import logging
from typing import Any, Callable

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crate_ledger.exceptions import StoreError, RecordNotFound, DuplicateRecord
from crate_ledger.models.partner import Partner
from crate_ledger.models.crate_type import CrateType, normalize_crate_type_id
from crate_ledger.models.movement import Movement

logger = logging.getLogger(__name__)


class LedgerStore:
    """Service für Datenspeicher-Operationen"""

    def __init__(self, db: Session):
        self.db = db

    # ========================================
    # INTERN
    # ========================================

    def _commit(self, action: str, record=None) -> None:
        """Commit und ggf. Neuladen des Datensatzes; Fehler -> Rollback + StoreError."""
        try:
            self.db.commit()
            if record is not None:
                self.db.refresh(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Speicherfehler bei {action}: {e}")
            raise StoreError(f"Speichern fehlgeschlagen ({action}): {getattr(e, 'orig', e)}") from e

    def _read(self, action: str, load: Callable[[], Any]) -> Any:
        try:
            return load()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Lesefehler bei {action}: {e}")
            raise StoreError(f"Laden fehlgeschlagen ({action}): {getattr(e, 'orig', e)}") from e

    def _list(self, query) -> list:
        return self._read("Liste", lambda: list(self.db.execute(query).scalars().all()))

    def _fetch(self, model, record_id: str):
        return self._read(f"{model.__tablename__} lesen", lambda: self.db.get(model, record_id))

    def _get_or_raise(self, model, collection: str, record_id: str):
        record = self._fetch(model, record_id)
        if record is None:
            raise RecordNotFound(collection, record_id)
        return record

    def _insert(self, record, collection: str):
        self.db.add(record)
        self._commit(f"{collection} anlegen", record)
        logger.info(f"{collection}: {record.id} angelegt")
        return record

    def _patch(self, record, patch: dict[str, Any], collection: str):
        for field, value in patch.items():
            setattr(record, field, value)
        self._commit(f"{collection} ändern", record)
        logger.info(f"{collection}: {record.id} geändert ({', '.join(patch)})")
        return record

    def _delete(self, record, collection: str) -> None:
        record_id = record.id
        self.db.delete(record)
        self._commit(f"{collection} löschen")
        logger.info(f"{collection}: {record_id} gelöscht")

    # ========================================
    # SNAPSHOT
    # ========================================

    def load_all(self) -> tuple[list[Partner], list[CrateType], list[Movement]]:
        """Vollständiger, konsistenter Stand aller drei Sammlungen."""
        return self.list_partners(), self.list_crate_types(), self.list_movements()

    # ========================================
    # PARTNER
    # ========================================

    def list_partners(self) -> list[Partner]:
        return self._list(select(Partner).order_by(Partner.name))

    def get_partner(self, partner_id: str) -> Partner:
        return self._get_or_raise(Partner, "partners", partner_id)

    def add_partner(self, name: str, contact: str | None = None, note: str | None = None) -> Partner:
        return self._insert(Partner(name=name, contact=contact, note=note), "partners")

    def update_partner(self, partner_id: str, patch: dict[str, Any]) -> Partner:
        partner = self.get_partner(partner_id)
        return self._patch(partner, patch, "partners")

    def delete_partner(self, partner_id: str) -> None:
        """Bewegungen des Partners bleiben erhalten."""
        self._delete(self.get_partner(partner_id), "partners")

    # ========================================
    # LADENTYPEN
    # ========================================

    def list_crate_types(self, include_archived: bool = True) -> list[CrateType]:
        query = select(CrateType)
        if not include_archived:
            query = query.where(CrateType.archived == False)
        return self._list(query.order_by(CrateType.id))

    def get_crate_type(self, crate_type_id: str) -> CrateType:
        return self._get_or_raise(CrateType, "crate_types", normalize_crate_type_id(crate_type_id))

    def add_crate_type(self, crate_type_id: str, label: str | None = None, archived: bool = False) -> CrateType:
        """
        Legt einen Ladentyp an. Die ID wird normalisiert (Großbuchstaben),
        eine leere Bezeichnung fällt auf die ID zurück.
        """
        clean_id = normalize_crate_type_id(crate_type_id)
        if self._fetch(CrateType, clean_id) is not None:
            raise DuplicateRecord("crate_types", clean_id)
        label = (label or "").strip() or clean_id
        try:
            return self._insert(CrateType(id=clean_id, label=label, archived=archived), "crate_types")
        except StoreError as e:
            # gleichzeitig von einer anderen Sitzung angelegt
            if self._fetch(CrateType, clean_id) is not None:
                raise DuplicateRecord("crate_types", clean_id) from e
            raise

    def update_crate_type(self, crate_type_id: str, patch: dict[str, Any]) -> CrateType:
        crate_type = self.get_crate_type(crate_type_id)
        return self._patch(crate_type, patch, "crate_types")

    def set_crate_type_archived(self, crate_type_id: str, archived: bool) -> CrateType:
        return self.update_crate_type(crate_type_id, {"archived": archived})

    def delete_crate_type(self, crate_type_id: str) -> None:
        """Historische Bewegungen mit diesem Typ bleiben erhalten."""
        self._delete(self.get_crate_type(crate_type_id), "crate_types")

    def count_movements_for_crate_type(self, crate_type_id: str) -> int:
        query = select(func.count()).select_from(Movement).where(
            Movement.crate_type_id == normalize_crate_type_id(crate_type_id)
        )
        return self._read("Verwendung", lambda: self.db.execute(query).scalar()) or 0

    # ========================================
    # BEWEGUNGEN
    # ========================================

    def list_movements(self) -> list[Movement]:
        """Neueste zuerst."""
        return self._list(select(Movement).order_by(Movement.created_at.desc()))

    def add_movement(self, **fields) -> Movement:
        return self._insert(Movement(**fields), "movements")

    def delete_movement(self, movement_id: str) -> None:
        self._delete(self._get_or_raise(Movement, "movements", movement_id), "movements")
