"""
Datenspeicher Tests
Tests für LedgerStore gegen SQLite in-memory
"""
from datetime import date, datetime

import pytest
from sqlalchemy import text

from crate_ledger.exceptions import StoreError, RecordNotFound, DuplicateRecord
from crate_ledger.models import CrateType, Direction
from crate_ledger.services.store import LedgerStore


@pytest.fixture
def store(db):
    return LedgerStore(db)


def add_movement(store, partner_id="P1", crate_type_id="M10", direction=Direction.OUT, qty=1, **extra):
    return store.add_movement(
        partner_id=partner_id,
        crate_type_id=crate_type_id,
        direction=direction,
        qty=qty,
        date=date(2024, 3, 15),
        driver_name="Gyuri",
        **extra,
    )


class TestPartners:
    """Partner-Sammlung"""

    def test_add_returns_store_assigned_id(self, store):
        partner = store.add_partner("Huber", contact="089-1")
        assert partner.id
        assert partner.created_at is not None

    def test_list_sorted_by_name(self, store):
        for name in ["Kaiser", "Bauer", "Huber"]:
            store.add_partner(name)
        assert [p.name for p in store.list_partners()] == ["Bauer", "Huber", "Kaiser"]

    def test_update_is_partial(self, store):
        partner = store.add_partner("Huber", contact="089-1", note="Rampe 3")
        updated = store.update_partner(partner.id, {"name": "Huber KG"})
        assert updated.name == "Huber KG"
        assert updated.contact == "089-1"
        assert updated.note == "Rampe 3"

    def test_update_unknown_raises(self, store):
        with pytest.raises(RecordNotFound):
            store.update_partner("nope", {"name": "x"})

    def test_delete_keeps_movements(self, store):
        partner = store.add_partner("Huber")
        add_movement(store, partner_id=partner.id, qty=7)
        store.delete_partner(partner.id)

        assert store.list_partners() == []
        movements = store.list_movements()
        assert len(movements) == 1
        assert movements[0].partner_id == partner.id

    def test_failed_write_is_rolled_back(self, store, db):
        """Fehlgeschlagener Insert hinterlässt keine Teiländerung"""
        with pytest.raises(StoreError):
            store.add_partner(None)

        assert store.list_partners() == []
        store.add_partner("Huber")
        assert [p.name for p in store.list_partners()] == ["Huber"]


class TestCrateTypes:
    """Ladentyp-Sammlung"""

    def test_id_is_normalized_and_label_defaults(self, store):
        crate_type = store.add_crate_type(" m10 ")
        assert crate_type.id == "M10"
        assert crate_type.label == "M10"
        assert crate_type.archived is False

    def test_lookup_by_lowercase_id(self, store):
        store.add_crate_type("M10", "kleine Lade")
        assert isinstance(store.get_crate_type(" m10"), CrateType)
        assert store.set_crate_type_archived("m10", True).archived is True

    def test_duplicate_id(self, store):
        store.add_crate_type("M10", "kleine Lade")
        with pytest.raises(DuplicateRecord):
            store.add_crate_type("m10")

    def test_list_sorted_by_id_and_archived_filter(self, store):
        store.add_crate_type("M20")
        store.add_crate_type("EP")
        store.add_crate_type("M10")
        store.set_crate_type_archived("M20", True)

        assert [c.id for c in store.list_crate_types()] == ["EP", "M10", "M20"]
        assert [c.id for c in store.list_crate_types(include_archived=False)] == ["EP", "M10"]

    def test_archive_and_restore(self, store):
        store.add_crate_type("M10")
        assert store.set_crate_type_archived("M10", True).archived is True
        assert store.set_crate_type_archived("M10", False).archived is False

    def test_usage_count(self, store):
        store.add_crate_type("M10")
        add_movement(store, crate_type_id="M10")
        add_movement(store, crate_type_id="M10")
        add_movement(store, crate_type_id="M20")
        assert store.count_movements_for_crate_type("M10") == 2
        assert store.count_movements_for_crate_type("XX") == 0

    def test_delete_unknown_raises(self, store):
        with pytest.raises(RecordNotFound):
            store.delete_crate_type("XX")


class TestMovements:
    """Bewegungs-Sammlung"""

    def test_add_and_delete(self, store):
        movement = add_movement(store, qty=3)
        assert movement.id
        assert movement.created_at is not None
        assert movement.direction == Direction.OUT

        store.delete_movement(movement.id)
        assert store.list_movements() == []

    def test_delete_unknown_raises(self, store):
        with pytest.raises(RecordNotFound):
            store.delete_movement("nope")

    def test_non_positive_qty_rejected_by_store(self, store):
        with pytest.raises(StoreError):
            add_movement(store, qty=0)
        assert store.list_movements() == []

    def test_load_all(self, store):
        store.add_partner("Huber")
        store.add_crate_type("M10")
        add_movement(store)

        partners, crate_types, movements = store.load_all()
        assert len(partners) == 1
        assert len(crate_types) == 1
        assert len(movements) == 1

    def test_listed_newest_first(self, store):
        created = [
            add_movement(store, qty=n, created_at=datetime(2024, 3, 15, 8, 0, n))
            for n in (1, 2, 3)
        ]
        assert [m.id for m in store.list_movements()] == [m.id for m in reversed(created)]


class TestStoreFailures:
    """Fehler des Datenspeichers kommen als StoreError beim Aufrufer an"""

    def drop(self, db, table):
        db.execute(text(f"DROP TABLE {table}"))
        db.commit()

    def test_update_partner_on_missing_table(self, store, db):
        partner = store.add_partner("Huber")
        self.drop(db, "partners")

        with pytest.raises(StoreError) as excinfo:
            store.update_partner(partner.id, {"name": "x"})
        assert "partners" in excinfo.value.message

    def test_delete_movement_on_missing_table(self, store, db):
        movement = add_movement(store)
        self.drop(db, "movements")

        with pytest.raises(StoreError):
            store.delete_movement(movement.id)

    def test_duplicate_check_on_missing_table(self, store, db):
        self.drop(db, "crate_types")

        with pytest.raises(StoreError):
            store.add_crate_type("M10")

    def test_usage_count_on_missing_table(self, store, db):
        self.drop(db, "movements")

        with pytest.raises(StoreError):
            store.count_movements_for_crate_type("M10")

    def test_concurrent_duplicate_crate_type(self, store, db, monkeypatch):
        """Zwischen Prüfung und Insert von anderer Sitzung angelegt -> DuplicateRecord"""
        store.add_crate_type("M10")
        db.expunge_all()

        real_fetch = store._fetch
        calls = []

        def stale_first_check(model, record_id):
            calls.append(record_id)
            return None if len(calls) == 1 else real_fetch(model, record_id)

        monkeypatch.setattr(store, "_fetch", stale_first_check)

        with pytest.raises(DuplicateRecord):
            store.add_crate_type("m10")
        assert [c.id for c in store.list_crate_types()] == ["M10"]
