#!/usr/bin/env python3
"""
Seed Data Script für das Ladenkonto
Erstellt Beispiel-Partner, Ladentypen und Bewegungen.

Verwendung:
    DATABASE_URL=sqlite:///ledger.db python scripts/seed_data.py
"""
import sys
import os
import random
from datetime import date, timedelta

# Pfad für Imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session
from crate_ledger.database import Base, get_engine, get_session_factory
from crate_ledger.models import Partner, CrateType, Movement, Direction


# ============== SEED DATA ==============

PARTNERS_DATA = [
    {"name": "Bio Hofladen Huber", "contact": "089-1234567", "note": "Lieferung Di/Fr"},
    {"name": "Gemüse Kaiser", "contact": "einkauf@gemuese-kaiser.de"},
    {"name": "Markthalle Süd", "contact": "0171-555123", "note": "Rampe 3"},
    {"name": "Restaurant Schumann"},
]

CRATE_TYPES_DATA = [
    {"id": "M10", "label": "M10 - kleine Lade"},
    {"id": "M20", "label": "M20 - große Lade"},
    {"id": "EP", "label": "Europalette"},
    {"id": "H6", "label": "H6 - Holzsteige", "archived": True},
]

DRIVERS = ["Ákos", "Gyuri", "Vasárnapi"]


def create_partners(db: Session) -> list[Partner]:
    """Erstellt Partner"""
    print("Erstelle Partner...")

    partners = []
    for partner_data in PARTNERS_DATA:
        partner = Partner(**partner_data)
        db.add(partner)
        partners.append(partner)

    return partners


def create_crate_types(db: Session) -> list[CrateType]:
    """Erstellt Ladentypen"""
    print("Erstelle Ladentypen...")

    crate_types = []
    for crate_type_data in CRATE_TYPES_DATA:
        crate_type = CrateType(**crate_type_data)
        db.add(crate_type)
        crate_types.append(crate_type)

    return crate_types


def create_movements(db: Session, partners: list[Partner], crate_types: list[CrateType]) -> int:
    """
    Erstellt Bewegungen der letzten 30 Tage.
    Rückgaben bleiben unter den Ausgaben, damit die Salden positiv sind.
    """
    print("Erstelle Bewegungen...")

    rng = random.Random(42)
    today = date.today()
    active_types = [c for c in crate_types if not c.archived]
    count = 0

    for days_ago in range(30, 0, -1):
        partner = rng.choice(partners)
        crate_type = rng.choice(active_types)
        qty_out = rng.randint(5, 40)

        db.add(Movement(
            partner_id=partner.id,
            crate_type_id=crate_type.id,
            direction=Direction.OUT,
            qty=qty_out,
            date=today - timedelta(days=days_ago),
            driver_name=rng.choice(DRIVERS),
        ))
        count += 1

        if days_ago % 3 == 0:
            db.add(Movement(
                partner_id=partner.id,
                crate_type_id=crate_type.id,
                direction=Direction.IN,
                qty=rng.randint(1, qty_out),
                date=today - timedelta(days=days_ago - 1),
                note=f"Beleg {1000 + days_ago}",
                driver_name=rng.choice(DRIVERS),
            ))
            count += 1

    return count


def main():
    """Hauptfunktion - erstellt alle Seed-Daten"""
    print("=" * 50)
    print("Ladenkonto - Seed Data")
    print("=" * 50)

    # Tabellen erstellen falls nicht vorhanden
    Base.metadata.create_all(bind=get_engine())

    db = get_session_factory()()
    try:
        existing = db.query(Partner).count()
        if existing > 0:
            print(f"\nWarnung: Datenbank enthält bereits {existing} Partner.")
            response = input("Fortfahren und Daten hinzufügen? (j/n): ")
            if response.lower() != "j":
                print("Abgebrochen.")
                return

        partners = create_partners(db)
        db.flush()

        existing_types = {c.id for c in db.query(CrateType).all()}
        crate_types = create_crate_types(db) if not existing_types else db.query(CrateType).all()
        db.flush()

        movement_count = create_movements(db, partners, crate_types)

        db.commit()

        print("\n" + "=" * 50)
        print("Seed-Daten erfolgreich erstellt!")
        print("=" * 50)
        print(f"  - {len(partners)} Partner")
        print(f"  - {len(crate_types)} Ladentypen")
        print(f"  - {movement_count} Bewegungen")

    except Exception as e:
        db.rollback()
        print(f"\nFehler: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
