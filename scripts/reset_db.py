#!/usr/bin/env python3
"""
Löscht alle Tabellen des Ladenkontos (inkl. alembic_version).

Verwendung:
    DATABASE_URL=... python scripts/reset_db.py
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import sqlalchemy as sa
from crate_ledger.database import get_engine
from crate_ledger.exceptions import ConfigurationMissing

try:
    engine = get_engine()
except ConfigurationMissing as e:
    print(e)
    sys.exit(1)

meta = sa.MetaData()
meta.reflect(bind=engine)
print(f"Dropping tables: {list(meta.tables.keys())}")
meta.drop_all(bind=engine)
print("Done.")
