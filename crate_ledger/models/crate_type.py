"""
Ladentyp-Model
"""
from datetime import datetime
from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from crate_ledger.database import Base


def normalize_crate_type_id(value: str) -> str:
    """Geschäftsschlüssel: ohne Leerraum, in Großbuchstaben (z.B. 'm10 ' -> 'M10')"""
    return (value or "").strip().upper()


class CrateType(Base):
    """
    Ladentyp (Artikel/SKU einer Mehrwegladen).

    Archivierte Typen werden bei neuen Bewegungen nicht mehr angeboten,
    bleiben aber für historische Bewegungen und Filter gültig.
    """
    __tablename__ = "crate_types"

    # Geschäftsschlüssel, z.B. "M10"
    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<CrateType(id='{self.id}', archived={self.archived})>"
