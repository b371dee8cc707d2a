"""
Partner-Model: Kunden und Lieferanten, die Leihladen erhalten
"""
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from crate_ledger.database import Base


class Partner(Base):
    """
    Partner - leiht wiederverwendbare Laden aus und bringt sie zurück.
    Identität ist die ID; der Name ist nicht eindeutig.
    """
    __tablename__ = "partners"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    # Kontakt (Telefon / E-Mail)
    contact: Mapped[str | None] = mapped_column(String(200))
    note: Mapped[str | None] = mapped_column(Text)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Partner(name='{self.name}')>"
