"""
Bewegungs-Model: Laden gehen an einen Partner raus oder kommen zurück
"""
import uuid
import datetime as dt
from enum import Enum
from sqlalchemy import String, Integer, Date, DateTime, Text, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from crate_ledger.database import Base


class Direction(str, Enum):
    """Richtung einer Bewegung"""
    OUT = "out"   # Ausgabe an den Partner
    IN = "in"     # Rückgabe vom Partner


class Movement(Base):
    """
    Ladenbewegung - wird nur angelegt oder gelöscht, nie geändert.

    partner_id und crate_type_id sind keine Fremdschlüssel:
    gelöschte Partner/Typen lassen ihre Bewegungen bestehen.
    """
    __tablename__ = "movements"
    __table_args__ = (
        CheckConstraint("qty > 0", name="ck_movements_qty_positive"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    partner_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    crate_type_id: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    direction: Mapped[Direction] = mapped_column(
        SQLEnum(
            Direction,
            name="movement_direction",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    qty: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)

    note: Mapped[str | None] = mapped_column(Text)
    driver_name: Mapped[str | None] = mapped_column(String(100))  # aktiver Benutzer bei Erfassung

    # Standard-Sortierung: neueste zuerst
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Movement(partner={self.partner_id}, type={self.crate_type_id}, {self.direction}, qty={self.qty})>"
