from datetime import date
from typing import Any, Sequence
import csv
from io import StringIO

EXPORT_COLUMNS = ["date", "partner", "direction", "crate_type", "qty", "note", "driver"]


def export_filename(export_date: date | None = None) -> str:
    return f"crate_ledger_export_{(export_date or date.today()).isoformat()}.csv"


class ExportService:
    """
    Service für den CSV-Export der Bewegungen.
    Jedes Feld in Anführungszeichen, enthaltene Anführungszeichen verdoppelt.
    """

    def movement_rows(
        self,
        partners: Sequence[Any],
        crate_types: Sequence[Any],
        movements: Sequence[Any],
    ) -> list[dict]:
        """
        Flache Exportzeilen, eine pro Bewegung.
        Gelöschte Partner/Typen erscheinen mit ihrer rohen ID.
        """
        partners_by_id = {p.id: p for p in partners}
        crate_types_by_id = {c.id: c for c in crate_types}

        rows = []
        for m in movements:
            partner = partners_by_id.get(m.partner_id)
            crate_type = crate_types_by_id.get(m.crate_type_id)
            direction = getattr(m.direction, "value", m.direction)
            rows.append({
                "date": m.date.isoformat() if isinstance(m.date, date) else (m.date or ""),
                "partner": partner.name if partner else m.partner_id,
                "direction": direction,
                "crate_type": crate_type.label if crate_type else m.crate_type_id,
                "qty": m.qty,
                "note": m.note or "",
                "driver": m.driver_name or "",
            })
        return rows

    def movements_csv(
        self,
        partners: Sequence[Any],
        crate_types: Sequence[Any],
        movements: Sequence[Any],
    ) -> str:
        """Bewegungen als CSV; ohne Bewegungen leerer String (auch ohne Kopfzeile)."""
        rows = self.movement_rows(partners, crate_types, movements)
        if not rows:
            return ""

        output = StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for row in rows:
            writer.writerow(["" if row[col] is None else row[col] for col in EXPORT_COLUMNS])

        # keine abschließende Leerzeile
        return output.getvalue().rstrip("\n")
