"""
Ladenkonto-Engine - Salden und Filter über Bewegungslisten

Reine Funktionen ohne I/O. Arbeiten mit allen Objekten, die die Attribute
der Models tragen (ORM-Instanzen oder Response-Schemas).
"""
import math
from datetime import date
from typing import Any, Container, Iterable, Mapping, Sequence

from crate_ledger.models.movement import Direction

DELETED_SUFFIX = "(deleted)"

BalanceKey = tuple[str, str]
Balance = int | float


def _signed_qty(movement: Any) -> Balance:
    """Vorzeichenbehaftete Menge; fehlende oder nicht endliche Mengen zählen 0."""
    qty = getattr(movement, "qty", None)
    if isinstance(qty, bool) or not isinstance(qty, (int, float)):
        return 0
    if not math.isfinite(qty):
        return 0
    sign = 1 if movement.direction == Direction.OUT else -1
    return sign * qty


def _iso(value: date | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return value


def compute_balances(movements: Iterable[Any]) -> dict[BalanceKey, Balance]:
    """
    Laufende Salden je (partner_id, crate_type_id).

    out = +qty, in = -qty. Paare ohne Bewegungen fehlen im Ergebnis
    (Aufrufer behandeln Fehlen als 0). Saldo > 0: Partner schuldet Laden.
    """
    balances: dict[BalanceKey, Balance] = {}
    for movement in movements:
        key = (movement.partner_id, movement.crate_type_id)
        balances[key] = balances.get(key, 0) + _signed_qty(movement)
    return balances


def compute_balance_rows(
    balances: Mapping[BalanceKey, Balance],
    partners: Sequence[Any],
    crate_types: Sequence[Any],
) -> list[dict]:
    """
    Eine Zeile pro bekanntem Partner, auch ohne Bewegungen.
    Sortiert nach Gesamtsaldo absteigend (stabil bei Gleichstand).
    """
    rows = []
    for partner in partners:
        sums = {}
        total = 0
        for crate_type in crate_types:
            value = balances.get((partner.id, crate_type.id), 0)
            sums[crate_type.id] = value
            total += value
        rows.append({
            "partner_id": partner.id,
            "partner_name": partner.name,
            "sums": sums,
            "total": total,
        })
    rows.sort(key=lambda row: row["total"], reverse=True)
    return rows


def matches_filters(
    movement: Any,
    filter_partner_id: str | None,
    filter_crate_type_id: str | None,
    from_date: date | str | None,
    to_date: date | str | None,
    known_partners: Container[str],
    known_crate_types: Container[str],
) -> bool:
    """
    Prüft eine Bewegung gegen die Filter der Bewegungsliste.

    Ein Partner- oder Typfilter, dessen ID nicht mehr existiert (gelöscht
    während der Filter aktiv war), wirkt wie kein Filter.
    Datumsgrenzen vergleichen ISO-Strings; ein fehlendes Datum gilt als ""
    und fällt damit bei jedem gesetzten from_date heraus.
    """
    partner_ok = (
        not filter_partner_id
        or filter_partner_id not in known_partners
        or movement.partner_id == filter_partner_id
    )
    type_ok = (
        not filter_crate_type_id
        or filter_crate_type_id not in known_crate_types
        or movement.crate_type_id == filter_crate_type_id
    )

    movement_date = _iso(getattr(movement, "date", None))
    from_iso = _iso(from_date)
    to_iso = _iso(to_date)
    from_ok = not from_iso or movement_date >= from_iso
    to_ok = not to_iso or movement_date <= to_iso

    return partner_ok and type_ok and from_ok and to_ok


def filter_movements(
    movements: Iterable[Any],
    filter_partner_id: str | None,
    filter_crate_type_id: str | None,
    from_date: date | str | None,
    to_date: date | str | None,
    known_partners: Container[str],
    known_crate_types: Container[str],
) -> list:
    """Wendet matches_filters auf eine Liste an, Reihenfolge bleibt erhalten."""
    return [
        m for m in movements
        if matches_filters(
            m, filter_partner_id, filter_crate_type_id, from_date, to_date,
            known_partners, known_crate_types,
        )
    ]


def partner_label(partners_by_id: Mapping[str, Any], partner_id: str) -> str:
    partner = partners_by_id.get(partner_id)
    return partner.name if partner else f"{partner_id} {DELETED_SUFFIX}"


def crate_type_label(crate_types_by_id: Mapping[str, Any], crate_type_id: str) -> str:
    crate_type = crate_types_by_id.get(crate_type_id)
    return crate_type.label if crate_type else f"{crate_type_id} {DELETED_SUFFIX}"
