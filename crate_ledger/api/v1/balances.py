"""
Salden- und Export-API
"""
from fastapi import APIRouter
from fastapi.responses import Response

from crate_ledger.api.deps import Store, CurrentUser
from crate_ledger.schemas.balance import BalanceRow, BalanceTableResponse
from crate_ledger.schemas.crate_type import CrateTypeResponse
from crate_ledger.services.export_service import ExportService, export_filename
from crate_ledger.services.ledger import compute_balances, compute_balance_rows

router = APIRouter(tags=["Salden"])


@router.get("/balances", response_model=BalanceTableResponse)
def get_balances(store: Store, user: CurrentUser):
    """
    Aktuelle Salden aller Partner je Ladentyp.
    Höchster Gesamtsaldo zuerst; Partner ohne Bewegungen mit 0.
    """
    partners, crate_types, movements = store.load_all()
    balances = compute_balances(movements)
    rows = compute_balance_rows(balances, partners, crate_types)

    return BalanceTableResponse(
        crate_types=[CrateTypeResponse.model_validate(c) for c in crate_types],
        rows=[BalanceRow(**row) for row in rows],
    )


@router.get("/export/movements.csv")
def export_movements(store: Store, user: CurrentUser):
    """Exportiert alle Bewegungen als CSV-Datei zum Download."""
    partners, crate_types, movements = store.load_all()
    csv_content = ExportService().movements_csv(partners, crate_types, movements)

    return Response(
        content=csv_content,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename()}",
        }
    )
