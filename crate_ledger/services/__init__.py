"""
Business Logic Services für das Ladenkonto
"""
from crate_ledger.services.store import LedgerStore
from crate_ledger.services.export_service import ExportService
from crate_ledger.services.ledger import (
    compute_balances,
    compute_balance_rows,
    matches_filters,
    filter_movements,
)

__all__ = [
    "LedgerStore",
    "ExportService",
    "compute_balances",
    "compute_balance_rows",
    "matches_filters",
    "filter_movements",
]
