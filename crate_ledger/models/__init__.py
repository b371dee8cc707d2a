"""
SQLAlchemy Models für das Ladenkonto
"""
from crate_ledger.models.partner import Partner
from crate_ledger.models.crate_type import CrateType, normalize_crate_type_id
from crate_ledger.models.movement import Movement, Direction

__all__ = [
    "Partner",
    "CrateType",
    "normalize_crate_type_id",
    "Movement",
    "Direction",
]
