"""Initial Schema - Ladenkonto

Revision ID: 001
Revises:
Create Date: 2026-10-18

Erstellt Partner, Ladentypen und Bewegungen.
Bewegungen haben keine Fremdschlüssel auf Partner/Ladentypen.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Partner
    op.create_table(
        'partners',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False, index=True),
        sa.Column('contact', sa.String(200)),
        sa.Column('note', sa.Text),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now()),
    )

    # Ladentypen
    op.create_table(
        'crate_types',
        sa.Column('id', sa.String(20), primary_key=True),
        sa.Column('label', sa.String(200), nullable=False),
        sa.Column('archived', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
    )

    # Bewegungen
    op.create_table(
        'movements',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('partner_id', sa.String(36), nullable=False, index=True),
        sa.Column('crate_type_id', sa.String(20), nullable=False, index=True),
        sa.Column('direction', sa.Enum('out', 'in', name='movement_direction'), nullable=False),
        sa.Column('qty', sa.Integer, nullable=False),
        sa.Column('date', sa.Date, nullable=False, index=True),
        sa.Column('note', sa.Text),
        sa.Column('driver_name', sa.String(100)),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now(), index=True),
        sa.CheckConstraint('qty > 0', name='ck_movements_qty_positive'),
    )


def downgrade() -> None:
    op.drop_table('movements')
    op.drop_table('crate_types')
    op.drop_table('partners')
    sa.Enum(name='movement_direction').drop(op.get_bind(), checkfirst=True)
