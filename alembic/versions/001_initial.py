"""Initial migration

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create reservations table
    op.create_table(
        'reservations',
        sa.Column('reservation_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(255), nullable=False),
        sa.Column('last_name', sa.String(255), nullable=False),
        sa.Column('mobile_number', sa.String(50), nullable=False),
        sa.Column('reservation_date', sa.Date(), nullable=False),
        sa.Column('reservation_time', sa.Time(), nullable=False),
        sa.Column('people', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='booked'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_index('ix_reservations_reservation_date', 'reservations', ['reservation_date'])


def downgrade() -> None:
    op.drop_index('ix_reservations_reservation_date', table_name='reservations')
    op.drop_table('reservations')
