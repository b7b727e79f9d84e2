"""initial_time_frames

Revision ID: 3f2a9c1d7e10
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'employees',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    op.create_table(
        'time_frames',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('employee_email', sa.String(length=255), nullable=False),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False, server_default='open'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'uq_time_frames_open_per_employee',
        'time_frames',
        ['employee_email'],
        unique=True,
        sqlite_where=sa.text('end_at IS NULL'),
        postgresql_where=sa.text('end_at IS NULL'),
    )
    op.create_index(
        'ix_time_frames_employee_end',
        'time_frames',
        ['employee_email', 'end_at'],
    )


def downgrade() -> None:
    op.drop_index('ix_time_frames_employee_end', table_name='time_frames')
    op.drop_index('uq_time_frames_open_per_employee', table_name='time_frames')
    op.drop_table('time_frames')
    op.drop_table('employees')
