"""Create invitees table

Revision ID: 3f2a9c1d7b10
Revises: 
Create Date: 2026-10-19 09:00:00

"""
from typing import Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, None] = None
depends_on: Union[str, None] = None


def upgrade() -> None:
    op.create_table(
        'invitees',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('token', sa.String(64), nullable=False),
        sa.Column('attendance_max_count', sa.Integer, nullable=False, server_default='1'),
        sa.Column('attendance_updated_count', sa.Integer, nullable=False, server_default='0'),
        sa.Column('attending', sa.Enum('yes', 'no', name='attending_enum'), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    )
    op.create_index('ix_invitees_full_name', 'invitees', ['full_name'])


def downgrade() -> None:
    op.drop_index('ix_invitees_full_name', table_name='invitees')
    op.drop_table('invitees')
    sa.Enum(name='attending_enum').drop(op.get_bind(), checkfirst=True)
