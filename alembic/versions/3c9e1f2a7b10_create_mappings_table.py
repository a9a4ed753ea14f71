"""create mappings table

Revision ID: 3c9e1f2a7b10
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9e1f2a7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('mappings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('long_url', sa.String(length=4096), nullable=False),
        sa.Column('short_token', sa.String(length=10), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    # Both columns are independently unique, inserts rely on these to detect conflicts
    op.create_index(op.f('ix_mappings_long_url'), 'mappings', ['long_url'], unique=True)
    op.create_index(op.f('ix_mappings_short_token'), 'mappings', ['short_token'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_mappings_short_token'), table_name='mappings')
    op.drop_index(op.f('ix_mappings_long_url'), table_name='mappings')
    op.drop_table('mappings')
