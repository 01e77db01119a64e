"""Create expenses table

Revision ID: 20261019_120000
Revises:
Create Date: 2026-10-19 12:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019_120000'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the flat expenses table."""
    op.create_table(
        'expenses',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Float(), nullable=True),
        sa.Column('category', sa.String(length=255), nullable=True),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    """Drop the expenses table."""
    op.drop_table('expenses')
