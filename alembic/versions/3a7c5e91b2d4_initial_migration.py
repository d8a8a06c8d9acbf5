"""initial_migration

Creates the Gigs table.

Revision ID: 3a7c5e91b2d4
Revises:
Create Date: 2021-01-02 21:57:32.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a7c5e91b2d4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'Gigs',
        sa.Column('GigId', sa.Integer(), sa.Identity(start=1, increment=1), nullable=False),
        sa.Column('Name', sa.String(), nullable=False),
        sa.Column('GigDate', sa.DateTime(), nullable=False),
        sa.Column('MusicGenre', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('GigId', name='PK_Gigs'),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drops every stored gig
    op.drop_table('Gigs')
