"""create users and donations

Revision ID: 3f1c9a2d7b41
Revises:
Create Date: 2025-11-02 10:14:08.512390
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2d7b41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('phone', sa.String(length=120), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('phone'),
    )

    op.create_table(
        'donations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('phone', sa.String(length=120), nullable=False),
        sa.Column('items', sa.Text(), nullable=False),
        sa.Column(
            'condition',
            sa.Enum('new', 'good', 'fair', name='donationcondition'),
            nullable=False,
        ),
        sa.Column('pickup_date', sa.Date(), nullable=True),
        sa.Column('pickup_slot', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_donations_phone'), 'donations', ['phone'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_donations_phone'), table_name='donations')
    op.drop_table('donations')
    op.drop_table('users')

    # Postgres keeps the enum type after the table is gone
    sa.Enum(name='donationcondition').drop(op.get_bind(), checkfirst=True)
