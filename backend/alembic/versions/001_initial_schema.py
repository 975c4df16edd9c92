"""Initial schema: identities and activity ledger.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ### Identities table ###
    op.create_table(
        'identities',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_identities_email', 'identities', ['email'], unique=True)
    op.create_index('ix_identities_created_at', 'identities', ['created_at'])

    # ### Activities table ###
    op.create_table(
        'activities',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('identity_id', sa.Uuid(), nullable=False),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('details', sa.Text(), nullable=False, server_default=''),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        'ix_activities_identity_timestamp',
        'activities',
        ['identity_id', 'timestamp'],
    )


def downgrade() -> None:
    op.drop_index('ix_activities_identity_timestamp', table_name='activities')
    op.drop_table('activities')
    op.drop_index('ix_identities_created_at', table_name='identities')
    op.drop_index('ix_identities_email', table_name='identities')
    op.drop_table('identities')
