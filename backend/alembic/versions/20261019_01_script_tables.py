"""script, version and element tables

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa
from typing import Sequence, Union

revision: str = '20261019_01'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'scripts',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('script_type', sa.String(), nullable=True),
        sa.Column('format_standard', sa.String(), nullable=True),
        sa.Column('logline', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_scripts_owner_id', 'scripts', ['owner_id'])

    op.create_table(
        'script_versions',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('script_id', sa.UUID(), sa.ForeignKey('scripts.id'), nullable=False),
        sa.Column('version_label', sa.String(), nullable=True),
        sa.Column('is_preferred', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('raw_content', sa.Text(), nullable=False),
        sa.Column('formatted_content', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_script_versions_script_id', 'script_versions', ['script_id'])

    op.create_table(
        'script_elements',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('script_version_id', sa.UUID(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.Column('element_type', sa.String(), nullable=False),
        sa.Column('character_name', sa.String(), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_script_elements_script_version_id', 'script_elements', ['script_version_id'])


def downgrade() -> None:
    op.drop_index('ix_script_elements_script_version_id', table_name='script_elements')
    op.drop_table('script_elements')
    op.drop_index('ix_script_versions_script_id', table_name='script_versions')
    op.drop_table('script_versions')
    op.drop_index('ix_scripts_owner_id', table_name='scripts')
    op.drop_table('scripts')
