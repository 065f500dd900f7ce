"""create_projects_and_transactions

Revision ID: 5d1c0a7e9b42
Revises:
Create Date: 2026-10-18 11:02:17.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d1c0a7e9b42'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'projects',
        sa.Column('slug', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('tagline', sa.String(), nullable=True),
        sa.Column('restricted', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('hidden', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('github', sa.String(length=256), nullable=True),
        sa.Column('sort_weight', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('slug'),
    )
    op.create_index(op.f('ix_projects_restricted'), 'projects', ['restricted'], unique=False)

    op.create_table(
        'project_links',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('project_slug', sa.String(length=64), nullable=False),
        sa.Column('link_id', sa.String(length=64), nullable=False),
        sa.Column('url', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['project_slug'], ['projects.slug'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('project_slug', 'link_id', name='uq_project_link_id'),
    )
    op.create_index(op.f('ix_project_links_project_slug'), 'project_links', ['project_slug'], unique=False)

    op.create_table(
        'versions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('project_slug', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('download_count', sa.Integer(), nullable=False, server_default='0'),
        sa.ForeignKeyConstraint(['project_slug'], ['projects.slug'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_versions_project_slug'), 'versions', ['project_slug'], unique=False)

    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('processor', sa.Enum('paypal', 'stripe', name='paymentprocessor'), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('marketplace', sa.String(), nullable=True),
        sa.Column('transaction_reference', sa.String(), nullable=True),
        sa.Column('passed_validation', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('refunded', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('project_grant_slug', sa.String(length=64), nullable=True),
        sa.ForeignKeyConstraint(['project_grant_slug'], ['projects.slug'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_transactions_timestamp'), 'transactions', ['timestamp'], unique=False)
    op.create_index(op.f('ix_transactions_email'), 'transactions', ['email'], unique=False)
    op.create_index(op.f('ix_transactions_transaction_reference'), 'transactions', ['transaction_reference'], unique=True)
    op.create_index(op.f('ix_transactions_project_grant_slug'), 'transactions', ['project_grant_slug'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_transactions_project_grant_slug'), table_name='transactions')
    op.drop_index(op.f('ix_transactions_transaction_reference'), table_name='transactions')
    op.drop_index(op.f('ix_transactions_email'), table_name='transactions')
    op.drop_index(op.f('ix_transactions_timestamp'), table_name='transactions')
    op.drop_table('transactions')
    sa.Enum(name='paymentprocessor').drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f('ix_versions_project_slug'), table_name='versions')
    op.drop_table('versions')
    op.drop_index(op.f('ix_project_links_project_slug'), table_name='project_links')
    op.drop_table('project_links')
    op.drop_index(op.f('ix_projects_restricted'), table_name='projects')
    op.drop_table('projects')
