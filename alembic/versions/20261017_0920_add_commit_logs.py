"""add commit logs table

Revision ID: 20261017_0920_add_commit_logs
Revises: 20261017_0910_create_translations
Create Date: 2026-10-17 09:20:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261017_0920_add_commit_logs'
down_revision = '20261017_0910_create_translations'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'commit_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('repo_name', sa.String(255), nullable=False),
        sa.Column('commit_id', sa.String(45), nullable=False),
        sa.Column('phrase_count', sa.Integer(), server_default='0', nullable=True),
        sa.Column('status', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_commit_logs_commit_id', 'commit_logs', ['commit_id'], unique=True)

def downgrade() -> None:
    op.drop_index('ix_commit_logs_commit_id', table_name='commit_logs')
    op.drop_table('commit_logs')
