"""create phrases table

Revision ID: 20261017_0900_create_phrases
Revises:
Create Date: 2026-10-17 09:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261017_0900_create_phrases'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'phrases',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('repo_name', sa.String(255), nullable=False),
        sa.Column('key', sa.Text(), nullable=False),
        sa.Column('meta_key', sa.Text(), nullable=True),
        sa.Column('file', sa.Text(), nullable=False),
        sa.Column('commit_id', sa.String(45), nullable=False),
    )
    op.create_index('ix_phrases_repo_name_commit_id', 'phrases', ['repo_name', 'commit_id'])
    op.create_index('ix_phrases_key', 'phrases', ['key'])
    op.create_index('ix_phrases_meta_key', 'phrases', ['meta_key'])

def downgrade() -> None:
    op.drop_index('ix_phrases_meta_key', table_name='phrases')
    op.drop_index('ix_phrases_key', table_name='phrases')
    op.drop_index('ix_phrases_repo_name_commit_id', table_name='phrases')
    op.drop_table('phrases')
