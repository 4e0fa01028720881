"""create translations table

Revision ID: 20261017_0910_create_translations
Revises: 20261017_0900_create_phrases
Create Date: 2026-10-17 09:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261017_0910_create_translations'
down_revision = '20261017_0900_create_phrases'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'translations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('phrase_id', sa.Integer(), sa.ForeignKey('phrases.id'), nullable=False),
        sa.Column('locale', sa.String(255), nullable=False),
        sa.Column('translation', sa.Text(), nullable=False),
    )
    op.create_index('ix_translations_phrase_id_locale', 'translations', ['phrase_id', 'locale'])

def downgrade() -> None:
    op.drop_index('ix_translations_phrase_id_locale', table_name='translations')
    op.drop_table('translations')
