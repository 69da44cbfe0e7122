"""create game_document table

Revision ID: 3a7c9e1d2b40
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c9e1d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'game_document' in set(insp.get_table_names()):
        return

    op.create_table(
        'game_document',
        sa.Column('id', sa.String(length=20), nullable=False),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_game_document_user_id', 'game_document', ['user_id'], unique=False)


def downgrade():
    op.drop_index('ix_game_document_user_id', table_name='game_document')
    op.drop_table('game_document')
