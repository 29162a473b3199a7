"""create regions, difficulties and walks

Revision ID: 4e2a9c1d7b30
Revises:
Create Date: 2024-10-02 09:14:27.318402

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4e2a9c1d7b30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'regions',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('code', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('region_image_url', sa.String(length=2048), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    difficulties = op.create_table(
        'difficulties',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_table(
        'walks',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('length_in_km', sa.Float(), nullable=False),
        sa.Column('walk_image_url', sa.String(length=2048), nullable=True),
        sa.Column('region_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('difficulty_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('length_in_km > 0', name='ck_walks_length_positive'),
        sa.ForeignKeyConstraint(['region_id'], ['regions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['difficulty_id'], ['difficulties.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_walks_region_id', 'walks', ['region_id'], unique=False)
    op.create_index('idx_walks_difficulty_id', 'walks', ['difficulty_id'], unique=False)

    # Reference data; ids must match nzwalks.db.models.DEFAULT_DIFFICULTIES
    op.bulk_insert(difficulties, [
        {'id': uuid.UUID('54466f17-02af-48e7-8ed3-5a4a8bfacf6f'), 'name': 'Easy'},
        {'id': uuid.UUID('ea294873-7a8c-4c0f-bfa7-a2eb492cbf8c'), 'name': 'Medium'},
        {'id': uuid.UUID('f808ddcd-b5e5-4d80-b732-1ca523e48434'), 'name': 'Hard'},
    ])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_walks_difficulty_id', table_name='walks')
    op.drop_index('idx_walks_region_id', table_name='walks')
    op.drop_table('walks')
    op.drop_table('difficulties')
    op.drop_table('regions')
