"""create users and landmarks tables

Revision ID: 0001
Revises:
Create Date: 2024-05-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)

    op.create_table(
        'landmarks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('short_description', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('opening_hours', sa.String(), nullable=False),
        sa.Column('latitude', sa.String(), nullable=False),
        sa.Column('longitude', sa.String(), nullable=False),
        sa.Column('vr_model_url', sa.String(), nullable=True),
        sa.Column('vr_scene_config', sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_landmarks_id'), 'landmarks', ['id'], unique=False)
    op.create_index(op.f('ix_landmarks_slug'), 'landmarks', ['slug'], unique=True)


def downgrade() -> None:
    op.drop_index(op.f('ix_landmarks_slug'), table_name='landmarks')
    op.drop_index(op.f('ix_landmarks_id'), table_name='landmarks')
    op.drop_table('landmarks')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
