"""initial tables: user_profile, ranking, family, family_member

Revision ID: 3f1c2a9e7b10
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONDocument = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')

MEDIA_TYPES = ('movie', 'tv', 'book', 'game', 'music')
FAMILY_ROLES = ('parent', 'guardian', 'child', 'grandmother', 'grandfather',
                'aunt', 'uncle', 'cousin', 'sibling', 'other')
PRIVACY_LEVELS = ('private', 'family-only', 'public')


def _service_object_columns() -> list:
    return [
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'user_profile',
        sa.Column('uid', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('display_name', sa.String(length=255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('photo_url', sa.Text(), nullable=True),
        sa.Column('favorite_genres', JSONDocument, nullable=True),
        sa.Column('family_id', sa.String(length=64), nullable=True),
        sa.Column('family_role', sa.Enum(*FAMILY_ROLES, name='family_role', native_enum=False, length=16), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('uid', name=op.f('pk_user_profile')),
    )
    op.create_index('ix_user_profile_display_name', 'user_profile', ['display_name'], unique=False)

    op.create_table(
        'ranking',
        *_service_object_columns(),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('media_id', sa.String(length=255), nullable=False),
        sa.Column('media_type', sa.Enum(*MEDIA_TYPES, name='media_type', native_enum=False, length=16), nullable=True),
        sa.Column('media', JSONDocument, nullable=True),
        sa.Column('rank', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.CheckConstraint('rank BETWEEN 1 AND 5', name=op.f('ck_ranking_rank_1_5')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_ranking')),
        sa.UniqueConstraint('user_id', 'media_id', name='uq_ranking_user_media'),
    )
    op.create_index('ix_ranking_user_updated', 'ranking', ['user_id', 'last_updated'], unique=False)
    op.create_index('ix_ranking_user_type', 'ranking', ['user_id', 'media_type'], unique=False)

    op.create_table(
        'family',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by', sa.String(length=128), nullable=False),
        sa.Column('allow_child_rankings', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('require_parent_approval', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('privacy_level', sa.Enum(*PRIVACY_LEVELS, name='privacy_level', native_enum=False, length=16), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_family')),
    )

    op.create_table(
        'family_member',
        sa.Column('family_id', sa.String(length=64), nullable=False),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('role', sa.Enum(*FAMILY_ROLES, name='family_role', native_enum=False, length=16), nullable=False),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.ForeignKeyConstraint(['family_id'], ['family.id'],
                                name=op.f('fk_family_member_family_id_family'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('family_id', 'user_id', name=op.f('pk_family_member')),
        sa.UniqueConstraint('family_id', 'user_id', name='uq_family_member_family_user'),
    )
    op.create_index('ix_family_member_user_role', 'family_member', ['user_id', 'role'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_family_member_user_role', table_name='family_member')
    op.drop_table('family_member')
    op.drop_table('family')
    op.drop_index('ix_ranking_user_type', table_name='ranking')
    op.drop_index('ix_ranking_user_updated', table_name='ranking')
    op.drop_table('ranking')
    op.drop_index('ix_user_profile_display_name', table_name='user_profile')
    op.drop_table('user_profile')
