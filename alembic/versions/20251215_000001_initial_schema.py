"""initial_schema

Revision ID: 000001
Revises:
Create Date: 2025-12-15 00:00:01.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            'created_at',
            sa.DateTime(timezone = True),
            server_default = sa.text('now()'),
            nullable = False
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone = True),
            nullable = True
        ),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column('username',
                  sa.String(length = 100),
                  nullable = False),
        sa.Column('name',
                  sa.String(length = 100),
                  nullable = False),
        sa.Column('surname',
                  sa.String(length = 100),
                  nullable = False),
        sa.Column('email',
                  sa.String(length = 320),
                  nullable = False),
        sa.Column('photo',
                  sa.String(length = 512),
                  nullable = True),
        sa.Column('bio',
                  sa.String(length = 255),
                  nullable = True),
        sa.Column(
            'role',
            sa.Enum(
                'user',
                'admin',
                name = 'user_role',
                native_enum = False
            ),
            nullable = False
        ),
        sa.Column(
            'hashed_password',
            sa.String(length = 1024),
            nullable = False
        ),
        sa.Column(
            'password_changed_at',
            sa.DateTime(timezone = True),
            nullable = True
        ),
        sa.Column(
            'password_reset_token_hash',
            sa.String(length = 64),
            nullable = True
        ),
        sa.Column(
            'password_reset_expires_at',
            sa.DateTime(timezone = True),
            nullable = True
        ),
        sa.Column('is_active',
                  sa.Boolean(),
                  nullable = False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id',
                                name = op.f('pk_users')),
    )
    op.create_index(
        op.f('ix_users_username'),
        'users',
        ['username'],
        unique = True
    )
    op.create_index(
        op.f('ix_users_email'),
        'users',
        ['email'],
        unique = True
    )
    op.create_index(
        op.f('ix_users_password_reset_token_hash'),
        'users',
        ['password_reset_token_hash'],
        unique = False
    )

    op.create_table(
        'follows',
        sa.Column('follower_id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column('following_id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone = True),
            nullable = False
        ),
        sa.ForeignKeyConstraint(
            ['follower_id'],
            ['users.id'],
            name = op.f('fk_follows_follower_id_users'),
            ondelete = 'CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['following_id'],
            ['users.id'],
            name = op.f('fk_follows_following_id_users'),
            ondelete = 'CASCADE'
        ),
        sa.PrimaryKeyConstraint(
            'follower_id',
            'following_id',
            name = op.f('pk_follows')
        ),
    )
    op.create_index(
        op.f('ix_follows_following_id'),
        'follows',
        ['following_id'],
        unique = False
    )

    op.create_table(
        'posts',
        sa.Column('id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column('caption',
                  sa.String(length = 255),
                  nullable = False),
        sa.Column('image',
                  sa.String(length = 512),
                  nullable = False),
        sa.Column('user_id',
                  sa.Uuid(),
                  nullable = False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['user_id'],
            ['users.id'],
            name = op.f('fk_posts_user_id_users'),
            ondelete = 'CASCADE'
        ),
        sa.PrimaryKeyConstraint('id',
                                name = op.f('pk_posts')),
    )
    op.create_index(
        op.f('ix_posts_user_id'),
        'posts',
        ['user_id'],
        unique = False
    )

    op.create_table(
        'post_likes',
        sa.Column('post_id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column('user_id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone = True),
            nullable = False
        ),
        sa.ForeignKeyConstraint(
            ['post_id'],
            ['posts.id'],
            name = op.f('fk_post_likes_post_id_posts'),
            ondelete = 'CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['user_id'],
            ['users.id'],
            name = op.f('fk_post_likes_user_id_users'),
            ondelete = 'CASCADE'
        ),
        sa.PrimaryKeyConstraint(
            'post_id',
            'user_id',
            name = op.f('pk_post_likes')
        ),
    )

    op.create_table(
        'comments',
        sa.Column('id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column('content',
                  sa.String(length = 255),
                  nullable = False),
        sa.Column('post_id',
                  sa.Uuid(),
                  nullable = False),
        sa.Column('user_id',
                  sa.Uuid(),
                  nullable = False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['post_id'],
            ['posts.id'],
            name = op.f('fk_comments_post_id_posts'),
            ondelete = 'CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['user_id'],
            ['users.id'],
            name = op.f('fk_comments_user_id_users'),
            ondelete = 'CASCADE'
        ),
        sa.PrimaryKeyConstraint('id',
                                name = op.f('pk_comments')),
    )
    op.create_index(
        op.f('ix_comments_post_id'),
        'comments',
        ['post_id'],
        unique = False
    )
    op.create_index(
        op.f('ix_comments_user_id'),
        'comments',
        ['user_id'],
        unique = False
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_comments_user_id'), table_name = 'comments')
    op.drop_index(op.f('ix_comments_post_id'), table_name = 'comments')
    op.drop_table('comments')
    op.drop_table('post_likes')
    op.drop_index(op.f('ix_posts_user_id'), table_name = 'posts')
    op.drop_table('posts')
    op.drop_index(op.f('ix_follows_following_id'), table_name = 'follows')
    op.drop_table('follows')
    op.drop_index(
        op.f('ix_users_password_reset_token_hash'),
        table_name = 'users'
    )
    op.drop_index(op.f('ix_users_email'), table_name = 'users')
    op.drop_index(op.f('ix_users_username'), table_name = 'users')
    op.drop_table('users')
