"""initial schema: users, sessions, content resources, site settings

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def _content_columns(ordered: bool = False):
    cols = [
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]
    if ordered:
        cols.append(sa.Column('order', sa.Integer(), nullable=False, server_default='0'))
    return cols


def _timestamp_column():
    return sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_table('user_sessions',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_user_sessions_user_id', 'user_sessions', ['user_id'])

    op.create_table('banners', *_content_columns(ordered=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('link', sa.Text(), nullable=True),
    )
    op.create_table('services', *_content_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_table('links', *_content_columns(ordered=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=False),
    )
    op.create_table('news', *_content_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
    )
    op.create_table('pages', *_content_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
    )
    op.create_index('ix_pages_slug', 'pages', ['slug'], unique=True)
    op.create_table('review_images', *_content_columns(ordered=True),
        sa.Column('image_url', sa.String(length=500), nullable=False),
    )
    op.create_table('announcements', *_content_columns(),
        sa.Column('text', sa.Text(), nullable=False),
    )
    op.create_table('gallery', *_content_columns(ordered=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('media_url', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_table('information', *_content_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
    )
    for table in ('banners', 'links', 'review_images', 'gallery'):
        op.create_index(f'ix_{table}_order', table, ['order'])

    op.create_table('contact_messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table('site_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('browser_tab_name', sa.String(length=255), nullable=True),
        sa.Column('main_logo', sa.String(length=500), nullable=True),
        sa.Column('footer_logo', sa.String(length=500), nullable=True),
        sa.Column('requests_email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        _timestamp_column(),
    )
    op.create_table('contacts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('whatsapp', sa.String(length=50), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('emails', sa.Text(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('business_hours', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        _timestamp_column(),
    )
    op.create_table('social_media',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('youtube', sa.String(length=500), nullable=True),
        sa.Column('instagram', sa.String(length=500), nullable=True),
        sa.Column('facebook', sa.String(length=500), nullable=True),
        sa.Column('tiktok', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        _timestamp_column(),
    )
    op.create_table('scripts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('google_tag_manager', sa.Text(), nullable=True),
        sa.Column('facebook_pixel', sa.Text(), nullable=True),
        sa.Column('google_analytics', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        _timestamp_column(),
    )


def downgrade():
    for table in ('scripts', 'social_media', 'contacts', 'site_settings', 'contact_messages'):
        op.drop_table(table)
    for table in ('banners', 'links', 'review_images', 'gallery'):
        op.drop_index(f'ix_{table}_order', table_name=table)
    op.drop_index('ix_pages_slug', table_name='pages')
    for table in ('information', 'gallery', 'announcements', 'review_images', 'pages', 'news', 'links', 'services', 'banners'):
        op.drop_table(table)
    op.drop_index('ix_user_sessions_user_id', table_name='user_sessions')
    op.drop_table('user_sessions')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
