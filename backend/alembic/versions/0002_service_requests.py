"""service requests submitted through the public forms

Revision ID: 0002_service_requests
Revises: 0001_initial
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0002_service_requests'
down_revision = '0001_initial'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('service_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('request_type', sa.String(length=100), nullable=False),
        sa.Column('request_name', sa.String(length=255), nullable=False),
        sa.Column('form_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_service_requests_request_type', 'service_requests', ['request_type'])


def downgrade():
    op.drop_index('ix_service_requests_request_type', table_name='service_requests')
    op.drop_table('service_requests')
