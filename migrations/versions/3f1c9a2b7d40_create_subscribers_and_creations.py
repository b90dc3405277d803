"""create subscribers and creations

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-18 10:12:31.204118
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a2b7d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'subscribers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('plan', sa.String(length=16), nullable=False, server_default='free'),
        sa.Column('free_usage', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('subscribers', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_subscribers_user_id'), ['user_id'], unique=True)

    op.create_table(
        'creations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('prompt', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('publish', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('creations', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_creations_user_id'), ['user_id'], unique=False)
        batch_op.create_index('idx_creations_user_created', ['user_id', 'created_at'], unique=False)


def downgrade():
    with op.batch_alter_table('creations', schema=None) as batch_op:
        batch_op.drop_index('idx_creations_user_created')
        batch_op.drop_index(batch_op.f('ix_creations_user_id'))
    op.drop_table('creations')

    with op.batch_alter_table('subscribers', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_subscribers_user_id'))
    op.drop_table('subscribers')
