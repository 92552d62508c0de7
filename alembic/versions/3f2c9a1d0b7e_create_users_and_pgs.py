"""create_users_and_pgs

Revision ID: 3f2c9a1d0b7e
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2c9a1d0b7e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    # Unique email closes the duplicate-signup race
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('pgs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('rent', sa.Float(), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('pincode', sa.String(length=20), nullable=False),
        sa.Column('distance', sa.Float(), nullable=False),
        sa.Column('college', sa.String(length=200), nullable=True),
        sa.Column('room_type', sa.String(length=50), nullable=True),
        sa.Column('gender', sa.String(length=20), nullable=True),
        sa.Column('deposit', sa.Float(), nullable=True),
        sa.Column('facilities', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_pgs_id'), 'pgs', ['id'], unique=False)
    op.create_index(op.f('ix_pgs_owner_id'), 'pgs', ['owner_id'], unique=False)
    op.create_index(op.f('ix_pgs_status'), 'pgs', ['status'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_pgs_status'), table_name='pgs')
    op.drop_index(op.f('ix_pgs_owner_id'), table_name='pgs')
    op.drop_index(op.f('ix_pgs_id'), table_name='pgs')
    op.drop_table('pgs')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
