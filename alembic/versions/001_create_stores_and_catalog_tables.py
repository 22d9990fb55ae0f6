"""Create stores and catalog tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create stores, categories, subcategories, options, option_values, brands."""
    op.create_table(
        'stores',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('user_id', sa.String(100), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=False, unique=True),
    )

    op.create_table(
        'subcategories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('category_id', sa.String(36),
                  sa.ForeignKey('categories.id', ondelete='CASCADE'), nullable=False, index=True),
    )

    op.create_table(
        'options',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('subcategory_id', sa.String(36),
                  sa.ForeignKey('subcategories.id', ondelete='CASCADE'), nullable=False, index=True),
    )

    op.create_table(
        'option_values',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('value', sa.String(200), nullable=False),
        sa.Column('option_id', sa.String(36),
                  sa.ForeignKey('options.id', ondelete='CASCADE'), nullable=False, index=True),
    )

    op.create_table(
        'brands',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=False, unique=True),
    )

    # Brand <-> category links
    op.create_table(
        'brand_categories',
        sa.Column('brand_id', sa.String(36),
                  sa.ForeignKey('brands.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('category_id', sa.String(36),
                  sa.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True),
    )


def downgrade() -> None:
    """Drop stores and catalog tables."""
    op.drop_table('brand_categories')
    op.drop_table('brands')
    op.drop_table('option_values')
    op.drop_table('options')
    op.drop_table('subcategories')
    op.drop_table('categories')
    op.drop_table('stores')
