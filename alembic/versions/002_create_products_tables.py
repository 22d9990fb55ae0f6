"""Create products, images, product_options, variants and variant_options tables.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create product tables."""
    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('store_id', sa.String(36),
                  sa.ForeignKey('stores.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('slug', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('subcategory_id', sa.String(36),
                  sa.ForeignKey('subcategories.id'), nullable=False, index=True),
        sa.Column('brand_id', sa.String(36),
                  sa.ForeignKey('brands.id'), nullable=False, index=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('status', sa.String(20), nullable=False, server_default='DRAFT', index=True),
        sa.Column('discount_type', sa.String(20), nullable=True),
        sa.Column('discount_value', sa.Numeric(10, 2), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.CheckConstraint('price > 0', name='ck_products_price_positive'),
    )

    op.create_table(
        'variants',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sku', sa.String(100), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('price >= 0', name='ck_variants_price_non_negative'),
        sa.CheckConstraint('stock >= 0', name='ck_variants_stock_non_negative'),
    )

    # Images belong to exactly one product or one variant
    op.create_table(
        'images',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=True, index=True),
        sa.Column('variant_id', sa.String(36),
                  sa.ForeignKey('variants.id', ondelete='CASCADE'), nullable=True, index=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint(
            '(product_id IS NULL) <> (variant_id IS NULL)',
            name='ck_images_single_owner',
        ),
    )

    op.create_table(
        'product_options',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('option_id', sa.String(36), sa.ForeignKey('options.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_unique_constraint(
        'uq_product_options_product_option',
        'product_options',
        ['product_id', 'option_id'],
    )

    op.create_table(
        'variant_options',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('variant_id', sa.String(36),
                  sa.ForeignKey('variants.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('option_id', sa.String(36), sa.ForeignKey('options.id'), nullable=False),
        sa.Column('option_value_id', sa.String(36),
                  sa.ForeignKey('option_values.id'), nullable=False, index=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_unique_constraint(
        'uq_variant_options_variant_option',
        'variant_options',
        ['variant_id', 'option_id'],
    )


def downgrade() -> None:
    """Drop product tables."""
    op.drop_table('variant_options')
    op.drop_table('product_options')
    op.drop_table('images')
    op.drop_table('variants')
    op.drop_table('products')
