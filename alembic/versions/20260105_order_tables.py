# -*- coding: utf-8 -*-
"""Add order query tables

Revision ID: 20260105_order_tables
Revises:
Create Date: 2026-01-05

Tables:
- members: 회원 (회원명 유니크, 임베디드 주소)
- items: 상품
- deliveries: 배송 (임베디드 주소)
- orders: 주문 (회원 N:1, 배송 1:1)
- order_items: 주문상품 (주문 N:1, 상품 N:1)
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20260105_order_tables'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _address_columns() -> list[sa.Column]:
    return [
        sa.Column('city', sa.String(length=100), nullable=True, comment='도시'),
        sa.Column('street', sa.String(length=200), nullable=True, comment='거리'),
        sa.Column('zipcode', sa.String(length=20), nullable=True, comment='우편번호'),
    ]


def _timestamp_columns() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ### members ###
    op.create_table(
        'members',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False, comment='회원명'),
        *_address_columns(),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='uq_members_name'),
    )

    # ### items ###
    op.create_table(
        'items',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False, comment='상품명'),
        sa.Column('price', sa.BigInteger(), nullable=False, comment='가격 (원)'),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, comment='재고 수량'),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint('id'),
    )

    # ### deliveries ###
    op.create_table(
        'deliveries',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        *_address_columns(),
        sa.Column('status', sa.String(length=20), nullable=False, comment='배송 상태'),
        *_timestamp_columns(),
        sa.PrimaryKeyConstraint('id'),
    )

    # ### orders ###
    op.create_table(
        'orders',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.BigInteger(), nullable=False, comment='회원 ID'),
        sa.Column('delivery_id', sa.BigInteger(), nullable=False, comment='배송 ID'),
        sa.Column('order_date', sa.DateTime(timezone=True), nullable=False, comment='주문 시각'),
        sa.Column('status', sa.String(length=20), nullable=False, comment='주문 상태'),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.ForeignKeyConstraint(['delivery_id'], ['deliveries.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('delivery_id'),
    )
    op.create_index('ix_orders_member_id', 'orders', ['member_id'], unique=False)
    op.create_index('ix_orders_order_date', 'orders', ['order_date'], unique=False)

    # ### order_items ###
    op.create_table(
        'order_items',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.BigInteger(), nullable=False, comment='주문 ID'),
        sa.Column('item_id', sa.BigInteger(), nullable=False, comment='상품 ID'),
        sa.Column('order_price', sa.BigInteger(), nullable=False, comment='주문 가격 (주문 시점 단가)'),
        sa.Column('count', sa.Integer(), nullable=False, comment='주문 수량'),
        *_timestamp_columns(),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id']),
        sa.ForeignKeyConstraint(['item_id'], ['items.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'], unique=False)
    op.create_index('ix_order_items_item_id', 'order_items', ['item_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop order_items
    op.drop_index('ix_order_items_item_id', table_name='order_items')
    op.drop_index('ix_order_items_order_id', table_name='order_items')
    op.drop_table('order_items')

    # Drop orders
    op.drop_index('ix_orders_order_date', table_name='orders')
    op.drop_index('ix_orders_member_id', table_name='orders')
    op.drop_table('orders')

    # Drop deliveries, items, members
    op.drop_table('deliveries')
    op.drop_table('items')
    op.drop_table('members')
