# -*- coding: utf-8 -*-
"""
Order Model - 주문 / 주문상품 모델
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel, BigIntPK
from src.adapters.database.models.delivery import DeliveryModel
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.member import MemberModel


class OrderStatus(str, Enum):
    """주문 상태"""

    ORDERED = "ordered"  # 주문
    CANCELLED = "cancelled"  # 취소


class OrderItemModel(Base, BaseModel):
    """
    주문상품 모델

    주문 시점의 단가(order_price)와 수량(count)을 보관한다.
    """

    __tablename__ = "order_items"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ==================== 연관관계 (FK) ====================
    order_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("orders.id"), nullable=False, comment="주문 ID"
    )

    item_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("items.id"), nullable=False, comment="상품 ID"
    )

    # ==================== 주문 상세 ====================
    order_price: Mapped[int] = mapped_column(
        BigInteger, nullable=False, comment="주문 가격 (주문 시점 단가)"
    )

    count: Mapped[int] = mapped_column(Integer, nullable=False, comment="주문 수량")

    # ==================== Relationships ====================
    item: Mapped[ItemModel] = relationship()

    # ==================== Indexes ====================
    __table_args__ = (
        Index("ix_order_items_order_id", "order_id"),
        Index("ix_order_items_item_id", "item_id"),
    )

    # ==================== Properties ====================

    @property
    def total_price(self) -> int:
        """주문상품 총액"""
        return self.order_price * self.count


class OrderModel(Base, BaseModel):
    """
    주문 모델

    회원/배송/주문상품 연관관계의 주인. 모든 연관관계는 지연 로딩이며
    조회 전략(OrderFetchDepth)에 따라 함께 로딩되거나 명시적으로 로딩된다.
    """

    __tablename__ = "orders"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ==================== 연관관계 (FK) ====================
    member_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("members.id"), nullable=False, comment="회원 ID"
    )

    delivery_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("deliveries.id"),
        unique=True,
        nullable=False,
        comment="배송 ID",
    )

    # ==================== 주문 정보 ====================
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, comment="주문 시각"
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=OrderStatus.ORDERED.value,
        comment="주문 상태",
    )

    # ==================== Relationships ====================
    member: Mapped[MemberModel] = relationship()

    delivery: Mapped[DeliveryModel] = relationship()

    order_items: Mapped[list[OrderItemModel]] = relationship(
        cascade="all, delete-orphan",
        order_by=OrderItemModel.id,
    )

    # ==================== Indexes ====================
    __table_args__ = (
        Index("ix_orders_member_id", "member_id"),
        Index("ix_orders_order_date", "order_date"),
    )

    # ==================== Properties ====================

    @property
    def total_price(self) -> int:
        """주문 총액 (order_items 로딩 필요)"""
        return sum(order_item.total_price for order_item in self.order_items)
