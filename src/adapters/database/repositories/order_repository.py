# -*- coding: utf-8 -*-
"""
Order Repository - 주문 엔티티 조회 계층

같은 질문("주문 + 회원 + 배송 + 주문상품")에 대해 조회 깊이(OrderFetchDepth)별로
쿼리 수 / 메모리 / 페이징 특성이 다른 전략을 하나의 쿼리 빌더로 제공한다.

    NONE                    루트만 조회, 연관관계는 load_associations로 하나씩 (1 + 2N ...)
    TO_ONE                  회원/배송 fetch join (1)
    TO_ONE_WITH_COLLECTION  회원/배송/주문상품/상품 fetch join (1, 페이징 불가)
    TO_ONE_WITH_BATCH       회원/배송 fetch join + 주문상품 IN 배치 조회 (1 + 1)
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from enum import Enum

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.attributes import set_committed_value

from src.adapters.database.batch import attach_children, load_children_in_batches
from src.adapters.database.models.base import Address
from src.adapters.database.models.delivery import DeliveryModel, DeliveryStatus
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.order import OrderItemModel, OrderModel, OrderStatus
from src.adapters.database.repositories.base_repository import BaseRepository
from src.application.common.exceptions import PaginationNotSupportedError
from src.settings.config import settings

logger = logging.getLogger(__name__)


class OrderFetchDepth(str, Enum):
    """주문 조회 깊이 (연관관계 로딩 전략)"""

    NONE = "none"  # 지연 로딩
    TO_ONE = "to_one"  # ToOne fetch join
    TO_ONE_WITH_COLLECTION = "to_one_with_collection"  # ToOne + 컬렉션 fetch join
    TO_ONE_WITH_BATCH = "to_one_with_batch"  # ToOne fetch join + 컬렉션 배치 조회

    @property
    def supports_pagination(self) -> bool:
        """offset/limit 적용 가능 여부"""
        return self is not OrderFetchDepth.TO_ONE_WITH_COLLECTION


class OrderRepository(BaseRepository[OrderModel]):
    """주문 Repository"""

    def __init__(self, session: AsyncSession, batch_size: int | None = None) -> None:
        super().__init__(OrderModel, session)
        self.batch_size = settings.batch_fetch_size if batch_size is None else batch_size

    # ==================== 주문 저장 ====================

    async def save_order(
        self,
        member_id: int,
        address: Address,
        lines: Sequence[tuple[ItemModel, int]],
        order_date: datetime | None = None,
    ) -> OrderModel:
        """
        주문 저장 (배송 + 주문 + 주문상품을 한 번에 flush)

        Args:
            member_id: 회원 ID
            address: 배송지
            lines: (상품, 수량) 목록, 주문 가격은 상품의 현재 가격
            order_date: 주문 시각 (없으면 현재 시각)

        Returns:
            OrderModel: 저장된 주문
        """
        order = OrderModel(
            member_id=member_id,
            delivery=DeliveryModel(address=address, status=DeliveryStatus.READY.value),
            order_date=order_date or datetime.now(),
            status=OrderStatus.ORDERED.value,
            order_items=[
                OrderItemModel(item_id=item.id, order_price=item.price, count=count)
                for item, count in lines
            ],
        )
        return await self.add(order)

    # ==================== 쿼리 빌더 ====================

    def build_query(
        self,
        depth: OrderFetchDepth,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Select[tuple[OrderModel]]:
        """
        조회 깊이별 루트 쿼리 생성

        Raises:
            PaginationNotSupportedError: 컬렉션 fetch join + offset/limit
        """
        if not depth.supports_pagination and (offset is not None or limit is not None):
            raise PaginationNotSupportedError(depth.value)

        stmt = select(OrderModel).order_by(OrderModel.id)

        if depth is not OrderFetchDepth.NONE:
            stmt = stmt.options(
                joinedload(OrderModel.member, innerjoin=True),
                joinedload(OrderModel.delivery, innerjoin=True),
            )

        if depth is OrderFetchDepth.TO_ONE_WITH_COLLECTION:
            stmt = stmt.options(
                joinedload(OrderModel.order_items).joinedload(OrderItemModel.item, innerjoin=True)
            )

        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return stmt

    # ==================== 주문 조회 ====================

    async def find_orders(
        self,
        depth: OrderFetchDepth,
        offset: int | None = None,
        limit: int | None = None,
        include_items: bool = True,
    ) -> list[OrderModel]:
        """
        조회 깊이별 주문 목록 조회 (주문 ID 순)

        NONE은 연관관계를 로딩하지 않은 주문을 반환한다.
        호출자가 load_associations로 명시적으로 로딩해야 한다.

        Args:
            depth: 조회 깊이
            offset: 시작 위치
            limit: 최대 주문 수
            include_items: TO_ONE_WITH_BATCH에서 주문상품 배치 조회 여부

        Returns:
            list[OrderModel]: 주문 목록
        """
        stmt = self.build_query(depth, offset=offset, limit=limit)
        result = await self.session.execute(stmt)

        if depth is OrderFetchDepth.TO_ONE_WITH_COLLECTION:
            # 주문상품 수만큼 늘어난 행을 주문 단위로 중복 제거
            orders = list(result.unique().scalars().all())
        else:
            orders = list(result.scalars().all())

        if depth is OrderFetchDepth.TO_ONE_WITH_BATCH and include_items:
            await self.load_order_items_in_batches(orders)

        logger.debug(f"[OrderRepository] depth={depth.value} orders={len(orders)}")
        return orders

    async def find_by_member(self, member_id: int) -> list[OrderModel]:
        """회원의 주문 목록 조회 (회원 → 주문 역방향 조회)"""
        stmt = (
            select(OrderModel)
            .where(OrderModel.member_id == member_id)
            .order_by(OrderModel.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # ==================== 연관관계 로딩 ====================

    async def load_associations(
        self, order: OrderModel, include_items: bool = True
    ) -> OrderModel:
        """
        지연 로딩 연관관계 명시적 로딩

        회원, 배송 각 1 쿼리 (이미 세션에 있는 엔티티는 생략),
        include_items면 주문상품 1 쿼리 + 상품 최대 N 쿼리.
        """
        await order.awaitable_attrs.member
        await order.awaitable_attrs.delivery
        if include_items:
            order_items = await order.awaitable_attrs.order_items
            for order_item in order_items:
                await order_item.awaitable_attrs.item
        return order

    async def load_order_items_in_batches(self, orders: Sequence[OrderModel]) -> None:
        """
        주문상품(+상품)을 주문 ID IN 절로 일괄 조회하여 각 주문에 연결

        주문이 없으면 쿼리를 실행하지 않고, 주문상품이 없는 주문은 빈 리스트를 받는다.
        """

        def build_query(order_ids: list[int]) -> Select[tuple[OrderItemModel]]:
            return (
                select(OrderItemModel)
                .options(joinedload(OrderItemModel.item, innerjoin=True))
                .where(OrderItemModel.order_id.in_(order_ids))
                .order_by(OrderItemModel.id)
            )

        order_items_by_order = await load_children_in_batches(
            self.session,
            [order.id for order in orders],
            build_query,
            key=lambda order_item: order_item.order_id,
            batch_size=self.batch_size,
        )
        attach_children(
            orders,
            order_items_by_order,
            id_of=lambda order: order.id,
            setter=lambda order, order_items: set_committed_value(
                order, "order_items", order_items
            ),
        )
