# -*- coding: utf-8 -*-
"""
Order Query Repository - 주문 조회 전용 DTO 프로젝션

엔티티를 만들지 않고 필요한 컬럼만 조회하여 DTO로 바로 매핑한다.

    find_simple_order_dtos            루트 프로젝션 (1)
    find_order_query_dtos             루트 + 주문별 주문상품 쿼리 (1 + N)
    find_order_query_dtos_optimized   루트 + 주문상품 IN 배치 쿼리 (1 + 1)
    find_order_flat_dtos              전체 조인 평면 행 (1, 페이징 불가)
"""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.batch import attach_children, group_by_parent, load_children_in_batches
from src.adapters.database.models.delivery import DeliveryModel
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.member import MemberModel
from src.adapters.database.models.order import OrderItemModel, OrderModel
from src.application.common.dto import AddressDTO
from src.application.domain.order.dto import (
    OrderFlatDTO,
    OrderItemQueryDTO,
    OrderQueryDTO,
    SimpleOrderQueryDTO,
)
from src.settings.config import settings

logger = logging.getLogger(__name__)


# ==================== Row → DTO ====================


def _order_fields(row: Row[Any]) -> dict[str, Any]:
    mapping = row._mapping
    return {
        "order_id": mapping["order_id"],
        "name": mapping["name"],
        "order_date": mapping["order_date"],
        "order_status": mapping["order_status"],
        "address": AddressDTO.from_address(mapping["address"]),
    }


def _to_order_item_query_dto(row: Row[Any]) -> OrderItemQueryDTO:
    # Row.count는 tuple 메서드이므로 _mapping으로 접근
    mapping = row._mapping
    return OrderItemQueryDTO(
        order_id=mapping["order_id"],
        item_name=mapping["item_name"],
        order_price=mapping["order_price"],
        count=mapping["count"],
    )


def group_flat_rows(rows: Sequence[OrderFlatDTO]) -> list[OrderQueryDTO]:
    """
    평면 행 → 주문별 중첩 DTO

    주문은 처음 등장한 순서, 주문상품은 행 순서를 유지한다.
    """
    rows_by_order = group_by_parent(rows, key=lambda row: row.order_id)
    result: list[OrderQueryDTO] = []
    for order_id, order_rows in rows_by_order.items():
        first = order_rows[0]
        result.append(
            OrderQueryDTO(
                order_id=order_id,
                name=first.name,
                order_date=first.order_date,
                order_status=first.order_status,
                address=first.address,
                order_items=[
                    OrderItemQueryDTO(
                        order_id=order_id,
                        item_name=row.item_name,
                        order_price=row.order_price,
                        count=row.count,
                    )
                    for row in order_rows
                ],
            )
        )
    return result


class OrderQueryRepository:
    """주문 조회 전용 Repository (DTO 프로젝션)"""

    def __init__(self, session: AsyncSession, batch_size: int | None = None) -> None:
        self.session = session
        self.batch_size = settings.batch_fetch_size if batch_size is None else batch_size

    # ==================== 쿼리 빌더 ====================

    @staticmethod
    def _order_projection() -> Select[Any]:
        return (
            select(
                OrderModel.id.label("order_id"),
                MemberModel.name.label("name"),
                OrderModel.order_date.label("order_date"),
                OrderModel.status.label("order_status"),
                DeliveryModel.address,
            )
            .join(OrderModel.member)
            .join(OrderModel.delivery)
            .order_by(OrderModel.id)
        )

    @staticmethod
    def _order_item_projection() -> Select[Any]:
        return (
            select(
                OrderItemModel.order_id.label("order_id"),
                ItemModel.name.label("item_name"),
                OrderItemModel.order_price.label("order_price"),
                OrderItemModel.count.label("count"),
            )
            .join(OrderItemModel.item)
            .order_by(OrderItemModel.id)
        )

    # ==================== 주문 요약 ====================

    async def find_simple_order_dtos(
        self, offset: int | None = None, limit: int | None = None
    ) -> list[SimpleOrderQueryDTO]:
        """주문 요약 프로젝션 (쿼리 1번)"""
        stmt = self._order_projection()
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [SimpleOrderQueryDTO(**_order_fields(row)) for row in result.all()]

    # ==================== 주문 + 주문상품 ====================

    async def _find_orders(self) -> list[OrderQueryDTO]:
        result = await self.session.execute(self._order_projection())
        return [OrderQueryDTO(**_order_fields(row)) for row in result.all()]

    async def _find_order_items(self, order_id: int) -> list[OrderItemQueryDTO]:
        stmt = self._order_item_projection().where(OrderItemModel.order_id == order_id)
        result = await self.session.execute(stmt)
        return [_to_order_item_query_dto(row) for row in result.all()]

    async def find_order_query_dtos(self) -> list[OrderQueryDTO]:
        """
        주문 프로젝션 + 주문별 주문상품 조회 (쿼리 1 + N)
        """
        orders = await self._find_orders()
        for order in orders:
            order.order_items = await self._find_order_items(order.order_id)
        return orders

    async def find_order_query_dtos_optimized(self) -> list[OrderQueryDTO]:
        """
        주문 프로젝션 + 주문상품 IN 배치 조회 (쿼리 1 + 1)

        주문이 없으면 주문상품 쿼리를 생략한다.
        """
        orders = await self._find_orders()

        rows_by_order = await load_children_in_batches(
            self.session,
            [order.order_id for order in orders],
            lambda order_ids: self._order_item_projection().where(
                OrderItemModel.order_id.in_(order_ids)
            ),
            key=lambda row: row._mapping["order_id"],
            batch_size=self.batch_size,
            scalars=False,
        )
        order_items_by_order = {
            order_id: [_to_order_item_query_dto(row) for row in rows]
            for order_id, rows in rows_by_order.items()
        }

        def set_order_items(order: OrderQueryDTO, order_items: list[OrderItemQueryDTO]) -> None:
            order.order_items = order_items

        attach_children(
            orders,
            order_items_by_order,
            id_of=lambda order: order.order_id,
            setter=set_order_items,
        )
        return orders

    # ==================== 평면 조회 ====================

    async def find_order_flat_dtos(self) -> list[OrderFlatDTO]:
        """
        주문 + 주문상품 전체 조인 평면 조회 (쿼리 1번, 주문상품 1건당 1행)
        """
        stmt = (
            select(
                OrderModel.id.label("order_id"),
                MemberModel.name.label("name"),
                OrderModel.order_date.label("order_date"),
                OrderModel.status.label("order_status"),
                DeliveryModel.address,
                ItemModel.name.label("item_name"),
                OrderItemModel.order_price.label("order_price"),
                OrderItemModel.count.label("count"),
            )
            .join(OrderModel.member)
            .join(OrderModel.delivery)
            .join(OrderModel.order_items)
            .join(OrderItemModel.item)
            .order_by(OrderModel.id, OrderItemModel.id)
        )
        result = await self.session.execute(stmt)
        rows = result.all()
        logger.debug(f"[OrderQueryRepository] flat rows={len(rows)}")
        return [
            OrderFlatDTO(
                **_order_fields(row),
                item_name=row._mapping["item_name"],
                order_price=row._mapping["order_price"],
                count=row._mapping["count"],
            )
            for row in rows
        ]
