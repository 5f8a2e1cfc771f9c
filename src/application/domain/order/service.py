# -*- coding: utf-8 -*-
"""
Order Query Service - 주문 조회 서비스

조회 전략(OrderFetchDepth / DTO 프로젝션)을 선택해 Repository를 호출하고
엔티티를 응답 DTO로 변환한다. 읽기 전용이므로 트랜잭션을 커밋하지 않는다.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.order import OrderModel
from src.adapters.database.repositories.order_query_repository import (
    OrderQueryRepository,
    group_flat_rows,
)
from src.adapters.database.repositories.order_repository import (
    OrderFetchDepth,
    OrderRepository,
)
from src.application.common.decorators import log_execution
from src.application.common.exceptions import InvalidInputError
from src.application.domain.order.dto import (
    OrderDetailDTO,
    OrderDTO,
    OrderFlatDTO,
    OrderQueryDTO,
    SimpleOrderDTO,
    SimpleOrderQueryDTO,
)
from src.settings.config import settings

logger = logging.getLogger(__name__)


class OrderQueryService:
    """
    주문 조회 서비스

    엔티티 조회:  list_orders / list_order_entities / list_simple_orders
    DTO 조회:     list_simple_order_projections / list_order_query_dtos / list_flat_orders
    """

    def __init__(self, session: AsyncSession, batch_size: int | None = None) -> None:
        self.session = session
        self.order_repo = OrderRepository(session, batch_size=batch_size)
        self.order_query_repo = OrderQueryRepository(session, batch_size=batch_size)

    # ==================== 입력 검증 ====================

    @staticmethod
    def _validate_page(offset: int | None, limit: int | None) -> None:
        if offset is not None and offset < 0:
            raise InvalidInputError("offset", "offset must be >= 0")
        if limit is not None and not 1 <= limit <= settings.max_page_limit:
            raise InvalidInputError(
                "limit", f"limit must be between 1 and {settings.max_page_limit}"
            )

    async def _fetch(
        self,
        depth: OrderFetchDepth,
        offset: int | None,
        limit: int | None,
        include_items: bool,
    ) -> list[OrderModel]:
        self._validate_page(offset, limit)
        orders = await self.order_repo.find_orders(
            depth, offset=offset, limit=limit, include_items=include_items
        )
        if depth is OrderFetchDepth.NONE or (depth is OrderFetchDepth.TO_ONE and include_items):
            # 지연 로딩: 주문마다 미로딩 연관관계를 하나씩 명시적으로 로딩 (N+1)
            # TO_ONE은 회원/배송이 이미 로딩되어 주문상품/상품만 조회된다
            for order in orders:
                await self.order_repo.load_associations(order, include_items=include_items)
        return orders

    # ==================== 엔티티 조회 ====================

    @log_execution
    async def list_orders(
        self,
        depth: OrderFetchDepth,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[OrderDTO]:
        """
        주문 + 주문상품 목록

        Raises:
            PaginationNotSupportedError: 컬렉션 fetch join + offset/limit
        """
        orders = await self._fetch(depth, offset, limit, include_items=True)
        return [OrderDTO.from_model(order) for order in orders]

    @log_execution
    async def list_order_entities(
        self,
        depth: OrderFetchDepth,
        include_items: bool = True,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[OrderDetailDTO]:
        """주문 엔티티 그래프 형태 목록 (역참조 없음)"""
        orders = await self._fetch(depth, offset, limit, include_items=include_items)
        return [OrderDetailDTO.from_model(order, include_items=include_items) for order in orders]

    @log_execution
    async def list_simple_orders(
        self,
        depth: OrderFetchDepth,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[SimpleOrderDTO]:
        """주문 요약 목록 (주문상품 제외)"""
        orders = await self._fetch(depth, offset, limit, include_items=False)
        return [SimpleOrderDTO.from_model(order) for order in orders]

    # ==================== DTO 프로젝션 조회 ====================

    async def list_simple_order_projections(
        self, offset: int | None = None, limit: int | None = None
    ) -> list[SimpleOrderQueryDTO]:
        """주문 요약 프로젝션"""
        self._validate_page(offset, limit)
        return await self.order_query_repo.find_simple_order_dtos(offset=offset, limit=limit)

    async def list_order_query_dtos(self, optimized: bool = True) -> list[OrderQueryDTO]:
        """주문 + 주문상품 프로젝션 (optimized: 1 + 1, 아니면 1 + N)"""
        if optimized:
            return await self.order_query_repo.find_order_query_dtos_optimized()
        return await self.order_query_repo.find_order_query_dtos()

    async def list_flat_orders(self) -> list[OrderFlatDTO]:
        """주문 평면 행 (주문상품 1건당 1행)"""
        return await self.order_query_repo.find_order_flat_dtos()

    async def list_flat_orders_grouped(self) -> list[OrderQueryDTO]:
        """평면 행을 주문별로 다시 묶은 목록"""
        rows = await self.order_query_repo.find_order_flat_dtos()
        return group_flat_rows(rows)
