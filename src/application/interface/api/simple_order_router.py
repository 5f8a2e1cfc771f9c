# -*- coding: utf-8 -*-
"""
Simple Order Router - 주문 요약 API 엔드포인트 (주문상품 제외, ToOne 연관관계만)

    v1 지연 로딩, 엔티티 그래프 형태   1 + 2N
    v2 지연 로딩, DTO 변환             1 + 2N
    v3 ToOne fetch join                1
    v4 DTO 프로젝션                    1
"""

from fastapi import APIRouter, Query, status

from src.adapters.database.repositories.order_repository import OrderFetchDepth
from src.application.common.dependencies import OrderQueryServiceDep
from src.application.common.dto import ResponseDTO
from src.application.domain.order.dto import (
    OrderDetailDTO,
    SimpleOrderDTO,
    SimpleOrderQueryDTO,
)

router = APIRouter()


@router.get(
    "/api/v1/simple-orders",
    response_model=ResponseDTO[list[OrderDetailDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 요약 v1 (지연 로딩, 엔티티 그래프)",
)
async def get_simple_orders_v1(
    service: OrderQueryServiceDep,
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[OrderDetailDTO]]:
    """주문 요약 v1"""
    orders = await service.list_order_entities(
        OrderFetchDepth.NONE, include_items=False, offset=offset, limit=limit
    )
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v2/simple-orders",
    response_model=ResponseDTO[list[SimpleOrderDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 요약 v2 (지연 로딩, DTO 변환)",
)
async def get_simple_orders_v2(
    service: OrderQueryServiceDep,
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[SimpleOrderDTO]]:
    """주문 요약 v2"""
    orders = await service.list_simple_orders(OrderFetchDepth.NONE, offset=offset, limit=limit)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v3/simple-orders",
    response_model=ResponseDTO[list[SimpleOrderDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 요약 v3 (ToOne fetch join)",
)
async def get_simple_orders_v3(
    service: OrderQueryServiceDep,
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[SimpleOrderDTO]]:
    """주문 요약 v3"""
    orders = await service.list_simple_orders(
        OrderFetchDepth.TO_ONE, offset=offset, limit=limit
    )
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v4/simple-orders",
    response_model=ResponseDTO[list[SimpleOrderQueryDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 요약 v4 (DTO 프로젝션)",
)
async def get_simple_orders_v4(
    service: OrderQueryServiceDep,
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[SimpleOrderQueryDTO]]:
    """주문 요약 v4"""
    orders = await service.list_simple_order_projections(offset=offset, limit=limit)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")
