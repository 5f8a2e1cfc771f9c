# -*- coding: utf-8 -*-
"""
Order Router - 주문 조회 API 엔드포인트

버전별 엔드포인트는 같은 질문(주문 + 회원 + 배송 + 주문상품)을
서로 다른 조회 전략으로 답한다.

    v1   지연 로딩, 엔티티 그래프 형태        1 + N ...
    v2   지연 로딩, DTO 변환                  1 + N ...
    v3   컬렉션 fetch join                    1 (페이징 불가)
    v3.1 ToOne fetch join + 컬렉션 배치 조회  1 + 1 (페이징 가능)
    v4   DTO 프로젝션 + 주문별 주문상품       1 + N
    v5   DTO 프로젝션 + 주문상품 배치 조회    1 + 1
    v6   전체 조인 평면 조회                  1 (페이징 불가)
"""

from fastapi import APIRouter, Query, status

from src.adapters.database.repositories.order_repository import OrderFetchDepth
from src.application.common.dependencies import OrderQueryServiceDep
from src.application.common.dto import ResponseDTO
from src.application.domain.order.dto import (
    OrderDetailDTO,
    OrderDTO,
    OrderFlatDTO,
    OrderQueryDTO,
)
from src.settings.config import settings

router = APIRouter()


@router.get(
    "/api/orders",
    response_model=ResponseDTO[list[OrderDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 조회 (조회 전략 선택)",
    description="fetch 파라미터로 조회 전략 선택. to_one_with_collection은 offset/limit 불가 (400)",
)
async def get_orders(
    service: OrderQueryServiceDep,
    fetch: OrderFetchDepth = Query(
        default=OrderFetchDepth.TO_ONE_WITH_BATCH, description="조회 전략"
    ),
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[OrderDTO]]:
    """주문 목록 조회 (조회 전략 선택)"""
    orders = await service.list_orders(fetch, offset=offset, limit=limit)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v1/orders",
    response_model=ResponseDTO[list[OrderDetailDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v1 (지연 로딩, 엔티티 그래프)",
)
async def get_orders_v1(
    service: OrderQueryServiceDep,
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[OrderDetailDTO]]:
    """주문 목록 v1"""
    orders = await service.list_order_entities(OrderFetchDepth.NONE, offset=offset, limit=limit)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v2/orders",
    response_model=ResponseDTO[list[OrderDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v2 (지연 로딩, DTO 변환)",
)
async def get_orders_v2(
    service: OrderQueryServiceDep,
    offset: int | None = Query(default=None, description="시작 위치"),
    limit: int | None = Query(default=None, description="최대 조회 수"),
) -> ResponseDTO[list[OrderDTO]]:
    """주문 목록 v2"""
    orders = await service.list_orders(OrderFetchDepth.NONE, offset=offset, limit=limit)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v3/orders",
    response_model=ResponseDTO[list[OrderDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v3 (컬렉션 fetch join)",
)
async def get_orders_v3(service: OrderQueryServiceDep) -> ResponseDTO[list[OrderDTO]]:
    """주문 목록 v3"""
    orders = await service.list_orders(OrderFetchDepth.TO_ONE_WITH_COLLECTION)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v3.1/orders",
    response_model=ResponseDTO[list[OrderDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v3.1 (ToOne fetch join + 컬렉션 배치 조회, 페이징)",
)
async def get_orders_v3_page(
    service: OrderQueryServiceDep,
    offset: int = Query(default=0, description="시작 위치"),
    limit: int = Query(default=settings.default_page_limit, description="최대 조회 수"),
) -> ResponseDTO[list[OrderDTO]]:
    """주문 목록 v3.1"""
    orders = await service.list_orders(
        OrderFetchDepth.TO_ONE_WITH_BATCH, offset=offset, limit=limit
    )
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v4/orders",
    response_model=ResponseDTO[list[OrderQueryDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v4 (DTO 프로젝션, 1 + N)",
)
async def get_orders_v4(service: OrderQueryServiceDep) -> ResponseDTO[list[OrderQueryDTO]]:
    """주문 목록 v4"""
    orders = await service.list_order_query_dtos(optimized=False)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v5/orders",
    response_model=ResponseDTO[list[OrderQueryDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v5 (DTO 프로젝션, 1 + 1)",
)
async def get_orders_v5(service: OrderQueryServiceDep) -> ResponseDTO[list[OrderQueryDTO]]:
    """주문 목록 v5"""
    orders = await service.list_order_query_dtos(optimized=True)
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v6/orders",
    response_model=ResponseDTO[list[OrderQueryDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 목록 v6 (평면 조회 후 주문별 그룹핑)",
)
async def get_orders_v6(service: OrderQueryServiceDep) -> ResponseDTO[list[OrderQueryDTO]]:
    """주문 목록 v6"""
    orders = await service.list_flat_orders_grouped()
    return ResponseDTO.success_response(orders, "Order list retrieved successfully")


@router.get(
    "/api/v6/orders/flat",
    response_model=ResponseDTO[list[OrderFlatDTO]],
    status_code=status.HTTP_200_OK,
    summary="주문 평면 행 v6 (주문상품 1건당 1행)",
)
async def get_orders_v6_flat(service: OrderQueryServiceDep) -> ResponseDTO[list[OrderFlatDTO]]:
    """주문 평면 행 v6"""
    rows = await service.list_flat_orders()
    return ResponseDTO.success_response(rows, "Order rows retrieved successfully")
