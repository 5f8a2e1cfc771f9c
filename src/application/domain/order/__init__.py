"""
Order Domain - 주문 조회 (조회 전략별)

OrderQueryService는 src.application.domain.order.service에서 직접 import한다.
(OrderQueryRepository가 이 패키지의 DTO를 사용하므로 순환 import 방지)
"""

from src.application.domain.order.dto import (
    OrderDetailDTO,
    OrderDTO,
    OrderFlatDTO,
    OrderItemDTO,
    OrderItemQueryDTO,
    OrderQueryDTO,
    SimpleOrderDTO,
    SimpleOrderQueryDTO,
)

__all__ = [
    "OrderDTO",
    "OrderItemDTO",
    "OrderDetailDTO",
    "SimpleOrderDTO",
    "SimpleOrderQueryDTO",
    "OrderQueryDTO",
    "OrderItemQueryDTO",
    "OrderFlatDTO",
]
