# -*- coding: utf-8 -*-
"""
Order Domain DTO - 주문 조회 데이터 전송 객체

엔티티는 응답에 직접 노출하지 않는다. 연관관계가 로딩된 엔티티를 DTO로 변환하거나
(OrderDTO, SimpleOrderDTO, OrderDetailDTO), 쿼리 결과를 바로 DTO로 받는다
(*QueryDTO, OrderFlatDTO).
"""

from datetime import datetime

from pydantic import Field

from src.adapters.database.models.delivery import DeliveryModel
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.member import MemberModel
from src.adapters.database.models.order import OrderItemModel, OrderModel
from src.application.common.dto import AddressDTO, BaseDTO


# ==================== Entity → DTO (평면) ====================


class OrderItemDTO(BaseDTO):
    """
    주문상품 DTO

    Attributes:
        item_name: 상품명
        order_price: 주문 가격
        count: 주문 수량
    """

    item_name: str = Field(description="상품명")
    order_price: int = Field(description="주문 가격")
    count: int = Field(description="주문 수량")

    @classmethod
    def from_model(cls, order_item: OrderItemModel) -> "OrderItemDTO":
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )


class SimpleOrderDTO(BaseDTO):
    """
    주문 요약 DTO (주문상품 제외)

    Attributes:
        order_id: 주문 ID
        name: 회원명
        order_date: 주문 시각
        order_status: 주문 상태
        address: 배송지
    """

    order_id: int = Field(description="주문 ID")
    name: str = Field(description="회원명")
    order_date: datetime = Field(description="주문 시각")
    order_status: str = Field(description="주문 상태")
    address: AddressDTO | None = Field(default=None, description="배송지")

    @classmethod
    def from_model(cls, order: OrderModel) -> "SimpleOrderDTO":
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDTO.from_address(order.delivery.address),
        )


class OrderDTO(SimpleOrderDTO):
    """
    주문 DTO (주문상품 포함)

    Attributes:
        order_items: 주문상품 목록
    """

    order_items: list[OrderItemDTO] = Field(default_factory=list, description="주문상품 목록")

    @classmethod
    def from_model(cls, order: OrderModel) -> "OrderDTO":
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDTO.from_address(order.delivery.address),
            order_items=[OrderItemDTO.from_model(order_item) for order_item in order.order_items],
        )


# ==================== Entity → DTO (엔티티 그래프) ====================


class ItemDTO(BaseDTO):
    """상품 DTO"""

    id: int = Field(description="상품 ID")
    name: str = Field(description="상품명")
    price: int = Field(description="가격")
    stock_quantity: int = Field(description="재고 수량")

    @classmethod
    def from_model(cls, item: ItemModel) -> "ItemDTO":
        return cls(
            id=item.id, name=item.name, price=item.price, stock_quantity=item.stock_quantity
        )


class OrderMemberDTO(BaseDTO):
    """주문 회원 DTO (회원 → 주문 역참조 없음)"""

    id: int = Field(description="회원 ID")
    name: str = Field(description="회원명")
    address: AddressDTO | None = Field(default=None, description="주소")

    @classmethod
    def from_model(cls, member: MemberModel) -> "OrderMemberDTO":
        return cls(id=member.id, name=member.name, address=AddressDTO.from_address(member.address))


class DeliveryDTO(BaseDTO):
    """배송 DTO"""

    id: int = Field(description="배송 ID")
    address: AddressDTO | None = Field(default=None, description="배송지")
    status: str = Field(description="배송 상태")

    @classmethod
    def from_model(cls, delivery: DeliveryModel) -> "DeliveryDTO":
        return cls(
            id=delivery.id,
            address=AddressDTO.from_address(delivery.address),
            status=delivery.status,
        )


class OrderItemDetailDTO(BaseDTO):
    """주문상품 상세 DTO"""

    id: int = Field(description="주문상품 ID")
    item: ItemDTO = Field(description="상품")
    order_price: int = Field(description="주문 가격")
    count: int = Field(description="주문 수량")
    total_price: int = Field(description="주문상품 총액")

    @classmethod
    def from_model(cls, order_item: OrderItemModel) -> "OrderItemDetailDTO":
        return cls(
            id=order_item.id,
            item=ItemDTO.from_model(order_item.item),
            order_price=order_item.order_price,
            count=order_item.count,
            total_price=order_item.total_price,
        )


class OrderDetailDTO(BaseDTO):
    """
    주문 상세 DTO (엔티티 그래프 형태)

    order_items가 None이면 주문상품을 조회하지 않은 응답이다.
    """

    id: int = Field(description="주문 ID")
    member: OrderMemberDTO = Field(description="회원")
    delivery: DeliveryDTO = Field(description="배송")
    order_date: datetime = Field(description="주문 시각")
    status: str = Field(description="주문 상태")
    order_items: list[OrderItemDetailDTO] | None = Field(
        default=None, description="주문상품 목록"
    )
    total_price: int | None = Field(default=None, description="주문 총액")

    @classmethod
    def from_model(cls, order: OrderModel, include_items: bool = True) -> "OrderDetailDTO":
        dto = cls(
            id=order.id,
            member=OrderMemberDTO.from_model(order.member),
            delivery=DeliveryDTO.from_model(order.delivery),
            order_date=order.order_date,
            status=order.status,
        )
        if include_items:
            dto.order_items = [
                OrderItemDetailDTO.from_model(order_item) for order_item in order.order_items
            ]
            dto.total_price = order.total_price
        return dto


# ==================== Query Projection DTO ====================


class OrderItemQueryDTO(BaseDTO):
    """
    주문상품 조회 DTO (쿼리 결과 직접 매핑)

    Attributes:
        order_id: 주문 ID (부모 ID별 그룹핑 키)
        item_name: 상품명
        order_price: 주문 가격
        count: 주문 수량
    """

    order_id: int = Field(description="주문 ID")
    item_name: str = Field(description="상품명")
    order_price: int = Field(description="주문 가격")
    count: int = Field(description="주문 수량")


class SimpleOrderQueryDTO(BaseDTO):
    """주문 요약 조회 DTO (쿼리 결과 직접 매핑)"""

    order_id: int = Field(description="주문 ID")
    name: str = Field(description="회원명")
    order_date: datetime = Field(description="주문 시각")
    order_status: str = Field(description="주문 상태")
    address: AddressDTO | None = Field(default=None, description="배송지")


class OrderQueryDTO(SimpleOrderQueryDTO):
    """주문 조회 DTO (주문상품은 별도 쿼리로 채움)"""

    order_items: list[OrderItemQueryDTO] = Field(
        default_factory=list, description="주문상품 목록"
    )


class OrderFlatDTO(BaseDTO):
    """
    주문 평면 조회 DTO

    주문 + 주문상품을 한 번의 조인으로 조회한 행 (주문상품 1건당 1행,
    주문 필드는 주문상품 수만큼 중복).
    """

    order_id: int = Field(description="주문 ID")
    name: str = Field(description="회원명")
    order_date: datetime = Field(description="주문 시각")
    order_status: str = Field(description="주문 상태")
    address: AddressDTO | None = Field(default=None, description="배송지")
    item_name: str = Field(description="상품명")
    order_price: int = Field(description="주문 가격")
    count: int = Field(description="주문 수량")
