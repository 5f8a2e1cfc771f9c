# -*- coding: utf-8 -*-
"""
Delivery Model - 배송 정보 모델
"""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, composite, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import Address, BaseModel, BigIntPK


class DeliveryStatus(str, Enum):
    """배송 상태"""

    READY = "ready"  # 준비
    COMPLETED = "completed"  # 완료


class DeliveryModel(Base, BaseModel):
    """배송 모델 (주문 1건당 1건, 주문이 연관관계의 주인)"""

    __tablename__ = "deliveries"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ==================== 배송지 ====================
    address: Mapped[Address] = composite(
        Address,
        mapped_column("city", String(100), nullable=True, comment="도시"),
        mapped_column("street", String(200), nullable=True, comment="거리"),
        mapped_column("zipcode", String(20), nullable=True, comment="우편번호"),
    )

    # ==================== 배송 상태 ====================
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=DeliveryStatus.READY.value,
        comment="배송 상태",
    )
