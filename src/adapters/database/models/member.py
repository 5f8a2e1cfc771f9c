# -*- coding: utf-8 -*-
"""
Member Model - 회원 모델
"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, composite, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import Address, BaseModel, BigIntPK


class MemberModel(Base, BaseModel):
    """
    회원 모델

    회원명 중복은 uq_members_name 제약조건으로 막는다.
    회원 → 주문 방향은 연관관계 없이 orders.member_id로 조회한다.
    """

    __tablename__ = "members"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ==================== 회원 정보 ====================
    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="회원명")

    address: Mapped[Address] = composite(
        Address,
        mapped_column("city", String(100), nullable=True, comment="도시"),
        mapped_column("street", String(200), nullable=True, comment="거리"),
        mapped_column("zipcode", String(20), nullable=True, comment="우편번호"),
    )

    # ==================== Constraints ====================
    __table_args__ = (UniqueConstraint("name", name="uq_members_name"),)
