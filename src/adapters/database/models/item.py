# -*- coding: utf-8 -*-
"""
Item Model - 상품 모델
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.adapters.database.connection import Base
from src.adapters.database.models.base import BaseModel, BigIntPK


class ItemModel(Base, BaseModel):
    """상품 모델"""

    __tablename__ = "items"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)

    # ==================== 상품 정보 ====================
    name: Mapped[str] = mapped_column(String(200), nullable=False, comment="상품명")

    price: Mapped[int] = mapped_column(BigInteger, nullable=False, comment="가격 (원)")

    stock_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="재고 수량"
    )
