# -*- coding: utf-8 -*-
"""
Item Repository - 상품 데이터 접근 계층
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.item import ItemModel
from src.adapters.database.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[ItemModel]):
    """상품 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ItemModel, session)

    async def save(self, name: str, price: int, stock_quantity: int = 0) -> ItemModel:
        """상품 저장"""
        return await self.add(ItemModel(name=name, price=price, stock_quantity=stock_quantity))

    async def find_one(self, item_id: int) -> ItemModel | None:
        """ID로 상품 조회"""
        return await self.get_by_id(item_id)

    async def find_all(self) -> Sequence[ItemModel]:
        """전체 상품 조회 (ID 순)"""
        return await self.get_all()
