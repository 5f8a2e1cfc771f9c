# -*- coding: utf-8 -*-
"""
Base Repository - 공통 Repository

엔티티별 Repository가 공유하는 저장 / 단건 조회 / 전체 조회 / 카운트
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.connection import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base Repository 클래스

    commit은 Service 계층 담당, Repository는 flush까지만 수행한다.
    """

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        """
        Args:
            model: SQLAlchemy 모델 클래스
            session: AsyncSession 인스턴스
        """
        self.model = model
        self.session = session

    async def add(self, instance: ModelType) -> ModelType:
        """엔티티 저장 (flush 후 ID 할당)"""
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def get_by_id(self, id: int) -> ModelType | None:
        """ID로 단건 조회 (세션에 이미 있으면 쿼리 생략)"""
        return await self.session.get(self.model, id)

    async def get_all(self) -> Sequence[ModelType]:
        """전체 조회 (ID 순)"""
        stmt = select(self.model).order_by(self.model.id)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count(self) -> int:
        """전체 레코드 수"""
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()
