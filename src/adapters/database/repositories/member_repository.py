# -*- coding: utf-8 -*-
"""
Member Repository - 회원 데이터 접근 계층
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.base import Address
from src.adapters.database.models.member import MemberModel
from src.adapters.database.repositories.base_repository import BaseRepository
from src.application.common.exceptions import DatabaseError, DuplicateMemberError

logger = logging.getLogger(__name__)

# PostgreSQL은 제약조건 이름, SQLite는 "UNIQUE constraint failed: members.name"
_NAME_CONSTRAINT_MARKERS = ("uq_members_name", "UNIQUE constraint failed: members.name")


def _is_duplicate_name(error: IntegrityError) -> bool:
    """회원명 유니크 제약조건 위반 여부 (PostgreSQL / SQLite 메시지)"""
    message = str(error.orig)
    return any(marker in message for marker in _NAME_CONSTRAINT_MARKERS)


class MemberRepository(BaseRepository[MemberModel]):
    """
    회원 Repository

    회원명 중복 검사는 조회 후 저장이 아니라 INSERT/UPDATE 한 번으로 수행하고,
    DB 유니크 제약조건 위반을 DuplicateMemberError로 변환한다.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(MemberModel, session)

    # ==================== 저장 ====================

    async def save(self, name: str, address: Address | None = None) -> MemberModel:
        """
        회원 저장

        Raises:
            DuplicateMemberError: 같은 이름의 회원이 이미 존재
        """
        member = MemberModel(name=name, address=address or Address())
        self.session.add(member)
        await self._flush_or_raise(name)
        return member

    async def rename(self, member: MemberModel, name: str) -> MemberModel:
        """
        회원명 변경

        Raises:
            DuplicateMemberError: 변경할 이름의 회원이 이미 존재
        """
        member.name = name
        await self._flush_or_raise(name)
        return member

    async def _flush_or_raise(self, name: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            if _is_duplicate_name(e):
                logger.warning(f"[Member] Duplicate name rejected: {name}")
                raise DuplicateMemberError(name) from e
            raise DatabaseError(str(e.orig)) from e

    # ==================== 조회 ====================

    async def find_one(self, member_id: int) -> MemberModel | None:
        """ID로 회원 조회"""
        return await self.get_by_id(member_id)

    async def find_all(self) -> Sequence[MemberModel]:
        """전체 회원 조회 (ID 순)"""
        return await self.get_all()

    async def find_by_name(self, name: str) -> Sequence[MemberModel]:
        """이름으로 회원 조회"""
        stmt = select(self.model).where(self.model.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().all()
