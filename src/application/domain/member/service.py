# -*- coding: utf-8 -*-
"""
Member Service - 회원 가입 / 수정 / 조회 서비스
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.models.base import Address
from src.adapters.database.models.member import MemberModel
from src.adapters.database.repositories.member_repository import MemberRepository
from src.application.common.decorators import transaction
from src.application.common.exceptions import MemberNotFoundError

logger = logging.getLogger(__name__)


class MemberService:
    """
    회원 서비스

    회원명 중복은 DB 유니크 제약조건으로 검증하므로
    동시 가입 요청에서도 같은 이름의 회원은 하나만 저장된다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.member_repo = MemberRepository(session)

    # ==================== 회원 가입 ====================

    @transaction
    async def join(self, name: str, address: Address | None = None) -> int:
        """
        회원 가입

        Args:
            name: 회원명
            address: 주소 (선택)

        Returns:
            int: 생성된 회원 ID

        Raises:
            DuplicateMemberError: 이미 존재하는 회원명
        """
        member = await self.member_repo.save(name, address)
        logger.info(f"[Member] Joined: id={member.id} name={member.name}")
        return member.id

    # ==================== 회원 수정 ====================

    @transaction
    async def update(self, member_id: int, name: str) -> MemberModel:
        """
        회원명 변경

        Raises:
            MemberNotFoundError: 존재하지 않는 회원 ID
            DuplicateMemberError: 변경할 이름의 회원이 이미 존재
        """
        member = await self.member_repo.find_one(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)

        await self.member_repo.rename(member, name)
        logger.info(f"[Member] Renamed: id={member_id} name={name}")
        return member

    # ==================== 회원 조회 ====================

    async def find_members(self) -> Sequence[MemberModel]:
        """전체 회원 조회"""
        return await self.member_repo.find_all()

    async def find_one(self, member_id: int) -> MemberModel:
        """
        회원 단건 조회

        Raises:
            MemberNotFoundError: 존재하지 않는 회원 ID
        """
        member = await self.member_repo.find_one(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member
