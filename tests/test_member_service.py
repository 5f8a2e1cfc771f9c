# -*- coding: utf-8 -*-
"""
Member Service 테스트

- 회원 가입 / 중복 회원명 거부
- 회원명 변경 / 존재하지 않는 회원
- 회원 조회
"""

import pytest

from src.adapters.database.models import Address
from src.adapters.database.repositories import MemberRepository
from src.application.common.exceptions import (
    DatabaseError,
    DuplicateMemberError,
    MemberNotFoundError,
)
from src.application.domain.member.service import MemberService


class TestJoin:
    """회원 가입 테스트"""

    @pytest.mark.asyncio
    async def test_join_returns_id(self, session, session_factory):
        member_id = await MemberService(session).join("kim", Address("서울", "강가", "123"))

        async with session_factory() as other:
            member = await MemberService(other).find_one(member_id)

        assert member.name == "kim"
        assert member.address == Address("서울", "강가", "123")

    @pytest.mark.asyncio
    async def test_distinct_names_both_join(self, session):
        service = MemberService(session)

        alice_id = await service.join("Alice")
        bob_id = await service.join("Bob")

        assert alice_id != bob_id
        assert [m.name for m in await service.find_members()] == ["Alice", "Bob"]

    @pytest.mark.asyncio
    async def test_join_without_address(self, session):
        member_id = await MemberService(session).join("lee")

        assert member_id is not None

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, session_factory):
        async with session_factory() as first:
            await MemberService(first).join("kim")

        async with session_factory() as second:
            service = MemberService(second)
            with pytest.raises(DuplicateMemberError):
                await service.join("kim")

            # 롤백 후 세션 재사용 가능
            assert [m.name for m in await service.find_members()] == ["kim"]

    @pytest.mark.asyncio
    async def test_duplicate_error_payload(self, session_factory):
        async with session_factory() as first:
            await MemberService(first).join("kim")

        async with session_factory() as second:
            with pytest.raises(DuplicateMemberError) as exc_info:
                await MemberService(second).join("kim")

        assert exc_info.value.status_code == 409
        assert exc_info.value.details == {"resource": "Member", "identifier": "kim"}


class TestUpdate:
    """회원 수정 테스트"""

    @pytest.mark.asyncio
    async def test_rename(self, session, session_factory):
        service = MemberService(session)
        member_id = await service.join("kim")

        await service.update(member_id, "park")

        async with session_factory() as other:
            member = await MemberService(other).find_one(member_id)
        assert member.name == "park"

    @pytest.mark.asyncio
    async def test_unknown_member(self, session):
        with pytest.raises(MemberNotFoundError):
            await MemberService(session).update(999, "park")

    @pytest.mark.asyncio
    async def test_rename_to_existing_name(self, session):
        service = MemberService(session)
        await service.join("kim")
        lee_id = await service.join("lee")

        with pytest.raises(DuplicateMemberError):
            await service.update(lee_id, "kim")


class TestFind:
    """회원 조회 테스트"""

    @pytest.mark.asyncio
    async def test_find_members_in_id_order(self, session):
        service = MemberService(session)
        for name in ["c", "a", "b"]:
            await service.join(name)

        members = await service.find_members()

        assert [member.name for member in members] == ["c", "a", "b"]

    @pytest.mark.asyncio
    async def test_find_one_missing(self, session):
        with pytest.raises(MemberNotFoundError) as exc_info:
            await MemberService(session).find_one(1)

        assert exc_info.value.status_code == 404


class TestMemberRepositoryErrors:
    """제약조건 위반 → 예외 변환 테스트"""

    @pytest.mark.asyncio
    async def test_not_null_violation_is_database_error(self, session):
        """회원명 NOT NULL 위반은 중복이 아니라 DB 오류"""
        repo = MemberRepository(session)
        member = await repo.save("kim")

        with pytest.raises(DatabaseError) as exc_info:
            await repo.rename(member, None)

        assert exc_info.value.status_code == 502
        assert exc_info.value.code == "EXTERNAL_SERVICE_ERROR"
        await session.rollback()

    @pytest.mark.asyncio
    async def test_unique_violation_is_duplicate_error(self, session):
        repo = MemberRepository(session)
        await repo.save("kim")

        with pytest.raises(DuplicateMemberError):
            await repo.save("kim")
        await session.rollback()
