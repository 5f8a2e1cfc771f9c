# -*- coding: utf-8 -*-
"""
Dependencies - 의존성 주입 중앙 관리

FastAPI Dependency Injection을 위한 공통 의존성 함수 정의
"""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.adapters.database.connection import get_db
from src.application.domain.member.service import MemberService
from src.application.domain.order.service import OrderQueryService
from src.settings.config import Settings, get_settings

# ==================== Database Session ====================


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Database Session Dependency

    Yields:
        AsyncSession: 비동기 데이터베이스 세션
    """
    async for session in get_db():
        yield session


# Type alias for Database Session
DatabaseSession = Annotated[AsyncSession, Depends(get_session)]


# ==================== Services ====================


def get_member_service(session: DatabaseSession) -> MemberService:
    """
    Member Service Dependency

    Args:
        session: Database Session

    Returns:
        MemberService: 회원 서비스
    """
    return MemberService(session)


def get_order_query_service(session: DatabaseSession) -> OrderQueryService:
    """
    Order Query Service Dependency

    Args:
        session: Database Session

    Returns:
        OrderQueryService: 주문 조회 서비스
    """
    return OrderQueryService(session)


# Type aliases for Services
MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]
OrderQueryServiceDep = Annotated[OrderQueryService, Depends(get_order_query_service)]


# ==================== Settings ====================


def get_settings_dependency() -> Settings:
    """
    Settings Dependency (Singleton)

    Returns:
        Settings: 애플리케이션 설정
    """
    return get_settings()


# Type alias for Settings
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]
