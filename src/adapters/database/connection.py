# -*- coding: utf-8 -*-
"""
Database Connection - SQLAlchemy Async Engine 및 Session 관리
"""

from typing import Any, AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.settings.config import settings


# ==================== Base Model ====================


class Base(AsyncAttrs, DeclarativeBase):
    """
    SQLAlchemy Base Model

    AsyncAttrs: 지연 로딩 연관관계는 `await obj.awaitable_attrs.<name>`으로만 로딩
    """

    pass


# ==================== Engine 및 SessionMaker ====================


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str | None = None, **kwargs: Any) -> AsyncEngine:
    """
    비동기 SQLAlchemy Engine 생성

    Args:
        database_url: 연결 URL (없으면 settings.database_url)
        **kwargs: create_async_engine 추가 인자

    Returns:
        AsyncEngine: 비동기 데이터베이스 엔진
    """
    url = database_url or settings.database_url
    options: dict[str, Any] = {"echo": settings.database_echo}

    if url.startswith("sqlite"):
        options.update(kwargs)
        async_engine = create_async_engine(url, **options)
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return async_engine

    options.update(
        pool_pre_ping=True,  # 연결 상태 체크
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle,
    )
    options.update(kwargs)
    return create_async_engine(url, **options)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """엔진에 바인딩된 AsyncSession 팩토리 생성"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,  # commit 후 객체 expire 방지
        autoflush=False,  # 자동 flush 비활성화
    )


# 전역 Engine 및 SessionMaker
engine: AsyncEngine = create_engine()
AsyncSessionLocal = create_session_factory(engine)


# ==================== Session Dependency ====================


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    FastAPI Dependency로 사용할 Database Session

    Yields:
        AsyncSession: 비동기 데이터베이스 세션
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ==================== Database 생명주기 ====================


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    데이터베이스 초기화 (테이블 생성)

    Note:
        운영 환경에서는 Alembic 마이그레이션 사용 권장
    """
    # 모든 모델을 metadata에 등록
    import src.adapters.database.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
