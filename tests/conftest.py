# -*- coding: utf-8 -*-
"""
공통 테스트 Fixture

- 인메모리 SQLite(aiosqlite) 엔진 + 테이블 생성
- 실행된 SELECT 쿼리 수 측정
- 샘플 주문 데이터 저장 (저장 세션과 조회 세션 분리)
- get_session 의존성을 교체한 httpx AsyncClient
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.adapters.database.connection import (  # noqa: E402
    Base,
    create_engine,
    create_session_factory,
    init_db,
)
from src.adapters.database.models import Address  # noqa: E402
from src.adapters.database.repositories import (  # noqa: E402
    ItemRepository,
    MemberRepository,
    OrderRepository,
)
from src.application.common.dependencies import get_session  # noqa: E402
from src.main import app  # noqa: E402


class QueryCounter:
    """엔진에서 실행된 SELECT 문 수집"""

    def __init__(self) -> None:
        self.statements: list[str] = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany) -> None:
        if statement.lstrip().upper().startswith("SELECT"):
            self.statements.append(statement)

    @property
    def count(self) -> int:
        return len(self.statements)

    def reset(self) -> None:
        self.statements.clear()


@pytest_asyncio.fixture
async def engine():
    """테스트별 인메모리 DB 엔진 (모든 세션이 같은 커넥션 공유)"""
    test_engine = create_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(test_engine)
    yield test_engine
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    """테스트 엔진에 바인딩된 세션 팩토리"""
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    """조회용 세션 (샘플 저장과 다른 세션)"""
    async with session_factory() as db_session:
        yield db_session


@pytest.fixture
def query_counter(engine):
    """실행된 SELECT 쿼리 수 측정"""
    counter = QueryCounter()
    event.listen(engine.sync_engine, "before_cursor_execute", counter)
    yield counter
    event.remove(engine.sync_engine, "before_cursor_execute", counter)


async def seed_orders(session_factory, member_count: int = 2, order_count: int = 2) -> list[int]:
    """
    샘플 주문 저장

    주문 i는 회원 (i % member_count)의 주문이며 주문상품 2개를 가진다.
    상품은 주문마다 새로 만든다 (주문상품 i의 단가 = 10000 * (i + 1)).

    Returns:
        list[int]: 주문 ID 목록 (저장 순)
    """
    async with session_factory() as db_session:
        member_repo = MemberRepository(db_session)
        item_repo = ItemRepository(db_session)
        order_repo = OrderRepository(db_session)

        members = [
            await member_repo.save(f"user{i}", Address(f"city{i}", f"street{i}", f"{i:05d}"))
            for i in range(member_count)
        ]

        order_ids = []
        for i in range(order_count):
            member = members[i % member_count]
            book1 = await item_repo.save(f"BOOK{i}-1", 10000, 100)
            book2 = await item_repo.save(f"BOOK{i}-2", 20000, 100)
            order = await order_repo.save_order(
                member.id,
                member.address,
                [(book1, 1), (book2, 2)],
                order_date=datetime(2024, 1, i + 1, 12, 0, 0),
            )
            order_ids.append(order.id)

        await db_session.commit()
        return order_ids


@pytest.fixture
def seed(session_factory):
    """회원/주문 수를 지정해 샘플 저장"""

    async def _seed(member_count: int = 2, order_count: int = 2) -> list[int]:
        return await seed_orders(session_factory, member_count, order_count)

    return _seed


@pytest_asyncio.fixture
async def seeded(seed) -> list[int]:
    """주문 2건 (회원 2명, 주문별 주문상품 2개)"""
    return await seed()


@pytest_asyncio.fixture
async def client(session_factory):
    """get_session을 테스트 세션으로 교체한 API 클라이언트"""

    async def override_get_session():
        async with session_factory() as db_session:
            yield db_session

    app.dependency_overrides[get_session] = override_get_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
