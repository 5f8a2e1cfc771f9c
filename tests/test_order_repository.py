# -*- coding: utf-8 -*-
"""
Order Repository 테스트

조회 깊이(OrderFetchDepth)별 쿼리 수 / 결과 / 페이징 제약 검증
"""

import pytest

from src.adapters.database.models import Address, is_loaded
from src.adapters.database.repositories import (
    ItemRepository,
    MemberRepository,
    OrderFetchDepth,
    OrderRepository,
)
from src.application.common.exceptions import PaginationNotSupportedError


class TestFetchDepth:
    """조회 깊이별 쿼리 수 테스트"""

    @pytest.mark.asyncio
    async def test_none_leaves_associations_unloaded(self, seeded, session, query_counter):
        """NONE: 루트만 조회 (연관관계 미로딩)"""
        orders = await OrderRepository(session).find_orders(OrderFetchDepth.NONE)

        assert query_counter.count == 1
        assert [order.id for order in orders] == seeded
        assert not is_loaded(orders[0], "member")
        assert not is_loaded(orders[0], "delivery")
        assert not is_loaded(orders[0], "order_items")

    @pytest.mark.asyncio
    async def test_none_with_explicit_loading(self, seeded, session, query_counter):
        """NONE + load_associations: 주문마다 회원/배송/주문상품/상품 쿼리 (1 + 5N)"""
        repo = OrderRepository(session)
        orders = await repo.find_orders(OrderFetchDepth.NONE)
        for order in orders:
            await repo.load_associations(order)

        # 주문별: 회원 1 + 배송 1 + 주문상품 1 + 상품 2
        assert query_counter.count == 1 + 5 * len(seeded)
        assert orders[0].member.name == "user0"
        assert [oi.item.name for oi in orders[0].order_items] == ["BOOK0-1", "BOOK0-2"]

    @pytest.mark.asyncio
    async def test_none_skips_already_loaded_member(self, seed, session, query_counter):
        """같은 회원의 주문은 회원 쿼리를 반복하지 않음 (세션 identity map)"""
        await seed(member_count=1, order_count=2)
        query_counter.reset()

        repo = OrderRepository(session)
        orders = await repo.find_orders(OrderFetchDepth.NONE)
        for order in orders:
            await repo.load_associations(order, include_items=False)

        # 루트 1 + 회원 1 + 배송 2
        assert query_counter.count == 4

    @pytest.mark.asyncio
    async def test_to_one_single_query(self, seeded, session, query_counter):
        """TO_ONE: 회원/배송 fetch join (쿼리 1번)"""
        orders = await OrderRepository(session).find_orders(OrderFetchDepth.TO_ONE)

        assert query_counter.count == 1
        assert is_loaded(orders[0], "member")
        assert is_loaded(orders[0], "delivery")
        assert not is_loaded(orders[0], "order_items")
        assert orders[1].delivery.address == Address("city1", "street1", "00001")

    @pytest.mark.asyncio
    async def test_collection_single_query_unique_orders(self, seeded, session, query_counter):
        """TO_ONE_WITH_COLLECTION: 쿼리 1번, 주문 중복 제거"""
        orders = await OrderRepository(session).find_orders(
            OrderFetchDepth.TO_ONE_WITH_COLLECTION
        )

        assert query_counter.count == 1
        assert [order.id for order in orders] == seeded
        assert all(len(order.order_items) == 2 for order in orders)
        assert orders[0].order_items[1].item.name == "BOOK0-2"

    @pytest.mark.asyncio
    async def test_batch_two_queries(self, seeded, session, query_counter):
        """TO_ONE_WITH_BATCH: 루트 1 + 주문상품 IN 배치 1"""
        orders = await OrderRepository(session).find_orders(OrderFetchDepth.TO_ONE_WITH_BATCH)

        assert query_counter.count == 2
        assert [order.id for order in orders] == seeded
        assert [oi.item.name for oi in orders[1].order_items] == ["BOOK1-1", "BOOK1-2"]
        assert orders[1].total_price == 10000 * 1 + 20000 * 2

    @pytest.mark.asyncio
    async def test_batch_size_splits_in_clause(self, seeded, session, query_counter):
        """batch_size=1이면 주문 수만큼 IN 쿼리"""
        orders = await OrderRepository(session, batch_size=1).find_orders(
            OrderFetchDepth.TO_ONE_WITH_BATCH
        )

        assert query_counter.count == 1 + len(seeded)
        assert all(len(order.order_items) == 2 for order in orders)

    @pytest.mark.asyncio
    async def test_batch_without_items_flag(self, seeded, session, query_counter):
        """include_items=False면 배치 조회 생략"""
        await OrderRepository(session).find_orders(
            OrderFetchDepth.TO_ONE_WITH_BATCH, include_items=False
        )

        assert query_counter.count == 1

    @pytest.mark.asyncio
    async def test_batch_on_empty_db(self, session, query_counter):
        """주문이 없으면 루트 쿼리만 실행"""
        orders = await OrderRepository(session).find_orders(OrderFetchDepth.TO_ONE_WITH_BATCH)

        assert orders == []
        assert query_counter.count == 1

    @pytest.mark.asyncio
    async def test_batch_order_without_items(self, session_factory, session):
        """주문상품 없는 주문은 빈 리스트"""
        async with session_factory() as seed_session:
            member = await MemberRepository(seed_session).save("solo", Address("a", "b", "c"))
            await OrderRepository(seed_session).save_order(member.id, member.address, [])
            await seed_session.commit()

        orders = await OrderRepository(session).find_orders(OrderFetchDepth.TO_ONE_WITH_BATCH)

        assert len(orders) == 1
        assert orders[0].order_items == []
        assert orders[0].total_price == 0


class TestPagination:
    """페이징 제약 테스트"""

    @pytest.mark.asyncio
    async def test_collection_with_limit_rejected(self, session):
        repo = OrderRepository(session)
        with pytest.raises(PaginationNotSupportedError):
            await repo.find_orders(OrderFetchDepth.TO_ONE_WITH_COLLECTION, limit=10)

    @pytest.mark.asyncio
    async def test_collection_with_offset_rejected(self, session):
        repo = OrderRepository(session)
        with pytest.raises(PaginationNotSupportedError):
            await repo.find_orders(OrderFetchDepth.TO_ONE_WITH_COLLECTION, offset=0)

    @pytest.mark.asyncio
    async def test_batch_pages_by_order(self, seeded, session):
        """배치 전략은 주문 단위로 페이징"""
        orders = await OrderRepository(session).find_orders(
            OrderFetchDepth.TO_ONE_WITH_BATCH, offset=1, limit=1
        )

        assert [order.id for order in orders] == seeded[1:2]
        assert len(orders[0].order_items) == 2

    def test_supports_pagination(self):
        assert OrderFetchDepth.TO_ONE_WITH_BATCH.supports_pagination
        assert not OrderFetchDepth.TO_ONE_WITH_COLLECTION.supports_pagination


class TestSaveOrder:
    """주문 저장 테스트"""

    @pytest.mark.asyncio
    async def test_order_price_from_item(self, session):
        member = await MemberRepository(session).save("buyer", Address("서울", "1", "1111"))
        item = await ItemRepository(session).save("JPA1 BOOK", 10000, 100)

        order = await OrderRepository(session).save_order(member.id, member.address, [(item, 3)])

        assert order.id is not None
        assert order.delivery.address == Address("서울", "1", "1111")
        assert order.order_items[0].order_price == 10000
        assert order.total_price == 30000

    @pytest.mark.asyncio
    async def test_find_by_member(self, seeded, session):
        member = (await MemberRepository(session).find_by_name("user1"))[0]

        orders = await OrderRepository(session).find_by_member(member.id)

        assert [order.id for order in orders] == [seeded[1]]


class TestSameLogicalData:
    """조회 깊이와 무관하게 같은 주문 데이터"""

    @staticmethod
    def _snapshot(orders):
        return [
            (
                order.id,
                order.member.name,
                order.delivery.address,
                [(oi.item.name, oi.order_price, oi.count) for oi in order.order_items],
            )
            for order in orders
        ]

    @pytest.mark.asyncio
    async def test_all_depths_agree(self, seed, session_factory):
        await seed(member_count=3, order_count=3)

        snapshots = []
        for depth in OrderFetchDepth:
            async with session_factory() as db_session:
                repo = OrderRepository(db_session)
                orders = await repo.find_orders(depth)
                if depth in (OrderFetchDepth.NONE, OrderFetchDepth.TO_ONE):
                    for order in orders:
                        await repo.load_associations(order)
                snapshots.append(self._snapshot(orders))

        assert len(snapshots[0]) == 3
        assert all(snapshot == snapshots[0] for snapshot in snapshots)

    @pytest.mark.asyncio
    async def test_batch_three_orders_two_queries(self, seed, session, query_counter):
        await seed(member_count=3, order_count=3)
        query_counter.reset()

        orders = await OrderRepository(session).find_orders(OrderFetchDepth.TO_ONE_WITH_BATCH)

        assert len(orders) == 3
        assert query_counter.count == 2

    @pytest.mark.asyncio
    async def test_lazy_one_plus_two_n(self, seed, session, query_counter):
        """회원이 모두 다르면 1 + 2N"""
        await seed(member_count=3, order_count=3)
        query_counter.reset()

        repo = OrderRepository(session)
        orders = await repo.find_orders(OrderFetchDepth.NONE)
        for order in orders:
            await repo.load_associations(order, include_items=False)

        assert query_counter.count == 1 + 2 * 3
