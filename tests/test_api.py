# -*- coding: utf-8 -*-
"""
API 엔드포인트 테스트

httpx AsyncClient + ASGITransport (get_session 의존성 교체)
"""

import pytest

from src.application.common.dependencies import get_member_service
from src.application.common.exceptions import DatabaseError
from src.main import app


class TestMemberAPI:
    """회원 API 테스트"""

    @pytest.mark.asyncio
    async def test_create_and_get(self, client):
        response = await client.post(
            "/api/v2/members",
            json={"name": "kim", "address": {"city": "서울", "street": "1", "zipcode": "1111"}},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        member_id = body["data"]["id"]

        response = await client.get(f"/api/v2/members/{member_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "kim"
        assert data["address"] == {"city": "서울", "street": "1", "zipcode": "1111"}

    @pytest.mark.asyncio
    async def test_duplicate_name_conflict(self, client):
        await client.post("/api/v2/members", json={"name": "kim"})

        response = await client.post("/api/v2/members", json={"name": "kim"})

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "RESOURCE_ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, client):
        response = await client.post("/api/v2/members", json={"name": "   "})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update(self, client):
        created = await client.post("/api/v2/members", json={"name": "kim"})
        member_id = created.json()["data"]["id"]

        response = await client.put(f"/api/v2/members/{member_id}", json={"name": "park"})

        assert response.status_code == 200
        assert response.json()["data"] == {"id": member_id, "name": "park"}

    @pytest.mark.asyncio
    async def test_update_unknown_member(self, client):
        response = await client.put("/api/v2/members/999", json={"name": "park"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list(self, client):
        for name in ["kim", "lee"]:
            await client.post("/api/v2/members", json={"name": name})

        response = await client.get("/api/v2/members")

        data = response.json()["data"]
        assert data["count"] == 2
        assert [member["name"] for member in data["members"]] == ["kim", "lee"]


class TestOrderAPI:
    """주문 조회 API 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path",
        [
            "/api/v2/orders",
            "/api/v3/orders",
            "/api/v3.1/orders",
            "/api/v4/orders",
            "/api/v5/orders",
            "/api/v6/orders",
        ],
    )
    async def test_versions_return_same_orders(self, client, seeded, path):
        """모든 버전이 같은 주문 + 주문상품을 반환"""
        response = await client.get(path)

        assert response.status_code == 200
        orders = response.json()["data"]
        assert [order["order_id"] for order in orders] == seeded
        assert orders[0]["name"] == "user0"
        assert orders[0]["address"]["city"] == "city0"
        assert [item["item_name"] for item in orders[1]["order_items"]] == ["BOOK1-1", "BOOK1-2"]

    @pytest.mark.asyncio
    async def test_v1_entity_graph(self, client, seeded):
        response = await client.get("/api/v1/orders")

        order = response.json()["data"][0]
        assert order["member"]["name"] == "user0"
        assert order["delivery"]["status"] == "ready"
        assert order["order_items"][0]["item"]["name"] == "BOOK0-1"
        assert order["total_price"] == 50000

    @pytest.mark.asyncio
    async def test_v6_flat_rows(self, client, seeded):
        response = await client.get("/api/v6/orders/flat")

        rows = response.json()["data"]
        assert len(rows) == 4
        assert rows[0]["item_name"] == "BOOK0-1"

    @pytest.mark.asyncio
    async def test_v3_1_paging(self, client, seeded, query_counter):
        response = await client.get("/api/v3.1/orders", params={"offset": 1, "limit": 1})

        orders = response.json()["data"]
        assert [order["order_id"] for order in orders] == seeded[1:]
        assert query_counter.count == 2

    @pytest.mark.asyncio
    async def test_fetch_strategy_param(self, client, seeded):
        response = await client.get("/api/orders", params={"fetch": "to_one_with_collection"})

        assert response.status_code == 200
        assert len(response.json()["data"]) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fetch", ["none", "to_one", "to_one_with_batch"])
    async def test_item_bearing_fetch_strategies(self, client, seeded, fetch):
        """주문상품을 조인하지 않는 전략도 주문상품을 포함해 응답"""
        response = await client.get("/api/orders", params={"fetch": fetch})

        assert response.status_code == 200
        orders = response.json()["data"]
        assert [order["order_id"] for order in orders] == seeded
        assert [item["item_name"] for item in orders[0]["order_items"]] == ["BOOK0-1", "BOOK0-2"]

    @pytest.mark.asyncio
    async def test_collection_with_paging_rejected(self, client, seeded):
        response = await client.get(
            "/api/orders", params={"fetch": "to_one_with_collection", "limit": 1}
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"] == {"strategy": "to_one_with_collection"}

    @pytest.mark.asyncio
    async def test_invalid_limit(self, client):
        response = await client.get("/api/v2/orders", params={"limit": 0})

        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "limit"

    @pytest.mark.asyncio
    async def test_empty_orders(self, client):
        response = await client.get("/api/v5/orders")

        assert response.status_code == 200
        assert response.json()["data"] == []


class TestSimpleOrderAPI:
    """주문 요약 API 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path", ["/api/v2/simple-orders", "/api/v3/simple-orders", "/api/v4/simple-orders"]
    )
    async def test_simple_orders(self, client, seeded, path):
        response = await client.get(path)

        orders = response.json()["data"]
        assert [order["order_id"] for order in orders] == seeded
        assert "order_items" not in orders[0]

    @pytest.mark.asyncio
    async def test_v1_without_items(self, client, seeded):
        response = await client.get("/api/v1/simple-orders")

        order = response.json()["data"][0]
        assert order["member"]["name"] == "user0"
        assert order["order_items"] is None

    @pytest.mark.asyncio
    async def test_lazy_query_count(self, client, seeded, query_counter):
        """지연 로딩: 1 + 2N"""
        await client.get("/api/v2/simple-orders")

        assert query_counter.count == 1 + 2 * len(seeded)

    @pytest.mark.asyncio
    async def test_to_one_query_count(self, client, seeded, query_counter):
        """ToOne fetch join: 1"""
        await client.get("/api/v3/simple-orders")

        assert query_counter.count == 1


class TestHealth:
    """헬스체크 테스트"""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["details"] == {"database": "connected"}

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.json()["status"] == "running"


class TestMemberV1API:
    """회원 v1 API 테스트 (엔티티 형태, 래퍼 없음)"""

    @pytest.mark.asyncio
    async def test_create_returns_bare_id(self, client):
        response = await client.post(
            "/api/v1/members",
            json={
                "id": 999,
                "name": "kim",
                "address": {"city": "서울", "street": "1", "zipcode": "1111"},
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"id"}
        assert body["id"] != 999

    @pytest.mark.asyncio
    async def test_list_returns_bare_array(self, client):
        await client.post("/api/v1/members", json={"name": "kim", "address": {"city": "서울"}})
        await client.post("/api/v2/members", json={"name": "lee"})

        response = await client.get("/api/v1/members")

        assert response.status_code == 200
        members = response.json()
        assert isinstance(members, list)
        assert [member["name"] for member in members] == ["kim", "lee"]
        assert members[0]["address"] == {"city": "서울", "street": None, "zipcode": None}
        assert "orders" not in members[0]

    @pytest.mark.asyncio
    async def test_duplicate_name_conflict(self, client):
        await client.post("/api/v1/members", json={"name": "kim"})

        response = await client.post("/api/v1/members", json={"name": "kim"})

        assert response.status_code == 409


class TestErrorMapping:
    """애플리케이션 예외 → HTTP 상태 코드"""

    @pytest.mark.asyncio
    async def test_database_error_maps_to_502(self, client):
        class FailingMemberService:
            async def find_members(self):
                raise DatabaseError("connection lost")

        app.dependency_overrides[get_member_service] = lambda: FailingMemberService()

        response = await client.get("/api/v2/members")

        assert response.status_code == 502
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "EXTERNAL_SERVICE_ERROR"
        assert body["message"] == "Database error: connection lost"
