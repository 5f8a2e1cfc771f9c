# -*- coding: utf-8 -*-
"""
Database Tables Initialization Script

모든 DB 테이블을 생성하고 조회 전략 비교용 샘플 데이터를 저장합니다.
"""

import asyncio

from src.adapters.database.connection import AsyncSessionLocal, close_db, init_db
from src.adapters.database.models import (
    Address,
    DeliveryModel,
    ItemModel,
    MemberModel,
    OrderItemModel,
    OrderModel,
)
from src.adapters.database.repositories import (
    ItemRepository,
    MemberRepository,
    OrderRepository,
)


async def seed() -> None:
    """샘플 데이터 저장 (회원 2명, 상품 4개, 주문 2건 x 주문상품 2개)"""
    async with AsyncSessionLocal() as session:
        member_repo = MemberRepository(session)
        if await member_repo.count() > 0:
            print("⏭️  샘플 데이터가 이미 존재합니다.")
            return

        item_repo = ItemRepository(session)
        order_repo = OrderRepository(session)

        user_a = await member_repo.save("userA", Address("서울", "1", "1111"))
        user_b = await member_repo.save("userB", Address("진주", "2", "2222"))

        book1 = await item_repo.save("JPA1 BOOK", 10000, 100)
        book2 = await item_repo.save("JPA2 BOOK", 20000, 100)
        book3 = await item_repo.save("SPRING1 BOOK", 20000, 200)
        book4 = await item_repo.save("SPRING2 BOOK", 40000, 300)

        await order_repo.save_order(user_a.id, user_a.address, [(book1, 1), (book2, 2)])
        await order_repo.save_order(user_b.id, user_b.address, [(book3, 3), (book4, 4)])

        await session.commit()
        print("✅ 샘플 데이터 저장 완료")


async def main():
    """테이블 초기화 실행"""
    print("=" * 80)
    print("🗄️  Database Tables Initialization")
    print("=" * 80)

    try:
        models = [MemberModel, ItemModel, DeliveryModel, OrderModel, OrderItemModel]
        print(f"\n📋 등록된 모델: {len(models)}개")
        for model in models:
            print(f"  - {model.__tablename__}")

        print("\n🔨 테이블 생성 중...")
        await init_db()
        print("✅ 테이블 생성 완료!")

        print("\n🌱 샘플 데이터 저장 중...")
        await seed()

        print("\n" + "=" * 80)
        print("🎉 데이터베이스 초기화 완료!")
        print("=" * 80)

    except Exception as e:
        print(f"\n❌ 초기화 실패: {e}")
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
