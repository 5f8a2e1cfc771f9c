# -*- coding: utf-8 -*-
"""
Batch Fetch - 부모 ID 목록 기반 자식 일괄 조회

부모마다 자식을 1번씩 조회하는 N+1 대신,
부모 ID를 IN 절로 묶어 한 번에 조회한 뒤 메모리에서 부모 ID별로 묶는다.

    1. 루트 쿼리로 부모 조회 (to-one 연관관계는 함께 조인)
    2. 부모 ID 수집
    3. SELECT ... WHERE child.parent_id IN (:ids)  (batch_size 단위)
    4. 부모 ID → 자식 목록 매핑 (조회 순서 유지)
    5. 매핑에서 부모별 자식 목록 연결 (없으면 빈 리스트)
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

K = TypeVar("K", bound=Hashable)
C = TypeVar("C")
P = TypeVar("P")

logger = logging.getLogger(__name__)


def chunked(ids: Sequence[K], size: int) -> list[list[K]]:
    """
    ID 목록을 IN 절 크기 단위로 분할

    Args:
        ids: ID 목록
        size: 청크 크기 (1 이상)

    Returns:
        list[list[K]]: 분할된 ID 목록
    """
    if size < 1:
        raise ValueError("Batch size must be positive")
    return [list(ids[i : i + size]) for i in range(0, len(ids), size)]


def group_by_parent(children: Iterable[C], key: Callable[[C], K]) -> dict[K, list[C]]:
    """
    자식 목록을 부모 ID별로 묶기

    부모별 자식 순서는 입력(조회) 순서를 그대로 유지한다.

    Args:
        children: 자식 목록
        key: 자식 → 부모 ID 함수

    Returns:
        dict[K, list[C]]: 부모 ID → 자식 목록
    """
    grouped: dict[K, list[C]] = {}
    for child in children:
        grouped.setdefault(key(child), []).append(child)
    return grouped


def attach_children(
    parents: Iterable[P],
    mapping: dict[K, list[C]],
    id_of: Callable[[P], K],
    setter: Callable[[P, list[C]], None],
) -> None:
    """
    부모별 자식 목록 연결

    매핑에 없는 부모는 빈 리스트를 받는다 (None 아님).
    """
    for parent in parents:
        setter(parent, list(mapping.get(id_of(parent), [])))


def unique_ids(ids: Iterable[K]) -> list[K]:
    """중복 제거 (첫 등장 순서 유지)"""
    return list(dict.fromkeys(ids))


async def load_children_in_batches(
    session: AsyncSession,
    parent_ids: Iterable[K],
    build_query: Callable[[list[K]], Select[Any]],
    key: Callable[[Any], K],
    batch_size: int,
    scalars: bool = True,
) -> dict[K, list[Any]]:
    """
    부모 ID 목록으로 자식을 일괄 조회하여 부모 ID별로 묶기

    부모 ID가 없으면 쿼리를 실행하지 않는다.
    부모 ID가 batch_size 이하이면 쿼리는 정확히 1번 실행된다.

    Args:
        session: AsyncSession
        parent_ids: 부모 ID 목록 (중복 허용)
        build_query: ID 청크 → IN 절 Select 생성 함수
        key: 자식 행 → 부모 ID 함수
        batch_size: IN 절 최대 ID 수
        scalars: True면 엔티티(scalars), False면 행(Row) 단위로 수집

    Returns:
        dict[K, list[Any]]: 부모 ID → 자식 목록

    Raises:
        ValueError: batch_size가 1 미만
    """
    ids = unique_ids(parent_ids)
    chunks = chunked(ids, batch_size)
    if not chunks:
        return {}

    children: list[Any] = []
    for chunk in chunks:
        result = await session.execute(build_query(chunk))
        rows = result.scalars().all() if scalars else result.all()
        children.extend(rows)

    logger.debug(
        f"[BatchFetch] {len(ids)} parents -> {len(children)} children "
        f"({len(chunks)} queries)"
    )
    return group_by_parent(children, key)
