# -*- coding: utf-8 -*-
"""
Decorators - 공통 데코레이터

@transaction, @log_execution 등 재사용 가능한 데코레이터
"""

import functools
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, Concatenate, ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger(__name__)


# ==================== @transaction 데코레이터 ====================


def transaction(
    func: Callable[Concatenate[Any, P], Awaitable[T]],
) -> Callable[Concatenate[Any, P], Awaitable[T]]:
    """
    트랜잭션 데코레이터

    Service Layer 메서드에 적용하여 self.session 트랜잭션 자동 관리
    - 성공 시: commit
    - 실패 시: rollback 후 예외 재발생

    사용 예시:
        @transaction
        async def join(self, name: str) -> int:
            # 비즈니스 로직
            pass

    주의:
        - 외부 호출 메서드에만 적용 (내부 헬퍼 메서드는 제외)
        - Service Layer에서만 사용 (Repository는 제외)
        - 읽기 전용 메서드에는 적용하지 않음
    """

    @functools.wraps(func)
    async def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> T:
        session = self.session
        try:
            result = await func(self, *args, **kwargs)
            await session.commit()
            return result
        except Exception as e:
            await session.rollback()
            logger.error(f"Transaction failed in {func.__name__}: {e}")
            raise

    return wrapper


# ==================== @log_execution 데코레이터 ====================


def log_execution(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """
    실행 로깅 데코레이터

    함수 실행 시작/종료 및 실행 시간 로깅 (DEBUG)

    사용 예시:
        @log_execution
        async def list_orders(self, depth: OrderFetchDepth):
            pass
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        func_name = func.__qualname__
        logger.debug(f"[START] {func_name}")

        start_time = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
            elapsed = time.perf_counter() - start_time
            logger.debug(f"[END] {func_name} (took {elapsed:.3f}s)")
            return result
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            logger.error(f"[ERROR] {func_name} failed after {elapsed:.3f}s: {e}")
            raise

    return wrapper
