# -*- coding: utf-8 -*-
"""
Base Model - 공통 모델 Base 클래스, Mixin 및 임베디드 값 타입
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import BigInteger, DateTime, Integer, func, inspect
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

# SQLite는 INTEGER PRIMARY KEY만 자동 증가
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


@dataclass
class Address:
    """
    주소 (임베디드 값 타입)

    식별자 없이 소유 엔티티의 city/street/zipcode 컬럼으로 저장된다.
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class TimestampMixin:
    """생성/수정 타임스탬프 Mixin"""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        """생성 시각"""
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        """수정 시각"""
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class BaseModel(TimestampMixin):
    """
    Base Model for all database models

    모든 모델은 이 클래스를 상속받아 created_at, updated_at 자동 포함
    """

    def to_dict(self) -> dict[str, Any]:
        """모델을 딕셔너리로 변환 (컬럼만, 연관관계 제외)"""
        return {c.key: getattr(self, c.key) for c in inspect(self).mapper.column_attrs}

    def __repr__(self) -> str:
        """모델 문자열 표현 (로딩된 컬럼만 출력)"""
        class_name = self.__class__.__name__
        state = inspect(self)
        attrs = ", ".join(
            f"{c.key}={getattr(self, c.key)!r}"
            for c in state.mapper.column_attrs
            if c.key not in state.unloaded and c.key not in ("created_at", "updated_at")
        )
        return f"{class_name}({attrs})"


def is_loaded(instance: Any, attribute: str) -> bool:
    """
    연관관계(또는 컬럼) 로딩 여부

    지연 로딩 대상이 아직 로딩되지 않았으면 False.
    False인 속성에 동기 접근하면 비동기 세션에서 오류가 발생하므로
    `await instance.awaitable_attrs.<attribute>`로 명시적으로 로딩해야 한다.
    """
    return attribute not in inspect(instance).unloaded
