# -*- coding: utf-8 -*-
"""
Common DTO - 공통 데이터 전송 객체

Base DTO, Response, Address 등 재사용 가능한 DTO 정의
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.adapters.database.models.base import Address

T = TypeVar("T")


# ==================== Base DTO ====================


class BaseDTO(BaseModel):
    """
    Base DTO 클래스

    모든 DTO의 기본 클래스
    """

    model_config = ConfigDict(
        from_attributes=True,  # ORM 모델에서 변환 가능
        populate_by_name=True,  # alias와 실제 이름 모두 사용 가능
        use_enum_values=True,  # Enum을 값으로 직렬화
    )


# ==================== Response DTO ====================


class ResponseDTO(BaseDTO, Generic[T]):
    """
    API 응답 DTO

    Attributes:
        success: 성공 여부
        message: 응답 메시지
        data: 응답 데이터
        error: 에러 정보 (실패 시)
    """

    success: bool = Field(description="성공 여부")
    message: str | None = Field(default=None, description="응답 메시지")
    data: T | None = Field(default=None, description="응답 데이터")
    error: dict[str, Any] | None = Field(default=None, description="에러 정보")

    @classmethod
    def success_response(cls, data: T, message: str = "Success") -> "ResponseDTO[T]":
        """성공 응답 생성"""
        return cls(success=True, message=message, data=data)

    @classmethod
    def error_response(
        cls, message: str = "Error", error: dict[str, Any] | None = None
    ) -> "ResponseDTO[None]":
        """실패 응답 생성"""
        return cls(success=False, message=message, error=error)


# ==================== ID DTO ====================


class IdResponseDTO(BaseDTO):
    """
    ID 응답 DTO

    생성/수정 작업 후 ID만 반환할 때 사용

    Attributes:
        id: 레코드 ID
    """

    id: int = Field(description="레코드 ID")


# ==================== Address DTO ====================


class AddressDTO(BaseDTO):
    """
    주소 DTO

    Attributes:
        city: 도시
        street: 거리
        zipcode: 우편번호
    """

    city: str | None = Field(default=None, description="도시")
    street: str | None = Field(default=None, description="거리")
    zipcode: str | None = Field(default=None, description="우편번호")

    @classmethod
    def from_address(cls, address: Address | None) -> "AddressDTO | None":
        """임베디드 Address → DTO"""
        if address is None:
            return None
        return cls(city=address.city, street=address.street, zipcode=address.zipcode)

    def to_address(self) -> Address:
        """DTO → 임베디드 Address"""
        return Address(city=self.city, street=self.street, zipcode=self.zipcode)


# ==================== Status DTO ====================


class StatusDTO(BaseDTO):
    """
    상태 응답 DTO

    Attributes:
        status: 상태 (healthy, unhealthy)
        timestamp: 확인 시각
        details: 상세 정보
    """

    status: str = Field(description="상태")
    timestamp: datetime = Field(default_factory=datetime.now, description="확인 시각")
    details: dict[str, Any] | None = Field(default=None, description="상세 정보")
