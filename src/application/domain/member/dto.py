# -*- coding: utf-8 -*-
"""
Member Domain DTO - 회원 관련 데이터 전송 객체
"""

from pydantic import Field, field_validator

from src.adapters.database.models.member import MemberModel
from src.application.common.dto import AddressDTO, BaseDTO


# ==================== Request DTOs ====================


class MemberCreateRequestDTO(BaseDTO):
    """
    회원 가입 요청 DTO

    Attributes:
        name: 회원명
        address: 주소 (선택)
    """

    name: str = Field(description="회원명", min_length=1, max_length=100)
    address: AddressDTO | None = Field(default=None, description="주소")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()


class MemberUpdateRequestDTO(BaseDTO):
    """
    회원 수정 요청 DTO

    Attributes:
        name: 변경할 회원명
    """

    name: str = Field(description="회원명", min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()


# ==================== Entity-shaped DTO (v1) ====================


class MemberDTO(BaseDTO):
    """
    회원 엔티티 형태 DTO (v1 요청 / 응답)

    엔티티 필드를 그대로 노출한다. 주문 역참조는 없으며 요청의 id는 무시된다.

    Attributes:
        id: 회원 ID
        name: 회원명
        address: 주소
    """

    id: int | None = Field(default=None, description="회원 ID")
    name: str = Field(description="회원명", min_length=1, max_length=100)
    address: AddressDTO | None = Field(default=None, description="주소")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()

    @classmethod
    def from_model(cls, member: MemberModel) -> "MemberDTO":
        return cls(
            id=member.id,
            name=member.name,
            address=AddressDTO.from_address(member.address),
        )


# ==================== Response DTOs ====================


class MemberUpdateResponseDTO(BaseDTO):
    """회원 수정 응답 DTO"""

    id: int = Field(description="회원 ID")
    name: str = Field(description="회원명")


class MemberSummaryDTO(BaseDTO):
    """회원 목록 항목 DTO"""

    id: int = Field(description="회원 ID")
    name: str = Field(description="회원명")


class MemberResponseDTO(BaseDTO):
    """
    회원 상세 응답 DTO

    Attributes:
        id: 회원 ID
        name: 회원명
        address: 주소
    """

    id: int = Field(description="회원 ID")
    name: str = Field(description="회원명")
    address: AddressDTO | None = Field(default=None, description="주소")

    @classmethod
    def from_model(cls, member: MemberModel) -> "MemberResponseDTO":
        return cls(
            id=member.id,
            name=member.name,
            address=AddressDTO.from_address(member.address),
        )


class MemberListResponseDTO(BaseDTO):
    """
    회원 목록 응답 DTO

    Attributes:
        members: 회원 목록
        count: 회원 수
    """

    members: list[MemberSummaryDTO] = Field(description="회원 목록")
    count: int = Field(description="회원 수")
