# -*- coding: utf-8 -*-
"""
Member Router - 회원 API 엔드포인트

    v1  엔티티 형태 요청 / 응답, 응답 래퍼 없음 (목록은 배열 그대로)
    v2  전용 요청 / 응답 DTO, ResponseDTO 래퍼
"""

from fastapi import APIRouter, status

from src.application.common.dependencies import MemberServiceDep
from src.application.common.dto import IdResponseDTO, ResponseDTO
from src.application.domain.member.dto import (
    MemberCreateRequestDTO,
    MemberDTO,
    MemberListResponseDTO,
    MemberResponseDTO,
    MemberSummaryDTO,
    MemberUpdateRequestDTO,
    MemberUpdateResponseDTO,
)

router = APIRouter()


# ==================== v1 (엔티티 형태) ====================


@router.post(
    "/api/v1/members",
    response_model=IdResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="회원 가입 v1 (엔티티 형태 요청)",
    description="요청 본문이 회원 엔티티 필드(id, name, address)와 같다. id는 무시",
)
async def save_member_v1(request: MemberDTO, service: MemberServiceDep) -> IdResponseDTO:
    """회원 가입 v1"""
    address = request.address.to_address() if request.address else None
    member_id = await service.join(request.name, address)
    return IdResponseDTO(id=member_id)


@router.get(
    "/api/v1/members",
    response_model=list[MemberDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 목록 조회 v1 (엔티티 형태, 래퍼 없음)",
)
async def get_members_v1(service: MemberServiceDep) -> list[MemberDTO]:
    """회원 목록 조회 v1"""
    members = await service.find_members()
    return [MemberDTO.from_model(member) for member in members]


# ==================== v2 (전용 DTO) ====================


@router.post(
    "/api/v2/members",
    response_model=ResponseDTO[IdResponseDTO],
    status_code=status.HTTP_201_CREATED,
    summary="회원 가입",
    description="회원명 중복 시 409",
)
async def save_member(
    request: MemberCreateRequestDTO,
    service: MemberServiceDep,
) -> ResponseDTO[IdResponseDTO]:
    """회원 가입"""
    address = request.address.to_address() if request.address else None
    member_id = await service.join(request.name, address)
    return ResponseDTO.success_response(IdResponseDTO(id=member_id), "Member created successfully")


@router.put(
    "/api/v2/members/{member_id}",
    response_model=ResponseDTO[MemberUpdateResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 수정",
    description="회원명 변경",
)
async def update_member(
    member_id: int,
    request: MemberUpdateRequestDTO,
    service: MemberServiceDep,
) -> ResponseDTO[MemberUpdateResponseDTO]:
    """회원 수정"""
    await service.update(member_id, request.name)
    member = await service.find_one(member_id)
    return ResponseDTO.success_response(
        MemberUpdateResponseDTO(id=member.id, name=member.name), "Member updated successfully"
    )


@router.get(
    "/api/v2/members",
    response_model=ResponseDTO[MemberListResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 목록 조회",
)
async def get_members(service: MemberServiceDep) -> ResponseDTO[MemberListResponseDTO]:
    """회원 목록 조회"""
    members = await service.find_members()
    member_list = MemberListResponseDTO(
        members=[MemberSummaryDTO(id=member.id, name=member.name) for member in members],
        count=len(members),
    )
    return ResponseDTO.success_response(member_list, "Member list retrieved successfully")


@router.get(
    "/api/v2/members/{member_id}",
    response_model=ResponseDTO[MemberResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 조회",
)
async def get_member(member_id: int, service: MemberServiceDep) -> ResponseDTO[MemberResponseDTO]:
    """회원 조회"""
    member = await service.find_one(member_id)
    return ResponseDTO.success_response(
        MemberResponseDTO.from_model(member), "Member retrieved successfully"
    )
