"""
Member Domain - 회원 가입 및 관리
"""

from src.application.domain.member.dto import (
    MemberCreateRequestDTO,
    MemberDTO,
    MemberListResponseDTO,
    MemberResponseDTO,
    MemberSummaryDTO,
    MemberUpdateRequestDTO,
    MemberUpdateResponseDTO,
)
from src.application.domain.member.service import MemberService

__all__ = [
    "MemberService",
    "MemberCreateRequestDTO",
    "MemberDTO",
    "MemberUpdateRequestDTO",
    "MemberUpdateResponseDTO",
    "MemberSummaryDTO",
    "MemberResponseDTO",
    "MemberListResponseDTO",
]
