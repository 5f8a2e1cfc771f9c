# -*- coding: utf-8 -*-
"""
Common Exceptions - 공통 예외 클래스

애플리케이션 전역에서 사용하는 커스텀 예외 정의
"""

from typing import Any


# ==================== Base Exception ====================


class ApplicationError(Exception):
    """
    애플리케이션 기본 예외

    모든 커스텀 예외의 베이스 클래스
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        return {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


# ==================== Validation Exceptions ====================


class ValidationError(ApplicationError):
    """검증 실패 예외"""

    def __init__(self, message: str = "Validation failed", details: dict[str, Any] | None = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)


class InvalidInputError(ValidationError):
    """잘못된 입력 예외"""

    def __init__(self, field: str, message: str = "Invalid input"):
        super().__init__(
            message=f"Invalid input for field: {field}",
            details={"field": field, "error": message},
        )


class PaginationNotSupportedError(ValidationError):
    """
    페이징 불가 조회 예외

    컬렉션 fetch join은 행이 주문상품 수만큼 늘어나므로
    offset/limit을 DB에 적용할 수 없다 (메모리 페이징 금지).
    """

    def __init__(self, strategy: str):
        super().__init__(
            message=f"Pagination is not supported with fetch strategy: {strategy}",
            details={"strategy": strategy},
        )


# ==================== Resource Exceptions ====================


class ResourceNotFoundError(ApplicationError):
    """리소스를 찾을 수 없음 예외"""

    def __init__(self, resource: str, identifier: str | int):
        super().__init__(
            message=f"{resource} not found: {identifier}",
            code="RESOURCE_NOT_FOUND",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)},
        )


class ResourceAlreadyExistsError(ApplicationError):
    """리소스가 이미 존재함 예외"""

    def __init__(self, resource: str, identifier: str | int):
        super().__init__(
            message=f"{resource} already exists: {identifier}",
            code="RESOURCE_ALREADY_EXISTS",
            status_code=409,
            details={"resource": resource, "identifier": str(identifier)},
        )


class MemberNotFoundError(ResourceNotFoundError):
    """회원을 찾을 수 없음 예외"""

    def __init__(self, member_id: int):
        super().__init__(resource="Member", identifier=member_id)


class DuplicateMemberError(ResourceAlreadyExistsError):
    """이미 존재하는 회원 예외 (회원명 중복)"""

    def __init__(self, name: str):
        super().__init__(resource="Member", identifier=name)


# ==================== External Service Exceptions ====================


class ExternalServiceError(ApplicationError):
    """외부 서비스 오류 예외"""

    def __init__(
        self, service: str, message: str, details: dict[str, Any] | None = None
    ):
        super().__init__(
            message=f"{service} error: {message}",
            code="EXTERNAL_SERVICE_ERROR",
            status_code=502,
            details=details,
        )


class DatabaseError(ExternalServiceError):
    """데이터베이스 오류 예외"""

    def __init__(self, message: str):
        super().__init__(service="Database", message=message)
