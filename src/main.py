# -*- coding: utf-8 -*-
"""
Order Query API - Main Application

FastAPI 애플리케이션 진입점
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.application.common.dependencies import DatabaseSession, SettingsDep
from src.application.common.dto import ResponseDTO, StatusDTO
from src.application.common.exceptions import ApplicationError
from src.settings.config import settings
from src.settings.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    애플리케이션 생명주기 관리

    시작 시: 로깅 설정, 데이터베이스 연결 확인
    종료 시: 커넥션 풀 정리
    """
    from src.adapters.database.connection import close_db, engine

    setup_logging(settings)

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.env}")
    logger.info(f"Database: {settings.database_url.split('@')[-1]}")  # Hide credentials
    logger.info(f"Batch fetch size: {settings.batch_fetch_size}")

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection established")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    try:
        await close_db()
        logger.info("Database connection closed")
    except Exception as e:
        logger.warning(f"Database close error: {e}")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="주문 조회 전략(지연 로딩, fetch join, 배치 조회, DTO 프로젝션) 비교 API",
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    openapi_url="/openapi.json" if not settings.is_production else None,
    lifespan=lifespan,
)

# CORS 미들웨어 추가
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


# ==================== Root Endpoint ====================


@app.get("/", tags=["Root"])
async def root(config: SettingsDep) -> dict[str, str]:
    """루트 엔드포인트"""
    return {
        "service": config.app_name,
        "version": config.app_version,
        "environment": config.env,
        "status": "running",
    }


@app.get("/health", tags=["Health"], response_model=StatusDTO)
async def health_check(session: DatabaseSession) -> StatusDTO:
    """헬스체크 엔드포인트 (DB 연결 확인)"""
    try:
        await session.execute(text("SELECT 1"))
        database = "connected"
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        database = "disconnected"

    return StatusDTO(
        status="healthy" if database == "connected" else "unhealthy",
        details={"database": database},
    )


# ==================== Error Handlers ====================


@app.exception_handler(ApplicationError)
async def application_exception_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """애플리케이션 예외 핸들러 (예외별 상태 코드)"""
    body = ResponseDTO.error_response(exc.message, error=exc.to_dict())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 핸들러"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


# ==================== Router 등록 ====================

from src.application.interface.api.member_router import router as member_router  # noqa: E402
from src.application.interface.api.order_router import router as order_router  # noqa: E402
from src.application.interface.api.simple_order_router import (  # noqa: E402
    router as simple_order_router,
)

app.include_router(member_router, tags=["Member"])
app.include_router(order_router, tags=["Order"])
app.include_router(simple_order_router, tags=["SimpleOrder"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.uvicorn_reload,
        workers=settings.uvicorn_workers,
        log_level=settings.log_level.lower(),
    )
