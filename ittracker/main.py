"""
IT 개발 요청 트래커의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ittracker.config import get_settings
from ittracker.api.router import api_router
from ittracker.exceptions import (
    TrackerError,
    ValidationError,
    InputValidationError,
    NotFoundError,
)
from ittracker.models import ErrorResponse
from ittracker.services import get_request_store, sample_requests

logger = logging.getLogger(__name__)


def error_status_code(exc: TrackerError) -> int:
    """트래커 예외를 HTTP 상태 코드로 변환합니다."""
    if isinstance(exc, (ValidationError, InputValidationError)):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.

    서버가 시작될 때:
    1. 필요한 설정들을 불러옵니다.
    2. 설정에 따라 샘플 요청을 저장소에 적재합니다.

    서버가 종료될 때:
    1. 종료 로그를 출력합니다. (데이터는 메모리에만 있으므로 함께 사라집니다)
    """
    settings = get_settings()
    logger.info(f"{settings.app_name}가 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")

    store = get_request_store()
    if settings.load_sample_data and len(store) == 0:
        store.load(sample_requests())

    yield

    logger.info(f"{settings.app_name}가 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 설정 (프론트엔드와의 통신 허용 설정)
    3. 예외 핸들러 등록 (트래커 예외 → 구조화된 JSON 응답)
    4. API 라우터 연결 (기능별 주소 연결)
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="IT 개발 요청의 8단계 생애주기 추적, 버그/작업 관리, 월간 MIS 보고서",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",  # 개발자용 문서 주소
        redoc_url="/redoc",
    )

    # CORS 미들웨어 설정: 프론트엔드 웹페이지가 이 서버에 접속할 수 있도록 허용하는 설정입니다.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],  # 모든 통신 방식 허용 (GET, POST 등)
        allow_headers=["*"],  # 모든 헤더 정보 허용
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError):
        status_code = error_status_code(exc)
        if status_code >= 500:
            logger.error(f"트래커 오류: {exc.message}", exc_info=True)
        body = ErrorResponse(
            error_code=exc.error_code,
            message=exc.message,
            details=jsonable_encoder(exc.details),
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        body = ErrorResponse(error_code="ERR_INTERNAL", message="내부 서버 오류가 발생했습니다")
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))

    # API 라우터 포함: /api/v1 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """
        루트 엔드포인트: 서버가 정상적으로 동작하는지 확인하는 기본 주소입니다.
        접속 시 서버의 기본 정보를 반환합니다.
        """
        return {
            "name": settings.app_name,
            "version": "1.0.0",
            "description": "IT 개발 요청 생애주기 추적 및 월간 MIS 보고",
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    # uvicorn 웹 서버를 실행합니다.
    uvicorn.run(
        "ittracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # 코드가 변경되면 자동으로 재시작 (개발 모드)
    )
