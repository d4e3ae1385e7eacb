import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from catalog import API_PREFIX
from catalog.core.config import settings
from catalog.core.database import engine, get_session, create_db_and_tables
from catalog.core.validation import request_validation_exception_handler

from catalog.domains.products.routers import router as products_router
from catalog.domains.usr.routers import router as users_router, auth_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 시작/종료 시점의 데이터베이스 작업을 처리합니다.
    """
    logger.info("%s %s starting (env=%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()

    yield  # 애플리케이션 실행

    logger.info("%s shutting down", settings.APP_NAME)
    await engine.dispose()


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# 요청 본문/쿼리 검증 실패는 422 대신 위반 목록 형태의 400으로 응답합니다.
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# -- CORS 미들웨어 설정 --
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 개발용: 모든 출처 허용. 프로덕션에서는 실제 프론트엔드 도메인으로 제한
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(products_router, prefix=f"{API_PREFIX}/products")
app.include_router(users_router, prefix=f"{API_PREFIX}/users")
app.include_router(auth_router, prefix=f"{API_PREFIX}/auth")


@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 루트 엔드포인트입니다. 문서 링크를 안내합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(text("SELECT 1"))
        if result.scalar_one() == 1:
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )
