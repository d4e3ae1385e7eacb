# catalog/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 요청마다 새로운 비동기 세션을 제공하는 의존성 함수를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발용).
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core.config import settings

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 모델을 임포트합니다.
from catalog.domains import models  # noqa: F401

logger = logging.getLogger(__name__)


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    echo=settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
    future=True,
    pool_recycle=3600,
    pool_size=10,
    max_overflow=20
)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def create_db_and_tables() -> None:
    """
    등록된 모든 테이블을 생성합니다.
    개발 환경에서만 사용해야 하며, 기존 테이블을 삭제하지는 않습니다.
    """
    logger.info("Creating database tables (if missing)...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ready.")


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session
