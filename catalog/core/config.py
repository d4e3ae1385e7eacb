# catalog/core/config.py

from typing import Any
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Catalog API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Product catalog and client-scoped user management API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and SQL echo")
    LOG_LEVEL: str = Field("INFO", description="Root logging level (DEBUG_MODE forces DEBUG)")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="PostgreSQL database connection URL (postgresql+asyncpg://...)")
    CREATE_TABLES_ON_STARTUP: bool = Field(False, description="Create missing tables when the application starts (development only)")

    # --- JWT (JSON Web Token) 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT token signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30, description="Access token expiration time in minutes")

    # --- 페이징 설정 ---
    PAGE_SIZE: int = Field(10, ge=1, description="Number of items returned per page by list endpoints")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 디버그 모드에서는 로그 레벨을 항상 DEBUG로 맞춥니다.
        if self.DEBUG_MODE:
            self.LOG_LEVEL = "DEBUG"


settings = Settings()
