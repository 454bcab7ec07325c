# fornecedor_api/core/config.py

from typing import List
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
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Fornecedor API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Supplier (fornecedor) CRUD API with JWT based registration and login."
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and SQL echo")
    LOG_LEVEL: str = Field("INFO", description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL (postgresql+asyncpg or sqlite+aiosqlite)")
    DB_CREATE_TABLES: bool = Field(True, description="Create missing tables on application startup")
    DB_POOL_SIZE: int = Field(10, ge=0, description="Connection pool size (ignored for SQLite)")
    DB_MAX_OVERFLOW: int = Field(20, ge=0, description="Connections allowed beyond the pool size (ignored for SQLite)")
    DB_POOL_RECYCLE: int = Field(3600, ge=0, description="Seconds after which a pooled connection is recycled")

    # --- JWT (JSON Web Token) 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for JWT token signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing (e.g., HS256)")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(120, gt=0, description="Access token expiration time in minutes")
    JWT_ISSUER: str = Field("MinimalAPI", description="Value of the 'iss' claim")
    JWT_AUDIENCE: str = Field("https://localhost", description="Value of the 'aud' claim")

    # --- 계정 잠금(lockout) 설정 ---
    LOCKOUT_MAX_FAILED_ATTEMPTS: int = Field(5, gt=0, description="Failed logins before the account is locked out")
    LOCKOUT_MINUTES: int = Field(5, gt=0, description="Lockout duration in minutes")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.get_secret_value().startswith("sqlite")


settings = Settings()
