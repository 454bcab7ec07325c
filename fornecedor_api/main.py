# fornecedor_api/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from fornecedor_api.core.config import settings
from fornecedor_api.core.database import engine, get_session, create_db_and_tables
from fornecedor_api.core.errors import register_exception_handlers
from fornecedor_api.core.log_config import setup_logging

from fornecedor_api.domains.usr.routers import router as usr_router
from fornecedor_api.domains.sup.routers import router as sup_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 시작 시 로깅과 테이블을 준비하고, 종료 시 연결 풀을 정리합니다.
    """
    setup_logging()
    logger.info("Starting %s %s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    if settings.DB_CREATE_TABLES:
        await create_db_and_tables()

    yield  # 애플리케이션 실행

    logger.info("Shutting down %s", settings.APP_NAME)
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# -- 도메인 라우터 포함 --
# 경로(/registro, /login, /fornecedor)는 외부 계약이므로 접두사 없이 등록합니다.
app.include_router(usr_router)
app.include_router(sup_router)


@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query"
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Database health check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )


def run() -> None:
    """개발용 uvicorn 실행 진입점 (console script: fornecedor-api)."""
    import uvicorn
    uvicorn.run("fornecedor_api.main:app", host="0.0.0.0", port=8000, log_level=settings.LOG_LEVEL.lower())
