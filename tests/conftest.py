# tests/conftest.py

import os
from typing import AsyncGenerator, Callable, Awaitable, List, Optional
from contextlib import asynccontextmanager

# 설정 객체는 임포트 시점에 생성되므로 애플리케이션 임포트 전에 환경 변수를 지정합니다.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-fornecedor-api-0123456789"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.main import app as main_app
from fornecedor_api.core import dependencies as deps
from fornecedor_api.core.database import get_session
from fornecedor_api.core.security import get_password_hash

from fornecedor_api.domains.usr import models as usr_models
from fornecedor_api.domains.usr import crud as usr_crud


# --- 테스트용 데이터베이스 설정 ---
# 운영 DB(PostgreSQL)와 분리된 메모리 SQLite를 테스트마다 새로 만듭니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "Teste@123"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """
    테스트 함수마다 모든 테이블이 생성된 빈 메모리 데이터베이스 엔진을 제공합니다.
    StaticPool로 하나의 연결을 공유해야 메모리 DB가 유지됩니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    각 테스트 함수에서 사용할 비동기 데이터베이스 세션을 제공합니다.
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


# --- 사용자 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[usr_models.User]]:
    """
    이메일, 비밀번호, 클레임을 지정하여 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    claims는 (타입, 값) 튜플 목록입니다.
    """
    async def _create_user(
        email: str,
        password: str = TEST_PASSWORD,
        is_active: bool = True,
        claims: Optional[List[tuple]] = None,
        **kwargs,
    ) -> usr_models.User:
        user = usr_models.User(
            email=email.lower(),
            user_name=email.lower(),
            password_hash=get_password_hash(password),
            email_confirmed=True,
            is_active=is_active,
            **kwargs,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        for claim_type, claim_value in claims or []:
            await usr_crud.user_claim.add_claim(
                db_session, user_id=user.id, claim_type=claim_type, claim_value=claim_value
            )
        return user
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_user(user_factory: Callable) -> usr_models.User:
    """클레임이 없는 일반 사용자를 생성합니다."""
    return await user_factory("usuario@teste.com")


@pytest_asyncio.fixture(scope="function")
async def test_deleter_user(user_factory: Callable) -> usr_models.User:
    """공급업체 삭제 클레임을 가진 사용자를 생성합니다."""
    return await user_factory("gerente@teste.com", claims=[(deps.DELETE_SUPPLIER_CLAIM, "true")])


# --- 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 사용자를 위한 AsyncClient 인스턴스를 생성하고,
    테스트용 비동기 DB 세션을 주입합니다.
    """
    def override_get_session_and_dependency():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        # get_session(보안 의존성, 헬스 체크)과 deps.get_db_session(라우터) 모두 오버라이드
        main_app.dependency_overrides[get_session] = override_get_session_and_dependency
        main_app.dependency_overrides[deps.get_db_session] = override_get_session_and_dependency

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(
    db_session: AsyncSession,
) -> Callable[[usr_models.User, str], AsyncGenerator[AsyncClient, None]]:
    """
    특정 사용자로 로그인된 AsyncClient를 생성하는 팩토리 함수를 반환합니다.
    현재 사용자 의존성은 오버라이드하지 않고, 실제 /login 으로 발급받은 토큰을 사용합니다.
    """
    @asynccontextmanager
    async def _create_client_context(user: usr_models.User, password: str = TEST_PASSWORD) -> AsyncGenerator[AsyncClient, None]:
        def override_get_session():
            yield db_session

        original_overrides = main_app.dependency_overrides.copy()
        try:
            main_app.dependency_overrides.update({
                get_session: override_get_session,
                deps.get_db_session: override_get_session,
            })

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                login_data = {"email": user.email, "password": password}
                res = await client.post("/login", json=login_data)

                if res.status_code != 200:
                    pytest.fail(f"Login failed for {user.email}: {res.text}")

                token = res.json()["access_token"]
                client.headers["Authorization"] = f"Bearer {token}"
                yield client
        finally:
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def user_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """클레임 없는 일반 사용자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_user) as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def deleter_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_deleter_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """'ExcluirFornecedor' 클레임을 가진 사용자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_deleter_user) as client:
        yield client
