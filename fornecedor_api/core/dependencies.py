# fornecedor_api/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 공급업체 저장소(persistence gateway) 획득 (get_supplier_repository).
- 현재 인증된 사용자 정보 획득 및 클레임 기반 권한 부여.
"""

from typing import AsyncGenerator
from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.core.database import get_session as get_main_app_session

# 보안 관련 유틸리티 함수 재노출
# flake8: noqa
from fornecedor_api.core.security import (
    create_access_token,
    issue_user_token,
    get_password_hash,
    verify_password,
    get_token_claims,
    get_current_user_from_token,
    get_current_active_user,
    require_claim,
)
from fornecedor_api.domains.sup.repository import SupplierRepository, SqlSupplierRepository

# 공급업체 삭제 권한을 나타내는 클레임 타입
DELETE_SUPPLIER_CLAIM = "ExcluirFornecedor"


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    fornecedor_api.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_supplier_repository(
    db: AsyncSession = Depends(get_db_session),
) -> SupplierRepository:
    """
    요청 단위의 공급업체 저장소를 반환합니다.
    테스트에서는 dependency_overrides로 메모리 구현을 주입할 수 있습니다.
    """
    return SqlSupplierRepository(db)


require_delete_supplier_claim = require_claim(DELETE_SUPPLIER_CLAIM)
