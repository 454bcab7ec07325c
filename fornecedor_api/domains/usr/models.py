# fornecedor_api/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 사용자 계정(usuarios)과 사용자에게 부여된 클레임(usuario_claims) 테이블에 대한
SQLModel 클래스를 포함합니다. 클레임은 토큰 발급 시 JWT에 그대로 복사되어
세분화된 권한 부여(예: 'ExcluirFornecedor')에 사용됩니다.
"""

import uuid
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. usuarios 테이블 모델
# =============================================================================
class UserBase(SQLModel):
    """
    usuarios 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="사용자 고유 ID")
    email: str = Field(max_length=256, sa_column_kwargs={"unique": True}, description="사용자 이메일 (로그인 ID)")
    user_name: str = Field(max_length=256, description="사용자명 (이메일과 동일)")
    password_hash: str = Field(max_length=255, description="해싱된 비밀번호")
    email_confirmed: bool = Field(default=False, description="이메일 확인 여부")
    is_active: bool = Field(default=True, description="계정 활성 여부")

    # --- 계정 잠금(lockout) 상태 ---
    access_failed_count: int = Field(default=0, description="연속 로그인 실패 횟수")
    lockout_end: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True), nullable=True),
        description="잠금 해제 일시 (NULL이면 잠금 없음)"
    )

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class User(UserBase, table=True):
    """
    usuarios 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "usuarios"


# =============================================================================
# 2. usuario_claims 테이블 모델
# =============================================================================
class UserClaimBase(SQLModel):
    """
    usuario_claims 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: uuid.UUID = Field(
        sa_column=Column(Uuid, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True),
        description="클레임 소유 사용자 ID (FK)"
    )
    claim_type: str = Field(max_length=256, description="클레임 타입 (예: ExcluirFornecedor)")
    claim_value: str = Field(max_length=256, description="클레임 값")


class UserClaim(UserClaimBase, table=True):
    """
    usuario_claims 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "usuario_claims"
