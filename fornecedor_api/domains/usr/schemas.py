# fornecedor_api/domains/usr/schemas.py

"""
'usr' 도메인 (사용자 등록 및 인증)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

import uuid
from typing import List
from sqlmodel import SQLModel, Field
from pydantic import BaseModel, EmailStr


# =============================================================================
# 1. 등록 / 로그인 요청 스키마
# =============================================================================
class RegisterUser(SQLModel):
    """사용자 등록 요청 스키마"""
    email: EmailStr = Field(..., description="사용자 이메일 (로그인 ID)")
    password: str = Field(..., min_length=6, max_length=100, description="비밀번호 (6~100자)")


class LoginUser(SQLModel):
    """로그인 요청 스키마"""
    email: EmailStr = Field(..., description="사용자 이메일")
    password: str = Field(..., min_length=6, max_length=100, description="비밀번호")


# =============================================================================
# 2. 클레임 스키마
# =============================================================================
class UserClaimCreate(SQLModel):
    user_id: uuid.UUID
    claim_type: str = Field(..., min_length=1, max_length=256)
    claim_value: str = Field(..., max_length=256)


class ClaimRead(BaseModel):
    """토큰 응답에 포함되는 클레임 정보"""
    type: str
    value: str


# =============================================================================
# 3. 인증 토큰 (Token) 스키마
# =============================================================================
class UserToken(BaseModel):
    """토큰과 함께 반환되는 사용자 요약 정보"""
    id: uuid.UUID
    email: str
    claims: List[ClaimRead] = []


class Token(BaseModel):
    """등록/로그인 성공 시 반환되는 응답 스키마"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="토큰 만료까지 남은 시간(초)")
    user_token: UserToken


# =============================================================================
# 4. 등록 실패 사유 스키마
# =============================================================================
class IdentityError(BaseModel):
    """등록 거부 사유 (비밀번호 정책 위반, 이메일 중복 등)"""
    code: str
    description: str
