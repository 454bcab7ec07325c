# fornecedor_api/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증 (passlib/bcrypt).
- JWT(JSON Web Token) 생성 및 검증 (python-jose).
- Bearer 스키마를 사용하여 현재 사용자 획득.
- 클레임(claim) 기반 권한 부여(Authorization) 검사.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.core.config import settings
from fornecedor_api.core.database import get_session
from fornecedor_api.domains.usr import models as usr_models
from fornecedor_api.domains.usr import schemas as usr_schemas

logger = logging.getLogger(__name__)

# 토큰 생성 시 사용자 클레임으로 덮어쓸 수 없는 표준 클레임 이름
RESERVED_CLAIMS = frozenset({"sub", "email", "jti", "nbf", "iat", "exp", "iss", "aud"})


# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    주어진 비밀번호를 해싱합니다.
    """
    return pwd_context.hash(password)


# --- Bearer 스키마 설정 ---
# 토큰이 없을 때의 응답(401)을 직접 제어하기 위해 auto_error를 끕니다.
bearer_scheme = HTTPBearer(auto_error=False, description="JWT: Authorization: Bearer {token}")


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Access Token을 생성합니다.
    표준 클레임(jti, iat, nbf, exp, iss, aud)은 여기서 채워집니다.
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({
        "jti": str(uuid.uuid4()),
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    })
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)
    logger.debug("Access token created for sub=%s, expires at %s", data.get("sub"), expire)
    return encoded_jwt


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    토큰 서명, 만료, 발급자(iss), 대상(aud)을 검증하고 페이로드를 반환합니다.
    검증에 실패하면 JWTError를 그대로 전파합니다.
    """
    return jwt.decode(
        token,
        settings.SECRET_KEY.get_secret_value(),
        algorithms=[settings.ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )


def issue_user_token(user: usr_models.User, claims: List[usr_models.UserClaim]) -> usr_schemas.Token:
    """
    인증된 사용자에 대해 표준 클레임과 사용자 클레임을 담은 토큰 응답을 구성합니다.
    같은 타입의 클레임이 여러 개면 JWT에는 목록으로 기록됩니다.
    """
    data: Dict[str, Any] = {"sub": str(user.id), "email": user.email}
    for claim in claims:
        if claim.claim_type in RESERVED_CLAIMS:
            logger.warning("Skipping reserved claim type %r for user %s", claim.claim_type, user.id)
            continue
        current = data.get(claim.claim_type)
        if current is None:
            data[claim.claim_type] = claim.claim_value
        elif isinstance(current, list):
            current.append(claim.claim_value)
        else:
            data[claim.claim_type] = [current, claim.claim_value]

    expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(data=data, expires_delta=expires_delta)
    return usr_schemas.Token(
        access_token=access_token,
        expires_in=int(expires_delta.total_seconds()),
        user_token=usr_schemas.UserToken(
            id=user.id,
            email=user.email,
            claims=[usr_schemas.ClaimRead(type=c.claim_type, value=c.claim_value) for c in claims],
        ),
    )


# --- 현재 사용자 획득 의존성 ---
def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """
    Authorization 헤더의 Bearer 토큰을 검증하고 클레임 딕셔너리를 반환합니다.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _credentials_exception("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as e:
        logger.debug("JWT validation failed: %s", e)
        raise _credentials_exception()
    if payload.get("sub") is None:
        raise _credentials_exception()
    return payload


async def get_current_user_from_token(
    claims: Dict[str, Any] = Depends(get_token_claims),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    토큰의 'sub' 클레임으로 데이터베이스에서 현재 사용자를 가져옵니다.
    """
    try:
        user_id = uuid.UUID(str(claims["sub"]))
    except ValueError:
        raise _credentials_exception()

    user = await db.get(usr_models.User, user_id)
    if user is None:
        raise _credentials_exception()
    return user


def get_current_active_user(
    current_user: usr_models.User = Depends(get_current_user_from_token),
) -> usr_models.User:
    """
    현재 인증된 활성 사용자를 반환합니다.
    계정이 비활성화된 경우 400 Bad Request를 발생시킵니다.
    """
    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")
    return current_user


# --- 클레임 기반 권한 부여 의존성 ---
def has_claim(claims: Dict[str, Any], claim_type: str, claim_value: Optional[str] = None) -> bool:
    """
    토큰 클레임에 지정한 타입(및 값)이 있는지 확인합니다.
    claim_value가 None이면 타입의 존재만 확인합니다.
    """
    if claim_type not in claims:
        return False
    if claim_value is None:
        return True
    present = claims[claim_type]
    if isinstance(present, list):
        return claim_value in present
    return present == claim_value


def require_claim(claim_type: str, claim_value: Optional[str] = None) -> Callable[..., Any]:
    """
    지정한 클레임을 가진 활성 사용자만 통과시키는 의존성을 생성합니다.
    클레임이 없으면 403 Forbidden을 발생시킵니다.
    """
    async def _require_claim(
        claims: Dict[str, Any] = Depends(get_token_claims),
        current_user: usr_models.User = Depends(get_current_active_user),
    ) -> usr_models.User:
        if not has_claim(claims, claim_type, claim_value):
            logger.info("User %s denied: missing claim %r", current_user.id, claim_type)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not enough permissions. Claim '{claim_type}' required.",
            )
        return current_user

    return _require_claim
