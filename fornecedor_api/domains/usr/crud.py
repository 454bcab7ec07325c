# fornecedor_api/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.

- 비밀번호 정책 검사 및 사용자 등록.
- 자격 증명 검증과 계정 잠금(lockout) 카운터 관리.
- 사용자 클레임 조회/부여.
"""

import logging
import enum
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.core.config import settings
from fornecedor_api.core.crud_base import CRUDBase
from fornecedor_api.core.security import get_password_hash, verify_password
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6


def check_password_policy(password: str) -> List[usr_schemas.IdentityError]:
    """
    비밀번호 정책을 검사하고 위반 사항 목록을 반환합니다. (빈 목록이면 통과)
    최소 길이, 숫자, 소문자, 대문자, 특수문자를 각각 요구합니다.
    """
    errors: List[usr_schemas.IdentityError] = []
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(usr_schemas.IdentityError(
            code="PasswordTooShort",
            description=f"Passwords must be at least {PASSWORD_MIN_LENGTH} characters."))
    if not any(c.isdigit() for c in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresDigit",
            description="Passwords must have at least one digit ('0'-'9')."))
    if not any(c.islower() for c in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresLower",
            description="Passwords must have at least one lowercase ('a'-'z')."))
    if not any(c.isupper() for c in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresUpper",
            description="Passwords must have at least one uppercase ('A'-'Z')."))
    if all(c.isalnum() for c in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresNonAlphanumeric",
            description="Passwords must have at least one non alphanumeric character."))
    return errors


class SignInResult(enum.Enum):
    """로그인 시도 결과"""
    SUCCEEDED = "succeeded"
    LOCKED_OUT = "locked_out"
    FAILED = "failed"


def _duplicate_email_error(email: str) -> usr_schemas.IdentityError:
    return usr_schemas.IdentityError(code="DuplicateEmail", description=f"Email '{email}' is already taken.")


def _as_utc(value: datetime) -> datetime:
    # SQLite는 tzinfo 없이 값을 돌려주므로 UTC로 간주합니다.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# 1. usuarios 테이블 CRUD
# =============================================================================
class CRUDUser(CRUDBase[usr_models.User, usr_schemas.RegisterUser]):
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        """이메일로 사용자를 조회합니다. (대소문자 무시)"""
        return await self.get_one_by(db, email=email.lower())

    async def register(
        self, db: AsyncSession, *, obj_in: usr_schemas.RegisterUser
    ) -> Tuple[Optional[usr_models.User], List[usr_schemas.IdentityError]]:
        """
        새로운 사용자를 이메일 확인 완료 상태로 생성합니다.
        비밀번호 정책 위반 또는 이메일 중복 시 사용자 없이 오류 목록을 반환합니다.
        """
        email = str(obj_in.email).lower()
        errors = check_password_policy(obj_in.password)
        if await self.get_by_email(db, email=email):
            errors.append(_duplicate_email_error(email))
        if errors:
            logger.info("Registration rejected for %s: %s", email, [e.code for e in errors])
            return None, errors

        db_user = usr_models.User(
            email=email,
            user_name=email,
            password_hash=get_password_hash(obj_in.password),
            email_confirmed=True,
        )
        try:
            db.add(db_user)
            await db.commit()
        except IntegrityError as e:
            # 동시에 같은 이메일로 등록된 경우 unique 제약에서 걸립니다.
            await db.rollback()
            logger.info("Registration rejected for %s: %s", email, e)
            return None, [_duplicate_email_error(email)]
        await db.refresh(db_user)
        logger.info("User registered: %s (%s)", db_user.email, db_user.id)
        return db_user, []

    def is_locked_out(self, user: usr_models.User, now: Optional[datetime] = None) -> bool:
        if user.lockout_end is None:
            return False
        now = now or datetime.now(timezone.utc)
        return _as_utc(user.lockout_end) > now

    async def password_sign_in(
        self, db: AsyncSession, *, email: str, password: str
    ) -> Tuple[SignInResult, Optional[usr_models.User]]:
        """
        이메일과 비밀번호로 로그인을 시도합니다.
        실패할 때마다 실패 횟수를 늘리고, 임계치에 도달하면 계정을 일정 시간 잠급니다.
        """
        user = await self.get_by_email(db, email=email)
        if user is None or not user.is_active:
            return SignInResult.FAILED, None

        now = datetime.now(timezone.utc)
        if self.is_locked_out(user, now):
            logger.info("Login attempt for locked out user %s", user.email)
            return SignInResult.LOCKED_OUT, user

        if verify_password(password, user.password_hash):
            if user.access_failed_count or user.lockout_end is not None:
                user.access_failed_count = 0
                user.lockout_end = None
                db.add(user)
                await db.commit()
                await db.refresh(user)
            return SignInResult.SUCCEEDED, user

        user.access_failed_count += 1
        result = SignInResult.FAILED
        if user.access_failed_count >= settings.LOCKOUT_MAX_FAILED_ATTEMPTS:
            user.lockout_end = now + timedelta(minutes=settings.LOCKOUT_MINUTES)
            user.access_failed_count = 0
            result = SignInResult.LOCKED_OUT
            logger.warning("User %s locked out until %s", user.email, user.lockout_end)
        else:
            logger.info("Invalid password for %s (%d failed attempts)", user.email, user.access_failed_count)
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return result, user


user = CRUDUser()


# =============================================================================
# 2. usuario_claims 테이블 CRUD
# =============================================================================
class CRUDUserClaim(CRUDBase[usr_models.UserClaim, usr_schemas.UserClaimCreate]):
    def __init__(self):
        super().__init__(model=usr_models.UserClaim)

    async def get_by_user(self, db: AsyncSession, *, user_id) -> List[usr_models.UserClaim]:
        """특정 사용자에게 부여된 모든 클레임을 조회합니다."""
        return await self.get_many_by(db, user_id=user_id)

    async def add_claim(
        self, db: AsyncSession, *, user_id, claim_type: str, claim_value: str
    ) -> usr_models.UserClaim:
        """
        사용자에게 클레임을 부여합니다. 동일한 (타입, 값) 클레임이 이미 있으면 그대로 반환합니다.
        """
        for existing in await self.get_by_user(db, user_id=user_id):
            if existing.claim_type == claim_type and existing.claim_value == claim_value:
                return existing
        claim = await self.create(db, obj_in=usr_schemas.UserClaimCreate(
            user_id=user_id, claim_type=claim_type, claim_value=claim_value))
        logger.info("Claim %s=%s granted to user %s", claim_type, claim_value, user_id)
        return claim


user_claim = CRUDUserClaim()
