# tests/core/test_security.py

"""
보안 유틸리티(비밀번호 해싱, JWT 생성/검증, 클레임 검사)와
비밀번호 정책 검사에 대한 단위 테스트 모듈입니다.
"""

import uuid
from datetime import timedelta

import pytest
from jose import JWTError, jwt

from fornecedor_api.core.config import settings
from fornecedor_api.core import security
from fornecedor_api.domains.usr import models as usr_models
from fornecedor_api.domains.usr.crud import check_password_policy


def _make_user() -> usr_models.User:
    return usr_models.User(
        id=uuid.uuid4(),
        email="token@teste.com",
        user_name="token@teste.com",
        password_hash="x",
    )


def _make_claim(user: usr_models.User, claim_type: str, claim_value: str) -> usr_models.UserClaim:
    return usr_models.UserClaim(user_id=user.id, claim_type=claim_type, claim_value=claim_value)


# --- 비밀번호 해싱 ---

def test_password_hash_roundtrip():
    hashed = security.get_password_hash("Teste@123")

    assert hashed != "Teste@123"
    assert security.verify_password("Teste@123", hashed)
    assert not security.verify_password("Teste@124", hashed)


# --- JWT 생성 및 검증 ---

def test_access_token_standard_claims():
    """
    생성된 토큰에 표준 클레임(jti, iat, nbf, exp, iss, aud)이 채워지는지 테스트합니다.
    """
    token = security.create_access_token({"sub": "abc"})
    payload = security.decode_access_token(token)

    assert payload["sub"] == "abc"
    assert payload["iss"] == settings.JWT_ISSUER
    assert payload["aud"] == settings.JWT_AUDIENCE
    for claim in ("jti", "iat", "nbf", "exp"):
        assert claim in payload
    assert payload["exp"] > payload["iat"]


def test_access_tokens_have_unique_jti():
    first = security.decode_access_token(security.create_access_token({"sub": "abc"}))
    second = security.decode_access_token(security.create_access_token({"sub": "abc"}))

    assert first["jti"] != second["jti"]


def test_expired_token_rejected():
    token = security.create_access_token({"sub": "abc"}, expires_delta=timedelta(minutes=-1))

    with pytest.raises(JWTError):
        security.decode_access_token(token)


def test_token_with_wrong_audience_rejected():
    token = jwt.encode(
        {"sub": "abc", "iss": settings.JWT_ISSUER, "aud": "https://outro"},
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )

    with pytest.raises(JWTError):
        security.decode_access_token(token)


def test_token_with_wrong_signature_rejected():
    token = jwt.encode(
        {"sub": "abc", "iss": settings.JWT_ISSUER, "aud": settings.JWT_AUDIENCE},
        "outra-chave",
        algorithm=settings.ALGORITHM,
    )

    with pytest.raises(JWTError):
        security.decode_access_token(token)


def test_issue_user_token_copies_claims():
    """
    사용자 클레임이 토큰에 복사되고, 같은 타입의 클레임은 목록으로 합쳐지는지 테스트합니다.
    """
    user = _make_user()
    claims = [
        _make_claim(user, "ExcluirFornecedor", "true"),
        _make_claim(user, "Perfil", "compras"),
        _make_claim(user, "Perfil", "financeiro"),
    ]

    token = security.issue_user_token(user, claims)
    payload = security.decode_access_token(token.access_token)

    assert token.token_type == "bearer"
    assert token.expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    assert token.user_token.id == user.id
    assert [c.type for c in token.user_token.claims] == ["ExcluirFornecedor", "Perfil", "Perfil"]
    assert payload["sub"] == str(user.id)
    assert payload["email"] == user.email
    assert payload["ExcluirFornecedor"] == "true"
    assert payload["Perfil"] == ["compras", "financeiro"]


def test_issue_user_token_skips_reserved_claims():
    user = _make_user()

    token = security.issue_user_token(user, [_make_claim(user, "sub", "intruso")])
    payload = security.decode_access_token(token.access_token)

    assert payload["sub"] == str(user.id)


# --- 클레임 검사 ---

@pytest.mark.parametrize("claims, claim_type, claim_value, expected", [
    ({"ExcluirFornecedor": "true"}, "ExcluirFornecedor", None, True),
    ({"ExcluirFornecedor": "true"}, "ExcluirFornecedor", "true", True),
    ({"ExcluirFornecedor": "true"}, "ExcluirFornecedor", "false", False),
    ({"Perfil": ["compras", "financeiro"]}, "Perfil", "financeiro", True),
    ({"Perfil": ["compras"]}, "Perfil", "financeiro", False),
    ({}, "ExcluirFornecedor", None, False),
])
def test_has_claim(claims, claim_type, claim_value, expected):
    assert security.has_claim(claims, claim_type, claim_value) is expected


# --- 비밀번호 정책 ---

def test_password_policy_accepts_strong_password():
    assert check_password_policy("Teste@123") == []


def test_password_policy_reports_every_violation():
    codes = [error.code for error in check_password_policy("abc")]

    assert codes == [
        "PasswordTooShort",
        "PasswordRequiresDigit",
        "PasswordRequiresUpper",
        "PasswordRequiresNonAlphanumeric",
    ]
