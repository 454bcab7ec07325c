# fornecedor_api/domains/usr/routers.py

"""
'usr' 도메인 (사용자 등록 및 로그인)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.core import dependencies as deps

from . import crud as usr_crud
from . import schemas as usr_schemas

USER_NOT_INFORMED = "Usuário não informado"
USER_LOCKED_OUT = "Usuário bloqueado"
INVALID_CREDENTIALS = "Usuário ou senha inválidos"

router = APIRouter(
    tags=["Usuario"],  # Swagger UI에 표시될 태그
)


@router.post(
    "/registro",
    response_model=usr_schemas.Token,
    summary="사용자 등록 후 토큰 발급",
    name="RegistroUsuario",
    responses={400: {"description": "Bad Request"}},
)
async def register_user(
    register_in: Optional[usr_schemas.RegisterUser] = Body(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 사용자를 등록하고 바로 Access Token을 발급합니다.
    - **email**: 사용자 이메일 (필수, 로그인 ID)
    - **password**: 비밀번호 (필수, 정책: 6자 이상, 숫자/소문자/대문자/특수문자 포함)
    """
    if register_in is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USER_NOT_INFORMED)

    db_user, errors = await usr_crud.user.register(db, obj_in=register_in)
    if db_user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[e.model_dump() for e in errors],
        )

    claims = await usr_crud.user_claim.get_by_user(db, user_id=db_user.id)
    return deps.issue_user_token(db_user, claims)


@router.post(
    "/login",
    response_model=usr_schemas.Token,
    summary="Access Token 획득",
    name="LoginUsuario",
    responses={400: {"description": "Bad Request"}},
)
async def login_user(
    login_in: Optional[usr_schemas.LoginUser] = Body(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    이메일과 비밀번호로 로그인하여 Access Token을 발급받습니다.
    잠긴 계정과 잘못된 자격 증명은 서로 다른 메시지로 구분됩니다.
    """
    if login_in is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USER_NOT_INFORMED)

    result, db_user = await usr_crud.user.password_sign_in(
        db, email=str(login_in.email), password=login_in.password
    )
    if result is usr_crud.SignInResult.LOCKED_OUT:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USER_LOCKED_OUT)
    if result is not usr_crud.SignInResult.SUCCEEDED:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)

    claims = await usr_crud.user_claim.get_by_user(db, user_id=db_user.id)
    return deps.issue_user_token(db_user, claims)
