# fornecedor_api/cli.py

"""
운영자용 명령줄 도구입니다. (console script: fornecedor-admin)

예:
    fornecedor-admin add-claim --email teste@gmail.com --type ExcluirFornecedor --value true
"""

import asyncio
from typing import Optional

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.core.database import AsyncSessionLocal, create_db_and_tables
from fornecedor_api.core.dependencies import DELETE_SUPPLIER_CLAIM
from fornecedor_api.domains.usr import crud as usr_crud
from fornecedor_api.domains.usr import models as usr_models

cli = typer.Typer(help="Fornecedor API administration commands.")


@cli.callback()
def main():
    """
    Fornecedor API 운영 명령 모음입니다.
    """


async def grant_claim(
    db: AsyncSession, *, email: str, claim_type: str, claim_value: str
) -> Optional[usr_models.UserClaim]:
    """
    이메일로 사용자를 찾아 클레임을 부여합니다. 사용자가 없으면 None을 반환합니다.
    """
    db_user = await usr_crud.user.get_by_email(db, email=email)
    if db_user is None:
        return None
    return await usr_crud.user_claim.add_claim(
        db, user_id=db_user.id, claim_type=claim_type, claim_value=claim_value
    )


@cli.command("add-claim")
def add_claim(
    email: str = typer.Option(..., '--email', '-e', prompt="사용자 이메일을 입력하세요", help="클레임을 부여할 사용자의 이메일입니다."),
    claim_type: str = typer.Option(DELETE_SUPPLIER_CLAIM, '--type', '-t', help="클레임 타입입니다."),
    claim_value: str = typer.Option("true", '--value', '-v', help="클레임 값입니다."),
):
    """
    사용자에게 클레임을 부여합니다. (기본값: 공급업체 삭제 권한)
    """
    async def run_grant():
        await create_db_and_tables()
        async with AsyncSessionLocal() as db:
            return await grant_claim(db, email=email, claim_type=claim_type, claim_value=claim_value)

    claim = asyncio.run(run_grant())
    if claim is None:
        typer.echo(f"오류: 존재하지 않는 사용자입니다: {email}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"클레임이 부여되었습니다: {email} -> {claim.claim_type}={claim.claim_value}")


if __name__ == "__main__":
    cli()
