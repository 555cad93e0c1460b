# flake8: noqa
# scripts/create_admin.py

import asyncio
import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import AsyncSessionLocal, engine
from pmms.core.exceptions import ValidationError
from pmms.domains.usr import crud as usr_crud
from pmms.domains.usr import schemas as usr_schemas
from pmms.domains.usr.models import UserRole

cli = typer.Typer()


async def create_admin_user(
    db: AsyncSession,
    user_in: usr_schemas.UserCreate
) -> bool:
    """
    데이터베이스에 관리자 사용자를 생성하는 비동기 함수.
    이메일/사용자명 중복 검사는 CRUD 계층이 수행합니다.
    """
    try:
        await usr_crud.user.create(db, obj_in=user_in)
    except ValidationError as e:
        print(f"오류: {e.detail}")
        return False
    print(f"관리자 계정이 성공적으로 생성되었습니다: {user_in.email} ({user_in.username})")
    return True


@cli.command()
def main(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="관리자 이메일을 입력하세요",
        help="생성할 관리자 계정의 이메일 주소입니다."
    ),
    username: str = typer.Option(
        ..., '--username', '-u',
        prompt="관리자 사용자명(ID)을 입력하세요",
        help="로그인 시 사용할 사용자명(ID)입니다. (3~50자)"
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="관리자 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="생성할 관리자 계정의 비밀번호입니다. (최소 6자 이상)"
    ),
):
    """
    PMMS 애플리케이션을 위한 새로운 관리자(admin) 계정을 생성합니다.
    """
    if len(password) < 6:
        print("오류: 비밀번호는 최소 6자 이상이어야 합니다.")
        raise typer.Abort()

    print("관리자 계정 생성을 시작합니다...")

    user_data = usr_schemas.UserCreate(
        email=email,
        username=username,
        password=password,
        role=UserRole.ADMIN,
    )

    async def run_creation() -> bool:
        try:
            async with AsyncSessionLocal() as db:
                return await create_admin_user(db=db, user_in=user_data)
        finally:
            await engine.dispose()

    if not asyncio.run(run_creation()):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
