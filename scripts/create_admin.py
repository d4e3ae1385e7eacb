# scripts/create_admin.py

import asyncio
from typing import Optional

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core.database import AsyncSessionLocal, create_db_and_tables
from catalog.core.security import get_password_hash
from catalog.domains.usr import crud as usr_crud
from catalog.domains.usr import models as usr_models
from catalog.domains.usr import schemas as usr_schemas

cli = typer.Typer(help="Catalog API 관리용 명령어 모음")


async def create_client(db: AsyncSession, name: str) -> usr_models.Client:
    """
    고객사를 생성합니다. 같은 이름이 있으면 기존 고객사를 반환합니다.
    """
    existing = await usr_crud.client.get_by_name(db, name=name)
    if existing:
        typer.echo(f"이미 존재하는 고객사입니다: {name} (ID: {existing.id})")
        return existing
    client = await usr_crud.client.create(db, obj_in=usr_schemas.ClientCreate(name=name))
    typer.echo(f"고객사가 생성되었습니다: {client.name} (ID: {client.id})")
    return client


async def create_admin_user(
    db: AsyncSession,
    *,
    user_name: str,
    email: str,
    password: str,
    super_admin: bool,
    client_id: Optional[int],
) -> Optional[usr_models.User]:
    """
    관리자 또는 최고 관리자 계정을 생성하는 비동기 함수
    """
    if await usr_crud.user.get_by_user_name(db, user_name=user_name):
        typer.echo(f"오류: 이미 존재하는 사용자명입니다: {user_name}")
        return None
    if await usr_crud.user.get_by_email(db, email=email):
        typer.echo(f"오류: 이미 존재하는 이메일입니다: {email}")
        return None
    if client_id is not None and await usr_crud.client.get(db, client_id) is None:
        typer.echo(f"오류: 존재하지 않는 고객사 ID입니다: {client_id}")
        return None

    role = usr_models.UserRole.SUPER_ADMIN if super_admin else usr_models.UserRole.ADMIN
    user = usr_models.User(
        user_name=user_name,
        email=email,
        password_hash=get_password_hash(password),
        roles=[role.value],
        client_id=client_id,
    )
    user = await usr_crud.user.save(db, db_obj=user)
    typer.echo(f"{role.value} 계정이 생성되었습니다: {user.user_name} (ID: {user.id})")
    return user


async def change_password(db: AsyncSession, *, user_name: str, new_password: str) -> Optional[usr_models.User]:
    """
    기존 사용자의 비밀번호를 새로 해싱하여 저장합니다.
    """
    user = await usr_crud.user.get_by_user_name(db, user_name=user_name)
    if user is None:
        typer.echo(f"오류: 사용자 '{user_name}'을(를) 찾을 수 없습니다.")
        return None
    user.password_hash = get_password_hash(new_password)
    user = await usr_crud.user.save(db, db_obj=user)
    typer.echo(f"사용자 '{user.user_name}'의 비밀번호가 변경되었습니다.")
    return user


@cli.command("create-client")
def create_client_command(
    name: str = typer.Option(..., '--name', '-n', prompt="고객사명을 입력하세요", help="생성할 고객사 이름입니다."),
):
    """새로운 고객사(테넌트)를 생성합니다."""
    async def run():
        await create_db_and_tables()
        async with AsyncSessionLocal() as db:
            await create_client(db, name)

    asyncio.run(run())


@cli.command("create-admin")
def create_admin_command(
    user_name: str = typer.Option(
        ..., '--username', '-u',
        prompt="관리자 사용자명(ID)을 입력하세요",
        help="로그인 시 사용할 사용자명(ID)입니다."
    ),
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="관리자 이메일을 입력하세요",
        help="생성할 관리자 계정의 이메일 주소입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="관리자 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="생성할 관리자 계정의 비밀번호입니다. (최소 8자 이상)"
    ),
    super_admin: bool = typer.Option(False, '--super', help="ROLE_SUPER_ADMIN 권한으로 생성합니다."),
    client_id: Optional[int] = typer.Option(None, '--client-id', '-c', help="관리자가 속할 고객사 ID입니다."),
):
    """
    관리자(ROLE_ADMIN) 또는 최고 관리자(ROLE_SUPER_ADMIN) 계정을 생성합니다.
    """
    if len(password) < usr_schemas.PASSWORD_MIN_LENGTH:
        typer.echo(f"오류: 비밀번호는 최소 {usr_schemas.PASSWORD_MIN_LENGTH}자 이상이어야 합니다.")
        raise typer.Abort()
    if not super_admin and client_id is None:
        typer.echo("오류: 최고 관리자가 아닌 관리자는 --client-id 가 필요합니다.")
        raise typer.Abort()

    async def run():
        await create_db_and_tables()
        async with AsyncSessionLocal() as db:
            await create_admin_user(
                db,
                user_name=user_name,
                email=email,
                password=password,
                super_admin=super_admin,
                client_id=client_id,
            )

    asyncio.run(run())


@cli.command("change-password")
def change_password_command(
    user_name: str = typer.Option(..., '--username', '-u', prompt="사용자명(ID)을 입력하세요"),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="새 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="새 비밀번호입니다. (최소 8자 이상)"
    ),
):
    """사용자의 비밀번호를 변경합니다."""
    if len(password) < usr_schemas.PASSWORD_MIN_LENGTH:
        typer.echo(f"오류: 비밀번호는 최소 {usr_schemas.PASSWORD_MIN_LENGTH}자 이상이어야 합니다.")
        raise typer.Abort()

    async def run():
        async with AsyncSessionLocal() as db:
            await change_password(db, user_name=user_name, new_password=password)

    asyncio.run(run())


if __name__ == "__main__":
    cli()
