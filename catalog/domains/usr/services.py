# catalog/domains/usr/services.py

"""
사용자 API의 핵심 로직 (고객사 범위 조회, 생성 시 고객사/역할 고정, 부분 수정)을 담당하는 모듈입니다.

라우터는 세션, 호출자(Caller), 검증된 본문만 넘겨주며,
비밀번호 해싱 함수는 인자로 주입받을 수 있습니다.
"""

import logging
from typing import Callable, List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core.exceptions import AccessDeniedError, Violation
from catalog.core.pagination import Page, Paginator
from catalog.core.security import get_password_hash
from catalog.core.validation import ValidatedPayload, check_violations

from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas
from .authorization import Caller, ensure_can_access

logger = logging.getLogger(__name__)

PasswordHasher = Callable[[str], str]

DEFAULT_ROLES = [usr_models.UserRole.USER.value]


def _unique_roles(roles: List[usr_models.UserRole]) -> List[str]:
    return list(dict.fromkeys(role.value for role in roles))


async def _collect_violations(
    db: AsyncSession,
    *,
    user_name: Optional[str],
    email: Optional[str],
    client_id: Optional[int],
    roles: List[str],
    exclude_id: Optional[int] = None,
) -> List[Violation]:
    """본문 스키마만으로는 알 수 없는 위반 사항 (중복, 존재하지 않는 고객사, 고객사 누락)을 모읍니다."""
    violations = []
    if user_name:
        existing = await usr_crud.user.get_by_user_name(db, user_name=user_name)
        if existing is not None and existing.id != exclude_id:
            violations.append(Violation(field="user_name", message="This value is already used."))
    if email:
        existing = await usr_crud.user.get_by_email(db, email=email)
        if existing is not None and existing.id != exclude_id:
            violations.append(Violation(field="email", message="This value is already used."))
    if client_id is not None:
        if await usr_crud.client.get(db, client_id) is None:
            violations.append(Violation(field="client_id", message="Client not found."))
    elif usr_models.UserRole.SUPER_ADMIN.value not in roles:
        violations.append(Violation(field="client_id", message="This value should not be blank."))
    return violations


async def list_users(db: AsyncSession, caller: Caller, page: int) -> Page:
    """
    최고 관리자는 모든 사용자를, 그 외에는 자신의 고객사 사용자만 페이지 단위로 조회합니다.
    """
    if not caller.is_super_admin and caller.client_id is None:
        raise AccessDeniedError()
    paginator = Paginator(db, usr_crud.user)
    return await paginator.get_page(page, include_total=True, filters=caller.scope_filters())


def show_user(caller: Caller, target: usr_models.User) -> usr_models.User:
    ensure_can_access(caller, target)
    return target


async def create_user(
    db: AsyncSession,
    payload: ValidatedPayload[usr_schemas.UserCreate],
    caller: Caller,
    hash_password: PasswordHasher = get_password_hash,
) -> usr_models.User:
    """
    새 사용자를 생성합니다.
    - 최고 관리자가 아니면 고객사는 호출자의 고객사로, 역할은 ROLE_USER로 고정됩니다.
    - 최고 관리자가 역할을 지정하지 않으면 ROLE_USER가 부여됩니다.
    """
    check_violations(payload.violations)
    user_in = payload.data

    if caller.is_super_admin:
        client_id = user_in.client_id
        roles = _unique_roles(user_in.roles or []) or list(DEFAULT_ROLES)
    else:
        client_id = caller.client_id
        roles = list(DEFAULT_ROLES)

    check_violations(await _collect_violations(
        db,
        user_name=user_in.user_name,
        email=str(user_in.email),
        client_id=client_id,
        roles=roles,
    ))

    db_user = usr_models.User(
        user_name=user_in.user_name,
        password_hash=hash_password(user_in.password),
        email=str(user_in.email),
        phone_number=user_in.phone_number,
        roles=roles,
        client_id=client_id,
    )
    db_user = await usr_crud.user.save(db, db_obj=db_user)
    logger.info("User %d (%s) created by %s in client %s", db_user.id, db_user.user_name, caller.user_name, client_id)
    return db_user


async def update_user(
    db: AsyncSession,
    target: usr_models.User,
    payload: ValidatedPayload[usr_schemas.UserUpdate],
    caller: Caller,
    hash_password: PasswordHasher = get_password_hash,
) -> usr_models.User:
    """
    사용자를 부분 수정합니다. 본문에 있고 비어 있지 않은 필드만 반영됩니다.
    - 최고 관리자가 아니면 다른 고객사의 사용자를 수정할 수 없고,
      대상의 역할은 본문과 상관없이 ROLE_USER로 고정되며 고객사 변경은 무시됩니다.
    """
    check_violations(payload.violations)
    patch = payload.data

    if caller.is_super_admin:
        roles = _unique_roles(patch.roles) if patch.roles else list(target.roles)
    else:
        ensure_can_access(caller, target, "You don't have the rights for modifying this user.")
        roles = list(DEFAULT_ROLES)

    changes = patch.provided_values()
    if not caller.is_super_admin and changes.pop("client_id", None) is not None:
        logger.info("Client change for user %d ignored: %s is not a super admin", target.id, caller.user_name)
    if "email" in changes:
        changes["email"] = str(changes["email"])
    changes.pop("roles", None)

    client_id = changes.get("client_id", target.client_id)
    check_violations(await _collect_violations(
        db,
        user_name=changes.get("user_name") if changes.get("user_name") != target.user_name else None,
        email=changes.get("email") if changes.get("email") != target.email else None,
        client_id=client_id,
        roles=roles,
        exclude_id=target.id,
    ))

    target.roles = roles
    for field, value in changes.items():
        if field == "password":
            target.password_hash = hash_password(value)
        else:
            setattr(target, field, value)

    target = await usr_crud.user.save(db, db_obj=target)
    logger.info("User %d updated by %s (fields=%s)", target.id, caller.user_name, sorted(changes))
    return target


async def delete_user(db: AsyncSession, target: usr_models.User, caller: Caller) -> None:
    ensure_can_access(caller, target, "You don't have the rights for deleting this user.")
    user_id = target.id
    await usr_crud.user.remove(db, db_obj=target)
    logger.info("User %d deleted by %s", user_id, caller.user_name)
