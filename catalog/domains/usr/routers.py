# catalog/domains/usr/routers.py

"""
'usr' 도메인 (인증 및 사용자 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
사용자 관리 API는 ROLE_ADMIN 또는 ROLE_SUPER_ADMIN 권한이 필요하며,
최고 관리자가 아닌 경우 자신의 고객사 범위로 제한됩니다.
"""

from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core.config import settings
from catalog.core import dependencies as deps
from catalog.core.exceptions import AuthenticationError, NotFoundError
from catalog.core.pagination import Page, get_page_number
from catalog.core.validation import ValidatedPayload, validated_body

from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas
from . import services as usr_services
from .authorization import Caller, get_caller


AUTH_RESPONSES = {
    401: {"description": "Expired JWT Token | JWT Token not found | Invalid JWT Token"},
    403: {"description": "Access denied."},
}

auth_router = APIRouter(tags=["Authentication (인증)"])

router = APIRouter(
    tags=["Users (사용자 관리)"],
    responses={404: {"description": "Not found"}, **AUTH_RESPONSES},
)

user_create_body = validated_body(usr_schemas.UserCreate)
user_update_body = validated_body(usr_schemas.UserUpdate)


# =============================================================================
# 1. 인증 (Authentication) 엔드포인트
# =============================================================================

@auth_router.post("/token", response_model=usr_schemas.Token, summary="Access Token 획득")
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    user = await usr_crud.user.authenticate(
        db, user_name=form_data.username, password=form_data.password
    )
    if not user:
        raise AuthenticationError("Invalid credentials.")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = deps.create_access_token(data={"sub": user.user_name}, expires_delta=access_token_expires)
    return {"access_token": access_token, "token_type": "bearer"}


@auth_router.get("/me", response_model=usr_schemas.UserRead, summary="현재 사용자 정보 조회")
async def read_users_me(current_user: usr_models.User = Depends(deps.get_current_active_user)):
    return current_user


# =============================================================================
# 2. 사용자 (User) 관리 엔드포인트
# =============================================================================

async def get_user_or_404(
    user_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
) -> usr_models.User:
    """경로의 ID로 사용자를 조회하고, 없으면 핸들러 실행 전에 404를 반환합니다."""
    user = await usr_crud.user.get(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@router.get("", response_model=Page[usr_schemas.UserRead], name="list_users", summary="사용자 목록 조회")
async def list_users(
    caller: Caller = Depends(get_caller),
    page: int = Depends(get_page_number),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    사용자 목록을 페이지 단위로 조회합니다.
    - 최고 관리자는 모든 사용자를 조회합니다.
    - 관리자는 자신과 같은 고객사의 사용자만 조회합니다.
    """
    return await usr_services.list_users(db, caller, page)


@router.get("/{user_id}", response_model=usr_schemas.UserRead, name="show_user", summary="특정 사용자 조회")
async def show_user(
    caller: Caller = Depends(get_caller),
    user: usr_models.User = Depends(get_user_or_404),
):
    return usr_services.show_user(caller, user)


@router.post(
    "",
    response_model=usr_schemas.UserRead,
    status_code=status.HTTP_201_CREATED,
    name="create_user",
    summary="새 사용자 생성",
    responses={400: {"description": "The JSON sent contains invalid data."}},
)
async def create_user(
    caller: Caller = Depends(get_caller),
    payload: ValidatedPayload[usr_schemas.UserCreate] = Depends(user_create_body),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새 사용자를 생성합니다.
    - 관리자가 생성한 사용자는 관리자의 고객사에 속하며 ROLE_USER 역할만 가집니다.
    """
    return await usr_services.create_user(db, payload, caller)


@router.put(
    "/{user_id}",
    response_model=usr_schemas.UserRead,
    name="update_user",
    summary="사용자 부분 수정",
    responses={400: {"description": "The JSON sent contains invalid data."}},
)
async def update_user(
    caller: Caller = Depends(get_caller),
    user: usr_models.User = Depends(get_user_or_404),
    payload: ValidatedPayload[usr_schemas.UserUpdate] = Depends(user_update_body),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    본문에 포함된 필드만 수정합니다. 빈 값은 '변경하지 않음'으로 처리됩니다.
    """
    return await usr_services.update_user(db, user, payload, caller)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, name="delete_user", summary="사용자 삭제")
async def delete_user(
    caller: Caller = Depends(get_caller),
    user: usr_models.User = Depends(get_user_or_404),
    db: AsyncSession = Depends(deps.get_db_session),
):
    await usr_services.delete_user(db, user, caller)
    return None
