# catalog/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증.
- JWT(JSON Web Token) 생성 및 검증.
- OAuth2 Password Bearer 스키마를 사용하여 현재 사용자 획득.
- 사용자 역할(role) 기반 권한 부여(Authorization) 검사.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from jose.exceptions import ExpiredSignatureError
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog import API_PREFIX
from catalog.core.config import settings
from catalog.core.database import get_session
from catalog.core.exceptions import AccessDeniedError, AuthenticationError
from catalog.domains.usr import models as usr_models

logger = logging.getLogger(__name__)


# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    주어진 비밀번호를 해싱합니다. 평문 비밀번호는 절대 저장하지 않습니다.
    """
    return pwd_context.hash(password)


# --- OAuth2 스키마 설정 ---
# 토큰이 없을 때 직접 401 메시지를 구분하기 위해 auto_error를 끕니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/auth/token", auto_error=False)


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Access Token을 생성합니다.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)
    logger.debug("Access token created for %s, expires at %s", data.get("sub"), expire)
    return encoded_jwt


async def get_current_user_from_token(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    JWT 토큰을 디코딩하고 검증하여 현재 사용자를 데이터베이스에서 가져옵니다.
    """
    if not token:
        raise AuthenticationError("JWT Token not found")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise AuthenticationError("Expired JWT Token")
    except JWTError as e:
        logger.debug("JWT decode failed: %s", e)
        raise AuthenticationError("Invalid JWT Token")

    user_name: Optional[str] = payload.get("sub")
    if user_name is None:
        raise AuthenticationError("Invalid JWT Token")

    # 토큰의 사용자명으로 호출자 자신의 사용자 레코드를 조회합니다.
    statement = select(usr_models.User).where(usr_models.User.user_name == user_name)
    result = await db.execute(statement)
    user = result.scalars().one_or_none()
    if user is None:
        raise AuthenticationError("Invalid JWT Token")
    return user


# --- 역할 기반 권한 부여 의존성 ---

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


def get_current_admin_user(
    current_user: usr_models.User = Depends(get_current_active_user),
) -> usr_models.User:
    """
    ROLE_ADMIN 또는 ROLE_SUPER_ADMIN 역할을 가진 사용자를 반환합니다.
    권한이 없는 경우 403 Forbidden을 발생시킵니다.
    """
    allowed_roles = [usr_models.UserRole.ADMIN, usr_models.UserRole.SUPER_ADMIN]

    if not any(current_user.has_role(role) for role in allowed_roles):
        logger.warning("User %s (roles=%s) denied: admin role required", current_user.user_name, current_user.roles)
        raise AccessDeniedError()
    return current_user
