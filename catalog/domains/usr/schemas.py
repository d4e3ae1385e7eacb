# catalog/domains/usr/schemas.py

"""
'usr' 도메인 (고객사 및 사용자 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import BaseModel, EmailStr, field_validator

from . import models as usr_models

PASSWORD_MIN_LENGTH = 8


# =============================================================================
# 1. 고객사 (Client) 스키마
# =============================================================================
class ClientCreate(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)


# =============================================================================
# 2. 사용자 (User) 스키마
# =============================================================================
class UserCreate(SQLModel):
    """사용자 생성을 위한 스키마"""
    user_name: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=255)
    email: EmailStr
    phone_number: Optional[str] = Field(None, max_length=30)
    roles: Optional[List[usr_models.UserRole]] = None
    client_id: Optional[int] = Field(None, ge=1)


class UserUpdate(SQLModel):
    """
    사용자 부분 수정을 위한 스키마.
    본문에 포함되지 않은 필드는 model_fields_set에 나타나지 않으며,
    빈 값("" 또는 null)과 함께 '변경하지 않음'으로 처리됩니다.
    """
    user_name: Optional[str] = Field(None, max_length=50)
    password: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=30)
    roles: Optional[List[usr_models.UserRole]] = None
    client_id: Optional[int] = Field(None, ge=1)

    @field_validator("email", mode="before")
    @classmethod
    def empty_email_as_none(cls, value: Any) -> Any:
        return None if value == "" else value

    @field_validator("password")
    @classmethod
    def password_length(cls, value: Optional[str]) -> Optional[str]:
        if value and len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"This value is too short. It should have {PASSWORD_MIN_LENGTH} characters or more."
            )
        return value

    def provided_values(self) -> Dict[str, Any]:
        """본문에 실제로 포함되었고 비어 있지 않은 값만 반환합니다."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) not in (None, "", [])
        }


class UserRead(SQLModel):
    """
    사용자 정보 조회를 위한 스키마.
    비밀번호 해시값 등 민감한 정보는 제외됩니다.
    """
    id: int
    user_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    roles: List[str] = []
    client_id: Optional[int] = None
    is_active: bool = True
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")


# =============================================================================
# 3. 인증 토큰 (Token) 스키마
# =============================================================================
class Token(BaseModel):
    """JWT 토큰 응답 스키마"""
    access_token: str
    token_type: str
