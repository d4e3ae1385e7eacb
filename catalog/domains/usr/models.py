# catalog/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 고객사(clients)와 사용자(users) 테이블에 대한 SQLModel 클래스를 포함합니다.
고객사는 테넌트 경계이며, 최고 관리자가 아닌 모든 사용자는 정확히 하나의 고객사에 속합니다.
"""

from typing import Optional, List
from datetime import datetime, UTC
from enum import Enum
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import ForeignKey, Integer, JSON
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 사용자 역할(RBAC)을 Enum으로 정의합니다.
# =============================================================================
class UserRole(str, Enum):
    """
    사용자 역할 문자열입니다. DB에는 문자열 목록(JSON)으로 저장됩니다.
    """
    SUPER_ADMIN = "ROLE_SUPER_ADMIN"  # 모든 고객사에 접근 가능한 최고 관리자
    ADMIN = "ROLE_ADMIN"              # 소속 고객사의 사용자만 관리
    USER = "ROLE_USER"                # 일반 사용자


# =============================================================================
# 1. clients 테이블 모델
# =============================================================================
class ClientBase(SQLModel):
    """
    clients 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="고객사 고유 ID")
    name: str = Field(max_length=100, sa_column_kwargs={"unique": True}, description="고객사명")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class Client(ClientBase, table=True):
    """
    clients 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "clients"


# =============================================================================
# 2. users 테이블 모델
# =============================================================================
class UserBase(SQLModel):
    """
    users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="사용자 고유 ID")
    user_name: str = Field(max_length=50, sa_column_kwargs={"unique": True}, description="로그인 사용자명")
    password_hash: str = Field(max_length=255, description="해싱된 비밀번호")
    email: Optional[str] = Field(default=None, max_length=100, sa_column_kwargs={"unique": True}, description="사용자 이메일")
    phone_number: Optional[str] = Field(default=None, max_length=30, description="전화번호")
    roles: List[str] = Field(
        default_factory=lambda: [UserRole.USER.value],
        sa_column=Column(JSON, nullable=False),
        description="역할 문자열 목록 (예: [\"ROLE_ADMIN\"])"
    )
    client_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("clients.id", onupdate="CASCADE", ondelete="RESTRICT"),
            index=True,
        ),
        description="소속 고객사 ID (FK)"
    )
    is_active: bool = Field(default=True, description="계정 활성 여부")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class User(UserBase, table=True):
    """
    users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "users"

    def has_role(self, role: UserRole) -> bool:
        return role.value in (self.roles or [])
