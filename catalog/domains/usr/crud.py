# catalog/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.
권한 판단은 services 모듈에서 수행하며, 여기서는 데이터 접근만 다룹니다.
"""

import logging
from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from catalog.core.crud_base import CRUDBase
from catalog.core.security import verify_password
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. clients 테이블 CRUD
# =============================================================================
class CRUDClient(CRUDBase[usr_models.Client, usr_schemas.ClientCreate]):
    def __init__(self):
        super().__init__(model=usr_models.Client)

    async def get_by_name(self, db: AsyncSession, *, name: str) -> Optional[usr_models.Client]:
        return await self.get_by_attribute(db, attribute="name", value=name)

    async def create(self, db: AsyncSession, *, obj_in: usr_schemas.ClientCreate) -> usr_models.Client:
        if await self.get_by_name(db, name=obj_in.name):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Client with this name already exists")
        return await super().create(db, obj_in=obj_in)


client = CRUDClient()


# =============================================================================
# 2. users 테이블 CRUD
# =============================================================================
class CRUDUser(CRUDBase[usr_models.User, usr_schemas.UserCreate]):
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_user_name(self, db: AsyncSession, *, user_name: str) -> Optional[usr_models.User]:
        """사용자명으로 사용자를 조회합니다."""
        return await self.get_by_attribute(db, attribute="user_name", value=user_name)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        """이메일로 사용자를 조회합니다."""
        return await self.get_by_attribute(db, attribute="email", value=email)

    async def save(self, db: AsyncSession, *, db_obj: usr_models.User) -> usr_models.User:
        """신규 또는 변경된 사용자를 커밋하고 최신 상태로 다시 읽어옵니다."""
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def authenticate(self, db: AsyncSession, *, user_name: str, password: str) -> Optional[usr_models.User]:
        """사용자명과 비밀번호를 사용하여 사용자를 인증합니다."""
        user = await self.get_by_user_name(db, user_name=user_name)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            logger.info("Failed login attempt for %s", user_name)
            return None
        return user


user = CRUDUser()
