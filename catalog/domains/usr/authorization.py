# catalog/domains/usr/authorization.py

"""
사용자 API의 고객사(테넌트) 범위 권한 검사를 한곳에 모은 모듈입니다.

호출자는 {user_name, is_super_admin, client_id} 값으로만 표현되며,
모든 사용자 작업은 같은 판정(can_access)을 사용합니다.
"""

import logging
from typing import Optional

from fastapi import Depends
from pydantic import BaseModel, ConfigDict

from catalog.core import dependencies as deps
from catalog.core.exceptions import AccessDeniedError
from . import models as usr_models

logger = logging.getLogger(__name__)


class Caller(BaseModel):
    """요청을 보낸 인증된 관리자"""
    model_config = ConfigDict(frozen=True)

    user_id: int
    user_name: str
    is_super_admin: bool = False
    client_id: Optional[int] = None

    @classmethod
    def from_user(cls, user: usr_models.User) -> "Caller":
        return cls(
            user_id=user.id,
            user_name=user.user_name,
            is_super_admin=user.has_role(usr_models.UserRole.SUPER_ADMIN),
            client_id=user.client_id,
        )

    def can_access(self, target: usr_models.User) -> bool:
        """최고 관리자이거나 대상 사용자와 같은 고객사에 속한 경우에만 True."""
        if self.is_super_admin:
            return True
        return self.client_id is not None and self.client_id == target.client_id

    def scope_filters(self) -> Optional[dict]:
        """목록 조회 시 적용할 고객사 필터. 최고 관리자는 필터가 없습니다."""
        if self.is_super_admin:
            return None
        return {"client_id": self.client_id}


def ensure_can_access(caller: Caller, target: usr_models.User, detail: str = "Access denied.") -> None:
    if not caller.can_access(target):
        logger.warning(
            "User %s (client=%s) denied access to user %s (client=%s)",
            caller.user_name, caller.client_id, target.id, target.client_id,
        )
        raise AccessDeniedError(detail)


def get_caller(current_admin_user: usr_models.User = Depends(deps.get_current_admin_user)) -> Caller:
    return Caller.from_user(current_admin_user)
