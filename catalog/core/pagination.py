# catalog/core/pagination.py

"""
목록 API의 페이지 단위 조회를 담당하는 모듈입니다.

- 페이지 번호는 1부터 시작하며, 페이지 크기는 설정(PAGE_SIZE)으로 고정됩니다.
- 전체 개수(total)는 요청한 경우에만 별도의 count 쿼리로 계산합니다.
- 존재하지 않는 페이지를 요청하면 404를 반환하지만, 빈 컬렉션의 1페이지는 빈 페이지로 응답합니다.
"""

import logging
import math
import re
from typing import Any, Dict, Generic, List, Optional, TypeVar

from fastapi import Query
from pydantic import BaseModel, Field
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core.config import settings
from catalog.core.crud_base import CRUDBase
from catalog.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

ItemType = TypeVar("ItemType")

PAGE_NOT_FOUND = "The page that you are looking for, does not exist!"


class Page(BaseModel, Generic[ItemType]):
    """한 페이지 분량의 조회 결과 (요청마다 계산되며 저장되지 않음)"""
    page: int = Field(..., ge=1, description="요청한 페이지 번호")
    limit: int = Field(..., ge=1, description="페이지 크기")
    total: Optional[int] = Field(None, description="전체 항목 수 (요청한 경우에만 포함)")
    pages: Optional[int] = Field(None, description="전체 페이지 수 (total이 포함된 경우에만)")
    items: List[ItemType] = Field(default_factory=list)


def get_page_number(
    page: Optional[str] = Query("1", description="The asked page"),
) -> int:
    """
    쿼리 문자열의 page 값을 양의 정수로 변환합니다.
    숫자가 아니거나 1보다 작은 값은 기본값 1로 처리합니다.
    """
    if page is None or not re.fullmatch(r"\d+", page, flags=re.ASCII):
        return 1
    return max(int(page), 1)


class Paginator:
    """
    CRUD 객체가 관리하는 모델에 대해 페이지 단위 조회를 수행합니다.
    """

    def __init__(self, db: AsyncSession, crud: CRUDBase, page_size: Optional[int] = None):
        self.db = db
        self.crud = crud
        self.page_size = page_size or settings.PAGE_SIZE

    async def get_page(
        self,
        page_number: int,
        include_total: bool = False,
        filters: Optional[Dict[str, Any]] = None,
    ) -> Page:
        if page_number < 1:
            raise NotFoundError(PAGE_NOT_FOUND)

        total = None
        pages = None
        if include_total:
            total = await self.crud.count(self.db, filters=filters)
            pages = math.ceil(total / self.page_size)
            # 빈 컬렉션이라도 1페이지는 유효한 빈 페이지입니다.
            if page_number > max(pages, 1):
                raise NotFoundError(PAGE_NOT_FOUND)

        items = await self.crud.get_multi(
            self.db,
            filters=filters,
            skip=(page_number - 1) * self.page_size,
            limit=self.page_size,
        )
        if not include_total and not items and page_number > 1:
            raise NotFoundError(PAGE_NOT_FOUND)

        logger.debug(
            "Page %d of %s (filters=%s): %d item(s), total=%s",
            page_number, self.crud.model.__name__, filters, len(items), total,
        )
        return Page(page=page_number, limit=self.page_size, total=total, pages=pages, items=items)
