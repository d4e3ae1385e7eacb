# catalog/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 세션을 사용합니다.
"""

from typing import Generic, List, Optional, Type, TypeVar, Any, Dict

from sqlalchemy import func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _conditions(self, filters: Optional[Dict[str, Any]]) -> list:
        conditions = []
        for attribute, value in (filters or {}).items():
            if not hasattr(self.model, attribute):
                raise ValueError(f"Model {self.model.__name__} has no attribute '{attribute}'")
            conditions.append(getattr(self.model, attribute) == value)
        return conditions

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_multi(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,  # 다중 속성 필터: {"attribute_name": "value"}
        skip: int = 0,
        limit: int = 100,
    ) -> List[ModelType]:
        """
        여러 레코드를 기본 키 오름차순으로 조회합니다.
        같은 조건이면 항상 같은 순서로 반환되도록 정렬을 고정합니다.
        """
        query = select(self.model)
        conditions = self._conditions(filters)
        if conditions:
            query = query.where(*conditions)
        query = query.order_by(self.model.id).offset(skip).limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def count(self, db: AsyncSession, *, filters: Optional[Dict[str, Any]] = None) -> int:
        """조건을 만족하는 레코드 수를 반환합니다."""
        query = select(func.count()).select_from(self.model)
        conditions = self._conditions(filters)
        if conditions:
            query = query.where(*conditions)
        result = await db.execute(query)
        return result.scalar_one()

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        이미 조회된 레코드를 삭제합니다.
        """
        await db.delete(db_obj)
        await db.commit()
        return db_obj
