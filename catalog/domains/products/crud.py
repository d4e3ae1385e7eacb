# catalog/domains/products/crud.py

"""
'products' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core.crud_base import CRUDBase
from . import models as product_models
from . import schemas as product_schemas

logger = logging.getLogger(__name__)


class CRUDProduct(CRUDBase[product_models.Product, product_schemas.ProductCreate]):
    def __init__(self):
        super().__init__(model=product_models.Product)

    async def create(self, db: AsyncSession, *, obj_in: product_schemas.ProductCreate) -> product_models.Product:
        db_obj = await super().create(db, obj_in=obj_in)
        logger.info("Product %d created (%s)", db_obj.id, db_obj.name)
        return db_obj

    async def upsert(self, db: AsyncSession, *, obj_in: product_schemas.ProductEdit) -> product_models.Product:
        """
        본문의 id로 기존 상품을 찾아 전체 필드를 교체합니다.
        id가 없거나 해당 상품이 없으면 새로운 ID로 생성합니다.
        """
        db_obj = await self.get(db, obj_in.id) if obj_in.id is not None else None
        product_data = obj_in.model_dump(exclude={"id"})

        if db_obj is None:
            db_obj = self.model.model_validate(product_data)
        else:
            for key, value in product_data.items():
                setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        logger.info("Product %d saved through upsert (requested id=%s)", db_obj.id, obj_in.id)
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: product_models.Product) -> product_models.Product:
        product_id = db_obj.id
        await super().remove(db, db_obj=db_obj)
        logger.info("Product %d deleted", product_id)
        return db_obj


product = CRUDProduct()
