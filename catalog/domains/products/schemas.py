# catalog/domains/products/schemas.py

"""
'products' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from decimal import Decimal
from sqlmodel import SQLModel, Field


class ProductBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=255)
    brand: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class ProductCreate(ProductBase):
    pass


class ProductEdit(ProductBase):
    """
    PUT /products 본문. 경로 대신 본문의 id로 대상 상품을 식별합니다.
    id가 없거나 존재하지 않으면 새 상품으로 생성됩니다.
    """
    id: Optional[int] = Field(None, ge=1, description="수정할 상품 ID")


class ProductRead(ProductBase):
    id: int
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")
