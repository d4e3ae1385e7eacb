# catalog/domains/products/models.py

"""
'products' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

상품은 소유 고객사(Client)와 무관하게 모든 호출자에게 공개되는 카탈로그 항목입니다.
"""

from typing import Optional
from datetime import datetime, UTC
from decimal import Decimal
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


class ProductBase(SQLModel):
    """
    products 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="상품 고유 ID")
    name: str = Field(max_length=255, index=True, description="상품명")
    brand: Optional[str] = Field(default=None, max_length=100, description="제조사/브랜드")
    description: Optional[str] = Field(default=None, description="상품 설명")
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2, description="판매 가격")

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


class Product(ProductBase, table=True):
    """
    products 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "products"
