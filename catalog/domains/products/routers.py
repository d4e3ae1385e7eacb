# catalog/domains/products/routers.py

"""
'products' 도메인 (상품 카탈로그)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
상품 API는 인증 없이 사용할 수 있습니다.
"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.core import dependencies as deps
from catalog.core.exceptions import NotFoundError
from catalog.core.pagination import Page, Paginator, get_page_number

from . import crud as product_crud
from . import models as product_models
from . import schemas as product_schemas


router = APIRouter(
    tags=["Products (상품 카탈로그)"],
    responses={404: {"description": "Not found"}},
)


async def get_product_or_404(
    product_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
) -> product_models.Product:
    """경로의 ID로 상품을 조회하고, 없으면 핸들러 실행 전에 404를 반환합니다."""
    product = await product_crud.product.get(db, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def _location(request: Request, product: product_models.Product) -> str:
    return str(request.url_for("show_product", product_id=product.id))


@router.get("", response_model=Page[product_schemas.ProductRead], name="list_products", summary="상품 목록 조회")
async def list_products(
    page: int = Depends(get_page_number),
    db: AsyncSession = Depends(deps.get_db_session),
):
    paginator = Paginator(db, product_crud.product)
    return await paginator.get_page(page, include_total=True)


@router.get("/{product_id}", response_model=product_schemas.ProductRead, name="show_product", summary="특정 상품 조회")
async def show_product(product: product_models.Product = Depends(get_product_or_404)):
    return product


@router.post(
    "",
    response_model=product_schemas.ProductRead,
    status_code=status.HTTP_201_CREATED,
    name="create_product",
    summary="새 상품 생성",
)
async def create_product(
    product_in: product_schemas.ProductCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(deps.get_db_session),
):
    product = await product_crud.product.create(db, obj_in=product_in)
    response.headers["Location"] = _location(request, product)
    return product


@router.put("", response_model=product_schemas.ProductRead, name="edit_product", summary="상품 수정 (본문의 id 기준)")
async def edit_product(
    product_in: product_schemas.ProductEdit,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    본문에 포함된 id의 상품을 교체합니다. 경로에 id가 없다는 점에 유의하세요.
    - id가 없거나 존재하지 않으면 새 상품으로 저장됩니다.
    """
    product = await product_crud.product.upsert(db, obj_in=product_in)
    response.headers["Location"] = _location(request, product)
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, name="delete_product", summary="상품 삭제")
async def delete_product(
    product: product_models.Product = Depends(get_product_or_404),
    db: AsyncSession = Depends(deps.get_db_session),
):
    await product_crud.product.remove(db, db_obj=product)
    return None
