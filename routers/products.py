from fastapi import APIRouter
from core.exceptions import NotFoundError
from schemas.product_schemas import ProductResponse
from services.catalog_service import CatalogService
from utils.deps import db_dependency
from utils.identifiers import parse_id


router = APIRouter(
    prefix="/products",
    tags=["products"]
)


@router.get("", response_model=list[ProductResponse])
async def list_products(db: db_dependency):
    return CatalogService.list_products(db)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, db: db_dependency):
    parsed_id = parse_id(product_id)
    if parsed_id is None:
        raise NotFoundError("Product not found")

    return CatalogService.get_product(db, parsed_id)
