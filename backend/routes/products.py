"""Product catalog route: cached product list with nested categories."""

import logging

from fastapi import APIRouter, Depends, Request

from models import ErrorResponse, ProductModel
from services.cache import TTLCache
from services.catalog import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter()


def get_product_cache(request: Request) -> TTLCache:
    return request.app.state.product_cache


@router.get(
    "/api/productlist",
    name="GetProducts",
    operation_id="GetProducts",
    description="Retrieves the complete product catalog with category information",
    response_model=list[ProductModel],
    responses={500: {"model": ErrorResponse}},
)
async def product_list(cache: TTLCache = Depends(get_product_cache)) -> list[ProductModel]:
    # GenerationError is mapped to a 500 by errors.register_error_handlers
    snapshot = get_catalog(cache)
    return [ProductModel.from_product(product) for product in snapshot]
