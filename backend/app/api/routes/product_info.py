import logging
import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.deps import CurrentUser, get_db
from app.crud import create_product_info, get_product_info, list_user_products
from app.models import ProductInfoCreate, ProductInfoPublic

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/product-info",
    response_model=ProductInfoPublic,
    status_code=status.HTTP_201_CREATED,
)
def create_new_product_info(
    *,
    session: Session = Depends(get_db),
    current_user: CurrentUser,
    product_in: ProductInfoCreate
) -> Any:
    """
    Store the product description and return it with its composed landing page prompt.
    """
    product = create_product_info(session=session, product_in=product_in, owner_id=current_user.id)
    logger.info("Stored product %s for user %s", product.id, current_user.id)
    return product


@router.get("/user/products", response_model=list[ProductInfoPublic])
def read_user_products(
    current_user: CurrentUser,
    session: Session = Depends(get_db),
) -> Any:
    return list_user_products(session=session, owner_id=current_user.id)


@router.get("/product-info/{id}", response_model=ProductInfoPublic)
def read_product_info(
    id: uuid.UUID,
    session: Session = Depends(get_db),
) -> Any:
    product = get_product_info(session=session, product_id=id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
