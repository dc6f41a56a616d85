import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app.ai.composer import UnknownPromptVersion, compose_landing_prompt
from app.api.deps import get_db
from app.crud import get_product_info
from app.models import GeneratedPromptPublic

router = APIRouter()


@router.get("/generate-prompt/{version}/{product_id}", response_model=GeneratedPromptPublic)
def generate_prompt(
    version: str,
    product_id: uuid.UUID,
    session: Session = Depends(get_db),
) -> Any:
    """
    Compose the landing page prompt of a stored product for the requested version.
    Nothing is sent to the model.
    """
    product = get_product_info(session=session, product_id=product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    try:
        prompt = compose_landing_prompt(product, version=version)
    except UnknownPromptVersion as e:
        raise HTTPException(status_code=404, detail=str(e))
    return GeneratedPromptPublic(version=version, product_id=product.id, prompt=prompt)
