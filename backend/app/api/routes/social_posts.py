import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app import crud
from app.api.deps import CurrentUser, get_db
from app.models import SocialPost, SocialPostCreate, SocialPostPublic, SocialPostUpdate

router = APIRouter()


@router.post("", response_model=SocialPostPublic, status_code=status.HTTP_201_CREATED)
def create_new_social_post(
    *,
    session: Session = Depends(get_db),
    current_user: CurrentUser,
    post_in: SocialPostCreate
) -> Any:
    product = crud.get_product_info(session=session, product_id=post_in.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    if product.owner_id != current_user.id:
        raise HTTPException(status_code=403, detail="Not enough permissions")
    return crud.create_social_post(session=session, post_in=post_in, user_id=current_user.id)


@router.get("", response_model=list[SocialPostPublic])
def read_social_posts(
    current_user: CurrentUser,
    session: Session = Depends(get_db),
) -> Any:
    return crud.list_user_social_posts(session=session, user_id=current_user.id)


@router.patch("/{id}", response_model=SocialPostPublic)
def edit_social_post(
    *,
    id: uuid.UUID,
    session: Session = Depends(get_db),
    current_user: CurrentUser,
    post_in: SocialPostUpdate
) -> Any:
    """
    Manually edit a saved post; this is the only way ``is_edited`` becomes true.
    """
    post = session.get(SocialPost, id)
    if not post:
        raise HTTPException(status_code=404, detail="Social post not found")
    if post.user_id != current_user.id:
        raise HTTPException(status_code=403, detail="Not enough permissions")
    return crud.edit_social_post(session=session, db_post=post, post_in=post_in)
