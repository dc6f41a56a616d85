import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app import crud
from app.api.deps import get_db
from app.models import TemplateCreate, TemplatePublic

router = APIRouter()


@router.get("/templates", response_model=list[TemplatePublic])
def read_templates(
    category: str | None = None,
    session: Session = Depends(get_db),
) -> Any:
    return crud.list_templates(session=session, category=category)


@router.post("/templates", response_model=TemplatePublic, status_code=status.HTTP_201_CREATED)
def create_new_template(
    *,
    session: Session = Depends(get_db),
    template_in: TemplateCreate
) -> Any:
    return crud.create_template(session=session, template_in=template_in)


@router.get("/template/{id}", response_model=TemplatePublic)
def read_template(id: uuid.UUID, session: Session = Depends(get_db)) -> Any:
    template = crud.get_template(session=session, template_id=id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template
