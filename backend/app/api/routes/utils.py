from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.deps import get_db

router = APIRouter(prefix="/utils", tags=["utils"])


@router.get("/health-check/")
def health_check(session: Session = Depends(get_db)) -> bool:
    session.connection().exec_driver_sql("SELECT 1")
    return True
