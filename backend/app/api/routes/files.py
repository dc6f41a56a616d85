import logging
import re
import uuid
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from pydantic import ValidationError
from sqlmodel import Session

from app import crud
from app.api.deps import get_db
from app.core.config import settings
from app.models import Message, StoredFileCreate, StoredFilePublic

router = APIRouter()
logger = logging.getLogger(__name__)


def get_upload_dir() -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def _safe_filename(filename: str) -> str:
    cleaned = re.sub(r"[^A-Za-z0-9._-]+", "_", Path(filename).name).strip("._")
    # Keep the stored name well under the filesystem component limit
    return cleaned[-100:].lstrip("._") or "file"


@router.get("", response_model=list[StoredFilePublic])
def read_files(session: Session = Depends(get_db)) -> Any:
    return crud.list_files(session=session)


@router.post("", response_model=StoredFilePublic, status_code=status.HTTP_201_CREATED)
async def upload_file(
    *,
    session: Session = Depends(get_db),
    upload_dir: Path = Depends(get_upload_dir),
    name: str | None = Form(default=None, max_length=255),
    file: UploadFile = File(...)
) -> Any:
    """
    Store an uploaded file in the download center.
    """
    content = await file.read()
    original_filename = file.filename or "unknown"
    storage_path = upload_dir / f"{uuid.uuid4().hex}_{_safe_filename(original_filename)}"
    try:
        file_in = StoredFileCreate(
            name=(name or "").strip() or original_filename,
            original_filename=original_filename,
            content_type=file.content_type or "application/octet-stream",
            size_bytes=len(content),
            storage_path=str(storage_path),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=422, detail=e.errors(include_url=False, include_context=False)
        )

    storage_path.write_bytes(content)
    try:
        db_file = crud.create_file_record(session=session, file_in=file_in)
    except Exception:
        storage_path.unlink(missing_ok=True)
        raise
    logger.info("Stored file %s (%s bytes)", db_file.id, db_file.size_bytes)
    return db_file


@router.get("/{id}/content")
def read_file_content(id: uuid.UUID, session: Session = Depends(get_db)) -> FileResponse:
    db_file = crud.get_file(session=session, file_id=id)
    if not db_file or not Path(db_file.storage_path).is_file():
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(
        db_file.storage_path,
        media_type=db_file.content_type,
        filename=db_file.original_filename,
    )


@router.patch("/{id}/download", response_model=StoredFilePublic)
def increment_download(id: uuid.UUID, session: Session = Depends(get_db)) -> Any:
    db_file = crud.increment_download_count(session=session, file_id=id)
    if not db_file:
        raise HTTPException(status_code=404, detail="File not found")
    return db_file


@router.delete("/{id}", response_model=Message)
def delete_file(id: uuid.UUID, session: Session = Depends(get_db)) -> Any:
    """
    Delete a file record and its stored content.
    """
    db_file = crud.get_file(session=session, file_id=id)
    if not db_file:
        raise HTTPException(status_code=404, detail="File not found")

    storage_path = Path(db_file.storage_path)
    crud.delete_file_record(session=session, db_file=db_file)
    storage_path.unlink(missing_ok=True)
    return Message(message="File deleted successfully")
