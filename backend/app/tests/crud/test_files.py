import uuid
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine

from app import crud
from app.models import StoredFile, StoredFileCreate


def _file_in() -> StoredFileCreate:
    return StoredFileCreate(
        name="Guide",
        original_filename="guide.pdf",
        content_type="application/pdf",
        size_bytes=10,
        storage_path="/tmp/guide.pdf",
    )


def test_concurrent_downloads_do_not_lose_updates(tmp_path: Path) -> None:
    engine = create_engine(
        f"sqlite:///{tmp_path / 'downloads.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        file_id = crud.create_file_record(session=session, file_in=_file_in()).id

    def download(_: int) -> None:
        with Session(engine) as session:
            crud.increment_download_count(session=session, file_id=file_id)

    n = 25
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(download, range(n)))

    with Session(engine) as session:
        assert session.get(StoredFile, file_id).download_count == n
    engine.dispose()


def test_increment_unknown_file(db: Session) -> None:
    assert crud.increment_download_count(session=db, file_id=uuid.uuid4()) is None


def test_delete_file_record(db: Session) -> None:
    db_file = crud.create_file_record(session=db, file_in=_file_in())
    crud.delete_file_record(session=db, db_file=db_file)
    assert crud.get_file(session=db, file_id=db_file.id) is None
    assert crud.list_files(session=db) == []
