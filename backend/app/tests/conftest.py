from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.ai.gateway import get_ai_gateway
from app.api.deps import get_db
from app.api.routes.files import get_upload_dir
from app.core.config import settings
from app.core.db import init_db
from app.main import app
from app.tests.utils.fakes import FakeGateway
from app.tests.utils.utils import register_user


@pytest.fixture(name="engine")
def engine_fixture() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="db")
def db_fixture(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        init_db(session)
        yield session


@pytest.fixture(name="upload_dir")
def upload_dir_fixture(tmp_path: Path) -> Path:
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    return upload_dir


@pytest.fixture(name="gateway")
def gateway_fixture() -> FakeGateway:
    return FakeGateway(text="Découvrez CRM Pro 🚀 #CRM #PME")


@pytest.fixture(name="client")
def client_fixture(
    db: Session, upload_dir: Path, gateway: FakeGateway
) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_upload_dir] = lambda: upload_dir
    app.dependency_overrides[get_ai_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_token_headers(client: TestClient) -> dict[str, str]:
    return register_user(client)


@pytest.fixture
def api() -> str:
    return settings.API_PREFIX
