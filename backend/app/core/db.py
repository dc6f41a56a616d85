import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from app import crud
from app.catalog import DEFAULT_TEMPLATES
from app.core.config import settings
from app.models import UserCreate

logger = logging.getLogger(__name__)


def _engine_kwargs(uri: str) -> dict:
    if uri.startswith("sqlite"):
        # Handlers run in FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    **_engine_kwargs(settings.SQLALCHEMY_DATABASE_URI),
)


def create_db_and_tables(db_engine: Engine) -> None:
    SQLModel.metadata.create_all(db_engine)


def init_db(session: Session) -> None:
    # Tables should be created with migrations in a deployed environment;
    # create_db_and_tables covers local runs and tests.
    user = crud.get_user_by_email(session=session, email=settings.FIRST_SUPERUSER)
    if not user:
        crud.create_user(
            session=session,
            user_create=UserCreate(
                email=settings.FIRST_SUPERUSER,
                password=settings.FIRST_SUPERUSER_PASSWORD,
                full_name="Admin",
            ),
        )
        logger.info("Created first user %s", settings.FIRST_SUPERUSER)

    purged = crud.purge_expired_tokens(session=session)
    if purged:
        logger.info("Purged %s expired revoked tokens", purged)

    created = crud.seed_templates(session=session, catalog=DEFAULT_TEMPLATES)
    if created:
        logger.info("Seeded %s page templates", created)
