import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import delete, update
from sqlmodel import Session, col, select

from app.ai.composer import compose_landing_prompt
from app.core.security import get_password_hash, verify_password
from app.models import (
    ProductInfo,
    ProductInfoCreate,
    RevokedToken,
    SocialPost,
    SocialPostCreate,
    SocialPostUpdate,
    StoredFile,
    StoredFileCreate,
    Template,
    TemplateCreate,
    User,
    UserCreate,
    get_datetime_utc,
)


def create_user(*, session: Session, user_create: UserCreate) -> User:
    db_obj = User.model_validate(
        user_create, update={"hashed_password": get_password_hash(user_create.password)}
    )
    session.add(db_obj)
    session.commit()
    session.refresh(db_obj)
    return db_obj


def get_user_by_email(*, session: Session, email: str) -> User | None:
    statement = select(User).where(User.email == email)
    session_user = session.exec(statement).first()
    return session_user


# Dummy hash to use for timing attack prevention when user is not found
# This is an Argon2 hash of a random password, used to ensure constant-time comparison
DUMMY_HASH = "$argon2id$v=19$m=65536,t=3,p=4$MjQyZWE1MzBjYjJlZTI0Yw$YTU4NGM5ZTZmYjE2NzZlZjY0ZWY3ZGRkY2U2OWFjNjk"


def authenticate(*, session: Session, email: str, password: str) -> User | None:
    db_user = get_user_by_email(session=session, email=email)
    if not db_user:
        verify_password(password, DUMMY_HASH)
        return None
    verified, updated_password_hash = verify_password(password, db_user.hashed_password)
    if not verified:
        return None
    if updated_password_hash:
        db_user.hashed_password = updated_password_hash
        session.add(db_user)
        session.commit()
        session.refresh(db_user)
    return db_user


def delete_user(*, session: Session, db_user: User) -> None:
    session.delete(db_user)
    session.commit()


def purge_expired_tokens(*, session: Session, now: datetime | None = None) -> int:
    statement = (
        delete(RevokedToken)
        .where(col(RevokedToken.expires_at) < (now or get_datetime_utc()))
        .execution_options(synchronize_session=False)
    )
    result = session.execute(statement)  # type: ignore[deprecated]
    session.commit()
    return result.rowcount


def revoke_token(*, session: Session, jti: str, expires_at: datetime | None) -> None:
    # Expired tokens fail signature checks on their own
    purge_expired_tokens(session=session)
    if session.get(RevokedToken, jti):
        return
    session.add(RevokedToken(jti=jti, expires_at=expires_at))
    session.commit()


def is_token_revoked(*, session: Session, jti: str | None) -> bool:
    if not jti:
        return False
    return session.get(RevokedToken, jti) is not None


def create_product_info(
    *, session: Session, product_in: ProductInfoCreate, owner_id: uuid.UUID
) -> ProductInfo:
    db_product = ProductInfo.model_validate(product_in, update={"owner_id": owner_id})
    db_product.generated_prompt = compose_landing_prompt(db_product)
    session.add(db_product)
    session.commit()
    session.refresh(db_product)
    return db_product


def get_product_info(*, session: Session, product_id: uuid.UUID) -> ProductInfo | None:
    return session.get(ProductInfo, product_id)


def list_user_products(*, session: Session, owner_id: uuid.UUID) -> list[ProductInfo]:
    statement = (
        select(ProductInfo)
        .where(ProductInfo.owner_id == owner_id)
        .order_by(col(ProductInfo.created_at).desc())
    )
    return list(session.exec(statement).all())


def create_social_post(
    *, session: Session, post_in: SocialPostCreate, user_id: uuid.UUID
) -> SocialPost:
    db_post = SocialPost.model_validate(post_in, update={"user_id": user_id})
    session.add(db_post)
    session.commit()
    session.refresh(db_post)
    return db_post


def list_user_social_posts(*, session: Session, user_id: uuid.UUID) -> list[SocialPost]:
    statement = (
        select(SocialPost)
        .where(SocialPost.user_id == user_id)
        .order_by(col(SocialPost.created_at).desc())
    )
    return list(session.exec(statement).all())


def edit_social_post(
    *, session: Session, db_post: SocialPost, post_in: SocialPostUpdate
) -> SocialPost:
    post_data = post_in.model_dump(exclude_unset=True, exclude_none=True)
    db_post.sqlmodel_update(post_data, update={"is_edited": True})
    session.add(db_post)
    session.commit()
    session.refresh(db_post)
    return db_post


def create_file_record(*, session: Session, file_in: StoredFileCreate) -> StoredFile:
    db_file = StoredFile.model_validate(file_in)
    session.add(db_file)
    session.commit()
    session.refresh(db_file)
    return db_file


def list_files(*, session: Session) -> list[StoredFile]:
    statement = select(StoredFile).order_by(col(StoredFile.created_at).desc())
    return list(session.exec(statement).all())


def get_file(*, session: Session, file_id: uuid.UUID) -> StoredFile | None:
    return session.get(StoredFile, file_id)


def delete_file_record(*, session: Session, db_file: StoredFile) -> None:
    session.delete(db_file)
    session.commit()


def increment_download_count(*, session: Session, file_id: uuid.UUID) -> StoredFile | None:
    # Single UPDATE so concurrent downloads never read-modify-write the counter
    statement = (
        update(StoredFile)
        .where(col(StoredFile.id) == file_id)
        .values(download_count=col(StoredFile.download_count) + 1)
    )
    result = session.execute(statement)  # type: ignore[deprecated]
    session.commit()
    if result.rowcount == 0:
        return None
    db_file = session.get(StoredFile, file_id)
    if db_file:
        session.refresh(db_file)
    return db_file


def create_template(*, session: Session, template_in: TemplateCreate) -> Template:
    db_template = Template.model_validate(template_in)
    session.add(db_template)
    session.commit()
    session.refresh(db_template)
    return db_template


def list_templates(*, session: Session, category: str | None = None) -> list[Template]:
    statement = select(Template)
    if category:
        statement = statement.where(Template.category == category)
    return list(session.exec(statement.order_by(col(Template.name))).all())


def get_template(*, session: Session, template_id: uuid.UUID) -> Template | None:
    return session.get(Template, template_id)


def get_template_by_name(*, session: Session, name: str) -> Template | None:
    return session.exec(select(Template).where(Template.name == name)).first()


def seed_templates(*, session: Session, catalog: list[dict[str, Any]]) -> int:
    created = 0
    for entry in catalog:
        if get_template_by_name(session=session, name=entry["name"]):
            continue
        create_template(session=session, template_in=TemplateCreate(**entry))
        created += 1
    return created
