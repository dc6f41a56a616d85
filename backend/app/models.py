import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import EmailStr, field_validator
from sqlalchemy import JSON, DateTime
from sqlmodel import Field, Relationship, SQLModel

from app.ai.prompts.options import AwarenessLevel, Goal, LandingTone


def get_datetime_utc() -> datetime:
    return datetime.now(timezone.utc)


# Shared properties
class UserBase(SQLModel):
    email: EmailStr = Field(unique=True, index=True, max_length=255)
    is_active: bool = True
    full_name: str | None = Field(default=None, max_length=255)


# Properties to receive via API on creation
class UserCreate(UserBase):
    password: str = Field(min_length=8, max_length=128)


class UserRegister(SQLModel):
    email: EmailStr = Field(max_length=255)
    password: str = Field(min_length=8, max_length=128)
    full_name: str | None = Field(default=None, max_length=255)


class UserLogin(SQLModel):
    email: EmailStr = Field(max_length=255)
    password: str = Field(min_length=1, max_length=128)


# Database model, database table inferred from class name
class User(UserBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    hashed_password: str
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    products: list["ProductInfo"] = Relationship(
        back_populates="owner", cascade_delete=True
    )
    social_posts: list["SocialPost"] = Relationship(
        back_populates="user", cascade_delete=True
    )


# Properties to return via API, id is always required
class UserPublic(UserBase):
    id: uuid.UUID
    created_at: datetime | None = None


# Generic message
class Message(SQLModel):
    message: str


# JSON payload containing access token
class Token(SQLModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int | None = None


# Contents of JWT token
class TokenPayload(SQLModel):
    sub: str | None = None
    jti: str | None = None
    exp: int | None = None


# Tokens invalidated through /logout, purged once past expires_at
class RevokedToken(SQLModel, table=True):
    jti: str = Field(primary_key=True, max_length=64)
    expires_at: datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


# Product info

class ProductInfoBase(SQLModel):
    name: str = Field(min_length=1, max_length=255)
    goal: Goal = Goal.LEADS
    price: str = ""
    audience: str = ""
    awareness_level: AwarenessLevel = AwarenessLevel.UNAWARE
    problems: str = ""
    solution: str = ""
    benefits: str = ""
    usp: str = ""
    testimonials: str = ""
    features: str = ""
    guarantee: str = ""
    cta: str = ""
    tone: LandingTone = LandingTone.PROFESSIONAL
    references: str = ""
    main_keyword: str = ""
    secondary_keywords: str = ""
    location: str = ""
    brand: str = ""
    url: str = ""
    primary_color: str = Field(default="", max_length=32)
    secondary_color: str = Field(default="", max_length=32)
    accent_color: str = Field(default="", max_length=32)
    background_color: str = Field(default="", max_length=32)
    text_color: str = Field(default="", max_length=32)


class ProductInfoCreate(ProductInfoBase):
    pass


class ProductInfo(ProductInfoBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    generated_prompt: str = ""
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    owner_id: uuid.UUID = Field(
        foreign_key="user.id", nullable=False, ondelete="CASCADE"
    )
    owner: User | None = Relationship(back_populates="products")
    social_posts: list["SocialPost"] = Relationship(
        back_populates="product", cascade_delete=True
    )


class ProductInfoPublic(ProductInfoBase):
    id: uuid.UUID
    owner_id: uuid.UUID
    generated_prompt: str
    created_at: datetime | None = None


class GeneratedPromptPublic(SQLModel):
    version: str
    product_id: uuid.UUID
    prompt: str


# Social posts

def _clean_hashtags(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(tag).strip() for tag in value if str(tag).strip()]
    return value


class SocialPostBase(SQLModel):
    platform: str = Field(max_length=32)
    content: str
    hashtags: list[str] = Field(default_factory=list, sa_type=JSON)
    tone: str = Field(default="", max_length=32)
    objective: str = Field(default="", max_length=32)


class SocialPostCreate(SocialPostBase):
    product_id: uuid.UUID

    @field_validator("hashtags", mode="before")
    @classmethod
    def normalize_hashtags(cls, value: Any) -> Any:
        return _clean_hashtags(value)


class SocialPostUpdate(SQLModel):
    content: str | None = None
    hashtags: list[str] | None = None

    @field_validator("hashtags", mode="before")
    @classmethod
    def normalize_hashtags(cls, value: Any) -> Any:
        # null leaves the stored hashtags untouched
        return None if value is None else _clean_hashtags(value)


class SocialPost(SocialPostBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    is_edited: bool = False
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )
    product_id: uuid.UUID = Field(
        foreign_key="productinfo.id", nullable=False, ondelete="CASCADE"
    )
    user_id: uuid.UUID = Field(
        foreign_key="user.id", nullable=False, ondelete="CASCADE"
    )
    product: ProductInfo | None = Relationship(back_populates="social_posts")
    user: User | None = Relationship(back_populates="social_posts")


class SocialPostPublic(SocialPostBase):
    id: uuid.UUID
    product_id: uuid.UUID
    user_id: uuid.UUID
    is_edited: bool
    created_at: datetime | None = None


# Download center files

class StoredFileBase(SQLModel):
    name: str = Field(max_length=255)
    original_filename: str = Field(max_length=255)
    content_type: str = Field(max_length=100)
    size_bytes: int = 0


class StoredFileCreate(StoredFileBase):
    storage_path: str


class StoredFile(StoredFileBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    storage_path: str
    download_count: int = Field(default=0, nullable=False)
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


class StoredFilePublic(StoredFileBase):
    id: uuid.UUID
    download_count: int
    created_at: datetime | None = None


# Page templates

class TemplateBase(SQLModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    category: str = Field(default="landing", max_length=50)
    layout: dict = Field(default_factory=dict, sa_type=JSON)  # sections with {{path}} placeholders


class TemplateCreate(TemplateBase):
    pass


class Template(TemplateBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime | None = Field(
        default_factory=get_datetime_utc,
        sa_type=DateTime(timezone=True),  # type: ignore
    )


class TemplatePublic(TemplateBase):
    id: uuid.UUID
    created_at: datetime | None = None


# AI gateway

class ClaudePrompt(SQLModel):
    prompt: str = Field(min_length=1)
