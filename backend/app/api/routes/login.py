import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, status

from app import crud
from app.api.deps import CurrentUser, SessionDep, TokenPayloadDep
from app.core import security
from app.core.config import settings
from app.models import Message, Token, User, UserCreate, UserLogin, UserPublic, UserRegister

router = APIRouter()
logger = logging.getLogger(__name__)


def _issue_token(user: User) -> Token:
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return Token(
        access_token=security.create_access_token(user.id, expires_delta=access_token_expires),
        expires_in=int(access_token_expires.total_seconds()),
    )


@router.post("/login", response_model=Token)
def login(session: SessionDep, credentials: UserLogin) -> Token:
    """
    Exchange email and password for a bearer token.
    """
    user = crud.authenticate(
        session=session, email=credentials.email, password=credentials.password
    )
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )
    elif not user.is_active:
        raise HTTPException(status_code=400, detail="Inactive user")
    return _issue_token(user)


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(session: SessionDep, user_in: UserRegister) -> Token:
    user = crud.get_user_by_email(session=session, email=user_in.email)
    if user:
        raise HTTPException(
            status_code=400,
            detail="The user with this email already exists in the system",
        )
    user_create = UserCreate.model_validate(user_in)
    user = crud.create_user(session=session, user_create=user_create)
    logger.info("Registered user %s", user.id)
    return _issue_token(user)


@router.get("/me", response_model=UserPublic)
def read_me(current_user: CurrentUser) -> Any:
    return current_user


@router.delete("/me", response_model=Message)
def delete_me(session: SessionDep, current_user: CurrentUser) -> Message:
    """
    Delete the caller's account along with their products and saved posts.
    """
    crud.delete_user(session=session, db_user=current_user)
    return Message(message="User deleted successfully")


@router.post("/logout", response_model=Message)
def logout(
    session: SessionDep, current_user: CurrentUser, token_data: TokenPayloadDep
) -> Message:
    expires_at = (
        datetime.fromtimestamp(token_data.exp, tz=timezone.utc) if token_data.exp else None
    )
    if token_data.jti:
        crud.revoke_token(session=session, jti=token_data.jti, expires_at=expires_at)
    logger.info("User %s logged out", current_user.id)
    return Message(message="Successfully logged out")
