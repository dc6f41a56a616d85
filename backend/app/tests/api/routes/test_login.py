from fastapi.testclient import TestClient
from sqlmodel import Session, select

from app.core.config import settings
from app.models import ProductInfo, User
from app.tests.utils.utils import product_payload, random_email, register_user


def test_register_then_me(client: TestClient, api: str) -> None:
    email = random_email()
    headers = register_user(client, email=email)

    r = client.get(f"{api}/me", headers=headers)
    assert r.status_code == 200
    assert r.json()["email"] == email
    assert "hashed_password" not in r.json()


def test_register_existing_email(client: TestClient, api: str) -> None:
    email = random_email()
    register_user(client, email=email)
    r = client.post(f"{api}/register", json={"email": email, "password": "another-pass"})
    assert r.status_code == 400


def test_login_returns_bearer_token(client: TestClient, api: str) -> None:
    r = client.post(
        f"{api}/login",
        json={
            "email": settings.FIRST_SUPERUSER,
            "password": settings.FIRST_SUPERUSER_PASSWORD,
        },
    )
    tokens = r.json()
    assert r.status_code == 200
    assert tokens["token_type"] == "bearer"
    assert tokens["access_token"]
    assert tokens["expires_in"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60


def test_login_wrong_password(client: TestClient, api: str) -> None:
    r = client.post(
        f"{api}/login",
        json={"email": settings.FIRST_SUPERUSER, "password": "incorrect"},
    )
    assert r.status_code == 401


def test_me_with_garbage_token(client: TestClient, api: str) -> None:
    r = client.get(f"{api}/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_logout_revokes_token(client: TestClient, api: str) -> None:
    headers = register_user(client)

    r = client.post(f"{api}/logout", headers=headers)
    assert r.status_code == 200

    assert client.get(f"{api}/me", headers=headers).status_code == 401
    assert client.post(f"{api}/logout", headers=headers).status_code == 401


def test_unauthenticated_requests_are_rejected_without_side_effects(
    client: TestClient, db: Session, api: str
) -> None:
    users_before = len(db.exec(select(User)).all())

    assert client.get(f"{api}/me").status_code == 401
    assert client.post(f"{api}/logout").status_code == 401
    assert client.post(f"{api}/product-info", json=product_payload()).status_code == 401
    assert client.get(f"{api}/user/products").status_code == 401
    assert client.post(f"{api}/generate-claude", json={"prompt": "hello"}).status_code == 401

    assert db.exec(select(ProductInfo)).all() == []
    assert len(db.exec(select(User)).all()) == users_before


def test_unauthenticated_generate_does_not_reach_provider(
    client: TestClient, gateway, api: str
) -> None:
    client.post(f"{api}/generate-claude", json={"prompt": "hello"})
    assert gateway.prompts == []


def test_delete_me_removes_products(client: TestClient, db: Session, api: str) -> None:
    headers = register_user(client)
    r = client.post(f"{api}/product-info", headers=headers, json=product_payload())
    assert r.status_code == 201

    r = client.delete(f"{api}/me", headers=headers)
    assert r.status_code == 200
    db.expire_all()
    assert db.exec(select(ProductInfo)).all() == []
    assert client.get(f"{api}/me", headers=headers).status_code == 401
