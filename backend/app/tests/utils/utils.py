import random
import string
from typing import Any

from fastapi.testclient import TestClient

from app.core.config import settings


def random_lower_string() -> str:
    return "".join(random.choices(string.ascii_lowercase, k=32))


def random_email() -> str:
    return f"{random_lower_string()}@{random_lower_string()}.com"


def register_user(client: TestClient, email: str | None = None, password: str = "s3cret-pass") -> dict[str, str]:
    r = client.post(
        f"{settings.API_PREFIX}/register",
        json={"email": email or random_email(), "password": password, "full_name": "Test User"},
    )
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def product_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "name": "CRM Pro",
        "goal": "obtenir des leads",
        "audience": "PME",
        "awareness_level": "conscient du problème",
        "problems": "suivi client difficile",
        "solution": "CRM centralisé",
        "benefits": "gain de temps",
        "usp": "IA intégrée",
        "features": "automatisation",
        "cta": "Essai gratuit",
        "tone": "professionnelle",
        "main_keyword": "CRM PME",
    }
    payload.update(overrides)
    return payload
