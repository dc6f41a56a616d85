import uuid

from fastapi.testclient import TestClient

from app.catalog import DEFAULT_TEMPLATES


def test_catalog_is_seeded(client: TestClient, api: str) -> None:
    r = client.get(f"{api}/templates")
    assert r.status_code == 200
    names = {t["name"] for t in r.json()}
    assert names == {t["name"] for t in DEFAULT_TEMPLATES}


def test_create_and_read_template(client: TestClient, api: str) -> None:
    payload = {
        "name": "Webinar",
        "description": "Inscription à un webinar",
        "category": "event",
        "layout": {"sections": [{"type": "hero", "title": "{{hero.title}}"}]},
    }
    r = client.post(f"{api}/templates", json=payload)
    assert r.status_code == 201
    created = r.json()

    r = client.get(f"{api}/template/{created['id']}")
    assert r.status_code == 200
    assert r.json()["layout"] == payload["layout"]

    r = client.get(f"{api}/templates", params={"category": "event"})
    assert [t["name"] for t in r.json()] == ["Webinar"]


def test_read_template_not_found(client: TestClient, api: str) -> None:
    assert client.get(f"{api}/template/{uuid.uuid4()}").status_code == 404
