import logging
from typing import Any

import httpx

from app.ai.gateway import first_text
from app.client.store import SessionStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class MarketingApiClient:
    """
    Thin client for the REST API.

    The bearer token is read from the session store on every request, so
    logging in or out through this client (or clearing the store) takes
    effect immediately.
    """

    def __init__(
        self,
        http: httpx.Client,
        store: SessionStore | None = None,
        base_path: str = "/api",
    ):
        self.http = http
        self.store = store or SessionStore()
        self.base_path = base_path.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.store.token:
            headers["Authorization"] = f"Bearer {self.store.token}"
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self.http.request(
            method, f"{self.base_path}{path}", headers=self._headers(), **kwargs
        )
        if response.is_error:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning("%s %s failed with %s: %s", method, path, response.status_code, detail)
            raise ApiError(response.status_code, detail)
        if not response.content:
            return None
        return response.json()

    # Auth

    def login(self, email: str, password: str) -> dict[str, Any]:
        token = self._request("POST", "/login", json={"email": email, "password": password})
        self.store.set_token(token["access_token"])
        return token

    def register(self, email: str, password: str, full_name: str | None = None) -> dict[str, Any]:
        token = self._request(
            "POST",
            "/register",
            json={"email": email, "password": password, "full_name": full_name},
        )
        self.store.set_token(token["access_token"])
        return token

    def me(self) -> dict[str, Any]:
        return self._request("GET", "/me")

    def logout(self) -> None:
        try:
            self._request("POST", "/logout")
        finally:
            self.store.clear_token()

    # Products and prompts

    def create_product_info(self, product: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/product-info", json=product)

    def list_products(self) -> list[dict[str, Any]]:
        return self._request("GET", "/user/products")

    def get_product(self, product_id: str) -> dict[str, Any]:
        return self._request("GET", f"/product-info/{product_id}")

    def generate_prompt(self, version: str, product_id: str) -> str:
        return self._request("GET", f"/generate-prompt/{version}/{product_id}")["prompt"]

    def generate(self, prompt: str) -> dict[str, Any]:
        return self._request("POST", "/generate-claude", json={"prompt": prompt})

    def generate_text(self, prompt: str) -> str:
        return first_text(self.generate(prompt))

    # Files

    def list_files(self) -> list[dict[str, Any]]:
        return self._request("GET", "/files")

    def upload_file(
        self, filename: str, content: bytes, content_type: str, name: str | None = None
    ) -> dict[str, Any]:
        data = {"name": name} if name else None
        return self._request(
            "POST", "/files", data=data, files={"file": (filename, content, content_type)}
        )

    def delete_file(self, file_id: str) -> None:
        self._request("DELETE", f"/files/{file_id}")

    def mark_downloaded(self, file_id: str) -> dict[str, Any]:
        return self._request("PATCH", f"/files/{file_id}/download")

    # Templates

    def list_templates(self) -> list[dict[str, Any]]:
        return self._request("GET", "/templates")

    def get_template(self, template_id: str) -> dict[str, Any]:
        return self._request("GET", f"/template/{template_id}")

    # Explicit post persistence, never called by SessionStore.save_post

    def persist_social_post(self, post: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/social-posts", json=post)

    def list_social_posts(self) -> list[dict[str, Any]]:
        return self._request("GET", "/social-posts")
