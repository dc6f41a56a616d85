"""
Session state for API clients.

Replaces ambient browser storage with one explicit object: the auth token,
the last generated post and landing page JSON, the template selection and
the saved-post history all live here and are read and written through
methods. Nothing in this module talks to the server; in particular
``save_post`` only records the post in memory.
"""
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from app.ai.composer import PostOptions


class GeneratedPost(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    product_id: str
    options: PostOptions
    prompt: str
    generated_content: str
    hashtags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TemplateSelection(BaseModel):
    template_id: str
    data: Any


class SessionStore(BaseModel):
    token: str | None = None
    generated_post: GeneratedPost | None = None
    generated_json: Any = None
    template_selection: TemplateSelection | None = None
    history: list[GeneratedPost] = Field(default_factory=list)

    def set_token(self, token: str) -> None:
        self.token = token

    def clear_token(self) -> None:
        self.token = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def remember_post(self, post: GeneratedPost) -> None:
        self.generated_post = post

    def remember_json(self, data: Any) -> None:
        self.generated_json = data

    def select_template(self, template_id: str) -> TemplateSelection:
        if self.generated_json is None:
            raise ValueError("No generated JSON to apply")
        self.template_selection = TemplateSelection(
            template_id=template_id, data=self.generated_json
        )
        return self.template_selection

    def save_post(self) -> GeneratedPost | None:
        """Move the pending post to the top of the history. Never persisted."""
        post = self.generated_post
        if post is None:
            return None
        self.history.insert(0, post)
        self.generated_post = None
        return post

    def delete_post(self, post_id: str) -> bool:
        before = len(self.history)
        self.history = [p for p in self.history if p.id != post_id]
        return len(self.history) != before

    def clear(self) -> None:
        self.token = None
        self.generated_post = None
        self.generated_json = None
        self.template_selection = None
        self.history = []
