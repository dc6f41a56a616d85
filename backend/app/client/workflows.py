import logging
import re
from typing import Any

from app.ai.composer import PostOptions, compose_social_post_prompt
from app.ai.json_extract import parse_generated_json
from app.client.api import MarketingApiClient
from app.client.forms import ProductForm, describe_post_options
from app.client.store import GeneratedPost
from app.client.templating import apply_content

logger = logging.getLogger(__name__)

HASHTAG_RE = re.compile(r"(?<![\w#])#(\w+)", re.UNICODE)


class GenerationFailed(Exception):
    pass


def extract_hashtags(text: str) -> list[str]:
    """Hashtags in order of first appearance, without duplicates."""
    return list(dict.fromkeys(f"#{tag}" for tag in HASHTAG_RE.findall(text or "")))


class _ProductView:
    def __init__(self, data: dict[str, Any]):
        self._data = data

    def __getattr__(self, name: str) -> Any:
        return self._data.get(name, "")


def generate_landing_page(client: MarketingApiClient, form: ProductForm) -> tuple[str, Any]:
    """
    Submit the product form, send the returned prompt to Claude and parse the JSON reply.

    Raises ``MissingFieldsError`` before any request when required fields are blank.
    """
    payload = form.to_payload()
    product = client.create_product_info(payload)
    prompt = product.get("generated_prompt") or ""
    if not prompt:
        raise GenerationFailed("No prompt returned for the product")

    raw_text = client.generate_text(prompt)
    try:
        data = parse_generated_json(raw_text)
    except ValueError as e:
        raise GenerationFailed(str(e)) from e
    client.store.remember_json(data)
    return prompt, data


def generate_social_post(
    client: MarketingApiClient,
    product: dict[str, Any],
    options: PostOptions,
) -> GeneratedPost:
    """Compose the post prompt locally and generate the post text."""
    prompt = compose_social_post_prompt(_ProductView(product), options)
    content = client.generate_text(prompt)
    if not content.strip():
        raise GenerationFailed("Model returned empty content")
    post = GeneratedPost(
        product_id=str(product["id"]),
        options=options,
        prompt=prompt,
        generated_content=content,
        hashtags=extract_hashtags(content) if options.include_hashtags else [],
    )
    logger.info("Generated social post (%s)", describe_post_options(options))
    client.store.remember_post(post)
    return post


def apply_to_template(client: MarketingApiClient, template_id: str) -> dict[str, Any]:
    selection = client.store.select_template(template_id)
    template = client.get_template(template_id)
    logger.info("Applying generated content to template %s", template_id)
    return apply_content(template["layout"], selection.data)
