import itertools
from types import SimpleNamespace

import pytest

from app.ai.composer import (
    PostOptions,
    UnknownPromptVersion,
    available_versions,
    compose_landing_prompt,
    compose_social_post_prompt,
)
from app.ai.prompts.options import (
    PLATFORM_CONTEXT,
    Objective,
    Platform,
    PostLength,
    PostTone,
)
from app.models import ProductInfoCreate
from app.tests.utils.utils import product_payload


@pytest.fixture
def product() -> ProductInfoCreate:
    return ProductInfoCreate(**product_payload(price="49€/mois", url="https://crm.example"))


def test_landing_prompt_contains_key_fields(product):
    prompt = compose_landing_prompt(product)
    for expected in ("CRM Pro", "PME", "CRM centralisé", "Essai gratuit", "CRM PME"):
        assert expected in prompt
    assert '"hero"' in prompt


def test_landing_prompt_is_deterministic(product):
    assert compose_landing_prompt(product) == compose_landing_prompt(product)
    assert compose_landing_prompt(product, "v2") == compose_landing_prompt(product, "v2")


def test_landing_prompt_skips_empty_optional_fields(product):
    prompt = compose_landing_prompt(product)
    assert "Prix : 49€/mois" in prompt
    assert "Garantie" not in prompt
    assert "Localisation" not in prompt

    with_location = compose_landing_prompt(product.model_copy(update={"location": "Lyon"}))
    assert "Localisation : Lyon" in with_location


def test_landing_prompt_does_not_truncate(product):
    long_problems = "problème " * 2000
    prompt = compose_landing_prompt(product.model_copy(update={"problems": long_problems}))
    assert long_problems.strip() in prompt


def test_landing_prompt_accepts_plain_strings():
    record = SimpleNamespace(**product_payload())
    assert "CRM Pro" in compose_landing_prompt(record)


def test_landing_prompt_unknown_version(product):
    assert available_versions() == ["v1", "v2"]
    with pytest.raises(UnknownPromptVersion):
        compose_landing_prompt(product, "v3")


def test_landing_prompt_rejects_unmapped_tone():
    record = SimpleNamespace(**product_payload(tone="sarcastique"))
    with pytest.raises(ValueError):
        compose_landing_prompt(record)


def test_social_prompt_for_every_option_combination(product):
    for platform, objective, tone, length in itertools.product(
        Platform, Objective, PostTone, PostLength
    ):
        options = PostOptions(platform=platform, objective=objective, tone=tone, length=length)
        prompt = compose_social_post_prompt(product, options)
        assert prompt
        assert "CRM Pro" in prompt
        assert PLATFORM_CONTEXT[platform] in prompt
        assert prompt == compose_social_post_prompt(product, options)


def test_social_prompt_flags_and_url(product):
    options = PostOptions(include_hashtags=False, include_emojis=True, custom_url="https://promo.example")
    prompt = compose_social_post_prompt(product, options)
    assert "Inclure des hashtags : NON" in prompt
    assert "Inclure des emojis : OUI" in prompt
    assert "Inclus des hashtags" not in prompt
    assert "Utilise des emojis" in prompt
    assert "URL : https://promo.example" in prompt

    fallback = compose_social_post_prompt(product, PostOptions())
    assert "URL : https://crm.example" in fallback
