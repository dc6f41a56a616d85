"""
Prompt composition.

Both composers are pure: they only interpolate the product record and the
selected options into the fixed templates of ``app.ai.prompts``. Values are
never truncated. Option values outside their enum raise ``ValueError`` when
coerced; callers are expected to validate them first (the API does so via
the request schemas).
"""
from typing import Any

from pydantic import BaseModel

from app.ai.prompts.landing_page import (
    DEFAULT_LANDING_PAGE_VERSION,
    LANDING_PAGE_JSON_CONTRACT,
    LANDING_PAGE_PROMPTS,
)
from app.ai.prompts.options import (
    AWARENESS_STRATEGY,
    GOAL_CONTEXT,
    LANDING_TONE_GUIDE,
    LENGTH_GUIDE,
    OBJECTIVE_CONTEXT,
    PLATFORM_CONTEXT,
    POST_TONE_GUIDE,
    AwarenessLevel,
    Goal,
    LandingTone,
    Objective,
    Platform,
    PostLength,
    PostTone,
)
from app.ai.prompts.social_post import (
    EMOJIS_INSTRUCTION,
    HASHTAGS_INSTRUCTION,
    SOCIAL_POST_PROMPT,
)

NOT_PROVIDED = "non précisé"


class UnknownPromptVersion(ValueError):
    def __init__(self, version: str):
        super().__init__(f"Unknown prompt version: {version}")
        self.version = version


class PostOptions(BaseModel):
    platform: Platform = Platform.INSTAGRAM
    objective: Objective = Objective.AWARENESS
    length: PostLength = PostLength.MEDIUM
    tone: PostTone = PostTone.CASUAL
    include_hashtags: bool = True
    include_emojis: bool = True
    custom_url: str = ""


def available_versions() -> list[str]:
    return sorted(LANDING_PAGE_PROMPTS)


def _text(product: Any, attr: str) -> str:
    value = getattr(product, attr, "") or ""
    return str(value).strip()


def _optional_lines(pairs: list[tuple[str, str]]) -> str:
    lines = [f"- {label} : {value}" for label, value in pairs if value]
    return "\n".join(lines) + "\n" if lines else ""


def compose_landing_prompt(product: Any, version: str = DEFAULT_LANDING_PAGE_VERSION) -> str:
    """
    Build the landing page prompt for a ProductInfo-like record.

    The prompt asks the model for JSON only, keyed the way the seeded page
    templates expect (hero, problem, solution, benefits, ...).
    """
    template = LANDING_PAGE_PROMPTS.get(version)
    if template is None:
        raise UnknownPromptVersion(version)

    goal = Goal(product.goal)
    awareness = AwarenessLevel(product.awareness_level)
    tone = LandingTone(product.tone)

    colors = ", ".join(
        f"{label} {value}"
        for label, value in (
            ("primaire", _text(product, "primary_color")),
            ("secondaire", _text(product, "secondary_color")),
            ("accent", _text(product, "accent_color")),
            ("fond", _text(product, "background_color")),
            ("texte", _text(product, "text_color")),
        )
        if value
    )
    optional_details = _optional_lines(
        [
            ("Prix", _text(product, "price")),
            ("Témoignages", _text(product, "testimonials")),
            ("Garantie", _text(product, "guarantee")),
            ("Marque", _text(product, "brand")),
            ("Références / inspirations", _text(product, "references")),
            ("Couleurs de la charte", colors),
            ("URL", _text(product, "url")),
        ]
    )
    seo_details = _optional_lines(
        [
            ("Mots-clés secondaires", _text(product, "secondary_keywords")),
            ("Localisation", _text(product, "location")),
        ]
    )

    body = template.format(
        name=_text(product, "name"),
        goal=goal.value,
        goal_context=GOAL_CONTEXT[goal],
        audience=_text(product, "audience"),
        awareness_level=awareness.value,
        awareness_strategy=AWARENESS_STRATEGY[awareness],
        problems=_text(product, "problems"),
        solution=_text(product, "solution"),
        benefits=_text(product, "benefits"),
        usp=_text(product, "usp"),
        features=_text(product, "features"),
        cta=_text(product, "cta"),
        tone_guide=LANDING_TONE_GUIDE[tone],
        main_keyword=_text(product, "main_keyword"),
        optional_details=optional_details,
        seo_details=seo_details,
    )
    return f"{body.rstrip()}\n\n{LANDING_PAGE_JSON_CONTRACT}"


def compose_social_post_prompt(product: Any, options: PostOptions) -> str:
    platform = Platform(options.platform)
    objective = Objective(options.objective)
    length = PostLength(options.length)
    tone = PostTone(options.tone)

    tags = ", ".join(
        t for t in (_text(product, "main_keyword"), _text(product, "secondary_keywords")) if t
    )
    extra = []
    if options.include_hashtags:
        extra.append(HASHTAGS_INSTRUCTION)
    if options.include_emojis:
        extra.append(EMOJIS_INSTRUCTION)
    extra_instructions = "\n" + "\n".join(extra) + "\n" if extra else ""

    return SOCIAL_POST_PROMPT.format(
        platform=platform.value,
        platform_context=PLATFORM_CONTEXT[platform],
        objective_context=OBJECTIVE_CONTEXT[objective],
        name=_text(product, "name"),
        description=_text(product, "solution") or _text(product, "usp") or NOT_PROVIDED,
        price=_text(product, "price") or NOT_PROVIDED,
        benefits=_text(product, "benefits") or NOT_PROVIDED,
        features=_text(product, "features") or NOT_PROVIDED,
        tags=tags or NOT_PROVIDED,
        url=options.custom_url.strip() or _text(product, "url") or NOT_PROVIDED,
        length_guide=LENGTH_GUIDE[length],
        tone_guide=POST_TONE_GUIDE[tone],
        hashtags_flag="OUI" if options.include_hashtags else "NON",
        emojis_flag="OUI" if options.include_emojis else "NON",
        extra_instructions=extra_instructions,
    )
