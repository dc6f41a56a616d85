from typing import Any

from app.ai.composer import PostOptions
from app.ai.prompts.options import (
    LENGTH_LABELS,
    OBJECTIVE_LABELS,
    PLATFORM_LABELS,
    POST_TONE_LABELS,
)
from app.models import ProductInfoBase

# Step id, title and the fields entered on that step
FORM_SECTIONS: list[tuple[str, str, tuple[str, ...]]] = [
    ("offre", "Informations sur l'offre", ("name", "goal", "price")),
    ("public", "Public cible", ("audience", "awareness_level")),
    ("probleme", "Problème & solution", ("problems", "solution", "benefits", "usp")),
    ("arguments", "Arguments & contenu", ("testimonials", "features", "guarantee", "cta")),
    ("style", "Style & inspiration", ("tone", "references")),
    (
        "seo",
        "SEO",
        (
            "main_keyword",
            "secondary_keywords",
            "location",
            "brand",
            "url",
            "primary_color",
            "secondary_color",
            "accent_color",
            "background_color",
            "text_color",
        ),
    ),
]

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "goal",
    "audience",
    "awareness_level",
    "problems",
    "solution",
    "benefits",
    "usp",
    "features",
    "cta",
    "tone",
    "main_keyword",
)


class MissingFieldsError(ValueError):
    def __init__(self, fields: list[str]):
        super().__init__("Missing required fields: " + ", ".join(fields))
        self.fields = fields


class ProductForm(ProductInfoBase):
    """
    The multi-step product description form.

    Every field may be blank while the user moves between steps; the
    required ones are only checked on submit.
    """

    name: str = ""
    step: int = 0

    def next_step(self) -> int:
        if self.step < len(FORM_SECTIONS) - 1:
            self.step += 1
        return self.step

    def previous_step(self) -> int:
        if self.step > 0:
            self.step -= 1
        return self.step

    @property
    def current_section(self) -> tuple[str, str, tuple[str, ...]]:
        return FORM_SECTIONS[self.step]

    def missing_required_fields(self) -> list[str]:
        missing = []
        for field in REQUIRED_FIELDS:
            value = getattr(self, field)
            if not str(getattr(value, "value", value) or "").strip():
                missing.append(field)
        return missing

    def to_payload(self) -> dict[str, Any]:
        missing = self.missing_required_fields()
        if missing:
            raise MissingFieldsError(missing)
        return self.model_dump(mode="json", exclude={"step"})


# Labelled choices of the social post generator, keyed by PostOptions field
POST_OPTION_LABELS: dict[str, dict[Any, str]] = {
    "platform": PLATFORM_LABELS,
    "objective": OBJECTIVE_LABELS,
    "length": LENGTH_LABELS,
    "tone": POST_TONE_LABELS,
}


def post_option_choices() -> dict[str, list[tuple[str, str]]]:
    """(value, label) pairs for each select of the post generator."""
    return {
        field: [(option.value, label) for option, label in labels.items()]
        for field, labels in POST_OPTION_LABELS.items()
    }


def describe_post_options(options: PostOptions) -> str:
    return " · ".join(
        labels[getattr(options, field)] for field, labels in POST_OPTION_LABELS.items()
    )
