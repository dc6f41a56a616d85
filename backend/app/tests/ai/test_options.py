import pytest

from app.ai.prompts import options


@pytest.mark.parametrize(
    "enum_cls, mapping",
    [
        (options.Goal, options.GOAL_CONTEXT),
        (options.AwarenessLevel, options.AWARENESS_STRATEGY),
        (options.LandingTone, options.LANDING_TONE_GUIDE),
        (options.Platform, options.PLATFORM_CONTEXT),
        (options.Objective, options.OBJECTIVE_CONTEXT),
        (options.PostLength, options.LENGTH_GUIDE),
        (options.PostTone, options.POST_TONE_GUIDE),
        (options.Platform, options.PLATFORM_LABELS),
        (options.Objective, options.OBJECTIVE_LABELS),
        (options.PostLength, options.LENGTH_LABELS),
        (options.PostTone, options.POST_TONE_LABELS),
    ],
)
def test_every_option_has_a_phrase(enum_cls, mapping):
    assert set(mapping) == set(enum_cls)
    assert all(phrase.strip() for phrase in mapping.values())
