"""
Enumerated presentation options and the phrases each value maps to.

Every mapping below is total over its enum; ``app.tests.ai.test_options``
checks that no member is left without a phrase or label.
"""
from enum import Enum


class Goal(str, Enum):
    LEADS = "obtenir des leads"
    SELL = "vendre un produit"
    BOOK_CALL = "réserver un appel"


class AwarenessLevel(str, Enum):
    UNAWARE = "inconscient du problème"
    PROBLEM_AWARE = "conscient du problème"
    SOLUTION_SEEKING = "cherche une solution"
    READY_TO_BUY = "prêt à acheter"


class LandingTone(str, Enum):
    PROFESSIONAL = "professionnelle"
    ENGAGING = "engageante"
    FUN = "fun"
    EXPERT = "experte"
    DIRECT = "simple et directe"


class Platform(str, Enum):
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    TIKTOK = "tiktok"


class Objective(str, Enum):
    AWARENESS = "awareness"
    ENGAGEMENT = "engagement"
    CONVERSION = "conversion"
    TRAFFIC = "traffic"


class PostLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class PostTone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ENTHUSIASTIC = "enthusiastic"
    EDUCATIONAL = "educational"


# Landing page

GOAL_CONTEXT: dict[Goal, str] = {
    Goal.LEADS: "collecter des coordonnées de prospects qualifiés via un formulaire",
    Goal.SELL: "convaincre le visiteur d'acheter directement le produit",
    Goal.BOOK_CALL: "amener le visiteur à réserver un appel découverte",
}

AWARENESS_STRATEGY: dict[AwarenessLevel, str] = {
    AwarenessLevel.UNAWARE: (
        "le visiteur ne connaît pas encore son problème : commence par le révéler "
        "avec une accroche empathique avant de présenter la solution"
    ),
    AwarenessLevel.PROBLEM_AWARE: (
        "le visiteur connaît son problème : amplifie-le puis montre que la solution existe"
    ),
    AwarenessLevel.SOLUTION_SEEKING: (
        "le visiteur cherche une solution : compare, différencie et prouve la supériorité de l'offre"
    ),
    AwarenessLevel.READY_TO_BUY: (
        "le visiteur est prêt à acheter : va droit à l'offre, lève les dernières objections "
        "et rends l'appel à l'action évident"
    ),
}

LANDING_TONE_GUIDE: dict[LandingTone, str] = {
    LandingTone.PROFESSIONAL: "un ton professionnel, crédible et rassurant",
    LandingTone.ENGAGING: "un ton engageant qui interpelle directement le lecteur",
    LandingTone.FUN: "un ton léger et ludique, avec de l'humour bien dosé",
    LandingTone.EXPERT: "un ton d'expert, précis et appuyé sur des faits",
    LandingTone.DIRECT: "un ton simple et direct, phrases courtes, zéro jargon",
}

# Social posts

PLATFORM_CONTEXT: dict[Platform, str] = {
    Platform.FACEBOOK: "Facebook (format long acceptable, engagement communautaire)",
    Platform.INSTAGRAM: "Instagram (visuel important, hashtags essentiels, stories possibles)",
    Platform.TWITTER: "X/Twitter (concis, maximum 280 caractères, trending topics)",
    Platform.LINKEDIN: "LinkedIn (professionnel, B2B, expertise)",
    Platform.TIKTOK: "TikTok (jeune audience, tendances, créatif)",
}

OBJECTIVE_CONTEXT: dict[Objective, str] = {
    Objective.AWARENESS: "sensibiliser et faire connaître le produit",
    Objective.ENGAGEMENT: "encourager les interactions, commentaires et partages",
    Objective.CONVERSION: "inciter à l'achat ou à l'action",
    Objective.TRAFFIC: "diriger vers le site web ou la page produit",
}

LENGTH_GUIDE: dict[PostLength, str] = {
    PostLength.SHORT: "un post concis et percutant",
    PostLength.MEDIUM: "un post équilibré avec détails importants",
    PostLength.LONG: "un post détaillé et informatif",
}

POST_TONE_GUIDE: dict[PostTone, str] = {
    PostTone.PROFESSIONAL: "un ton professionnel et sérieux",
    PostTone.CASUAL: "un ton décontracté et accessible",
    PostTone.ENTHUSIASTIC: "un ton enthousiaste et énergique",
    PostTone.EDUCATIONAL: "un ton informatif et pédagogique",
}

# Display labels shown next to each choice

PLATFORM_LABELS: dict[Platform, str] = {
    Platform.FACEBOOK: "Facebook",
    Platform.INSTAGRAM: "Instagram",
    Platform.TWITTER: "X (Twitter)",
    Platform.LINKEDIN: "LinkedIn",
    Platform.TIKTOK: "TikTok",
}

OBJECTIVE_LABELS: dict[Objective, str] = {
    Objective.AWARENESS: "Notoriété",
    Objective.ENGAGEMENT: "Engagement",
    Objective.CONVERSION: "Conversion",
    Objective.TRAFFIC: "Trafic",
}

LENGTH_LABELS: dict[PostLength, str] = {
    PostLength.SHORT: "Court (< 100 mots)",
    PostLength.MEDIUM: "Moyen (100-200 mots)",
    PostLength.LONG: "Long (> 200 mots)",
}

POST_TONE_LABELS: dict[PostTone, str] = {
    PostTone.PROFESSIONAL: "Professionnel",
    PostTone.CASUAL: "Décontracté",
    PostTone.ENTHUSIASTIC: "Enthousiaste",
    PostTone.EDUCATIONAL: "Éducatif",
}
