LANDING_PAGE_JSON_CONTRACT = """
FORMAT DE RÉPONSE :
Réponds UNIQUEMENT avec un objet JSON valide, sans texte autour et sans bloc markdown, respectant exactement cette structure :
{
  "hero": {"title": "", "subtitle": "", "cta": ""},
  "problem": {"title": "", "description": ""},
  "solution": {"title": "", "description": ""},
  "benefits": [{"title": "", "description": ""}],
  "features": [{"title": "", "description": ""}],
  "testimonials": [{"name": "", "quote": ""}],
  "guarantee": "",
  "cta": {"title": "", "button": ""},
  "seo": {"title": "", "description": "", "keywords": [""]},
  "colors": {"primary": "", "secondary": "", "accent": "", "background": "", "text": ""}
}
""".strip()


LANDING_PAGE_PROMPT_V1 = """
Tu es un copywriter expert en pages de vente à fort taux de conversion.
Rédige le contenu complet d'une landing page pour l'offre « {name} ».

OBJECTIF DE LA PAGE :
- {goal} : {goal_context}

PUBLIC CIBLE :
- Audience : {audience}
- Niveau de conscience : {awareness_level} ({awareness_strategy})

PROBLÈME & SOLUTION :
- Problèmes rencontrés : {problems}
- Solution proposée : {solution}
- Bénéfices : {benefits}
- Proposition de valeur unique : {usp}

ARGUMENTS :
- Fonctionnalités clés : {features}
- Appel à l'action : {cta}
{optional_details}
STYLE :
- Adopte {tone_guide}.

SEO :
- Mot-clé principal : {main_keyword}
{seo_details}
""".strip()


LANDING_PAGE_PROMPT_V2 = """
Tu es un expert SEO et copywriter. Rédige une landing page optimisée pour le référencement naturel autour du mot-clé « {main_keyword} ».
{seo_details}
Le mot-clé principal doit apparaître dans le titre principal, le sous-titre et la méta-description.

OFFRE : « {name} »
- Objectif : {goal} ({goal_context})
- Audience : {audience}
- Niveau de conscience : {awareness_level} ({awareness_strategy})
- Problèmes : {problems}
- Solution : {solution}
- Bénéfices : {benefits}
- Différenciation : {usp}
- Fonctionnalités : {features}
- Appel à l'action : {cta}
{optional_details}
STYLE :
- Adopte {tone_guide}.
""".strip()


LANDING_PAGE_PROMPTS = {
    "v1": LANDING_PAGE_PROMPT_V1,
    "v2": LANDING_PAGE_PROMPT_V2,
}

DEFAULT_LANDING_PAGE_VERSION = "v1"
