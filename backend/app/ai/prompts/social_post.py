SOCIAL_POST_PROMPT = """
Créé un post pour {platform_context} avec l'objectif de {objective_context}.

PRODUIT À PROMOUVOIR :
- Nom : {name}
- Description : {description}
- Prix : {price}
- Bénéfices : {benefits}
- Caractéristiques clés : {features}
- Tags : {tags}
- URL : {url}

CONSIGNES :
- Plateforme : {platform_context}
- Longueur : {length_guide}
- Ton : {tone_guide}
- Inclure des hashtags : {hashtags_flag}
- Inclure des emojis : {emojis_flag}
- Objectif principal : {objective_context}
{extra_instructions}
Assure-toi que le post est optimisé pour {platform} et respecte les bonnes pratiques de cette plateforme.
""".strip()

HASHTAGS_INSTRUCTION = "Inclus des hashtags pertinents pour maximiser la portée."
EMOJIS_INSTRUCTION = "Utilise des emojis appropriés pour rendre le post plus engageant."
