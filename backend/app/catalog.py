# Page templates seeded into the catalog by init_db. Layout strings hold
# {{dotted.path}} placeholders resolved against the generated landing JSON.

DEFAULT_TEMPLATES: list[dict] = [
    {
        "name": "Classique",
        "description": "Hero, problème, solution, bénéfices et appel à l'action final.",
        "category": "landing",
        "layout": {
            "theme": {
                "primary": "{{colors.primary}}",
                "secondary": "{{colors.secondary}}",
                "accent": "{{colors.accent}}",
                "background": "{{colors.background}}",
                "text": "{{colors.text}}",
            },
            "meta": {
                "title": "{{seo.title}}",
                "description": "{{seo.description}}",
                "keywords": "{{seo.keywords}}",
            },
            "sections": [
                {
                    "type": "hero",
                    "title": "{{hero.title}}",
                    "subtitle": "{{hero.subtitle}}",
                    "button": "{{hero.cta}}",
                },
                {
                    "type": "text",
                    "title": "{{problem.title}}",
                    "body": "{{problem.description}}",
                },
                {
                    "type": "text",
                    "title": "{{solution.title}}",
                    "body": "{{solution.description}}",
                },
                {"type": "cards", "title": "Bénéfices", "items": "{{benefits}}"},
                {
                    "type": "cta",
                    "title": "{{cta.title}}",
                    "button": "{{cta.button}}",
                },
            ],
        },
    },
    {
        "name": "Preuve sociale",
        "description": "Met en avant les témoignages et la garantie avant la conversion.",
        "category": "landing",
        "layout": {
            "theme": {
                "primary": "{{colors.primary}}",
                "accent": "{{colors.accent}}",
                "background": "{{colors.background}}",
                "text": "{{colors.text}}",
            },
            "meta": {
                "title": "{{seo.title}}",
                "description": "{{seo.description}}",
            },
            "sections": [
                {
                    "type": "hero",
                    "title": "{{hero.title}}",
                    "subtitle": "{{hero.subtitle}}",
                    "button": "{{hero.cta}}",
                },
                {"type": "testimonials", "items": "{{testimonials}}"},
                {"type": "cards", "title": "Fonctionnalités", "items": "{{features}}"},
                {"type": "text", "title": "Notre garantie", "body": "{{guarantee}}"},
                {
                    "type": "cta",
                    "title": "{{cta.title}}",
                    "button": "{{cta.button}}",
                },
            ],
        },
    },
    {
        "name": "Minimaliste",
        "description": "Une seule colonne : promesse, solution, bouton.",
        "category": "landing",
        "layout": {
            "theme": {
                "primary": "{{colors.primary}}",
                "background": "{{colors.background}}",
                "text": "{{colors.text}}",
            },
            "meta": {"title": "{{seo.title}}"},
            "sections": [
                {
                    "type": "hero",
                    "title": "{{hero.title}}",
                    "subtitle": "{{solution.description}}",
                    "button": "{{cta.button}}",
                },
            ],
        },
    },
]
