import pytest

from app.ai.json_extract import json_text_candidates, parse_generated_json


def test_parse_bare_json():
    assert parse_generated_json('{"hero": {"title": "CRM Pro"}}') == {"hero": {"title": "CRM Pro"}}


def test_parse_fenced_json():
    raw = 'Voici le contenu :\n```json\n{"cta": {"button": "Essai gratuit"}}\n```'
    assert parse_generated_json(raw) == {"cta": {"button": "Essai gratuit"}}


def test_parse_json_with_surrounding_prose():
    raw = 'Bien sûr ! {"benefits": [{"title": "Gain de temps"}]} Bonne chance.'
    assert parse_generated_json(raw) == {"benefits": [{"title": "Gain de temps"}]}


def test_braces_inside_strings_do_not_break_extraction():
    raw = 'Résultat: {"hero": {"title": "Le {meilleur} CRM"}} fin'
    assert parse_generated_json(raw) == {"hero": {"title": "Le {meilleur} CRM"}}


def test_unparseable_text():
    with pytest.raises(ValueError):
        parse_generated_json("pas de JSON ici")
    with pytest.raises(ValueError):
        parse_generated_json("")


def test_candidates_are_unique():
    candidates = json_text_candidates('{"a": 1}')
    assert candidates == ['{"a": 1}']
