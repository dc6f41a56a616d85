import re
from typing import Any

PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z0-9_.]+)\s*\}\}")

_MISSING = object()


def resolve_path(data: Any, path: str) -> Any:
    current = data
    for part in path.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        else:
            return _MISSING
    return current


def _as_text(value: Any) -> str:
    if value is _MISSING or value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(_as_text(item) for item in value)
    if isinstance(value, dict):
        return " - ".join(_as_text(v) for v in value.values() if v not in (None, ""))
    return str(value)


def _render_string(template: str, data: Any) -> Any:
    whole = PLACEHOLDER_RE.fullmatch(template.strip())
    if whole:
        # A lone placeholder keeps the value's own type (lists of cards, etc.)
        value = resolve_path(data, whole.group(1))
        return "" if value is _MISSING or value is None else value
    return PLACEHOLDER_RE.sub(lambda m: _as_text(resolve_path(data, m.group(1))), template)


def apply_content(layout: Any, data: Any) -> Any:
    """
    Merge generated landing page JSON into a template layout.

    Returns a new structure; neither argument is modified. Paths missing
    from ``data`` render as empty strings.
    """
    if isinstance(layout, dict):
        return {key: apply_content(value, data) for key, value in layout.items()}
    if isinstance(layout, list):
        return [apply_content(item, data) for item in layout]
    if isinstance(layout, str):
        return _render_string(layout, data)
    return layout


def missing_placeholders(layout: Any, data: Any) -> list[str]:
    found: list[str] = []
    if isinstance(layout, dict):
        for value in layout.values():
            found.extend(missing_placeholders(value, data))
    elif isinstance(layout, list):
        for item in layout:
            found.extend(missing_placeholders(item, data))
    elif isinstance(layout, str):
        for path in PLACEHOLDER_RE.findall(layout):
            if resolve_path(data, path) is _MISSING and path not in found:
                found.append(path)
    return list(dict.fromkeys(found))
