import json
import re
from typing import Any


def _extract_fenced_block(text: str) -> str | None:
    blocks = re.findall(r"```(?:json)?\s*(.*?)\s*```", text, re.DOTALL | re.IGNORECASE)
    return blocks[0].strip() if blocks else None


def _extract_balanced_json_span(text: str) -> str | None:
    """Best-effort extraction of the first balanced top-level JSON object/array."""
    if not text:
        return None

    starts = []
    first_obj = text.find("{")
    first_arr = text.find("[")
    if first_obj != -1:
        starts.append((first_obj, "{", "}"))
    if first_arr != -1:
        starts.append((first_arr, "[", "]"))
    if not starts:
        return None

    start_idx, open_ch, close_ch = min(starts, key=lambda x: x[0])
    depth = 0
    in_string = False
    escape = False
    for i in range(start_idx, len(text)):
        ch = text[i]
        if in_string:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == open_ch:
            depth += 1
        elif ch == close_ch:
            depth -= 1
            if depth == 0:
                return text[start_idx:i + 1]
    return None


def json_text_candidates(raw_text: str) -> list[str]:
    text = (raw_text or "").strip()
    if not text:
        return []

    candidates: list[str] = [text]
    fenced = _extract_fenced_block(text)
    if fenced:
        candidates.append(fenced)

    balanced = _extract_balanced_json_span(text)
    if balanced:
        candidates.append(balanced)

    # Deduplicate while preserving order.
    seen = set()
    unique: list[str] = []
    for candidate in candidates:
        c = candidate.strip()
        if not c or c in seen:
            continue
        seen.add(c)
        unique.append(c)
    return unique


def parse_generated_json(raw_text: str) -> Any:
    """
    Parse JSON returned by the model.

    The model is asked for bare JSON but sometimes wraps it in a fence or a
    sentence; each candidate is tried in order. Raises ``ValueError`` when
    none parses.
    """
    errors: list[str] = []
    for candidate in json_text_candidates(raw_text):
        try:
            return json.loads(candidate, strict=False)
        except json.JSONDecodeError as e:
            errors.append(str(e))
    if not errors:
        raise ValueError("Model returned empty content")
    raise ValueError("Unable to parse generated JSON: " + " | ".join(errors[:3]))
