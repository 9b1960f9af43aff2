from __future__ import annotations

import random
from collections.abc import Callable

from app.utils.text import map_words

_ALTERNATIVES: dict[str, list[str]] = {
    "good": ["excellent", "fantastic", "great", "wonderful"],
    "bad": ["terrible", "awful", "poor", "subpar"],
    "big": ["large", "enormous", "massive", "substantial"],
    "small": ["tiny", "minute", "compact", "little"],
    "important": ["crucial", "vital", "essential", "significant"],
}

_FORMAL: dict[str, str] = {
    "got": "obtained",
    "get": "acquire",
    "lots": "numerous",
    "thing": "item",
    "stuff": "materials",
    "okay": "acceptable",
    "ok": "acceptable",
}

_SIMPLE: dict[str, str] = {
    "additional": "more",
    "approximately": "about",
    "commence": "begin",
    "concerning": "about",
    "endeavor": "try",
    "frequently": "often",
    "fundamental": "basic",
    "consequently": "so",
    "sufficient": "enough",
    "subsequently": "later",
}


def _match_case(original: str, replacement: str) -> str:
    if original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def alternative_word(word: str, rng: random.Random | None = None) -> str:
    choices = _ALTERNATIVES.get(word.lower())
    if not choices:
        return word
    return _match_case(word, (rng or random).choice(choices))


def formal_word(word: str) -> str:
    replacement = _FORMAL.get(word.lower())
    return _match_case(word, replacement) if replacement else word


def simple_word(word: str) -> str:
    replacement = _SIMPLE.get(word.lower())
    return _match_case(word, replacement) if replacement else word


def _replacer_for(style: str, rng: random.Random | None) -> Callable[[str], str] | None:
    if style == "creative":
        return lambda word: alternative_word(word, rng)
    if style == "formal":
        return formal_word
    if style == "simple":
        return simple_word
    return None


def swap_words(text: str, style: str, rng: random.Random | None = None) -> str:
    replace = _replacer_for(style, rng)
    if replace is None:
        return text
    return map_words(text, replace)
