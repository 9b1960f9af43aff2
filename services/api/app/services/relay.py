from __future__ import annotations

import random

from app.services.style_mapper import resolve_style
from app.services.word_swap import swap_words
from app.utils.text import rejoin_sentences


def relay_rewrite(text: str, style: str, *, word_swap: bool = False, rng: random.Random | None = None) -> str:
    """Local rewrite served by the relay endpoint.

    Sentence cleanup only, unless ``word_swap`` also applies the style's word table.
    """
    cleaned = rejoin_sentences(text)
    if not word_swap:
        return cleaned
    return swap_words(cleaned, resolve_style(style), rng)
