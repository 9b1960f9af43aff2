import re

_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")
_WORD_RE = re.compile(r"[A-Za-z']+")


def normalize_text(text: str) -> str:
    return " ".join(text.strip().split())


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def sentences(text: str) -> list[str]:
    """Split on runs ending in ``.``, ``!`` or ``?``.

    Text with no terminator at all is one sentence. Anything before the first
    sentence or after the last terminator is dropped.
    """
    return _SENTENCE_RE.findall(text) or [text]


def rejoin_sentences(text: str) -> str:
    parts = [normalize_text(sentence) for sentence in sentences(text)]
    return " ".join(part for part in parts if part)


def map_words(text: str, replace) -> str:
    return _WORD_RE.sub(lambda match: replace(match.group(0)), text)
