from __future__ import annotations

from dataclasses import asdict, dataclass

DEFAULT_STYLE = "fluent"


@dataclass(frozen=True)
class StyleMapping:
    readability: str
    purpose: str
    strength: str

    def as_payload(self) -> dict[str, str]:
        return asdict(self)


STYLE_MAPPINGS: dict[str, StyleMapping] = {
    "fluent": StyleMapping(readability="University", purpose="General Writing", strength="Balanced"),
    "creative": StyleMapping(readability="Journalist", purpose="Story", strength="More Human"),
    "formal": StyleMapping(readability="Doctorate", purpose="Business Material", strength="Quality"),
    "simple": StyleMapping(readability="High School", purpose="General Writing", strength="More Human"),
}


def map_style(style: str) -> StyleMapping:
    """Return the humanizer parameters for ``style``, or the fluent ones for unknown tags."""
    return STYLE_MAPPINGS.get(style, STYLE_MAPPINGS[DEFAULT_STYLE])


def resolve_style(style: str) -> str:
    return style if style in STYLE_MAPPINGS else DEFAULT_STYLE
