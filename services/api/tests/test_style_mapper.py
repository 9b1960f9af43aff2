import dataclasses

import pytest

from app.services.style_mapper import DEFAULT_STYLE, STYLE_MAPPINGS, StyleMapping, map_style, resolve_style


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("fluent", ("University", "General Writing", "Balanced")),
        ("creative", ("Journalist", "Story", "More Human")),
        ("formal", ("Doctorate", "Business Material", "Quality")),
        ("simple", ("High School", "General Writing", "More Human")),
    ],
)
def test_map_style_known_styles(style, expected):
    mapping = map_style(style)

    assert (mapping.readability, mapping.purpose, mapping.strength) == expected


@pytest.mark.parametrize("style", ["", "Fluent", "poetic", "  simple  "])
def test_map_style_unknown_defaults_to_fluent(style):
    assert map_style(style) == STYLE_MAPPINGS[DEFAULT_STYLE]
    assert resolve_style(style) == "fluent"


def test_style_mapping_is_immutable():
    mapping = map_style("formal")

    with pytest.raises(dataclasses.FrozenInstanceError):
        mapping.readability = "Kindergarten"  # type: ignore[misc]


def test_style_mapping_payload_keys():
    payload = StyleMapping(readability="a", purpose="b", strength="c").as_payload()

    assert payload == {"readability": "a", "purpose": "b", "strength": "c"}
