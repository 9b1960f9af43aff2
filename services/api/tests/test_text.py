import pytest

from app.utils.text import is_blank, rejoin_sentences, sentences


def test_rejoin_sentences_collapses_spacing():
    assert rejoin_sentences("Hello there.   This  is a test!") == "Hello there. This is a test!"


def test_rejoin_sentences_without_terminator_is_single_sentence():
    assert rejoin_sentences("  no punctuation here  ") == "no punctuation here"


def test_rejoin_sentences_drops_unterminated_tail():
    assert rejoin_sentences("First one.   and a tail") == "First one."
    assert rejoin_sentences("Hello. world") == "Hello."


def test_rejoin_sentences_drops_leading_terminators():
    assert rejoin_sentences("!!! Leading marks.") == "Leading marks."


def test_rejoin_sentences_keeps_terminator_runs():
    assert rejoin_sentences("Wait...   what?!  Really.") == "Wait... what?! Really."


@pytest.mark.parametrize(
    "text",
    [
        "Hello there.   This  is a test!",
        "One.Two.   Three?",
        "\n\tIndented line without an end",
        "!!! Leading marks.  Then more.",
    ],
)
def test_rejoin_sentences_is_idempotent(text):
    once = rejoin_sentences(text)

    assert rejoin_sentences(once) == once


def test_sentences_splits_on_terminators():
    assert sentences("A. B! C?") == ["A.", " B!", " C?"]


@pytest.mark.parametrize(("text", "expected"), [("", True), ("   \n\t", True), (None, True), (" x ", False)])
def test_is_blank(text, expected):
    assert is_blank(text) is expected
