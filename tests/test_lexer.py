from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from lexer import NUMBER, RETURN, SEMI, Token, tokenize


def _kinds(src: str) -> list[tuple[str, str | None]]:
    return [(t.kind, t.text) for t in tokenize(src)]


def test_single_statement():
    assert tokenize("kharrej 7;") == [Token(RETURN), Token(NUMBER, "7"), Token(SEMI)]


def test_whitespace_and_unknown_only():
    assert tokenize("") == []
    assert tokenize(" \t\r\n\n") == []
    assert tokenize("@#$%^&*()-+=,.{}[]") == []
    assert tokenize("é ✓  ") == []


def test_unknown_words_are_dropped():
    assert _kinds("return 5; foo kharrej 3;") == [
        (NUMBER, "5"),
        (SEMI, None),
        (RETURN, None),
        (NUMBER, "3"),
        (SEMI, None),
    ]


def test_keyword_must_be_whole_word():
    assert tokenize("kharrejx kharre Kharrej") == []
    assert tokenize("kharrejé 1;") == [Token(NUMBER, "1"), Token(SEMI)]


def test_dropped_word_is_not_rescanned():
    # "xkharrej" is one word, so the keyword inside it never surfaces
    assert tokenize("xkharrej 1;") == [Token(NUMBER, "1"), Token(SEMI)]


def test_non_ascii_letter_is_skipped_alone():
    assert _kinds("ékharrej 2;") == [(RETURN, None), (NUMBER, "2"), (SEMI, None)]


def test_digits_split_words():
    assert _kinds("kharrej42;") == [(RETURN, None), (NUMBER, "42"), (SEMI, None)]
    assert _kinds("12kharrej") == [(NUMBER, "12"), (RETURN, None)]


def test_number_kept_verbatim():
    assert tokenize("007 99999999999") == [Token(NUMBER, "007"), Token(NUMBER, "99999999999")]


def test_minus_sign_is_dropped():
    assert tokenize("kharrej -1;") == [Token(RETURN), Token(NUMBER, "1"), Token(SEMI)]


def test_order_and_line_numbers():
    toks = tokenize("kharrej 1;\n\nkharrej 2;")
    assert [t.kind for t in toks] == [RETURN, NUMBER, SEMI, RETURN, NUMBER, SEMI]
    assert [t.text for t in toks if t.kind == NUMBER] == ["1", "2"]
    assert toks[0].lineno == 1
    assert toks[3].lineno == 3


def test_adjacent_semicolons():
    assert tokenize(";;") == [Token(SEMI), Token(SEMI)]


def test_tokens_are_immutable():
    tok = tokenize("5")[0]
    with pytest.raises(FrozenInstanceError):
        tok.text = "6"
    assert tok.text == "5"
