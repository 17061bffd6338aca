"""Tests for query tokenizing."""

import pytest

from zpredict.search.tokenize import Term, TokenizerMode, last_keyword, tokenize

SPACE = TokenizerMode.SEPARATORS_AND_SPACE


def texts(terms):
    return [t.text for t in terms]


@pytest.mark.parametrize("query", ["", "   ", "\t \n"])
def test_blank_query_has_no_terms(query):
    assert tokenize(query) == []
    assert tokenize(query, SPACE) == []


def test_separators_are_their_own_terms():
    terms = tokenize("proj/ba")
    assert terms == [Term.literal("proj"), Term.separator("/"), Term.literal("ba")]


def test_backslash_is_a_separator():
    terms = tokenize("src\\app")
    assert texts(terms) == ["src", "\\", "app"]
    assert [t.is_separator for t in terms] == [False, True, False]


def test_consecutive_separators_are_not_merged():
    assert texts(tokenize("a//b")) == ["a", "/", "/", "b"]


def test_whitespace_delimits_literals_in_default_mode():
    terms = tokenize("  foo   bar ")
    assert terms == [Term.literal("foo"), Term.literal("bar")]


def test_space_is_a_marker_in_space_mode():
    terms = tokenize("foo bar", SPACE)
    assert terms == [Term.literal("foo"), Term.separator(" "), Term.literal("bar")]


def test_space_mode_trims_before_scanning():
    assert texts(tokenize("  foo ", SPACE)) == ["foo"]


def test_space_mode_keeps_each_space():
    assert texts(tokenize("a  b", SPACE)) == ["a", " ", " ", "b"]


def test_tabs_only_delimit_in_space_mode():
    assert texts(tokenize("a\tb", SPACE)) == ["a", "b"]


def test_casing_is_preserved():
    assert texts(tokenize("Proj/BA")) == ["Proj", "/", "BA"]


def test_leading_separator():
    assert texts(tokenize("/home")) == ["/", "home"]


def test_last_keyword_is_last_literal():
    assert last_keyword(tokenize("proj ba")) == "ba"
    assert last_keyword(tokenize("proj/ba")) == "ba"


def test_last_keyword_splits_final_term_on_separators():
    # Terms built by hand may still carry separators
    assert last_keyword([Term.literal("a/b\\c")]) == "c"


def test_last_keyword_of_trailing_separator_is_the_separator():
    assert last_keyword(tokenize("proj/")) == "/"
    assert last_keyword(tokenize("proj\\")) == "\\"


def test_last_keyword_of_no_terms_is_empty():
    assert last_keyword([]) == ""
