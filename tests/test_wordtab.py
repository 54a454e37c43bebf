import pytest

from fractview.wordtab import find, find_outside_quotes, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t \t") == []


def test_other_whitespace_is_not_a_separator():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_then_join_round_trip():
    words = ["16", "7", "2", "1"]
    assert split_words("\t".join(words)) == words


def test_find_at_start():
    assert find("abc", "abc", 3) == 0


def test_find_respects_limit():
    assert find("xabc", "abc", 2) == -1


def test_find_missing():
    assert find("abc", "zz", 5) == -1


def test_find_locates_first_occurrence():
    prefix = "hello "
    text = prefix + "world world"
    assert find(text, "world", 50) == len(prefix)


def test_find_outside_quotes_skips_quoted_match():
    prefix = '"ab" '
    text = prefix + "ab"
    assert find_outside_quotes(text, "ab", 10) == len(prefix)
    assert find(text, "ab", 10) < find_outside_quotes(text, "ab", 10)


def test_find_outside_quotes_comment_marker():
    prefix = '"/*" '
    text = prefix + "/* note */"
    assert find_outside_quotes(text, "/*", 20) == len(prefix)


def test_find_outside_quotes_all_quoted():
    assert find_outside_quotes('"abc"', "b", 10) == -1


def test_find_outside_quotes_limit():
    assert find_outside_quotes("abcdef", "cde", 2) == -1


@pytest.mark.parametrize("func", [find, find_outside_quotes])
def test_empty_needle_rejected(func):
    with pytest.raises(ValueError):
        func("abc", "", 3)