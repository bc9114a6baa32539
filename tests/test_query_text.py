import pytest

from chatcore.query_text import (
    QueryTerms,
    collapse_whitespace_lines,
    extract_query_terms,
    is_capitalized,
    is_number,
    overlap_relevance,
    simplify_query,
    strip_markdown_tables_to_lines,
)


def test_simplify_query_keeps_key_tokens():
    got = simplify_query("How much do Gen Z in Nashville spend on streaming?")
    assert "nashville" in got
    assert got == "gen z nashville spend streaming"


def test_simplify_query_all_stopwords_falls_back():
    assert simplify_query("the and or in of") == "the and or in of"


def test_simplify_query_empty():
    assert simplify_query("") == ""
    assert simplify_query("?!") == ""


MD = (
    "\n"
    "| text | value |\n"
    "| --- | --- |\n"
    "| Gen Z | Nashville |\n"
    "Some line\n"
    "\n"
    "| a | b |\n"
    "|---|---|\n"
    "| row | 2 |\n"
)


def test_strip_markdown_tables_removes_headers_and_separators():
    clean = strip_markdown_tables_to_lines(MD)
    assert "text" not in clean.lower()
    assert "---" not in clean
    assert "Gen Z Nashville" in clean
    assert "row 2" in clean
    assert clean == "Gen Z Nashville\nSome line\nrow 2"


def test_strip_markdown_row_without_separator_kept():
    assert strip_markdown_tables_to_lines("| a | b |\nplain") == "| a | b |\nplain"


def test_strip_markdown_keeps_empty_cells_as_spaces():
    md = "| h1 | h2 | h3 |\n| --- | --- | --- |\n| a |  | b |"
    assert strip_markdown_tables_to_lines(md) == "a  b"


def test_strip_markdown_empty():
    assert strip_markdown_tables_to_lines("") == ""


def test_collapse_whitespace_lines():
    assert collapse_whitespace_lines(" a \r\n \n b \n\n c ") == "a\nb\nc"
    assert collapse_whitespace_lines("x   y\t z") == "x y z"


def test_collapse_whitespace_lines_empty():
    assert collapse_whitespace_lines("") == ""


def test_extract_query_terms_numbers_caps_long():
    q = extract_query_terms('Gen Z in "music streaming" 2025 Nashville growth')
    assert "in" not in q.tokens
    assert {"music streaming", "2025", "nashville", "growth"} <= q.entities
    assert {"gen", "z"} <= q.entities
    assert "music" not in q.entities


def test_overlap_relevance_in_bounds():
    q = extract_query_terms('Gen Z in "music streaming" 2025 Nashville growth')
    score = overlap_relevance("Nashville sees growth in music streaming among Gen Z by 2025.", q)
    assert 0 < score <= 1.0


@pytest.mark.parametrize(
    "text,expected",
    [
        ("12.5%", True),
        ("2,000", True),
        ("A123", True),
        ("abc", False),
        ("12!a", False),
        ("", False),
    ],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


@pytest.mark.parametrize(
    "text,expected",
    [("Gen", True), ("gen", False), ("", False), ("\u03a9mega", True), ("1Up", False)],
)
def test_is_capitalized(text, expected):
    assert is_capitalized(text) is expected


def test_overlap_relevance_no_tokens_is_zero():
    assert overlap_relevance("anything here", QueryTerms()) == 0.0


def test_overlap_relevance_boost_is_capped():
    q = QueryTerms(
        tokens=frozenset({"x"}),
        entities=frozenset({"alpha", "beta", "gamma", "delta", "epsilon"}),
    )
    score = overlap_relevance("alpha beta gamma delta epsilon", q)
    assert 0.23 < score <= 0.24 + 1e-9


def test_overlap_relevance_clamped_to_one():
    q = QueryTerms(
        tokens=frozenset({"nashville", "growth"}),
        entities=frozenset({"nashville"}),
    )
    assert overlap_relevance("Nashville growth", q) == 1.0


def test_overlap_relevance_plain_jaccard():
    q = QueryTerms(tokens=frozenset({"apps", "art"}))
    assert overlap_relevance("popular apps trend", q) == pytest.approx(0.25)