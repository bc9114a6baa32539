"""Text helpers for turning a prompt into query terms and cleaning snippets."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import List

WORD_RE = re.compile(r"[^\W_]+")
QUOTED_PHRASE_RE = re.compile(r"\"([^\"]+)\"|‘([^’]+)’|“([^”]+)”|'([^']+)'")

QUERY_STOPWORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "of", "to", "in",
        "is", "are", "for", "on", "with", "by", "from",
        "at", "as", "that", "this", "it", "be", "was", "were",
        "how", "much", "more", "likely", "do", "does", "what", "which",
        "new", "brands", "products", "find", "out", "about",
    }
)

ENTITY_BOOST = 0.06
ENTITY_BOOST_CAP = 0.24

_SPACE = r"[\t\n\f\r ]"
_TABLE_ROW_RE = re.compile(rf"{_SPACE}*\|.*\|{_SPACE}*")
_SEPARATOR_ROW_RE = re.compile(
    rf"{_SPACE}*\|?{_SPACE}*:?-{{3,}}:?{_SPACE}*"
    rf"(?:\|{_SPACE}*:?-{{3,}}:?{_SPACE}*)+\|?{_SPACE}*"
)


@dataclass(frozen=True)
class QueryTerms:
    """Lower-cased query tokens (stop words removed) and strong entities.

    Entities are quoted phrases, numbers, capitalized words and long words.
    """

    tokens: frozenset = field(default_factory=frozenset)
    entities: frozenset = field(default_factory=frozenset)


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


def simplify_query(text: str) -> str:
    """Reduce a natural-language question to its keywords.

    If every word is a stop word, all words are kept.
    """
    tokens = WORD_RE.findall(text.lower())
    if not tokens:
        return ""
    kept = [t for t in tokens if t not in QUERY_STOPWORDS]
    return " ".join(kept or tokens)


def _table_row(line: str) -> bool:
    return _TABLE_ROW_RE.fullmatch(line) is not None


def _separator_row(line: str) -> bool:
    return _SEPARATOR_ROW_RE.fullmatch(line) is not None


def strip_markdown_tables_to_lines(text: str) -> str:
    """Turn Markdown tables into one line per body row.

    A table is a row followed by a separator row; both are dropped and each
    following row becomes its cells joined by spaces. Other non-empty lines
    are kept, trimmed.
    """
    if not text:
        return ""
    lines = text.split("\n")
    out: List[str] = []
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if _table_row(line) and i + 1 < len(lines) and _separator_row(lines[i + 1].strip()):
            i += 2
            while i < len(lines) and _table_row(lines[i].strip()):
                row = lines[i].strip()
                row = row.removeprefix("|").removesuffix("|")
                joined = " ".join(cell.strip() for cell in row.split("|"))
                if joined:
                    out.append(joined)
                i += 1
            continue
        if line:
            out.append(line)
        i += 1
    return "\n".join(out)


def collapse_whitespace_lines(text: str) -> str:
    """Collapse whitespace within each line and drop blank lines."""
    if not text:
        return ""
    lines = text.replace("\r\n", "\n").split("\n")
    return "\n".join(" ".join(ln.split()) for ln in lines if ln.split())


def is_number(text: str) -> bool:
    """Report whether ``text`` has a digit and only letters, digits and ``.,%``."""
    has_digit = False
    for ch in text:
        if unicodedata.category(ch) == "Nd":
            has_digit = True
        elif not (ch.isalpha() or ch in ".,%"):
            return False
    return has_digit


def is_capitalized(text: str) -> bool:
    """Report whether ``text`` starts with an upper-case letter."""
    return bool(text) and unicodedata.category(text[0]) == "Lu"


def extract_query_terms(prompt: str) -> QueryTerms:
    """Extract tokens and strong entities from a prompt."""
    p = prompt.strip()
    tokens = frozenset(t for t in WORD_RE.findall(p.lower()) if t not in QUERY_STOPWORDS)

    entities = set()
    for groups in QUOTED_PHRASE_RE.findall(p):
        for phrase in groups:
            phrase = phrase.strip()
            if phrase:
                entities.add(phrase.lower())

    for raw in WORD_RE.findall(p):
        lc = raw.lower()
        if lc in QUERY_STOPWORDS:
            continue
        if is_number(raw) or is_capitalized(raw) or _utf8_len(lc) >= 6:
            entities.add(lc)

    return QueryTerms(tokens=tokens, entities=frozenset(entities))


def overlap_relevance(snippet: str, terms: QueryTerms) -> float:
    """Score a snippet against query terms in [0, 1].

    The Jaccard similarity of the word sets, plus 0.06 per entity found in
    the snippet (at most 0.24), capped at 1.
    """
    if not terms.tokens:
        return 0.0
    snippet_lower = snippet.lower()
    snippet_tokens = set(WORD_RE.findall(snippet_lower))

    inter = sum(1 for t in terms.tokens if t in snippet_tokens)
    union = len(snippet_tokens) + len(terms.tokens) - inter
    if union == 0:
        return 0.0
    jaccard = inter / union

    boost = sum(ENTITY_BOOST for e in sorted(terms.entities) if e and e in snippet_lower)
    boost = min(boost, ENTITY_BOOST_CAP)
    return min(jaccard + boost, 1.0)