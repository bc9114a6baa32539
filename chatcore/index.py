"""In-memory paragraph search index ranked by Jaccard similarity.

The index is built once from a list of paragraphs (or from Markdown text
split on blank lines) and is read-only afterwards, so it is safe to share
between threads. A paragraph's score for a query is
``|Q ∩ P| / |Q ∪ P|`` over their lower-cased word sets.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import IO, AbstractSet, Iterable, Iterator, Optional, Union

DEFAULT_MIN_PARAGRAPH_RUNES = 40
DEFAULT_TOP_K = 3

_PARAGRAPH_SPLIT_RE = re.compile(r"\n[\t\n\f\r ]*\n")
_HORIZONTAL_SPACE = frozenset(" \t\r")


@dataclass(frozen=True)
class Result:
    """A ranked snippet with its similarity score."""

    snippet: str
    score: float


@dataclass(frozen=True)
class IndexConfig:
    """Settings that control which paragraphs are indexed and how."""

    min_paragraph_runes: int = DEFAULT_MIN_PARAGRAPH_RUNES
    stopwords: Optional[frozenset] = None
    max_docs: int = 0


def build_config(
    min_paragraph_runes: Optional[int] = None,
    stopwords: Optional[Iterable[str]] = None,
    max_docs: Optional[int] = None,
) -> IndexConfig:
    """Build an :class:`IndexConfig`, ignoring values that are out of range.

    A negative ``min_paragraph_runes``, a non-positive ``max_docs`` and a
    stop-word list that is empty after trimming leave the defaults in place.
    """
    min_runes = DEFAULT_MIN_PARAGRAPH_RUNES
    if min_paragraph_runes is not None and min_paragraph_runes >= 0:
        min_runes = min_paragraph_runes

    words: Optional[frozenset] = None
    if stopwords is not None:
        cleaned = frozenset(w.strip().lower() for w in stopwords if w.strip())
        if cleaned:
            words = cleaned

    cap = 0
    if max_docs is not None and max_docs > 0:
        cap = max_docs

    return IndexConfig(min_paragraph_runes=min_runes, stopwords=words, max_docs=cap)


@dataclass(frozen=True)
class _Document:
    text: str
    tokens: frozenset


class SearchIndex:
    """A read-only index over paragraphs, queried with :meth:`top_k`."""

    def __init__(
        self,
        paragraphs: Iterable[str] = (),
        config: Optional[IndexConfig] = None,
    ) -> None:
        self.config = config if config is not None else IndexConfig()
        self._docs = tuple(self._build(paragraphs))

    def _build(self, paragraphs: Iterable[str]) -> Iterator[_Document]:
        cfg = self.config
        count = 0
        for raw in paragraphs:
            text = normalize_whitespace(raw).strip()
            if not text:
                continue
            if cfg.min_paragraph_runes > 0 and len(text) < cfg.min_paragraph_runes:
                continue
            tokens = tokenize(text, cfg.stopwords)
            if not tokens:
                continue
            yield _Document(text=text, tokens=tokens)
            count += 1
            if cfg.max_docs > 0 and count >= cfg.max_docs:
                break

    def __len__(self) -> int:
        return len(self._docs)

    def top_k(self, query: str, k: int = DEFAULT_TOP_K) -> list[Result]:
        """Return up to ``k`` best-matching paragraphs, best first.

        A non-positive ``k`` means 3. Ties on score are broken by shorter
        snippet, then by snippet text.
        """
        if not self._docs or not query.strip():
            return []
        if k <= 0:
            k = DEFAULT_TOP_K
        q_tokens = tokenize(query, self.config.stopwords)
        if not q_tokens:
            return []

        scored = []
        for doc in self._docs:
            shared = overlap(q_tokens, doc.tokens)
            if shared == 0:
                continue
            union = len(q_tokens) + len(doc.tokens) - shared
            if union <= 0:
                continue
            score = shared / union
            if score <= 0:
                continue
            scored.append((doc.text, score))

        scored.sort(key=lambda item: (-item[1], len(item[0]), item[0]))
        return [Result(snippet=text, score=score) for text, score in scored[:k]]


def index_from_strings(
    paragraphs: Iterable[str],
    min_paragraph_runes: Optional[int] = None,
    stopwords: Optional[Iterable[str]] = None,
    max_docs: Optional[int] = None,
) -> SearchIndex:
    """Build an index directly from a sequence of paragraphs."""
    return SearchIndex(paragraphs, build_config(min_paragraph_runes, stopwords, max_docs))


def index_from_text(
    text: str,
    min_paragraph_runes: Optional[int] = None,
    stopwords: Optional[Iterable[str]] = None,
    max_docs: Optional[int] = None,
) -> SearchIndex:
    """Build an index from text whose paragraphs are separated by blank lines."""
    return index_from_strings(split_paragraphs(text), min_paragraph_runes, stopwords, max_docs)


def index_from_stream(
    stream: IO,
    min_paragraph_runes: Optional[int] = None,
    stopwords: Optional[Iterable[str]] = None,
    max_docs: Optional[int] = None,
) -> SearchIndex:
    """Read a text or binary stream to the end and build an index from it.

    Errors raised while reading propagate to the caller.
    """
    data: Union[str, bytes] = stream.read()
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8", errors="replace")
    return index_from_text(data, min_paragraph_runes, stopwords, max_docs)


def index_from_markdown(
    path: Union[str, Path],
    min_paragraph_runes: Optional[int] = None,
    stopwords: Optional[Iterable[str]] = None,
    max_docs: Optional[int] = None,
) -> SearchIndex:
    """Read the Markdown file at ``path`` and build an index from it.

    Raises :class:`OSError` if the file cannot be read.
    """
    text = Path(path).read_bytes().decode("utf-8", errors="replace")
    return index_from_text(text, min_paragraph_runes, stopwords, max_docs)


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


def _is_number(ch: str) -> bool:
    return unicodedata.category(ch).startswith("N")


def _words(text: str) -> Iterator[str]:
    """Yield runs of letters optionally followed by a run of numbers."""
    i, n = 0, len(text)
    while i < n:
        if not _is_letter(text[i]):
            i += 1
            continue
        j = i
        while j < n and _is_letter(text[j]):
            j += 1
        while j < n and _is_number(text[j]):
            j += 1
        yield text[i:j]
        i = j


def tokenize(text: str, stopwords: Optional[AbstractSet[str]] = None) -> frozenset:
    """Return the set of lower-cased words in ``text`` minus ``stopwords``."""
    stop = stopwords or frozenset()
    return frozenset(w for w in _words(text.lower()) if w not in stop)


def overlap(a: Optional[AbstractSet[str]], b: Optional[AbstractSet[str]]) -> int:
    """Return how many tokens the two sets share."""
    if not a or not b:
        return 0
    if len(a) > len(b):
        a, b = b, a
    return sum(1 for token in a if token in b)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of spaces, tabs and carriage returns to one space."""
    out = []
    prev_space = False
    for ch in text:
        if ch in _HORIZONTAL_SPACE:
            if not prev_space:
                out.append(" ")
                prev_space = True
            continue
        prev_space = False
        out.append(ch)
    return "".join(out)


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    return [chunk.strip() for chunk in _PARAGRAPH_SPLIT_RE.split(text) if chunk.strip()]