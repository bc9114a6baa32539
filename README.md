# chatcore

Text-search building blocks for picking answers out of a Markdown knowledge
file. The package contains these modules:

- **`chatcore.index`**: a deterministic, read-only paragraph index. It splits
  paragraphs on blank lines and tokenises them into Unicode words. It ranks
  results by Jaccard similarity between the query's token set and each
  paragraph's token set.
- **`chatcore.preprocess`**: flattens Markdown, including table rows, into
  standalone one-line facts before indexing.
- **`chatcore.query_text`**: helpers for working with a question and its search
  hits. They reduce a question to keywords and pull out its strong entities.
  They also turn Markdown tables in a snippet into plain lines and score a
  snippet against a query.
- **`chatcore.sysutil`**: helpers for logging levels and on/off setting strings.
- **`chatcore.pagination`**: a helper for parsing integers.

The package has no runtime dependencies.

## Installation

```
pip install .
```

## Searching paragraphs

```python
from chatcore.index import index_from_strings

idx = index_from_strings(
    ["alpha beta", "alpha beta gamma", "beta alpha", "delta epsilon"],
    min_paragraph_runes=0,
)
for result in idx.top_k("alpha beta", 3):
    print(result.snippet, result.score)
# alpha beta 1.0
# beta alpha 1.0
# alpha beta gamma 0.666...
```

`top_k` returns a list of `Result(snippet, score)` objects, best match first.
Paragraphs with equal scores are ordered by shorter snippet, then by the
snippet text. If `k` is zero or less, it returns 3 results. If nothing matches,
or the query is blank, it returns an empty list. `len(idx)` gives the number of
paragraphs that were indexed.

You can also build an index from other sources:

- `index_from_text(text, ...)` builds it from a string.
- `index_from_stream(stream, ...)` builds it from a text or binary stream.
- `index_from_markdown(path, ...)` builds it from a file. It raises `OSError` if
  the file cannot be read.

All of these take the same keyword options:

- **`min_paragraph_runes`**: paragraphs with fewer characters than this are
  skipped. The default is 40; 0 turns the check off. Negative values are ignored.
- **`stopwords`**: words left out when tokenising paragraphs and queries.
- **`max_docs`**: the most paragraphs to index. 0 or less means no limit.

The same options can be collected with `build_config()`, which returns an
`IndexConfig` to pass to `SearchIndex(paragraphs, config)`. The lower-level
helpers are also public: `tokenize`, `overlap`, `normalize_whitespace` and
`split_paragraphs`.

## Preparing Markdown

```python
from chatcore.preprocess import prepare_markdown_in_memory
from chatcore.index import index_from_text

text = prepare_markdown_in_memory("data.md").decode("utf-8")
idx = index_from_text(text)
```

Each non-blank line, and each table row with its cells joined by spaces,
becomes a fact followed by a blank line. Table separator rows (`| --- |`) are
dropped, as are facts that read just `text`. When the file contained a table,
the output ends with exactly one newline.

If there was nothing to change, the file's bytes are returned as they are. A
line of 4 MiB or more raises `LineTooLongError`.

## Working with query text

```python
from chatcore.query_text import extract_query_terms, overlap_relevance, simplify_query

simplify_query("How much do Gen Z in Nashville spend on streaming?")
# 'gen z nashville spend streaming'

terms = extract_query_terms('Gen Z in "music streaming" 2025 Nashville growth')
overlap_relevance("Nashville sees growth in music streaming among Gen Z by 2025.", terms)
```

`extract_query_terms` returns a `QueryTerms` with two fields:

- `tokens`: the lower-cased words, with stop words removed.
- `entities`: quoted phrases, numbers, capitalised words and long words.

`overlap_relevance` returns the Jaccard similarity between the query and the
snippet. It adds 0.06 for each entity found in the snippet, up to 0.24 in all,
and caps the total at 1.0.

`strip_markdown_tables_to_lines` turns a Markdown table into one line per body
row. `collapse_whitespace_lines` trims every line and drops the empty ones.

## Small helpers

```python
from chatcore.sysutil import set_log_level, is_truthy, first_non_empty
from chatcore.pagination import atoi_default

set_log_level("warn")          # sets the root logger's level; returns logging.WARNING
is_truthy(" Yes ")             # True
first_non_empty("  ", "x")     # 'x'
atoi_default("42", 0)          # 42
atoi_default(" 42", 7)         # 7
```

`set_log_level` accepts the following names, in any case:

- `debug`
- `info`
- `warn` or `warning`
- `error`
- `fatal`
- `panic`

Empty or unknown names select `info`.

`atoi_default` accepts only an optional sign followed by ASCII digits. It
returns the default for anything else, and for values outside the signed
64-bit range.

## What this package does not do

chatcore only searches and scores text. It does not include:

- a step that picks a final reply from the search hits;
- storage for chats, messages or feedback;
- chat title generation;
- an HTTP server or a command-line program.

Those are left to the application that uses it.

## Testing

```
pip install .[test]
pytest
```