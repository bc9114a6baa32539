"""Flatten Markdown, especially tables, into standalone one-line facts."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union

MAX_LINE_BYTES = 4 * 1024 * 1024


class LineTooLongError(ValueError):
    """Raised when a single input line exceeds :data:`MAX_LINE_BYTES`."""


def _lines(data: bytes) -> Iterator[str]:
    parts = data.split(b"\n")
    if parts and parts[-1] == b"":
        parts.pop()
    for raw in parts:
        if len(raw) >= MAX_LINE_BYTES:
            raise LineTooLongError(f"line of {len(raw)} bytes exceeds the limit")
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        yield raw.decode("utf-8", errors="replace")


def _is_separator_cell(cell: str) -> bool:
    return not cell.replace(":", "").replace("-", "").strip()


def prepare_markdown_in_memory(path: Union[str, Path]) -> bytes:
    """Return the Markdown at ``path`` with each line and table row as a fact.

    Each fact is followed by a blank line. Table separator rows are dropped
    and table cells are joined with spaces. If the file holds no table and
    no fact, the original bytes are returned unchanged. When a table was
    seen, the output ends with exactly one newline.
    """
    original = Path(path).read_bytes()

    out: list[str] = []
    wrote_any = False
    wrote_blank = True
    saw_table = False

    def write_fact(fact: str) -> None:
        nonlocal wrote_any, wrote_blank
        fact = fact.strip()
        if not fact or fact.lower() == "text":
            return
        out.append(fact + "\n\n")
        wrote_any = True
        wrote_blank = True

    for raw_line in _lines(original):
        line = raw_line.strip()
        if not line:
            if not wrote_blank:
                out.append("\n")
                wrote_blank = True
            continue

        if line.startswith("|") and line.endswith("|"):
            saw_table = True
            cells = [c.strip() for c in line.strip("|").split("|")]
            cleaned = [c for c in cells if c]
            if all(_is_separator_cell(c) for c in cells) or not cleaned:
                continue
            write_fact(" ".join(cleaned))
            continue

        wrote_blank = False
        write_fact(line)

    if not saw_table and not wrote_any:
        return original

    result = "".join(out)
    if saw_table:
        result = result.rstrip("\n") + "\n"
    return result.encode("utf-8")