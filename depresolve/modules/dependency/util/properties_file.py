"""Parser for line-oriented ``.properties`` mapping resources.

Follows the Java properties conventions (``#``/``!`` comments, backslash
continuation lines, ``=``/``:``/whitespace separators, backslash escapes) with
one relaxation: when a line holds an unescaped ``=``, that ``=`` is the
separator, so coordinate keys such as ``org.foo:bar:1.0 = /libs/bar.jar`` can
be written without escaping their colons.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_WHITESPACE = " \t\f"
# Java properties line terminators
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class PropertiesFormatError(ValueError):
    """Raised for malformed properties content."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


def _ends_with_continuation(line: str) -> bool:
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    pending: List[str] = []
    start = 0
    for line_no, raw_line in enumerate(_LINE_BREAK.split(text), start=1):
        line = raw_line.lstrip(_WHITESPACE)
        if not pending:
            if not line or line[0] in "#!":
                continue
            start = line_no
        if _ends_with_continuation(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, "".join(pending)
        pending = []
    if pending:
        yield start, "".join(pending)


def _unescape(text: str, line_no: int) -> str:
    out: List[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue
        if i + 1 >= len(text):
            raise PropertiesFormatError("dangling escape character", line_no)
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) != 4:
                raise PropertiesFormatError(f"truncated unicode escape \\u{digits}", line_no)
            try:
                out.append(chr(int(digits, 16)))
            except ValueError as exc:
                raise PropertiesFormatError(f"invalid unicode escape \\u{digits}", line_no) from exc
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _unescaped_positions(line: str) -> Iterator[Tuple[int, str]]:
    i = 0
    while i < len(line):
        if line[i] == "\\":
            i += 2
            continue
        yield i, line[i]
        i += 1


def _split_entry(line: str) -> Tuple[str, str]:
    positions = list(_unescaped_positions(line))
    for idx, char in positions:
        if char == "=":
            return line[:idx].rstrip(_WHITESPACE), line[idx + 1 :].lstrip(_WHITESPACE)

    key_end = len(line)
    for idx, char in positions:
        if char == ":" or char in _WHITESPACE:
            key_end = idx
            break
    key = line[:key_end]
    rest = line[key_end:].lstrip(_WHITESPACE)
    if rest[:1] == ":":
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str) -> Dict[str, str]:
    """Parse properties ``text`` into an insertion-ordered dict.

    Later duplicates of a key replace earlier ones.
    """

    result: Dict[str, str] = {}
    for line_no, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_no)
        if not key:
            raise PropertiesFormatError("missing key", line_no)
        result[key] = _unescape(raw_value, line_no)
    return result


def load_properties(path: Path, encoding: str = "utf-8") -> Dict[str, str]:
    """Read and parse a properties file. ``OSError``/``UnicodeDecodeError`` propagate."""

    return parse_properties(path.read_text(encoding=encoding))
