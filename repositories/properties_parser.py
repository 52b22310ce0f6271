"""
Parser for the flat key=value mapping format.

Java-properties flavoured: '#' and '!' comment lines, '=' or ':' separators,
backslash continuation lines and backslash escapes. Anything else that is
not blank is malformed and rejects the whole source.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from core.errors import ConfigLoadError

COMMENT_PREFIXES = ("#", "!")
SEPARATORS = ("=", ":")

_SIMPLE_ESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}


def _ends_with_continuation(line: str) -> bool:
    """An odd number of trailing backslashes continues the line."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Join continuation lines, dropping blanks and comments."""
    buffer: Optional[str] = None
    start = 0

    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n").lstrip()

        if buffer is None:
            if not line or line.startswith(COMMENT_PREFIXES):
                continue
            start = number
            buffer = ""

        if _ends_with_continuation(line):
            buffer += line[:-1]
            continue

        yield start, buffer + line
        buffer = None

    # Continuation on the last line of the file
    if buffer is not None:
        yield start, buffer


def _find_separator(line: str) -> int:
    escaped = False
    for index, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in SEPARATORS:
            return index
    return -1


def _unescape(text: str, path: Optional[str], line: int) -> str:
    result = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\" or index + 1 == len(text):
            result.append(char)
            index += 1
            continue

        code = text[index + 1]
        if code == "u":
            digits = text[index + 2 : index + 6]
            try:
                if len(digits) != 4:
                    raise ValueError(digits)
                result.append(chr(int(digits, 16)))
            except ValueError:
                raise ConfigLoadError(
                    f"Malformed \\uXXXX escape: \\u{digits}", path=path, line=line
                ) from None
            index += 6
            continue

        result.append(_SIMPLE_ESCAPES.get(code, code))
        index += 2
    return "".join(result)


def parse_properties(
    lines: Iterable[str], path: Optional[str] = None
) -> List[Tuple[int, str, str]]:
    """
    Parse mapping lines.

    Args:
        lines: Physical lines of the source
        path: Source path, used in error messages only

    Returns:
        List of (line number, key, value) in source order

    Raises:
        ConfigLoadError: On the first malformed line
    """
    pairs = []
    for number, logical in _logical_lines(lines):
        separator = _find_separator(logical)
        if separator < 0:
            raise ConfigLoadError(
                f"Expected key=value, got {logical!r}", path=path, line=number
            )

        key = _unescape(logical[:separator].strip(), path, number)
        value = _unescape(logical[separator + 1 :].strip(), path, number)

        if not key:
            raise ConfigLoadError("Empty key", path=path, line=number)
        if not value:
            raise ConfigLoadError(
                f"Empty value for key {key!r}", path=path, line=number
            )

        pairs.append((number, key, value))
    return pairs
