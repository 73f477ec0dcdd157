"""Key/value parsing of multi-line four-letter-word responses."""

from __future__ import annotations

TAB_SEPARATOR = "\t"
EQUAL_SEPARATOR = "="


def parse_key_values(text: str, separator: str) -> dict[str, str]:
    """Parse ``key<separator>value`` lines into an ordered dict.

    Only ``\\n`` ends a line; other characters Python treats as line breaks
    (form feed, ``\\x1c``, ``\\u2028``...) stay inside the value. Lines
    without the separator are skipped. Only the first two segments of a line
    are used, so ``a=b=c`` yields ``{"a": "b"}``, and ``key=`` yields an
    empty value rather than being skipped. Keys and values are stripped; the
    last occurrence of a duplicate key wins.
    """
    pairs: dict[str, str] = {}
    for line in text.split("\n"):
        parts = line.split(separator)
        if len(parts) < 2:
            continue
        pairs[parts[0].strip()] = parts[1].strip()
    return pairs


def parse_tab_separated(text: str) -> dict[str, str]:
    """Parse a tab-separated response such as the one returned by ``mntr``."""
    return parse_key_values(text, TAB_SEPARATOR)


def parse_equal_separated(text: str) -> dict[str, str]:
    """Parse an equals-separated response such as ``conf`` or ``envi``."""
    return parse_key_values(text, EQUAL_SEPARATOR)
