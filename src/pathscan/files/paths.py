"""Location decoding and name normalization utilities."""

import re
from urllib.parse import unquote

from pathscan.exceptions import MalformedLocationError

SEPARATORS = ("/", "\\")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode(raw: str) -> str:
    """Percent-decode a location URI as UTF-8.

    Args:
        raw: Location as returned by a resource loader

    Returns:
        Decoded location string

    Raises:
        MalformedLocationError: If an escape is incomplete or the escaped
            bytes are not valid UTF-8
    """
    match = _BAD_ESCAPE.search(raw)
    if match:
        raise MalformedLocationError(
            raw, f"invalid escape at position {match.start()}"
        )
    try:
        return unquote(raw, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedLocationError(raw, f"not valid UTF-8 ({e.reason})") from e


def strip_trailing_separator(s: str) -> str:
    """Remove one trailing / or \\ if present."""
    if s.endswith(SEPARATORS):
        return s[:-1]
    return s


def strip_leading_separator(s: str) -> str:
    """Remove one leading / or \\ if present."""
    if s.startswith(SEPARATORS):
        return s[1:]
    return s


def strip_scheme(s: str, scheme: str) -> str:
    """Remove a leading "scheme:" tag if present."""
    prefix = f"{scheme}:"
    if s.startswith(prefix):
        return s[len(prefix) :]
    return s


def relative_name(absolute: str, base_length: int) -> str:
    """Compute the logical name of a file below a base of known length.

    Args:
        absolute: Full path string of the file
        base_length: Length of the base prefix to drop

    Returns:
        Remainder without a leading separator, using "/" throughout

    Raises:
        ValueError: If absolute is shorter than base_length
    """
    if len(absolute) < base_length:
        raise ValueError(
            f"Path {absolute!r} is shorter than its base length {base_length}"
        )
    name = strip_leading_separator(absolute[base_length:])
    return name.replace("\\", "/")


def package_to_path(base_package: str) -> str:
    """Convert a dotted package ("a.b.c") to a relative path ("a/b/c")."""
    return base_package.replace(".", "/")
