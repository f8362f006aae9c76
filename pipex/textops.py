"""Small string helpers with the exact semantics the pipeline relies on."""

from __future__ import annotations

_INT32 = 1 << 32
_INT64 = 1 << 64


def _wrap(value: int, modulus: int) -> int:
    """Wrap an integer into a two's complement range of the given width."""
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def _until_nul(text: str) -> str:
    """Return the part of ``text`` before any embedded NUL character."""
    return text.split("\0", 1)[0]


def is_space(ch: str) -> bool:
    """Return True for a space or one of the characters ``\\t`` to ``\\r``."""
    return ch == " " or "\t" <= ch <= "\r"


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a signed decimal integer prefix, as a 32-bit int.

    Leading whitespace is skipped.  If the character after the first
    non-space character is a sign, the result is 0.
    """
    text = _until_nul(text)
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    if pos + 1 < len(text) and text[pos + 1] in "+-":
        return 0
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap(-value if negative else value, _INT32)


def atoll(text: str) -> int:
    """Parse a signed integer as a 64-bit value.

    Whitespace is allowed before and after the sign.  Every character up
    to the next whitespace counts as a digit, whatever it is.
    """
    text = _until_nul(text)
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] == "+":
        pos += 1
    elif pos < len(text) and text[pos] == "-":
        sign = -1
        pos += 1
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    value = 0
    for ch in text[pos:]:
        if is_space(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap(value * sign, _INT64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def trim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end or a zero length gives an empty string.
    """
    if start > len(text) or length == 0:
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int:
    """Return where ``needle`` lies wholly within the first ``limit``
    characters of ``haystack``, or -1.  An empty needle is found at 0."""
    haystack = _until_nul(haystack)
    needle = _until_nul(needle)
    return haystack[:max(limit, 0)].find(needle)


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with
    the end of a string counting as code 0, or 0 if they agree.
    """
    if n <= 0:
        return 0
    a = _until_nul(a)[:n]
    b = _until_nul(b)[:n]
    for left, right in zip(a.ljust(n, "\0"), b.ljust(n, "\0")):
        if left != right:
            return ord(left) - ord(right)
        if left == "\0":
            break
    return 0


def find_char(text: str, ch: str) -> int:
    """Return the first index of ``ch`` in ``text``, or -1.

    The terminating NUL is searchable: ``"\\0"`` is found at ``len(text)``.
    """
    text = _until_nul(text)
    if ch == "\0":
        return len(text)
    return text.find(ch)


def rfind_char(text: str, ch: str) -> int:
    """Return the last index of ``ch`` in ``text``, or -1.

    The terminating NUL is searchable: ``"\\0"`` is found at ``len(text)``.
    """
    text = _until_nul(text)
    if ch == "\0":
        return len(text)
    return text.rfind(ch)