"""
Text utility functions for textkit.

Provides substring removal, word frequency counting, deduplication,
SEO slug generation, phone number format checks and human-readable
byte sizes. Every function is pure and works on short in-memory values.
"""

import re
from collections import Counter
from collections.abc import Iterable
from typing import Any, Dict, List, Sequence, Tuple

from ..core import get_logger, InvalidInputError

logger = get_logger(__name__)


ANGLE_BRACKETS = ["<", ">"]

# Formatting characters accepted inside a phone number
PHONE_SEPARATORS = ["(", ")", "-", " "]
PHONE_LENGTH = 10

# (threshold, divisor, suffix), checked top to bottom
BYTE_UNITS: List[Tuple[int, int, str]] = [
    (1_000_000_000_000, 1 << 40, " TB"),
    (1_000_000_000, 1 << 30, " GB"),
    (1_000_000, 1 << 20, " MB"),
    (1_000, 1 << 10, " KB"),
]
BYTES_SUFFIX = " bytes"

_SEO_DISALLOWED = re.compile(r"[^a-z0-9_-]")
_ASCII_DIGITS = re.compile(r"[0-9]+")


def _require_str(value: Any, argument: str) -> None:
    """Raise InvalidInputError unless value is a str."""
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{argument} must be a str, got {type(value).__name__}",
            argument=argument,
            details={"received": type(value).__name__}
        )


def _delete_first(text: str, token: str) -> Tuple[str, bool]:
    """Delete the first occurrence of token, reporting whether one was found."""
    position = text.find(token)
    if position < 0:
        return text, False
    return text[:position] + text[position + len(token):], True


def remove(text: str, token: str) -> str:
    """
    Remove every occurrence of a token from text.

    The first occurrence is deleted and the scan restarts on the result,
    so occurrences formed by joining both sides of a deletion are removed
    as well: remove("aabb", "ab") returns "".

    Args:
        text: Text to clean.
        token: Literal substring to delete. An empty token matches nothing.

    Returns:
        Text with no remaining occurrence of token.

    Raises:
        InvalidInputError: If text or token is not a str.
    """
    _require_str(text, "text")
    _require_str(token, "token")

    if not token:
        return text

    found = True
    while found:
        text, found = _delete_first(text, token)

    return text


def remove_all(text: str, tokens: Sequence[str]) -> str:
    """
    Remove every occurrence of each token, applied left to right.

    Args:
        text: Text to clean.
        tokens: Tokens to delete, in order. Each is fully removed before
                the next is considered.

    Returns:
        Cleaned text, or text unchanged if tokens is empty.

    Raises:
        InvalidInputError: If text is not a str, tokens is a str or not
                           iterable, or any token is not a str.
    """
    _require_str(text, "text")

    if isinstance(tokens, str) or not isinstance(tokens, Iterable):
        raise InvalidInputError(
            f"tokens must be a sequence of str, got {type(tokens).__name__}",
            argument="tokens",
            details={"received": type(tokens).__name__}
        )

    for token in tokens:
        text = remove(text, token)

    return text


def words(text: str) -> str:
    """
    Strip angle brackets from text.

    Does not tokenize: "<b>hi</b>" becomes "bhi/b". Split the result
    separately if a list of words is needed.
    """
    return remove_all(text, ANGLE_BRACKETS)


def word_frequency(sequence: Iterable) -> Dict[Any, int]:
    """
    Count occurrences of each distinct element.

    Equality is exact, so "Word" and "word" are counted separately.

    Args:
        sequence: Elements to count, typically words. Must be hashable.

    Returns:
        Mapping from element to its number of occurrences.

    Raises:
        InvalidInputError: If sequence is not iterable or holds an
                           unhashable element.
    """
    if not isinstance(sequence, Iterable):
        raise InvalidInputError(
            f"sequence must be iterable, got {type(sequence).__name__}",
            argument="sequence",
            details={"received": type(sequence).__name__}
        )

    try:
        return dict(Counter(sequence))
    except TypeError as e:
        raise InvalidInputError(
            f"sequence elements must be hashable: {e}",
            argument="sequence"
        ) from e


def dedupe(sequence: Iterable) -> List[Any]:
    """
    Return the distinct elements of a sequence in first-occurrence order.

    Hashable input is deduplicated through a dict; input holding
    unhashable elements such as lists falls back to an equality scan.

    Args:
        sequence: Elements to deduplicate.

    Returns:
        New list with each distinct element exactly once.

    Raises:
        InvalidInputError: If sequence is not iterable.
    """
    if not isinstance(sequence, Iterable):
        raise InvalidInputError(
            f"sequence must be iterable, got {type(sequence).__name__}",
            argument="sequence",
            details={"received": type(sequence).__name__}
        )

    items = list(sequence)

    try:
        return list(dict.fromkeys(items))
    except TypeError:
        logger.debug("Unhashable elements in dedupe input, using equality scan")

    result: List[Any] = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def make_seo_name(title: str) -> str:
    """
    Build a URL slug from a title.

    Lowercases and trims the title, then deletes every character other
    than a-z, 0-9, underscore and hyphen. Nothing is put in their place,
    so "Hello, World! 123" becomes "helloworld123".
    """
    _require_str(title, "title")
    return _SEO_DISALLOWED.sub("", title.lower().strip())


def is_phone(phone: str) -> bool:
    """
    Check that a phone number is well formed.

    Does not consult any numbering plan. Parentheses, hyphens and spaces
    are dropped, and what remains must be exactly ten ASCII digits, so
    "(213) 221-2222", "213 221 2222" and "213-221-2222" all pass while a
    leading "+" does not.

    The remainder is matched against [0-9] rather than parsed with int(),
    which would also accept a sign, underscores, surrounding whitespace
    and non-ASCII digits.

    Args:
        phone: Phone number in any of the accepted formats.

    Returns:
        True if the number is well formed, False otherwise.

    Raises:
        InvalidInputError: If phone is not a str.
    """
    _require_str(phone, "phone")

    digits = remove_all(phone, PHONE_SEPARATORS)

    if not _ASCII_DIGITS.fullmatch(digits):
        logger.debug(f"Rejected phone {phone!r}: non-digit characters")
        return False

    if len(digits) != PHONE_LENGTH:
        logger.debug(f"Rejected phone {phone!r}: {len(digits)} digits")
        return False

    return True


def byte_format(n: int) -> str:
    """
    Format a byte count with the largest fitting unit.

    Units switch at decimal thresholds (1000, 10^6, 10^9, 10^12) but
    divide by binary multiples (2^10, 2^20, 2^30, 2^40), rounding to the
    nearest integer. Negative counts are classified by magnitude.

    Args:
        n: Number of bytes.

    Returns:
        Display string such as "500 bytes", "1 KB" or "3 GB".

    Raises:
        InvalidInputError: If n is not an int.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError(
            f"n must be an int, got {type(n).__name__}",
            argument="n",
            details={"received": type(n).__name__}
        )

    for threshold, divisor, suffix in BYTE_UNITS:
        if abs(n) >= threshold:
            return byte_format_with_suffix(round(n / divisor), suffix)

    return byte_format_with_suffix(n, BYTES_SUFFIX)


def byte_format_with_suffix(n: int, suffix: str) -> str:
    """Concatenate the decimal form of n with suffix, adding no separator."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError(
            f"n must be an int, got {type(n).__name__}",
            argument="n",
            details={"received": type(n).__name__}
        )
    _require_str(suffix, "suffix")

    return f"{n}{suffix}"


if __name__ == "__main__":
    from ..core import LoggingConfig, setup_logging

    setup_logging(LoggingConfig(level="DEBUG", format="%(levelname)s - %(message)s"))

    print("=== remove / remove_all ===")
    print(remove("Hell-o Worl-d", "-"))
    print(remove_all("H-e+llo World", ["-", "+"]))
    print(words("<b>hi</b>"))

    print("\n=== word_frequency / dedupe ===")
    sample = "the cat and the hat and the bat".split()
    print(word_frequency(sample))
    print(dedupe(sample))

    print("\n=== make_seo_name ===")
    print(make_seo_name("  Hello, World! 123  "))

    print("\n=== is_phone ===")
    for number in ["(213) 221-2222", "213-221-222", "213-221-abcd"]:
        print(f"{number}: {is_phone(number)}")

    print("\n=== byte_format ===")
    for size in [500, 1024, 5_000_000, 1073741824, 2 * 10**12]:
        print(f"{size}: {byte_format(size)}")
