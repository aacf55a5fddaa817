"""Segmentation of strings into prefix, digit run and remainder."""

import re
from dataclasses import dataclass, field


# Largest value a digit run may hold (unsigned 64-bit)
MAX_NUMBER = 2**64 - 1
MAX_DIGITS = len(str(MAX_NUMBER))

# Prefix, first digit run, everything after it
_SPLIT_RE = re.compile(r"(\D*)(\d*)(.*)", re.DOTALL)


class NumberOverflowError(OverflowError):
    """Raised when a digit run does not fit in an unsigned 64-bit integer."""

    def __init__(self, digits: str, text: str):
        self.digits = digits
        self.text = text
        super().__init__(
            f"Digit run {digits!r} in {text!r} exceeds {MAX_NUMBER}"
        )


@dataclass(frozen=True, eq=False)
class Segment:
    """One prefix/number/remainder step of a string.

    `digits` keeps the digit run as written (leading zeros included) so that
    `join()` rebuilds the source string exactly. Ordering only looks at
    `number`.
    """

    prefix: str
    number: int | None = None
    remainder: str | None = None
    digits: str | None = field(default=None, repr=False)

    def join(self) -> str:
        """Rebuild the string this segment was split from."""
        if self.number is None:
            return self.prefix
        digits = self.digits if self.digits is not None else str(self.number)
        return f"{self.prefix}{digits}{self.remainder or ''}"

    def __str__(self) -> str:
        return self.join()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.join() == other.join()

    def __hash__(self) -> int:
        return hash(self.join())


def _parse_digits(digits: str, text: str) -> int:
    # Reject by length first; int() refuses very long runs with ValueError
    if len(digits.lstrip("0")) > MAX_DIGITS:
        raise NumberOverflowError(digits, text)
    number = int(digits, 10)
    if number > MAX_NUMBER:
        raise NumberOverflowError(digits, text)
    return number


def segment(text: str) -> Segment:
    """Split a string at its first digit run.

    Args:
        text: String to split

    Returns:
        Segment with the leading non-digit prefix, the first digit run
        (if any) and whatever follows it (if anything)

    Raises:
        NumberOverflowError: If the digit run exceeds 2**64 - 1

    Example:
        >>> segment("x12z34")
        Segment(prefix='x', number=12, remainder='z34')
    """
    prefix, digits, remainder = _SPLIT_RE.match(text).groups()
    if not digits:
        return Segment(prefix=text)

    return Segment(
        prefix=prefix,
        number=_parse_digits(digits, text),
        remainder=remainder or None,
        digits=digits,
    )
