from number_checks import (
    MAX_SAFE_INTEGER,
    is_finite_number,
    is_safe_number,
    parse_numeral,
)
from ordinals import make_ordinal

_ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
_TENS = (
    "zero",
    "ten",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
# Largest first. Groups of a thousand and up end with a comma.
_TIERS = (
    (1_000_000_000_000_000, "quadrillion,"),
    (1_000_000_000_000, "trillion,"),
    (1_000_000_000, "billion,"),
    (1_000_000, "million,"),
    (1_000, "thousand,"),
    (100, "hundred"),
)


class NumberWordsError(ValueError):
    pass


class InvalidInputError(NumberWordsError):
    pass


class OutOfRangeError(NumberWordsError):
    pass


def _coerce(number):
    value = parse_numeral(number) if isinstance(number, str) else number
    if not is_finite_number(value):
        raise InvalidInputError(
            f"Not a finite number: {number!r} ({type(number).__name__})"
        )
    if not is_safe_number(value):
        raise OutOfRangeError(
            f"Input is not a safe number, its magnitude exceeds {MAX_SAFE_INTEGER}."
        )
    return int(value)


def _generate_words(value, words=None):
    words = list(words) if words else []
    if value == 0:
        if not words:
            return _ONES[0]
        return " ".join(words).rstrip(",")

    if value < 0:
        words.append("minus")
        value = -value

    if value < 20:
        remainder = 0
        word = _ONES[value]
    elif value < 100:
        remainder = 0
        word = _TENS[value // 10]
        if value % 10:
            word = f"{word}-{_ONES[value % 10]}"
    else:
        for size, magnitude in _TIERS:
            if value >= size:
                break
        remainder = value % size
        word = f"{_generate_words(value // size)} {magnitude}"

    words.append(word)
    return _generate_words(remainder, words)


def to_words(number, as_ordinal=False):
    words = _generate_words(_coerce(number))
    if as_ordinal:
        return make_ordinal(words)
    return words


def to_words_ordinal(number):
    return to_words(number, as_ordinal=True)
