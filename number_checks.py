import math
import re

MAX_SAFE_INTEGER = 9_007_199_254_740_992
# Longest digit run that still fits in a float; longer runs parse as infinity.
_MAX_FINITE_DIGITS = 309

_LEADING_INTEGER = re.compile(r"\s*([+-]?)0*([0-9]+)")


def parse_numeral(text):
    # Leading integer only: "12.7" -> 12, "42px" -> 42, "abc" -> nan.
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return math.nan
    sign, digits = match.groups()
    if len(digits) > _MAX_FINITE_DIGITS:
        return -math.inf if sign == "-" else math.inf
    return int(sign + digits)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value):
    if not _is_number(value):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def is_safe_number(value):
    if not is_finite_number(value):
        return False
    return abs(value) <= MAX_SAFE_INTEGER
