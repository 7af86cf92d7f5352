import re

_ENDS_WITH_MAGNITUDE_OR_TEEN = re.compile(
    r"(hundred|thousand|(m|b|tr|quadr)illion|teen)$"
)
_ENDS_WITH_Y = re.compile(r"y$")
_ENDS_WITH_ZERO_TO_TWELVE = re.compile(
    r"(zero|one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve)$"
)
_ORDINALS_BELOW_THIRTEEN = {
    "zero": "zeroth",
    "one": "first",
    "two": "second",
    "three": "third",
    "four": "fourth",
    "five": "fifth",
    "six": "sixth",
    "seven": "seventh",
    "eight": "eighth",
    "nine": "ninth",
    "ten": "tenth",
    "eleven": "eleventh",
    "twelve": "twelfth",
}


def make_ordinal(words):
    if _ENDS_WITH_MAGNITUDE_OR_TEEN.search(words):
        return f"{words}th"
    if _ENDS_WITH_Y.search(words):
        return _ENDS_WITH_Y.sub("ieth", words)
    return _ENDS_WITH_ZERO_TO_TWELVE.sub(
        lambda match: _ORDINALS_BELOW_THIRTEEN[match.group(1)], words
    )
