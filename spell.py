import argparse
import sys

from number_words import NumberWordsError, to_words


def spell_value(value, as_ordinal=False, show_length=False):
    words = to_words(value, as_ordinal=as_ordinal)
    print(f"Number: {value}")
    print(f"Words: {words}")
    if show_length:
        print(f"Length: {len(words)}")
    return words


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    failed = False
    for value in args.values:
        try:
            spell_value(value, as_ordinal=args.ordinal, show_length=args.length)
        except NumberWordsError as exc:
            print(f"ERROR: {exc}")
            failed = True
    return 1 if failed else 0


def cmdline_parser():
    epilog = (
        "Examples:\n"
        "  spell 1234567\n"
        "  spell -42 12 --ordinal\n"
        "  spell 9007199254740992 --length\n"
    )
    parser = argparse.ArgumentParser(
        description="Spell integers as English words.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "values",
        nargs="+",
        help="Integers or numeral strings to spell. Decimals are truncated.",
    )
    parser.add_argument(
        "--ordinal",
        action="store_true",
        help="Print the ordinal form (e.g. twelfth) instead of the cardinal.",
    )
    parser.add_argument(
        "--length",
        action="store_true",
        help="Also print the character length of the spelled-out form.",
    )
    return parser


if __name__ == "__main__":
    sys.exit(main())
