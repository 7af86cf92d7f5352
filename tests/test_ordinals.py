import unittest

from ordinals import make_ordinal


class TestMakeOrdinal(unittest.TestCase):
    def test_irregular_small_words(self):
        cases = {
            "zero": "zeroth",
            "one": "first",
            "two": "second",
            "three": "third",
            "four": "fourth",
            "five": "fifth",
            "eight": "eighth",
            "nine": "ninth",
            "ten": "tenth",
            "eleven": "eleventh",
            "twelve": "twelfth",
        }
        for words, expected in cases.items():
            with self.subTest(words=words):
                self.assertEqual(make_ordinal(words), expected)

    def test_teens_and_magnitudes_append_th(self):
        cases = {
            "thirteen": "thirteenth",
            "nineteen": "nineteenth",
            "one hundred": "one hundredth",
            "two thousand": "two thousandth",
            "three million": "three millionth",
            "four billion": "four billionth",
            "five trillion": "five trillionth",
            "six quadrillion": "six quadrillionth",
        }
        for words, expected in cases.items():
            with self.subTest(words=words):
                self.assertEqual(make_ordinal(words), expected)

    def test_tens_words_become_ieth(self):
        self.assertEqual(make_ordinal("twenty"), "twentieth")
        self.assertEqual(make_ordinal("ninety"), "ninetieth")

    def test_only_last_word_changes(self):
        self.assertEqual(make_ordinal("twenty-one"), "twenty-first")
        self.assertEqual(
            make_ordinal("one million, two hundred three"),
            "one million, two hundred third",
        )
        self.assertEqual(make_ordinal("minus twelve"), "minus twelfth")

    def test_unknown_words_unchanged(self):
        self.assertEqual(make_ordinal("first"), "first")
        self.assertEqual(make_ordinal(""), "")


if __name__ == "__main__":
    unittest.main()
