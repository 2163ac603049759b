"""Tests for East Asian Width clustering."""
import unittest

from text_segmenter.classifier.unicode_classifier import UnicodeClassifier, get_default_classifier
from text_segmenter.segmentation.horizontal_box import HorizontalBoxSegmenter


class HorizontalBoxSegmenterTest(unittest.TestCase):
    """Narrow runs stick together, wide characters stand alone."""

    def setUp(self) -> None:
        self.classifier = get_default_classifier()
        self.segmenter = HorizontalBoxSegmenter()

    def contents(self, text: str, classifier: UnicodeClassifier | None = None) -> list:
        tokens = self.segmenter.segment(text, classifier or self.classifier, 1.0)
        return [t.content for t in tokens]

    def test_mixed_width_clusters(self) -> None:
        self.assertEqual(self.contents("AB漢字CD"), ["AB", "漢", "字", "CD"])

    def test_whitespace_separates_and_is_dropped(self) -> None:
        self.assertEqual(self.contents("Hello World"), ["Hello", "World"])
        self.assertEqual(self.contents("  a\n\tb  "), ["a", "b"])
        self.assertEqual(self.contents(" \n\t "), [])

    def test_wide_characters_always_split(self) -> None:
        self.assertEqual(self.contents("日本語"), ["日", "本", "語"])
        self.assertEqual(self.contents("ＡＢ"), ["Ａ", "Ｂ"])

    def test_half_width_is_narrow(self) -> None:
        self.assertEqual(self.contents("ｱｲｳ"), ["ｱｲｳ"])

    def test_ambiguous_width_starts_new_cluster(self) -> None:
        self.assertEqual(self.contents("caf\u00e9"), ["caf", "\u00e9"])

    def test_narrow_classes_are_configurable(self) -> None:
        classifier = UnicodeClassifier(narrow_classes=("Na", "H", "A"))
        self.assertEqual(self.contents("caf\u00e9", classifier), ["caf\u00e9"])

    def test_combining_marks_stay_with_base(self) -> None:
        self.assertEqual(self.contents("\u304b\u3099\u304d"), ["\u304b\u3099", "\u304d"])
        self.assertEqual(self.contents("cafe\u0301 au"), ["cafe\u0301", "au"])

    def test_no_token_mixes_widths(self) -> None:
        tokens = self.segmenter.segment("abc漢def 字g。h", self.classifier, 0.0)
        for token in tokens:
            narrow = [self.classifier.is_narrow(char) for char in token.content]
            self.assertTrue(all(narrow) or len(token.content) == 1, token.content)

    def test_all_non_whitespace_content_is_kept(self) -> None:
        texts = [
            "AB漢字CD",
            "abc 漢字\tｶﾅ def。\n全角ＡＢ x\u0301y",
            "「こんにちは」 Hello, 世界! 123",
            "が \U0001F600ok",
        ]
        for text in texts:
            self.assertEqual("".join(self.contents(text)), "".join(text.split()), repr(text))

    def test_margin_and_flags(self) -> None:
        tokens = self.segmenter.segment("ab 漢", self.classifier, 4.0)
        self.assertTrue(all(t.margin == (4.0, 0.0) and not t.break_after for t in tokens))

    def test_clusters_include_whitespace(self) -> None:
        self.assertEqual(self.segmenter.clusters("a b", self.classifier), ["a", " ", "b"])

    def test_empty_text(self) -> None:
        self.assertEqual(self.segmenter.segment("", self.classifier, 0.0), ())


if __name__ == "__main__":
    unittest.main()
