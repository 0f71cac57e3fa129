"""Unit tests for Hangul decomposition and the jamo table."""

import unittest

from hangul_lib.domain import JamoType, LayoutType
from hangul_lib.hangul import (
    FALLBACK_LAYOUT,
    VowelClass,
    classify_layout,
    classify_vowel,
    compose_syllable_char,
    decompose_syllable,
    get_jamo,
    is_hangul,
    iter_hangul,
)
from hangul_lib.hangul.data import JAMO_MAPS


class TestDecompose(unittest.TestCase):
    """Tests for decompose_syllable."""

    def test_closed_syllable(self):
        s = decompose_syllable('한')
        self.assertEqual((s.choseong, s.jungseong, s.jongseong), ('ㅎ', 'ㅏ', 'ㄴ'))
        self.assertIs(s.layout_type, LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG)

    def test_open_syllable(self):
        s = decompose_syllable('고')
        self.assertIsNone(s.jongseong)
        self.assertIs(s.layout_type, LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL)

    def test_mixed_vowel_with_final(self):
        s = decompose_syllable('궝')
        self.assertEqual((s.choseong, s.jungseong, s.jongseong), ('ㄱ', 'ㅝ', 'ㅇ'))
        self.assertIs(s.layout_type, LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG)

    def test_first_and_last_syllables(self):
        first = decompose_syllable('가')
        last = decompose_syllable('힣')
        self.assertEqual((first.choseong, first.jungseong), ('ㄱ', 'ㅏ'))
        self.assertEqual((last.choseong, last.jungseong, last.jongseong), ('ㅎ', 'ㅣ', 'ㅎ'))

    def test_compatibility_consonant(self):
        s = decompose_syllable('ㄱ')
        self.assertEqual(s.choseong, 'ㄱ')
        self.assertIs(s.layout_type, LayoutType.CHOSEONG_ONLY)

    def test_compatibility_vowel(self):
        self.assertIs(decompose_syllable('ㅘ').layout_type, LayoutType.JUNGSEONG_MIXED_ONLY)
        self.assertIs(decompose_syllable('ㅡ').layout_type, LayoutType.JUNGSEONG_HORIZONTAL_ONLY)

    def test_non_hangul_is_empty(self):
        s = decompose_syllable('A')
        self.assertTrue(s.is_empty)
        self.assertIs(s.layout_type, FALLBACK_LAYOUT)

    def test_compose_inverse(self):
        self.assertEqual(compose_syllable_char('ㅎ', 'ㅏ', 'ㄴ'), '한')
        self.assertEqual(compose_syllable_char('ㄱ', 'ㅏ'), '가')

    def test_compose_invalid(self):
        with self.assertRaises(ValueError):
            compose_syllable_char('ㅏ', 'ㄱ')


class TestClassify(unittest.TestCase):
    """Tests for vowel and layout classification."""

    def test_vowel_classes(self):
        self.assertIs(classify_vowel('ㅓ'), VowelClass.VERTICAL)
        self.assertIs(classify_vowel('ㅠ'), VowelClass.HORIZONTAL)
        self.assertIs(classify_vowel('ㅢ'), VowelClass.MIXED)
        self.assertIsNone(classify_vowel('ㄱ'))

    def test_layout_without_vowel_falls_back(self):
        self.assertIs(classify_layout('ㄱ', None, 'ㄴ'), FALLBACK_LAYOUT)
        self.assertIs(classify_layout(None, None, None), FALLBACK_LAYOUT)
        self.assertIs(classify_layout(None, 'ㅏ', 'ㄴ'), FALLBACK_LAYOUT)

    def test_layout_table(self):
        self.assertIs(classify_layout('ㄱ', 'ㅘ', None), LayoutType.CHOSEONG_JUNGSEONG_MIXED)
        self.assertIs(classify_layout('ㄱ', 'ㅜ', 'ㄹ'),
                      LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG)
        self.assertIs(classify_layout(None, 'ㅣ', None), LayoutType.JUNGSEONG_VERTICAL_ONLY)


class TestHangulText(unittest.TestCase):
    """Tests for is_hangul and iter_hangul."""

    def test_is_hangul(self):
        self.assertTrue(is_hangul('한'))
        self.assertTrue(is_hangul('ㅎ'))
        self.assertFalse(is_hangul('a'))
        self.assertFalse(is_hangul('한글'))

    def test_iter_hangul(self):
        self.assertEqual(list(iter_hangul('a한 b글!')), ['한', '글'])


class TestJamoTable(unittest.TestCase):
    """Tests for the static jamo table."""

    def test_strokes_inside_unit_box(self):
        for jamo_type, table in JAMO_MAPS.items():
            for char, jamo in table.items():
                self.assertIs(jamo.type, jamo_type)
                for stroke in jamo.all_strokes:
                    with self.subTest(jamo=char, stroke=stroke.stroke_id):
                        self.assertGreaterEqual(stroke.x, 0)
                        self.assertGreaterEqual(stroke.y, 0)
                        self.assertLessEqual(stroke.x + stroke.width, 1 + 1e-9)
                        self.assertLessEqual(stroke.y + stroke.height, 1 + 1e-9)

    def test_mixed_groups_disjoint(self):
        jamo = get_jamo(JamoType.JUNGSEONG, 'ㅘ')
        self.assertTrue(jamo.is_mixed)
        self.assertFalse(jamo.horizontal_ids & jamo.vertical_ids)
        # Horizontal group comes first
        self.assertEqual(jamo.all_strokes[0].stroke_id, 'ㅘ-1')

    def test_missing_jamo(self):
        self.assertIsNone(get_jamo(JamoType.CHOSEONG, 'ㅋ'))
        self.assertIsNone(get_jamo(JamoType.JONGSEONG, None))


if __name__ == '__main__':
    unittest.main()
