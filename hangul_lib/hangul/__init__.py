"""Hangul decomposition and the static jamo glyph table."""

from .data import CHOSEONG_MAP, JONGSEONG_MAP, JUNGSEONG_MAP, get_jamo, h, jamo_map, v
from .unicode import (
    FALLBACK_LAYOUT,
    Syllable,
    VowelClass,
    classify_layout,
    classify_vowel,
    compose_syllable_char,
    decompose_syllable,
    is_hangul,
    iter_hangul,
)

__all__ = [
    'CHOSEONG_MAP', 'JUNGSEONG_MAP', 'JONGSEONG_MAP', 'get_jamo', 'jamo_map', 'h', 'v',
    'Syllable', 'VowelClass', 'FALLBACK_LAYOUT',
    'classify_layout', 'classify_vowel', 'decompose_syllable', 'compose_syllable_char',
    'is_hangul', 'iter_hangul',
]
