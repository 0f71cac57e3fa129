"""Hangul syllable decomposition and layout classification.

Precomposed syllables (U+AC00..U+D7A3) are split arithmetically into their
initial consonant, vowel and optional final consonant. Standalone
compatibility jamo (U+3131..U+3163) decompose to a single slot.

The layout a syllable takes depends only on which slots are present and on
the class of its vowel, so it is computed once here and carried on the
``Syllable``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from ..domain.layout import LayoutType

HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3
COMPAT_CONSONANT_FIRST = 0x3131
COMPAT_CONSONANT_LAST = 0x314E
COMPAT_VOWEL_FIRST = 0x314F
COMPAT_VOWEL_LAST = 0x3163

JUNGSEONG_COUNT = 21
JONGSEONG_COUNT = 28

CHOSEONG_LIST = [
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
]

JUNGSEONG_LIST = [
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ', 'ㅙ',
    'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ',
]

# Index 0 means no final consonant
JONGSEONG_LIST = [
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
]


class VowelClass(Enum):
    """Shape class of a vowel, which decides the slot arrangement."""
    VERTICAL = 'vertical'
    HORIZONTAL = 'horizontal'
    MIXED = 'mixed'


VERTICAL_JUNGSEONG = frozenset('ㅏㅐㅑㅒㅓㅔㅕㅖㅣ')
HORIZONTAL_JUNGSEONG = frozenset('ㅗㅛㅜㅠㅡ')
MIXED_JUNGSEONG = frozenset('ㅘㅙㅚㅝㅞㅟㅢ')

# Used when the present slots match none of the ten layouts
FALLBACK_LAYOUT = LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG

_ONLY_LAYOUTS = {
    VowelClass.VERTICAL: LayoutType.JUNGSEONG_VERTICAL_ONLY,
    VowelClass.HORIZONTAL: LayoutType.JUNGSEONG_HORIZONTAL_ONLY,
    VowelClass.MIXED: LayoutType.JUNGSEONG_MIXED_ONLY,
}
_OPEN_LAYOUTS = {
    VowelClass.VERTICAL: LayoutType.CHOSEONG_JUNGSEONG_VERTICAL,
    VowelClass.HORIZONTAL: LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL,
    VowelClass.MIXED: LayoutType.CHOSEONG_JUNGSEONG_MIXED,
}
_CLOSED_LAYOUTS = {
    VowelClass.VERTICAL: LayoutType.CHOSEONG_JUNGSEONG_VERTICAL_JONGSEONG,
    VowelClass.HORIZONTAL: LayoutType.CHOSEONG_JUNGSEONG_HORIZONTAL_JONGSEONG,
    VowelClass.MIXED: LayoutType.CHOSEONG_JUNGSEONG_MIXED_JONGSEONG,
}


def classify_vowel(vowel: str) -> Optional[VowelClass]:
    """Shape class of a compatibility vowel, or None if it is not one."""
    if vowel in VERTICAL_JUNGSEONG:
        return VowelClass.VERTICAL
    if vowel in HORIZONTAL_JUNGSEONG:
        return VowelClass.HORIZONTAL
    if vowel in MIXED_JUNGSEONG:
        return VowelClass.MIXED
    return None


def classify_layout(choseong: Optional[str], jungseong: Optional[str],
                    jongseong: Optional[str]) -> LayoutType:
    """Pick the layout for the slots present in a syllable.

    Combinations that match no layout (a final consonant without a vowel,
    an unknown vowel, nothing at all) fall back to FALLBACK_LAYOUT.
    """
    vowel_class = classify_vowel(jungseong) if jungseong else None

    if choseong and not jungseong and not jongseong:
        return LayoutType.CHOSEONG_ONLY
    if vowel_class is None:
        return FALLBACK_LAYOUT
    if not choseong:
        return FALLBACK_LAYOUT if jongseong else _ONLY_LAYOUTS[vowel_class]
    if jongseong:
        return _CLOSED_LAYOUTS[vowel_class]
    return _OPEN_LAYOUTS[vowel_class]


@dataclass(frozen=True)
class Syllable:
    """A character split into its jamo, with its layout type."""
    char: str
    choseong: Optional[str]
    jungseong: Optional[str]
    jongseong: Optional[str]
    layout_type: LayoutType

    @property
    def is_empty(self) -> bool:
        return not (self.choseong or self.jungseong or self.jongseong)


def is_hangul(char: str) -> bool:
    """True for precomposed syllables and compatibility jamo."""
    if len(char) != 1:
        return False
    code = ord(char)
    return (HANGUL_BASE <= code <= HANGUL_LAST or
            COMPAT_CONSONANT_FIRST <= code <= COMPAT_VOWEL_LAST)


def iter_hangul(text: str) -> Iterator[str]:
    """Hangul characters of a text, in order."""
    return (ch for ch in text if is_hangul(ch))


def decompose_syllable(char: str) -> Syllable:
    """Split a character into choseong, jungseong and jongseong.

    Args:
        char: A single character.

    Returns:
        Syllable with the present jamo as compatibility characters. A
        non-Hangul character gives an empty syllable on FALLBACK_LAYOUT.

    Example:
        >>> s = decompose_syllable('한')
        >>> s.choseong, s.jungseong, s.jongseong
        ('ㅎ', 'ㅏ', 'ㄴ')
    """
    code = ord(char) if len(char) == 1 else -1
    cho = jung = jong = None

    if HANGUL_BASE <= code <= HANGUL_LAST:
        index = code - HANGUL_BASE
        cho = CHOSEONG_LIST[index // (JUNGSEONG_COUNT * JONGSEONG_COUNT)]
        jung = JUNGSEONG_LIST[(index % (JUNGSEONG_COUNT * JONGSEONG_COUNT)) // JONGSEONG_COUNT]
        jong = JONGSEONG_LIST[index % JONGSEONG_COUNT] or None
    elif COMPAT_CONSONANT_FIRST <= code <= COMPAT_CONSONANT_LAST:
        cho = char
    elif COMPAT_VOWEL_FIRST <= code <= COMPAT_VOWEL_LAST:
        jung = char

    return Syllable(
        char=char,
        choseong=cho,
        jungseong=jung,
        jongseong=jong,
        layout_type=classify_layout(cho, jung, jong),
    )


def compose_syllable_char(choseong: str, jungseong: str, jongseong: str = '') -> str:
    """Precomposed syllable for a jamo triple.

    Raises:
        ValueError: If any jamo is not valid for its position.
    """
    try:
        ci = CHOSEONG_LIST.index(choseong)
        vi = JUNGSEONG_LIST.index(jungseong)
        ti = JONGSEONG_LIST.index(jongseong)
    except ValueError:
        raise ValueError(
            f"Invalid jamo for composition: {choseong!r} {jungseong!r} {jongseong!r}"
        ) from None
    return chr(HANGUL_BASE + (ci * JUNGSEONG_COUNT + vi) * JONGSEONG_COUNT + ti)
