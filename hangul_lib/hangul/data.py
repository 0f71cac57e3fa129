"""Static jamo glyph table.

Every entry gives the strokes of one jamo as fractions of its own box.
Strokes are written with the ``h`` (horizontal) and ``v`` (vertical)
helpers; ``hangul_lib.utils.serialize.format_jamo_entry`` emits edited
strokes in the same form so they can be pasted back here.

Mixed vowels split their strokes into a horizontal group (laid out in the
JU_H box) and a vertical group (laid out in the JU_V box).

Jamo missing from the table are simply not drawn.
"""

from __future__ import annotations
from typing import Dict, Optional

from ..domain.jamo import JamoData, JamoType, StrokeDirection, StrokeRel


def h(stroke_id: str, x: float, y: float, width: float, height: float) -> StrokeRel:
    """Horizontal stroke: keeps its height when the box is stretched."""
    return StrokeRel(stroke_id, x, y, width, height, StrokeDirection.HORIZONTAL)


def v(stroke_id: str, x: float, y: float, width: float, height: float) -> StrokeRel:
    """Vertical stroke: keeps its width when the box is stretched."""
    return StrokeRel(stroke_id, x, y, width, height, StrokeDirection.VERTICAL)


def _jamo(char: str, jamo_type: JamoType, *strokes: StrokeRel) -> JamoData:
    return JamoData(char=char, type=jamo_type, strokes=tuple(strokes))


def _mixed(char: str, horizontal: tuple, vertical: tuple) -> JamoData:
    return JamoData(char=char, type=JamoType.JUNGSEONG,
                    horizontal_strokes=horizontal, vertical_strokes=vertical)


_CH = JamoType.CHOSEONG
_JU = JamoType.JUNGSEONG
_JO = JamoType.JONGSEONG

CHOSEONG_MAP: Dict[str, JamoData] = {
    'ㄱ': _jamo('ㄱ', _CH,
               h('ㄱ-1', 2 / 20, 2 / 20, 14 / 20, 3 / 20),
               v('ㄱ-2', 17 / 20, 2 / 20, 3 / 20, 16 / 20)),
    'ㄴ': _jamo('ㄴ', _CH,
               v('ㄴ-1', 0.1, 0.1, 0.12, 0.75),
               h('ㄴ-2', 0.1, 0.8, 0.8, 0.12)),
    'ㄷ': _jamo('ㄷ', _CH,
               h('ㄷ-1', 0.1, 0.1, 0.8, 0.12),
               v('ㄷ-2', 0.1, 0.1, 0.12, 0.8),
               h('ㄷ-3', 0.1, 0.8, 0.8, 0.12)),
    'ㄹ': _jamo('ㄹ', _CH,
               h('ㄹ-1', 0.1, 0.05, 0.8, 0.1),
               v('ㄹ-2', 0.8, 0.05, 0.1, 0.45),
               h('ㄹ-3', 0.1, 0.45, 0.8, 0.1),
               v('ㄹ-4', 0.1, 0.45, 0.1, 0.45),
               h('ㄹ-5', 0.1, 0.85, 0.8, 0.1)),
    'ㅁ': _jamo('ㅁ', _CH,
               v('ㅁ-1', 0.1, 0.1, 0.12, 0.8),
               h('ㅁ-2', 0.1, 0.1, 0.8, 0.12),
               v('ㅁ-3', 0.78, 0.1, 0.12, 0.8),
               h('ㅁ-4', 0.1, 0.78, 0.8, 0.12)),
    'ㅂ': _jamo('ㅂ', _CH,
               v('ㅂ-1', 0.1, 0.05, 0.12, 0.85),
               v('ㅂ-2', 0.78, 0.05, 0.12, 0.85),
               h('ㅂ-3', 0.1, 0.45, 0.8, 0.1),
               h('ㅂ-4', 0.1, 0.8, 0.8, 0.12)),
    'ㅇ': _jamo('ㅇ', _CH,
               h('ㅇ-1', 0.2, 0.15, 0.6, 0.1),
               v('ㅇ-2', 0.15, 0.15, 0.1, 0.7),
               v('ㅇ-3', 0.75, 0.15, 0.1, 0.7),
               h('ㅇ-4', 0.2, 0.75, 0.6, 0.1)),
    'ㅎ': _jamo('ㅎ', _CH,
               h('ㅎ-1', 0.35, 0.02, 0.3, 0.08),
               h('ㅎ-2', 0.1, 0.2, 0.8, 0.08),
               h('ㅎ-3', 0.3, 0.45, 0.4, 0.08),
               v('ㅎ-4', 0.25, 0.45, 0.08, 0.45),
               v('ㅎ-5', 0.67, 0.45, 0.08, 0.45),
               h('ㅎ-6', 0.3, 0.85, 0.4, 0.08)),
}

JUNGSEONG_MAP: Dict[str, JamoData] = {
    'ㅏ': _jamo('ㅏ', _JU,
               v('ㅏ-1', 0.35, 0.0, 0.12, 1.0),
               h('ㅏ-2', 0.47, 0.45, 0.35, 0.1)),
    'ㅐ': _jamo('ㅐ', _JU,
               v('ㅐ-1', 0.25, 0.0, 0.1, 1.0),
               h('ㅐ-2', 0.35, 0.45, 0.3, 0.1),
               v('ㅐ-3', 0.65, 0.0, 0.1, 1.0)),
    'ㅓ': _jamo('ㅓ', _JU,
               h('ㅓ-1', 0.18, 0.45, 0.35, 0.1),
               v('ㅓ-2', 0.53, 0.0, 0.12, 1.0)),
    'ㅔ': _jamo('ㅔ', _JU,
               h('ㅔ-1', 0.05, 0.45, 0.3, 0.1),
               v('ㅔ-2', 0.35, 0.0, 0.1, 1.0),
               v('ㅔ-3', 0.7, 0.0, 0.1, 1.0)),
    'ㅣ': _jamo('ㅣ', _JU,
               v('ㅣ-1', 0.44, 0.0, 0.12, 1.0)),
    'ㅗ': _jamo('ㅗ', _JU,
               v('ㅗ-1', 0.45, 0.3, 0.1, 0.4),
               h('ㅗ-2', 0.0, 0.7, 1.0, 0.12)),
    'ㅜ': _jamo('ㅜ', _JU,
               h('ㅜ-1', 0.0, 0.2, 1.0, 0.12),
               v('ㅜ-2', 0.45, 0.32, 0.1, 0.5)),
    'ㅡ': _jamo('ㅡ', _JU,
               h('ㅡ-1', 0.0, 0.44, 1.0, 0.12)),
    'ㅘ': _mixed('ㅘ',
                (v('ㅘ-1', 0.45, 0.2, 0.1, 0.45),
                 h('ㅘ-2', 0.0, 0.65, 1.0, 0.12)),
                (v('ㅘ-3', 0.35, 0.0, 0.15, 1.0),
                 h('ㅘ-4', 0.5, 0.45, 0.35, 0.1))),
    'ㅚ': _mixed('ㅚ',
                (v('ㅚ-1', 0.45, 0.2, 0.1, 0.45),
                 h('ㅚ-2', 0.0, 0.65, 1.0, 0.12)),
                (v('ㅚ-3', 0.4, 0.0, 0.15, 1.0),)),
    'ㅝ': _mixed('ㅝ',
                (h('ㅝ-1', 0.0, 0.2, 1.0, 0.12),
                 v('ㅝ-2', 0.45, 0.32, 0.1, 0.5)),
                (h('ㅝ-3', 0.0, 0.45, 0.4, 0.1),
                 v('ㅝ-4', 0.4, 0.0, 0.15, 1.0))),
    'ㅟ': _mixed('ㅟ',
                (h('ㅟ-1', 0.0, 0.2, 1.0, 0.12),
                 v('ㅟ-2', 0.45, 0.32, 0.1, 0.5)),
                (v('ㅟ-3', 0.4, 0.0, 0.15, 1.0),)),
    'ㅢ': _mixed('ㅢ',
                (h('ㅢ-1', 0.0, 0.44, 1.0, 0.12),),
                (v('ㅢ-2', 0.4, 0.0, 0.15, 1.0),)),
}

JONGSEONG_MAP: Dict[str, JamoData] = {
    'ㄱ': _jamo('ㄱ', _JO,
               h('ㄱ-1', 0.1, 0.1, 0.7, 0.15),
               v('ㄱ-2', 0.8, 0.1, 0.1, 0.8)),
    'ㄴ': _jamo('ㄴ', _JO,
               v('ㄴ-1', 0.1, 0.05, 0.1, 0.8),
               h('ㄴ-2', 0.1, 0.75, 0.8, 0.15)),
    'ㄹ': _jamo('ㄹ', _JO,
               h('ㄹ-1', 0.1, 0.05, 0.8, 0.1),
               v('ㄹ-2', 0.8, 0.05, 0.1, 0.45),
               h('ㄹ-3', 0.1, 0.45, 0.8, 0.1),
               v('ㄹ-4', 0.1, 0.45, 0.1, 0.45),
               h('ㄹ-5', 0.1, 0.85, 0.8, 0.1)),
    'ㅁ': _jamo('ㅁ', _JO,
               h('ㅁ-1', 4 / 20, 2 / 20, 14 / 20, 2 / 20),
               v('ㅁ-2', 4 / 20, 2 / 20, 2 / 20, 16 / 20),
               v('ㅁ-3', 16 / 20, 2 / 20, 2 / 20, 16 / 20),
               h('ㅁ-4', 4 / 20, 16 / 20, 14 / 20, 2 / 20)),
    'ㅇ': _jamo('ㅇ', _JO,
               h('ㅇ-1', 0.2, 0.1, 0.6, 0.12),
               v('ㅇ-2', 0.15, 0.1, 0.1, 0.8),
               v('ㅇ-3', 0.75, 0.1, 0.1, 0.8),
               h('ㅇ-4', 0.2, 0.78, 0.6, 0.12)),
}

JAMO_MAPS: Dict[JamoType, Dict[str, JamoData]] = {
    JamoType.CHOSEONG: CHOSEONG_MAP,
    JamoType.JUNGSEONG: JUNGSEONG_MAP,
    JamoType.JONGSEONG: JONGSEONG_MAP,
}


def jamo_map(jamo_type: JamoType) -> Dict[str, JamoData]:
    """Table of all jamo of one syllable position."""
    return JAMO_MAPS[jamo_type]


def get_jamo(jamo_type: JamoType, char: Optional[str]) -> Optional[JamoData]:
    """Glyph data for a jamo, or None when it is absent from the table."""
    if not char:
        return None
    return JAMO_MAPS[jamo_type].get(char)
