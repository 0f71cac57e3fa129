"""Service layer for glyph composition.

This module wraps decomposition, layout resolution and composition behind
one object with dictionary-friendly results, so a command-line tool or an
editor front end does not have to wire the pieces together.

The module contains one service class:
    GlyphService: Composes syllables with the schemas of a layout session,
        resolves jamo preview boxes, and dumps schemas and boxes as text.

Example usage:
    Composing text::

        from hangul_lib.api.services import GlyphService

        service = GlyphService()

        glyphs = service.compose_text('한글')
        for glyph in glyphs:
            print(glyph.char, glyph.layout_type.value, len(glyph.strokes))

        # Editor-style edits return a new service state
        service.update_split('choseong-jungseong-vertical', 0, 0.7)
        info = service.get_syllable_info('가')
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..compose.compositor import (
    ComposedGlyph,
    JamoBoxInfo,
    PlacedStroke,
    compose_syllable,
    preview_strokes,
    resolve_jamo_box,
)
from ..config import STROKE_THICKNESS, VIEW_BOX_SIZE
from ..domain.jamo import JamoType
from ..domain.layout import LayoutType
from ..hangul.data import get_jamo, jamo_map
from ..hangul.unicode import decompose_syllable, is_hangul
from ..layout.session import LayoutSession
from ..utils.serialize import dump_boxes, dump_layout_schema, format_jamo_entry

_logger = logging.getLogger(__name__)

LayoutKey = Union[LayoutType, str]


def _layout_type(value: LayoutKey) -> LayoutType:
    return value if isinstance(value, LayoutType) else LayoutType(value)


@dataclass
class GlyphService:
    """Service for composing Hangul syllables.

    Holds the current layout session; edits replace it with a new session.
    Bad input (non-Hangul characters, jamo without glyph data) is logged and
    yields empty results instead of raising.

    Attributes:
        session: Layout schemas in use.
        scale: Canvas size composed rectangles are expressed in.
        thickness: Fixed stroke thickness in canvas units.

    Example:
        >>> service = GlyphService()
        >>> glyph = service.compose_char('가')
        >>> glyph.layout_type.value
        'choseong-jungseong-vertical'
    """
    session: LayoutSession = field(default_factory=LayoutSession)
    scale: float = VIEW_BOX_SIZE
    thickness: float = STROKE_THICKNESS

    def compose_char(self, char: str) -> Optional[ComposedGlyph]:
        """Compose one character.

        Returns:
            ComposedGlyph, or None when char is not a Hangul syllable or
            compatibility jamo.
        """
        if not is_hangul(char):
            _logger.warning("Not a Hangul character: %r", char)
            return None
        syllable = decompose_syllable(char)
        boxes = self.session.boxes(syllable.layout_type)
        glyph = compose_syllable(syllable, boxes, self.scale, self.thickness)
        _logger.debug("Composed %r as %s with %d strokes",
                      char, syllable.layout_type.value, len(glyph.strokes))
        return glyph

    def compose_text(self, text: str) -> List[ComposedGlyph]:
        """Compose every Hangul character of text, skipping the rest."""
        glyphs = []
        for char in text:
            if char.isspace():
                continue
            glyph = self.compose_char(char)
            if glyph is not None:
                glyphs.append(glyph)
        return glyphs

    def get_syllable_info(self, char: str) -> Dict:
        """Decomposition and composed strokes as a plain dict; {} for bad input."""
        glyph = self.compose_char(char)
        if glyph is None:
            return {}
        syllable = decompose_syllable(char)
        info = glyph.to_dict()
        info.update(
            choseong=syllable.choseong,
            jungseong=syllable.jungseong,
            jongseong=syllable.jongseong,
        )
        return info

    def jamo_box(self, jamo_type: JamoType, char: str) -> JamoBoxInfo:
        """Preview box of a jamo under the current schemas."""
        return resolve_jamo_box(jamo_type, char, self.session.all_boxes())

    def jamo_preview(self, jamo_type: JamoType, char: str,
                     strokes=None) -> List[PlacedStroke]:
        """Place a jamo's strokes (or a draft of them) in its preview box.

        Returns an empty list when the jamo has no glyph data.
        """
        jamo = get_jamo(jamo_type, char)
        if jamo is None:
            _logger.warning("No glyph data for %s %r", jamo_type.value, char)
            return []
        info = self.jamo_box(jamo_type, char)
        draft = jamo.all_strokes if strokes is None else strokes
        return preview_strokes(draft, jamo, info, self.scale, self.thickness)

    def export_jamo(self, jamo_type: JamoType, char: str, strokes) -> str:
        """Table entry text for edited strokes of a jamo."""
        return format_jamo_entry(strokes, char, jamo_type, jamo_map(jamo_type))

    def update_split(self, layout_type: LayoutKey, index: int, value: float) -> LayoutSession:
        self.session = self.session.update_split(_layout_type(layout_type), index, value)
        return self.session

    def update_padding(self, layout_type: LayoutKey, side: str, value: float) -> LayoutSession:
        self.session = self.session.update_padding(_layout_type(layout_type), side, value)
        return self.session

    def reset_layout(self, layout_type: Optional[LayoutKey] = None) -> LayoutSession:
        """Reset one layout, or all of them when layout_type is None."""
        if layout_type is None:
            self.session = self.session.reset_all()
        else:
            self.session = self.session.reset(_layout_type(layout_type))
        return self.session

    def export_layout(self, layout_type: LayoutKey) -> Dict[str, str]:
        """Current schema and its resolved boxes, both as JSON text."""
        lt = _layout_type(layout_type)
        return {
            'schema': dump_layout_schema(self.session.schema(lt)),
            'boxes': dump_boxes(self.session.boxes(lt)),
        }
