"""API layer for glyph composition.

The module exports one service class:
    GlyphService: Composes Hangul text with the current layout schemas and
        exposes the editor operations on those schemas.

Example usage::

    from hangul_lib.api import GlyphService

    service = GlyphService()
    info = service.get_syllable_info('한')
    print(info['layoutType'], len(info['strokes']))
"""

from .services import GlyphService

__all__ = ['GlyphService']
