"""Hangul Glyph Package.

Composes Korean syllable blocks from jamo stroke data and provides the pure
geometry behind a glyph editor: slot layouts, stroke placement and freehand
path editing.

Architecture Overview:
    Data flows one way. A layout schema is resolved into slot boxes, jamo
    strokes are placed into those boxes, and the placed rectangles are drawn.
    Freehand strokes are a separate path: they are edited, merged into
    multi-node paths and drawn the same way.

The package is organized into the following modules:
    domain: Value objects (Point, Padding, BoxConfig, LayoutSchema, StrokeRel,
        JamoData, and the freehand shapes).
    layout: Layout resolver, the ten default schemas and the layout session.
    hangul: Syllable decomposition, layout classification and the jamo table.
    compose: Stroke placement, syllable composition and stroke edits.
    paths: Freehand shape session, drags, merges and draw commands.
    utils: Numeric helpers, Pillow rendering and text serialization.
    api: Service layer for command-line and editor front ends.

Example usage:
    Composing a syllable::

        from hangul_lib.api import GlyphService

        service = GlyphService()
        glyph = service.compose_char('한')
        for placed in glyph.strokes:
            print(placed.stroke_id, placed.rect)

    Merging two strokes::

        from hangul_lib.paths import ShapeSession, merge_selected

        session = ShapeSession.sample()
        session = session.select(session.shapes[0].id)
        result = merge_selected(session)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import GlyphService
from .domain import BoxConfig, LayoutSchema, LayoutType, Padding, Part, Point
from .hangul import decompose_syllable
from .layout import LayoutSession, calculate_boxes, get_default_schema
from .paths import ShapeSession, merge_selected, to_path_d

__all__ = [
    # Domain objects
    'Point', 'Padding', 'BoxConfig', 'Part', 'LayoutType', 'LayoutSchema',
    # Layout
    'calculate_boxes', 'get_default_schema', 'LayoutSession',
    # Composition
    'decompose_syllable', 'GlyphService',
    # Paths
    'ShapeSession', 'merge_selected', 'to_path_d',
]

__version__ = '0.1.0'
