"""Domain objects for glyph layout and stroke editing.

This module provides the value objects shared by the layout resolver, the
compositor and the freehand path tools.

Geometry classes:
    Point: Immutable 2D point with vector operations.
    Padding: Margins of a unit square.
    BoxConfig: Normalized box inside a unit square.

Layout classes:
    Part, LayoutType, Axis, Split, LayoutSchema.

Jamo classes:
    JamoType, StrokeDirection, StrokeRel, JamoData.

Freehand shapes:
    LineStroke, CubicStroke, Node, PathShape.

Example usage::

    from hangul_lib.domain import Padding, box_from_padding

    box = box_from_padding(Padding(top=0.1, bottom=0.1, left=0.2, right=0.2))
    print(box.width, box.height)
"""

from .geometry import UNIT_BOX, BoxConfig, Padding, Point, box_from_padding, union_boxes
from .jamo import JamoData, JamoType, LegacyBox, StrokeDirection, StrokeRel
from .layout import Axis, LayoutSchema, LayoutType, Part, Split
from .shapes import CubicStroke, LineStroke, Node, PathShape, Shape, Stroke

__all__ = [
    'Point', 'Padding', 'BoxConfig', 'UNIT_BOX', 'box_from_padding', 'union_boxes',
    'Part', 'LayoutType', 'Axis', 'Split', 'LayoutSchema',
    'JamoType', 'StrokeDirection', 'StrokeRel', 'JamoData', 'LegacyBox',
    'LineStroke', 'CubicStroke', 'Node', 'PathShape', 'Shape', 'Stroke',
]
