"""Text serialization of edited glyph data.

Editors hand their results back as text: jamo strokes as a Python snippet in
the form the jamo table is written in, and schemas, boxes and shapes as JSON.
All functions here are pure; the dump functions return strings.
"""

from __future__ import annotations
import json
from typing import List, Mapping, Optional, Sequence

from ..domain.geometry import BoxConfig
from ..domain.jamo import JamoData, JamoType, StrokeRel
from ..domain.layout import LayoutSchema, Part
from ..domain.shapes import Shape, shape_from_dict, shape_to_dict

_MAP_NAMES = {
    JamoType.CHOSEONG: 'CHOSEONG_MAP',
    JamoType.JUNGSEONG: 'JUNGSEONG_MAP',
    JamoType.JONGSEONG: 'JONGSEONG_MAP',
}

_TYPE_CONSTANTS = {
    JamoType.CHOSEONG: '_CH',
    JamoType.JUNGSEONG: '_JU',
    JamoType.JONGSEONG: '_JO',
}


def _num(value: float) -> str:
    return repr(round(float(value), 4))


def format_stroke(stroke: StrokeRel) -> str:
    """One stroke as an ``h(...)`` or ``v(...)`` call."""
    helper = 'h' if stroke.is_horizontal else 'v'
    args = ', '.join(_num(getattr(stroke, f)) for f in ('x', 'y', 'width', 'height'))
    return f"{helper}({stroke.stroke_id!r}, {args})"


def _format_group(strokes: Sequence[StrokeRel], indent: str) -> str:
    if not strokes:
        return '()'
    calls = [format_stroke(s) for s in strokes]
    if len(calls) == 1:
        return f"({calls[0]},)"
    return '(' + (',\n' + indent + ' ').join(calls) + ')'


def format_jamo_entry(strokes: Sequence[StrokeRel], char: str, jamo_type: JamoType,
                      reference_table: Optional[Mapping[str, JamoData]] = None) -> str:
    """Table entry for a jamo with edited strokes.

    When the reference table holds a mixed vowel for char, the strokes are
    split back into its horizontal and vertical groups by id. Strokes whose
    id is in neither group are appended to the vertical group.

    Args:
        strokes: Edited strokes, in display order.
        char: The jamo character.
        jamo_type: Position of the jamo; names the table to paste into.
        reference_table: Table the jamo came from, used for group membership.

    Returns:
        A comment line naming the target table followed by the entry.
    """
    header = f"# Replace the entry for {char!r} in {_MAP_NAMES[jamo_type]}:"
    reference = reference_table.get(char) if reference_table else None

    if reference is not None and reference.is_mixed:
        horizontal = [s for s in strokes if s.stroke_id in reference.horizontal_ids]
        vertical = [s for s in strokes if s.stroke_id not in reference.horizontal_ids]
        indent = ' ' * 16
        body = (f"    {char!r}: _mixed({char!r},\n"
                f"{indent}{_format_group(horizontal, indent)},\n"
                f"{indent}{_format_group(vertical, indent)}),")
        return header + '\n' + body

    indent = ' ' * 15
    lines = [f"    {char!r}: _jamo({char!r}, {_TYPE_CONSTANTS[jamo_type]},"]
    calls = [indent + format_stroke(s) for s in strokes]
    if calls:
        lines.append(',\n'.join(calls) + '),')
    else:
        lines[0] = lines[0].rstrip(',') + '),'
    return header + '\n' + '\n'.join(lines)


def dump_layout_schema(schema: LayoutSchema) -> str:
    return json.dumps(schema.to_dict(), indent=2)


def dump_boxes(boxes: Mapping[Part, BoxConfig]) -> str:
    """Resolved slot boxes as JSON keyed by slot name."""
    return json.dumps({part.value: box.to_dict() for part, box in boxes.items()}, indent=2)


def dump_shapes(shapes: Sequence[Shape]) -> str:
    """Freehand shapes as a JSON list of ``type``-tagged objects."""
    return json.dumps([shape_to_dict(s) for s in shapes], indent=2)


def load_shapes(text: str) -> List[Shape]:
    """Inverse of dump_shapes.

    Raises:
        ValueError: On malformed JSON or an unknown shape type.
    """
    return [shape_from_dict(d) for d in json.loads(text)]
