"""Layout resolution.

    calculate_boxes: Schema -> mapping of slot to normalized box.
    DEFAULT_LAYOUT_SCHEMAS / get_default_schema: the ten tuned schemas.
    LayoutSession: immutable, clamped editing of those schemas.
"""

from .resolver import RECIPES, calculate_boxes
from .schemas import (
    DEFAULT_LAYOUT_SCHEMAS,
    DEFAULT_PADDING,
    DEFAULT_SINGLE_SLOT_PADDING,
    get_default_schema,
)
from .session import LayoutSession

__all__ = [
    'calculate_boxes', 'RECIPES',
    'DEFAULT_LAYOUT_SCHEMAS', 'DEFAULT_PADDING', 'DEFAULT_SINGLE_SLOT_PADDING',
    'get_default_schema', 'LayoutSession',
]
