"""Immutable layout editing session.

The layout editor adjusts split positions and padding of the ten schemas.
A ``LayoutSession`` holds the current schema of every layout type; each
edit returns a new session and leaves the old one untouched, so the UI
layer owns the only mutable reference.

Edits are clamped here, at the point of commit. The resolver never
validates values.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from ..config import PADDING_MAX, SPLIT_MAX, SPLIT_MIN
from ..domain.geometry import Padding
from ..domain.layout import LayoutSchema, LayoutType
from ..utils.geometry import clamp
from .resolver import BoxMap, calculate_boxes
from .schemas import DEFAULT_LAYOUT_SCHEMAS, DEFAULT_PADDING

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class LayoutSession:
    """Snapshot of every layout schema being edited.

    Attributes:
        schemas: Mapping from layout type to its current schema. The
            mapping is copied into a read-only view on construction.

    Example:
        >>> from hangul_lib.domain import LayoutType
        >>> session = LayoutSession()
        >>> session = session.update_split(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL, 0, 0.7)
        >>> session.schema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL).splits[0].value
        0.7
    """
    schemas: Mapping[LayoutType, LayoutSchema] = field(
        default_factory=lambda: DEFAULT_LAYOUT_SCHEMAS, hash=False
    )

    def __post_init__(self):
        object.__setattr__(self, 'schemas', MappingProxyType(dict(self.schemas)))

    def schema(self, layout_type: LayoutType) -> LayoutSchema:
        return self.schemas[layout_type]

    def boxes(self, layout_type: LayoutType) -> BoxMap:
        """Resolved boxes of the current schema."""
        return calculate_boxes(self.schemas[layout_type])

    def all_boxes(self) -> dict[LayoutType, BoxMap]:
        return {lt: calculate_boxes(schema) for lt, schema in self.schemas.items()}

    def _with_schema(self, schema: LayoutSchema) -> LayoutSession:
        schemas = dict(self.schemas)
        schemas[schema.id] = schema
        return replace(self, schemas=schemas)

    def update_split(self, layout_type: LayoutType, index: int, value: float) -> LayoutSession:
        """Move one split, clamped to [SPLIT_MIN, SPLIT_MAX].

        An index past the end of the schema's splits leaves the session
        unchanged.
        """
        schema = self.schemas[layout_type]
        if not 0 <= index < len(schema.splits):
            logger.debug("No split %d on %s", index, layout_type.value)
            return self
        return self._with_schema(schema.with_split_value(index, clamp(value, SPLIT_MIN, SPLIT_MAX)))

    def update_padding(self, layout_type: LayoutType, side: str, value: float) -> LayoutSession:
        """Change one padding side, clamped to [0, PADDING_MAX].

        A schema without padding starts from the default padding.

        Raises:
            ValueError: If side is not top, bottom, left or right.
        """
        schema = self.schemas[layout_type]
        padding: Padding = schema.padding or DEFAULT_PADDING
        padding = padding.replace_side(side, clamp(value, 0.0, PADDING_MAX))
        return self._with_schema(schema.with_padding(padding))

    def reset(self, layout_type: LayoutType) -> LayoutSession:
        return self._with_schema(DEFAULT_LAYOUT_SCHEMAS[layout_type])

    def reset_all(self) -> LayoutSession:
        return LayoutSession()
