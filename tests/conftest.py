"""Shared pytest fixtures for the hangul_lib test suite.

Fixtures:
    layout_session: Fresh LayoutSession with the default schemas
    vertical_boxes: Resolved boxes of the choseong-jungseong-vertical layout
    line_stroke / cubic_stroke: Freehand strokes on the editor canvas
    shape_session: ShapeSession holding a line and a cubic

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hangul_lib.domain import CubicStroke, LayoutType, LineStroke, Point  # noqa: E402
from hangul_lib.layout import LayoutSession, calculate_boxes, get_default_schema  # noqa: E402
from hangul_lib.paths import ShapeSession  # noqa: E402


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Layout Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def layout_session():
    """Return a LayoutSession holding the ten default schemas."""
    return LayoutSession()


@pytest.fixture
def vertical_boxes():
    """Return resolved boxes of the choseong-jungseong-vertical layout."""
    return calculate_boxes(get_default_schema(LayoutType.CHOSEONG_JUNGSEONG_VERTICAL))


# -----------------------------------------------------------------------------
# Freehand Shape Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def line_stroke():
    """Return a horizontal line ending at (260, 240)."""
    return LineStroke('line', Point(120, 240), Point(260, 240))


@pytest.fixture
def cubic_stroke():
    """Return a vertical cubic starting at (260, 240)."""
    return CubicStroke('cubic', Point(260, 240), Point(260, 360),
                       c1=Point(260, 260), c2=Point(260, 340))


@pytest.fixture
def shape_session(line_stroke, cubic_stroke):
    """Return a ShapeSession with the line selected."""
    return ShapeSession((line_stroke, cubic_stroke), selected_id='line')
