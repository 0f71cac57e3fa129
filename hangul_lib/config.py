"""Shared configuration for glyph layout, composition and path editing.

This module centralizes the numeric constants used across the package and
the logging setup used by the command-line entry point.

Attributes:
    VIEW_BOX_SIZE (int): Side of the composition canvas in view units (100).
    STROKE_THICKNESS (float): Fixed visual thickness of box strokes (2).
    PREVIEW_BASE_SIZE (int): Longest side of a jamo preview in pixels (400).
    CANVAS_WIDTH (int): Freehand editor canvas width in pixels (500).
    CANVAS_HEIGHT (int): Freehand editor canvas height in pixels (500).
    GRID (int): Snap grid spacing in pixels (20).
    CTRL_MARGIN (int): How far control handles may leave the canvas (300).
    MERGE_SNAP_DISTANCE (float): Max endpoint gap for a merge, in pixels (12).
    CORNER_HANDLE_RATIO (float): Corner handle length as a fraction of the
        shorter adjoining segment (0.4).
    MOVE_STEP (float): Keyboard move step for box strokes (0.01).
    RESIZE_STEP (float): Keyboard resize step for box strokes (0.01).
    MIN_STROKE_EXTENT (float): Smallest width/height a box stroke may take.
    SPLIT_MIN, SPLIT_MAX (float): Range interactive split edits clamp to.
    PADDING_MAX (float): Upper bound interactive padding edits clamp to.
"""

import logging

logger = logging.getLogger(__name__)

# Composition canvas
VIEW_BOX_SIZE = 100
STROKE_THICKNESS = 2.0
PREVIEW_BASE_SIZE = 400

# Freehand editor canvas
CANVAS_WIDTH = 500
CANVAS_HEIGHT = 500
GRID = 20
CTRL_MARGIN = 300

# Merge
MERGE_SNAP_DISTANCE = 12.0
CORNER_HANDLE_RATIO = 0.4

# Box stroke editing
MOVE_STEP = 0.01
RESIZE_STEP = 0.01
MIN_STROKE_EXTENT = 0.01

# Layout editing
SPLIT_MIN = 0.05
SPLIT_MAX = 0.95
PADDING_MAX = 0.45

# Colors for slot debug boxes
BOX_COLORS = {
    'CH': '#ff6b6b',
    'JU': '#4ecdc4',
    'JU_H': '#ff9500',
    'JU_V': '#ffd700',
    'JO': '#4169e1',
}


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
