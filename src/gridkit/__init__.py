import logging

from .engine import (
    Column,
    ColumnSchema,
    FeatureFlags,
    GridEditor,
    GridEditorConfig,
    KeyGesture,
    SelectionRange,
)

logger = logging.getLogger(__name__)

__version__ = "0.1.0"
__all__ = [
    "Column",
    "ColumnSchema",
    "FeatureFlags",
    "GridEditor",
    "GridEditorConfig",
    "KeyGesture",
    "SelectionRange",
    "logger",
]
