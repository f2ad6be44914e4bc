"""Configuration module for the grid editing engine.

This module provides the configuration classes for a GridEditor: the set of
independently toggleable features and the depth of the undo/redo history.

Classes:
    FeatureFlags: Booleans switching each editing feature on or off.
    GridEditorConfig: Configuration container for a GridEditor.

Example:
    >>> from gridkit.engine import FeatureFlags, GridEditorConfig
    >>> config = GridEditorConfig(
    ...     features=FeatureFlags(drag_fill=False),
    ...     max_history_states=20,
    ... )
    >>> config.features.clipboard
    True
"""

from pydantic import BaseModel, ConfigDict, Field

from gridkit.shared.consts import DEFAULT_MAX_HISTORY_STATES


class FeatureFlags(BaseModel):
    """Feature switches for a GridEditor.

    Every flag defaults to True. A disabled feature turns the matching
    gesture handlers into no-ops instead of errors.

    Attributes:
        clipboard: Copy, cut and paste.
        history: Undo and redo. When off, edits still apply but nothing is recorded.
        drag_fill: The fill handle drag gesture.
        sorting: Delegated to the host's tabular view. Stored and reported only.
        filtering: Delegated to the host's tabular view. Stored and reported only.
        row_selection: Delegated to the host's tabular view. Stored and reported only.
        keyboard_shortcuts: Global key gesture dispatch.
    """

    model_config = ConfigDict(frozen=True)

    clipboard: bool = Field(default=True, description="Enable copy/cut/paste")
    history: bool = Field(default=True, description="Enable undo/redo")
    drag_fill: bool = Field(default=True, description="Enable the drag fill handle")
    sorting: bool = Field(default=True, description="Enable sorting in the host view")
    filtering: bool = Field(default=True, description="Enable filtering in the host view")
    row_selection: bool = Field(
        default=True, description="Enable checkbox row selection in the host view"
    )
    keyboard_shortcuts: bool = Field(
        default=True, description="Enable global keyboard shortcuts"
    )


class GridEditorConfig(BaseModel):
    """Configuration for a GridEditor.

    Attributes:
        features: The enabled editing features. Defaults to everything on.
        max_history_states: Number of grid snapshots kept for undo/redo,
            the initial state included. Defaults to 50.

    Example:
        >>> config = GridEditorConfig()  # Use defaults
        >>> config.max_history_states
        50
    """

    features: FeatureFlags = Field(
        default_factory=FeatureFlags,
        description="Independently toggleable editing features",
    )
    max_history_states: int = Field(
        default=DEFAULT_MAX_HISTORY_STATES,
        ge=1,
        description="Maximum number of history snapshots to keep",
    )
