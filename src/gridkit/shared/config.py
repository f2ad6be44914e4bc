import os
from dotenv import load_dotenv
from pydantic import BaseModel

from gridkit.engine.config import FeatureFlags, GridEditorConfig

from .consts import DEFAULT_DOTENV_PATH, DEFAULT_MAX_HISTORY_STATES


class Config(BaseModel):
    # History
    MAX_HISTORY_STATES: int = DEFAULT_MAX_HISTORY_STATES

    # Features
    FEATURE_CLIPBOARD: bool = True
    FEATURE_HISTORY: bool = True
    FEATURE_DRAG_FILL: bool = True
    FEATURE_SORTING: bool = True
    FEATURE_FILTERING: bool = True
    FEATURE_ROW_SELECTION: bool = True
    FEATURE_KEYBOARD_SHORTCUTS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    @staticmethod
    def from_env(dotenv_path: str = DEFAULT_DOTENV_PATH) -> "Config":
        load_dotenv(dotenv_path)
        return Config.model_validate(os.environ)

    def to_editor_config(self) -> GridEditorConfig:
        return GridEditorConfig(
            max_history_states=self.MAX_HISTORY_STATES,
            features=FeatureFlags(
                clipboard=self.FEATURE_CLIPBOARD,
                history=self.FEATURE_HISTORY,
                drag_fill=self.FEATURE_DRAG_FILL,
                sorting=self.FEATURE_SORTING,
                filtering=self.FEATURE_FILTERING,
                row_selection=self.FEATURE_ROW_SELECTION,
                keyboard_shortcuts=self.FEATURE_KEYBOARD_SHORTCUTS,
            ),
        )
