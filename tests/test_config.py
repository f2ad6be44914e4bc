import pytest
from pydantic import ValidationError

from gridkit.engine import Column, ColumnSchema, FeatureFlags, GridEditorConfig
from gridkit.shared.config import Config

SETTING_NAMES = (
    "MAX_HISTORY_STATES",
    "FEATURE_CLIPBOARD",
    "FEATURE_HISTORY",
    "FEATURE_DRAG_FILL",
    "FEATURE_SORTING",
    "FEATURE_FILTERING",
    "FEATURE_ROW_SELECTION",
    "FEATURE_KEYBOARD_SHORTCUTS",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch also undoes whatever load_dotenv writes
    for name in SETTING_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestGridEditorConfig:
    def test_defaults(self):
        config = GridEditorConfig()
        assert config.max_history_states == 50
        assert config.features == FeatureFlags()
        assert all(config.features.model_dump().values())

    def test_history_depth_must_be_positive(self):
        with pytest.raises(ValidationError):
            GridEditorConfig(max_history_states=0)

    def test_flags_are_frozen(self):
        with pytest.raises(ValidationError):
            FeatureFlags().clipboard = False


class TestColumnSchema:
    def test_duplicate_ids_are_rejected(self):
        with pytest.raises(ValidationError):
            ColumnSchema.from_ids("id", "name", "id")

    def test_empty_id_is_rejected(self):
        with pytest.raises(ValidationError):
            Column(id="")

    def test_label_falls_back_to_id(self):
        assert Column(id="age").label == "age"
        assert Column(id="age", header="Age").label == "Age"


class TestConfig:
    def test_defaults_without_settings_file(self, clean_env, tmp_path):
        config = Config.from_env(str(tmp_path / "missing.env"))

        assert config.MAX_HISTORY_STATES == 50
        assert config.LOG_LEVEL == "INFO"
        assert config.to_editor_config() == GridEditorConfig()

    def test_reads_settings_file(self, clean_env, tmp_path):
        settings = tmp_path / "settings.env"
        settings.write_text(
            "MAX_HISTORY_STATES=10\n"
            "FEATURE_CLIPBOARD=false\n"
            "FEATURE_DRAG_FILL=0\n"
            "LOG_LEVEL=DEBUG\n"
        )

        config = Config.from_env(str(settings))
        editor_config = config.to_editor_config()

        assert config.LOG_LEVEL == "DEBUG"
        assert editor_config.max_history_states == 10
        assert not editor_config.features.clipboard
        assert not editor_config.features.drag_fill
        assert editor_config.features.history

    def test_environment_wins_over_file(self, clean_env, tmp_path):
        settings = tmp_path / "settings.env"
        settings.write_text("MAX_HISTORY_STATES=10\n")
        clean_env.setenv("MAX_HISTORY_STATES", "7")

        assert Config.from_env(str(settings)).MAX_HISTORY_STATES == 7

    def test_invalid_history_depth(self, clean_env, tmp_path):
        clean_env.setenv("MAX_HISTORY_STATES", "0")
        with pytest.raises(ValidationError):
            Config.from_env(str(tmp_path / "missing.env")).to_editor_config()
