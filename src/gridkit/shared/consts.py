from typing import Final

DEFAULT_MAX_HISTORY_STATES: Final[int] = 50

NOT_FOUND: Final[int] = -1
EMPTY_VALUE: Final[str] = ""

ROW_ID_FIELD: Final[str] = "id"
SELECT_COLUMN_ID: Final[str] = "select"

DEFAULT_DOTENV_PATH: Final[str] = "settings.env"
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
