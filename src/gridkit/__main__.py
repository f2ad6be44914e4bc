"""Scripted editing session over the sample people grid.

Run with ``python -m gridkit``. Settings come from ``settings.env`` (see
``gridkit.shared.config.Config``).
"""

import logging

from gridkit.engine import (
    Column,
    ColumnSchema,
    Effect,
    GridEditor,
    KeyGesture,
    summarize,
)
from gridkit.shared.config import Config
from gridkit.shared.logs import setup_logging

logger = logging.getLogger("gridkit")

SAMPLE_ROWS: list[dict] = [
    {"id": 1, "name": "Ahmad", "age": 24, "city": "Kendari"},
    {"id": 2, "name": "Rina", "age": 22, "city": "Jakarta"},
    {"id": 3, "name": "Yudi", "age": 27, "city": "Bandung"},
    {"id": 4, "name": "Budi", "age": 25, "city": "Makassar"},
    {"id": 5, "name": "Sari", "age": 26, "city": "Surabaya"},
    {"id": 6, "name": "Doni", "age": 28, "city": "Medan"},
]

SAMPLE_SCHEMA = ColumnSchema(
    columns=(
        Column.select_column(),
        Column(id="id", header="ID", editable=False),
        Column(id="name", header="Name"),
        Column(id="age", header="Age"),
        Column(id="city", header="City"),
    )
)


def log_effect(effect: Effect) -> None:
    logger.info(f"{type(effect).__name__}: {effect.model_dump()}")


def run_session(editor: GridEditor) -> None:
    editor.subscribe(log_effect)

    # Drag-fill ages down from row 2
    editor.select_cell(1, "age")
    editor.begin_drag(1, "age")
    editor.update_drag(4, "age")
    editor.commit_drag()

    # Copy two names and paste them at the bottom
    editor.select_cell(0, "name")
    editor.extend_selection(1, "name")
    editor.handle_key(KeyGesture(key="c", ctrl=True))
    editor.select_cell(4, "name")
    editor.handle_key(KeyGesture(key="v", ctrl=True))

    # Take the paste back
    editor.handle_key(KeyGesture(key="z", ctrl=True))

    logger.info(summarize(editor).model_dump())


def main() -> int:
    config = Config.from_env()
    setup_logging(config.LOG_LEVEL)

    editor = GridEditor(SAMPLE_ROWS, SAMPLE_SCHEMA, config.to_editor_config())
    run_session(editor)

    for row in editor.grid:
        logger.info(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
