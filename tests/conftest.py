import pytest

from gridkit.engine import (
    ClipboardManager,
    Column,
    ColumnIndexResolver,
    ColumnSchema,
    FillEngine,
    GridEditor,
)


@pytest.fixture
def people_rows() -> list[dict]:
    return [
        {"id": 1, "name": "Ahmad", "age": 24, "city": "Kendari"},
        {"id": 2, "name": "Rina", "age": 22, "city": "Jakarta"},
        {"id": 3, "name": "Yudi", "age": 27, "city": "Bandung"},
        {"id": 4, "name": "Budi", "age": 25, "city": "Makassar"},
        {"id": 5, "name": "Sari", "age": 26, "city": "Surabaya"},
        {"id": 6, "name": "Doni", "age": 28, "city": "Medan"},
    ]


@pytest.fixture
def people_schema() -> ColumnSchema:
    return ColumnSchema.from_ids("id", "name", "age", "city")


@pytest.fixture
def table_schema() -> ColumnSchema:
    """Schema with the leading row-selection column and a read-only id."""
    return ColumnSchema(
        columns=(
            Column.select_column(),
            Column(id="id", header="ID", editable=False),
            Column(id="name", header="Name"),
            Column(id="age", header="Age"),
            Column(id="city", header="City"),
        )
    )


@pytest.fixture
def resolver(people_schema) -> ColumnIndexResolver:
    return ColumnIndexResolver(people_schema)


@pytest.fixture
def clipboard(resolver) -> ClipboardManager:
    return ClipboardManager(resolver)


@pytest.fixture
def fill_engine(resolver) -> FillEngine:
    return FillEngine(resolver)


@pytest.fixture
def editor(people_rows, people_schema) -> GridEditor:
    return GridEditor(people_rows, people_schema)
