"""Column index resolution.

Selections address columns by id while range arithmetic works on ordinals.
ColumnIndexResolver maps between the two for one column schema.
"""

from gridkit.shared.consts import NOT_FOUND

from .schemas import Column, ColumnSchema


class ColumnIndexResolver:
    """Maps column ids to ordinal positions in a column schema and back.

    The lookup table is built once, so the schema must stay stable for the
    lifetime of the resolver (one editing session).

    Example:
        >>> resolver = ColumnIndexResolver(ColumnSchema.from_ids("id", "name", "age"))
        >>> resolver.resolve("age")
        2
        >>> resolver.resolve("missing")
        -1
        >>> resolver.column_id_at(1)
        'name'
    """

    def __init__(self, schema: ColumnSchema) -> None:
        self.schema = schema
        self._index: dict[str, int] = {
            column.id: position for position, column in enumerate(schema.columns)
        }

    def __len__(self) -> int:
        return len(self.schema)

    def __contains__(self, column_id: object) -> bool:
        return column_id in self._index

    def resolve(self, column_id: str) -> int:
        """Return the ordinal of ``column_id``, or ``NOT_FOUND`` (-1) if absent."""
        return self._index.get(column_id, NOT_FOUND)

    def column_id_at(self, index: int) -> str | None:
        """Return the id of the column at ``index``, or None when out of bounds."""
        if 0 <= index < len(self.schema):
            return self.schema.columns[index].id
        return None

    def column(self, column_id: str) -> Column | None:
        index = self.resolve(column_id)
        if index == NOT_FOUND:
            return None
        return self.schema.columns[index]

    def selectable_indices(self) -> list[int]:
        return [
            position
            for position, column in enumerate(self.schema.columns)
            if column.selectable
        ]
