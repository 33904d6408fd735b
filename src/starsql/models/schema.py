"""Star-schema model types: databases, tables, foreign keys."""

from __future__ import annotations

from pydantic import BaseModel, Field, PrivateAttr

from starsql.dedup import DedupList, Match
from starsql.models.errors import SchemaReferenceError


class ForeignKey(BaseModel):
    """A referencing column on one table pointing at another table's primary key."""

    column: str = ""
    target: str = Field("", alias="references")

    model_config = {"populate_by_name": True, "frozen": True}


def foreign_key_equal(fk1: ForeignKey, fk2: ForeignKey) -> bool:
    return fk1.column == fk2.column


def foreign_key_by_column(column: str) -> Match[ForeignKey]:
    def match(fk: ForeignKey) -> bool:
        return fk.column == column

    return match


class Table(BaseModel):
    """A table with its primary key and the foreign keys declared on it.

    ``Table()`` with no arguments is the placeholder returned for unknown names.
    """

    name: str = ""
    primary_key: str = Field("", alias="primaryKey")
    _foreign_keys: DedupList[ForeignKey] = PrivateAttr(
        default_factory=lambda: DedupList(foreign_key_equal)
    )

    model_config = {"populate_by_name": True}

    @property
    def foreign_keys(self) -> tuple[ForeignKey, ...]:
        """Foreign keys in registration order."""
        return tuple(self._foreign_keys)

    def add_foreign_key(self, fk: ForeignKey) -> bool:
        """Register ``fk``; returns False if its column is already a foreign key."""
        return self._foreign_keys.add(fk)

    def get_foreign_key(self, column: str) -> ForeignKey:
        """Return the foreign key on ``column``, or an empty placeholder."""
        found = self._foreign_keys.find(foreign_key_by_column(column))
        return found if found is not None else ForeignKey()

    def require_foreign_key(self, column: str) -> ForeignKey:
        found = self._foreign_keys.find(foreign_key_by_column(column))
        if found is None:
            raise SchemaReferenceError(
                "foreign key",
                f"{self.name}.{column}",
                available=[f"{self.name}.{fk.column}" for fk in self._foreign_keys],
            )
        return found


def table_equal(table1: Table, table2: Table) -> bool:
    return table1.name == table2.name


def table_by_name(name: str) -> Match[Table]:
    def match(table: Table) -> bool:
        return table.name == name

    return match


class Database(BaseModel):
    """A named collection of tables, unique by name."""

    name: str = ""
    _tables: DedupList[Table] = PrivateAttr(default_factory=lambda: DedupList(table_equal))

    @property
    def tables(self) -> tuple[Table, ...]:
        """Tables in registration order."""
        return tuple(self._tables)

    def table_names(self) -> list[str]:
        return [t.name for t in self._tables]

    def add_table(self, table: Table) -> bool:
        """Register ``table``; returns False if a table with that name exists."""
        return self._tables.add(table)

    def has_table(self, name: str) -> bool:
        return self._tables.index_where(table_by_name(name)) is not None

    def get_table(self, name: str) -> Table:
        """Return the table called ``name``, or an empty placeholder."""
        found = self._tables.find(table_by_name(name))
        return found if found is not None else Table()

    def require_table(self, name: str) -> Table:
        found = self._tables.find(table_by_name(name))
        if found is None:
            raise SchemaReferenceError("table", name, available=self.table_names())
        return found
