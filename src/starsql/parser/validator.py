"""Schema validation: naming, primary keys, join targets, cycles."""

from __future__ import annotations

from starsql.compiler.graph import SchemaGraph
from starsql.models.errors import SemanticError, ValidationResult
from starsql.models.schema import Database


class SchemaValidator:
    """Checks a star schema for references that would render broken SQL."""

    def validate(self, database: Database) -> ValidationResult:
        graph = SchemaGraph(database)
        errors: list[SemanticError] = []
        errors.extend(self._check_table_names(database))
        errors.extend(self._check_join_targets_exist(graph))
        errors.extend(self._check_primary_keys(database, graph))
        warnings = self._check_no_cyclic_foreign_keys(graph)
        return ValidationResult(valid=len(errors) == 0, errors=errors, warnings=warnings)

    def _check_table_names(self, database: Database) -> list[SemanticError]:
        errors: list[SemanticError] = []
        for position, table in enumerate(database.tables):
            if not table.name:
                errors.append(
                    SemanticError(
                        code="EMPTY_TABLE_NAME",
                        message=f"Table #{position + 1} has an empty name",
                        path="tables",
                    )
                )
        return errors

    def _check_join_targets_exist(self, graph: SchemaGraph) -> list[SemanticError]:
        errors: list[SemanticError] = []
        for dangling in graph.unresolved_targets():
            errors.append(
                SemanticError(
                    code="UNKNOWN_JOIN_TARGET",
                    message=(
                        f"Foreign key '{dangling.table}.{dangling.column}' references "
                        f"unknown table '{dangling.target}'"
                    ),
                    path=f"tables.{dangling.table}.foreignKeys.{dangling.column}",
                )
            )
        return errors

    def _check_primary_keys(self, database: Database, graph: SchemaGraph) -> list[SemanticError]:
        """Every table referenced by a foreign key needs a primary key to join on."""
        errors: list[SemanticError] = []
        for table in database.tables:
            if table.primary_key:
                continue
            referrers = sorted({u for u, _ in graph.graph.in_edges(table.name)})
            if referrers:
                errors.append(
                    SemanticError(
                        code="MISSING_PRIMARY_KEY",
                        message=(
                            f"Table '{table.name}' is referenced by "
                            f"{', '.join(referrers)} but has no primary key"
                        ),
                        path=f"tables.{table.name}.primaryKey",
                    )
                )
        return errors

    def _check_no_cyclic_foreign_keys(self, graph: SchemaGraph) -> list[SemanticError]:
        warnings: list[SemanticError] = []
        for cycle in graph.detect_cycles():
            chain = " -> ".join([*cycle, cycle[0]])
            warnings.append(
                SemanticError(
                    code="CYCLIC_FOREIGN_KEYS",
                    message=f"Cyclic foreign keys: {chain}",
                    path=f"tables.{cycle[0]}.foreignKeys",
                )
            )
        return warnings
