"""Schema resolution: raw YAML mapping → Database of tables and foreign keys."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from starsql.models.errors import SemanticError, ValidationResult
from starsql.models.schema import Database, ForeignKey, Table
from starsql.parser.loader import SourceMap, TrackedLoader, YAMLSafetyError
from starsql.parser.validator import SchemaValidator

logger = logging.getLogger("starsql.parser")


class SchemaResolver:
    """Builds a ``Database`` from a raw schema document and validates it."""

    def __init__(self) -> None:
        self._validator = SchemaValidator()

    def resolve(
        self,
        raw: dict[str, Any],
        source_map: SourceMap | None = None,
    ) -> tuple[Database, ValidationResult]:
        """Resolve a raw YAML dict into a Database.

        Returns (database, validation_result). If there are errors,
        the database may be partially populated.
        """
        errors: list[SemanticError] = []
        warnings: list[SemanticError] = []
        raw_name = raw.get("name")
        database = Database(name="" if raw_name is None else str(raw_name))

        raw_tables = raw.get("tables", {})
        if not isinstance(raw_tables, dict):
            errors.append(
                SemanticError(
                    code="TABLES_PARSE_ERROR",
                    message="'tables' must be a YAML mapping, not a list or scalar",
                    path="tables",
                )
            )
            raw_tables = {}

        for name, raw_table in raw_tables.items():
            path = f"tables.{name}"
            if not isinstance(raw_table, dict):
                errors.append(
                    SemanticError(
                        code="TABLE_PARSE_ERROR",
                        message=f"Table '{name}' must be a mapping",
                        path=path,
                    )
                )
                continue
            try:
                table = Table(name=name, primary_key=raw_table.get("primaryKey", ""))
            except ValidationError as exc:
                errors.append(
                    SemanticError(
                        code="TABLE_PARSE_ERROR",
                        message=f"Table '{name}': {exc.errors()[0]['msg']}",
                        path=path,
                    )
                )
                continue

            raw_fkeys = raw_table.get("foreignKeys", [])
            if not isinstance(raw_fkeys, list):
                errors.append(
                    SemanticError(
                        code="FOREIGN_KEY_PARSE_ERROR",
                        message=f"'foreignKeys' of table '{name}' must be a list",
                        path=f"{path}.foreignKeys",
                    )
                )
                raw_fkeys = []

            for i, raw_fk in enumerate(raw_fkeys):
                fk_path = f"{path}.foreignKeys[{i}]"
                if not (
                    isinstance(raw_fk, dict)
                    and isinstance(raw_fk.get("column"), str)
                    and isinstance(raw_fk.get("references"), str)
                ):
                    errors.append(
                        SemanticError(
                            code="FOREIGN_KEY_PARSE_ERROR",
                            message=(
                                f"Foreign key #{i + 1} of table '{name}' needs "
                                f"string 'column' and 'references' values"
                            ),
                            path=fk_path,
                        )
                    )
                    continue
                fk = ForeignKey(column=raw_fk["column"], target=raw_fk["references"])
                if not table.add_foreign_key(fk):
                    warnings.append(
                        SemanticError(
                            code="DUPLICATE_FOREIGN_KEY",
                            message=(
                                f"Column '{fk.column}' of table '{name}' is already a "
                                f"foreign key; later declaration ignored"
                            ),
                            path=fk_path,
                        )
                    )

            database.add_table(table)

        # Integrity checks only make sense on a structurally sound document.
        if not errors:
            result = self._validator.validate(database)
            errors.extend(result.errors)
            warnings.extend(result.warnings)

        if source_map is not None:
            errors = [self._with_span(e, source_map) for e in errors]
            warnings = [self._with_span(w, source_map) for w in warnings]

        logger.debug(
            "Resolved schema '%s': %d tables, %d errors, %d warnings",
            database.name,
            len(database.tables),
            len(errors),
            len(warnings),
        )
        return database, ValidationResult(valid=len(errors) == 0, errors=errors, warnings=warnings)

    @staticmethod
    def _with_span(error: SemanticError, source_map: SourceMap) -> SemanticError:
        if error.span is not None or error.path is None:
            return error
        # Fall back to the closest enclosing path that has a position.
        path = error.path
        while path:
            span = source_map.get(path)
            if span is not None:
                return error.model_copy(update={"span": span})
            path = path.rpartition(".")[0]
        return error


def load_database(content: str, filename: str = "<string>") -> Database:
    """Parse and resolve a YAML schema document.

    Raises ``ValueError`` if the document cannot be parsed or has errors.
    """
    try:
        raw, source_map = TrackedLoader().load_string(content, filename=filename)
    except (YAMLSafetyError, YAMLError) as exc:
        raise ValueError(f"Schema validation failed: {exc}") from exc

    database, result = SchemaResolver().resolve(raw, source_map)
    if not result.valid:
        msgs = "; ".join(e.message for e in result.errors)
        raise ValueError(f"Schema validation failed: {msgs}")
    for w in result.warnings:
        logger.warning("%s: %s", w.code, w.message)
    return database
