"""Orchestrates compilation: schema checks → rendering → SQL validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import StringIO

from starsql.compiler.generator import SQLGenerator
from starsql.compiler.graph import SchemaGraph
from starsql.compiler.validator import validate_sql
from starsql.parser.validator import SchemaValidator

logger = logging.getLogger("starsql.pipeline")


@dataclass
class CompilationResult:
    """The result of compiling a generator's query to SQL."""

    sql: str
    from_table: str | None
    joined_tables: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    sql_valid: bool = True


class CompilationPipeline:
    """Renders a generator and collects non-blocking diagnostics."""

    def __init__(self, validate_sql: bool = True) -> None:
        self._validate_sql = validate_sql
        self._schema_validator = SchemaValidator()

    def compile(self, generator: SQLGenerator) -> CompilationResult:
        """Compile the generator's query; SQL is returned even when warnings exist."""
        warnings: list[str] = []

        # Phase 1: schema checks
        schema_result = self._schema_validator.validate(generator.database)
        for err in [*schema_result.errors, *schema_result.warnings]:
            warnings.append(f"{err.code}: {err.message}")

        # Phase 2: selects that no inferred join brings into scope
        from_table = generator.from_table or ""
        reachable = SchemaGraph(generator.database).reachable_from_base(from_table)
        for s in generator.selects:
            if s.table not in reachable:
                message = (
                    f"Column '{s.table}.{s.column}' is selected but '{s.table}' "
                    f"is not joined to '{from_table}'"
                )
                logger.warning("%s", message)
                warnings.append(message)

        # Phase 3: rendering (strict lookups raise here)
        steps = generator.join_steps()
        buf = StringIO()
        generator.write(buf, steps)
        sql = buf.getvalue()
        joined = [step.to_table for step in steps]

        # Phase 4: SQL validation (non-blocking)
        sql_valid = True
        if self._validate_sql:
            validation_errors = validate_sql(sql)
            sql_valid = len(validation_errors) == 0
            warnings.extend(f"SQL validation: {e}" for e in validation_errors)

        logger.info(
            "Compiled query on '%s' (%d joins, %d warnings, sql_valid=%s)",
            from_table,
            len(joined),
            len(warnings),
            sql_valid,
        )
        return CompilationResult(
            sql=sql,
            from_table=generator.from_table,
            joined_tables=joined,
            warnings=warnings,
            sql_valid=sql_valid,
        )
