"""Join inference: one join per foreign key declared on the base (fact) table."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from starsql.models.schema import Database, Table

logger = logging.getLogger("starsql.generator")


@dataclass
class JoinStep:
    """A single fact-to-dimension join: ``to_table.to_primary_key = from_table.fk_column``."""

    from_table: str
    fk_column: str
    to_table: str
    to_primary_key: str


def _lookup(database: Database, name: str, strict: bool) -> Table:
    if strict:
        return database.require_table(name)
    table = database.get_table(name)
    if not table.name:
        logger.warning("Table '%s' is not registered; rendering empty fragments", name)
    return table


def infer_join_steps(database: Database, from_table: str, strict: bool = True) -> list[JoinStep]:
    """Infer joins from the foreign keys registered on ``from_table``.

    Only direct foreign keys produce joins, in registration order. No
    dimension-to-dimension joins are attempted.
    """
    base = _lookup(database, from_table, strict)
    steps: list[JoinStep] = []
    for fk in base.foreign_keys:
        target = _lookup(database, fk.target, strict)
        steps.append(
            JoinStep(
                from_table=from_table,
                fk_column=fk.column,
                to_table=fk.target,
                to_primary_key=target.primary_key,
            )
        )
    return steps
