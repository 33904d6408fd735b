"""Query descriptors: requested output columns and rendering options."""

from __future__ import annotations

from pydantic import BaseModel


class Select(BaseModel):
    """One requested output column, optionally aggregated and aliased.

    ``table`` and ``column`` are free-form identifiers; they are not checked
    against the schema.
    """

    table: str
    column: str
    alias: str | None = None
    aggregate: str | None = None

    model_config = {"frozen": True}

    @property
    def is_aggregate(self) -> bool:
        return bool(self.aggregate)


class RenderOptions(BaseModel):
    """Flags controlling how a statement is rendered."""

    case_sensitive: bool = False
    force_group_by: bool = False
    # False reproduces the permissive behavior: unknown names render as empty fragments.
    strict_references: bool = True

    model_config = {"frozen": True}
