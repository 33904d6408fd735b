"""Structured error models and the schema lookup exception."""

from __future__ import annotations

from pydantic import BaseModel


class SchemaReferenceError(Exception):
    """Raised when a table or foreign key name is not registered in the schema."""

    def __init__(self, kind: str, name: str, available: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.available = available
        listing = ", ".join(available) if available else "none"
        super().__init__(f"Unknown {kind} '{name}'. Available: {listing}")


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class SemanticError(BaseModel):
    """A structured error with optional source position and suggestions."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None
    suggestions: list[str] = []


class ValidationResult(BaseModel):
    """Result of schema validation."""

    valid: bool
    errors: list[SemanticError] = []
    warnings: list[SemanticError] = []
