"""Pydantic domain models for StarSQL."""

from starsql.models.errors import SchemaReferenceError, SemanticError, SourceSpan, ValidationResult
from starsql.models.query import RenderOptions, Select
from starsql.models.schema import Database, ForeignKey, Table

__all__ = [
    "Database",
    "ForeignKey",
    "RenderOptions",
    "SchemaReferenceError",
    "Select",
    "SemanticError",
    "SourceSpan",
    "Table",
    "ValidationResult",
]
