"""StarSQL: SQL SELECT generation over declarative star schemas."""

from starsql.compiler.generator import SQLGenerator
from starsql.compiler.pipeline import CompilationPipeline, CompilationResult
from starsql.models.errors import SchemaReferenceError
from starsql.models.query import RenderOptions, Select
from starsql.models.schema import Database, ForeignKey, Table

__version__ = "0.1.0"

__all__ = [
    "CompilationPipeline",
    "CompilationResult",
    "Database",
    "ForeignKey",
    "RenderOptions",
    "SQLGenerator",
    "SchemaReferenceError",
    "Select",
    "Table",
    "__version__",
]
