"""YAML schema loading with line fidelity for StarSQL."""

from starsql.parser.loader import SourceMap, TrackedLoader, YAMLSafetyError
from starsql.parser.resolver import SchemaResolver, load_database
from starsql.parser.validator import SchemaValidator

__all__ = [
    "SchemaResolver",
    "SchemaValidator",
    "SourceMap",
    "TrackedLoader",
    "YAMLSafetyError",
    "load_database",
]
