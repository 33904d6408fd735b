"""Query compilation for StarSQL: join inference, clause emitters, generator."""

from starsql.compiler.generator import SQLGenerator
from starsql.compiler.joins import JoinStep, infer_join_steps

__all__ = [
    "JoinStep",
    "SQLGenerator",
    "infer_join_steps",
]
