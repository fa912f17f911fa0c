"""
Schema building and script execution utilities.
"""

from .builder import CURRENT_TIMESTAMP, SchemaBuilder
from .script import SchemaScript, ScriptStatement, split_statements

__all__ = [
    "CURRENT_TIMESTAMP",
    "SchemaBuilder",
    "SchemaScript",
    "ScriptStatement",
    "split_statements",
]
