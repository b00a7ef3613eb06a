"""Schema layer — declarative rule documents.

Load a document (JSON, TOML, or YAML), compile it into rule objects, and
resolve bare rule names through the named-rule registry.
"""

from vrule.schema.compiler import CompiledSchema, compile_schema
from vrule.schema.loader import load_document
from vrule.schema.registry import get_rule, register_rule, registered_names

__all__ = [
    "CompiledSchema",
    "compile_schema",
    "get_rule",
    "load_document",
    "register_rule",
    "registered_names",
]
