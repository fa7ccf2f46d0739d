"""Schema management package - schema bundles and schema files."""

from .bundle import SchemaBundle, parse_schema, resolve_type
from .files import load_schema_file, locate_schema_file

__all__ = [
    "SchemaBundle",
    "load_schema_file",
    "locate_schema_file",
    "parse_schema",
    "resolve_type",
]
