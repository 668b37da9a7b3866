"""Schema subsystem -- the parsed protocol definition table."""

from dap_typegen.schema.errors import (
    DefinitionNotFoundError,
    MalformedSchemaError,
    SchemaError,
    SchemaFetchError,
    UnresolvableReferenceError,
)
from dap_typegen.schema.loader import fetch_schema_document, load_schema_file, load_schema_store
from dap_typegen.schema.models import SchemaNode, definition_name
from dap_typegen.schema.store import SchemaStore

__all__ = [
    "DefinitionNotFoundError",
    "MalformedSchemaError",
    "SchemaError",
    "SchemaFetchError",
    "SchemaNode",
    "SchemaStore",
    "UnresolvableReferenceError",
    "definition_name",
    "fetch_schema_document",
    "load_schema_file",
    "load_schema_store",
]
