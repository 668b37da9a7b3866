"""Schema store -- read-only index of the protocol's named definitions.

The store is built once from the parsed document's ``definitions`` mapping
and keeps the document's key order, which drives the order of the generated
API surface.  Nothing mutates it after construction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from dap_typegen.schema.errors import DefinitionNotFoundError, MalformedSchemaError
from dap_typegen.schema.models import SchemaNode, definition_name

logger = logging.getLogger(__name__)


class SchemaStore:
    """In-memory table of definition name to schema node."""

    def __init__(self, definitions: Mapping[str, SchemaNode]) -> None:
        self._definitions: dict[str, SchemaNode] = dict(definitions)

    @classmethod
    def from_document(cls, document: Any) -> SchemaStore:
        """Build a store from a parsed JSON-schema document.

        Raises MalformedSchemaError if the document has no ``definitions``
        mapping or one of its definitions is not a schema object.
        """
        if not isinstance(document, dict):
            raise MalformedSchemaError("Schema document root must be a JSON object")
        raw = document.get("definitions")
        if not isinstance(raw, dict):
            raise MalformedSchemaError("Schema document has no 'definitions' mapping")

        definitions: dict[str, SchemaNode] = {}
        for name, body in raw.items():
            try:
                definitions[name] = SchemaNode.model_validate(body)
            except ValidationError as exc:
                raise MalformedSchemaError(str(exc), definition=name) from exc
        logger.debug("Loaded %d definitions", len(definitions))
        return cls(definitions)

    def get(self, name: str) -> SchemaNode | None:
        """Look up a definition by name. Returns None if not found."""
        return self._definitions.get(name)

    def require(self, name: str, *, referrer: str | None = None) -> SchemaNode:
        """Look up a definition by name, raising DefinitionNotFoundError if absent."""
        node = self._definitions.get(name)
        if node is None:
            raise DefinitionNotFoundError(name, definition=referrer)
        return node

    def resolve(self, ref: str, *, referrer: str | None = None) -> SchemaNode:
        """Look up the definition a ``#/definitions/<name>`` reference points at."""
        return self.require(definition_name(ref), referrer=referrer)

    def names(self) -> list[str]:
        return list(self._definitions)

    def items(self) -> list[tuple[str, SchemaNode]]:
        return list(self._definitions.items())

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)
