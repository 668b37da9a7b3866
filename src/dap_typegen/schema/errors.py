"""Error taxonomy for schema loading and translation.

  - SchemaFetchError: the schema document could not be fetched or parsed
  - MalformedSchemaError: the document parsed but a definition has the wrong shape
  - DefinitionNotFoundError: a ``$ref`` names a definition that does not exist
  - UnresolvableReferenceError: a ``$ref`` chain cycles or never bottoms out
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for every error raised while producing declarations."""


class SchemaFetchError(SchemaError):
    pass


class MalformedSchemaError(SchemaError):
    def __init__(self, message: str, *, definition: str | None = None) -> None:
        self.definition = definition
        if definition:
            message = f"{definition}: {message}"
        super().__init__(message)


class DefinitionNotFoundError(MalformedSchemaError):
    def __init__(self, name: str, *, definition: str | None = None) -> None:
        self.name = name
        super().__init__(f"Unknown definition {name!r}", definition=definition)


class UnresolvableReferenceError(MalformedSchemaError):
    def __init__(self, chain: list[str], *, definition: str | None = None) -> None:
        self.chain = list(chain)
        super().__init__(
            f"Unresolvable $ref chain: {' -> '.join(self.chain)}",
            definition=definition,
        )
