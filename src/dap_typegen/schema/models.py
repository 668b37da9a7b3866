"""Pydantic models for JSON-schema nodes in the protocol definition table."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dap_typegen.schema.errors import MalformedSchemaError

DEFINITIONS_PREFIX = "#/definitions/"


class SchemaNode(BaseModel):
    """A named definition or a nested fragment of one.

    Nodes are read-only views of the parsed document.  Keys the generator
    does not interpret (``default``, ``additionalProperties`` ...) are kept as
    extras so nothing in the source document is lost.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    type: str | list[str] | None = None
    ref: str | None = Field(default=None, alias="$ref")
    title: str | None = None
    description: str | None = None
    properties: dict[str, SchemaNode] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    items: SchemaNode | None = None
    enum: list[Any] | None = None
    suggested_enum: list[Any] | None = Field(default=None, alias="_enum")
    all_of: list[SchemaNode] | None = Field(default=None, alias="allOf")

    @field_validator("required", mode="before")
    @classmethod
    def normalize_required(cls, value: Any) -> Any:
        return [] if value is None else value

    def fixed_values(self) -> list[Any]:
        """Literal values this node is restricted to, closed ``enum`` first."""
        if self.enum:
            return list(self.enum)
        if self.suggested_enum:
            return list(self.suggested_enum)
        return []

    def required_names(self) -> set[str]:
        return set(self.required)

    def is_object(self) -> bool:
        return self.type == "object"

    def base_reference(self) -> SchemaNode | None:
        """The ``allOf`` member that is a bare reference, if any."""
        for parent in self.all_of or []:
            if parent.ref:
                return parent
        return None

    def extension(self) -> SchemaNode | None:
        """The inline ``allOf`` member that extends the base, if any."""
        for parent in self.all_of or []:
            if not parent.ref:
                return parent
        return None

    def child(self, name: str) -> SchemaNode | None:
        return self.properties.get(name)


EMPTY_NODE = SchemaNode(type="object")


def definition_name(ref: str) -> str:
    """Strip the ``#/definitions/`` prefix from a reference."""
    if not ref.startswith(DEFINITIONS_PREFIX):
        raise MalformedSchemaError(f"Unsupported $ref {ref!r}, expected '{DEFINITIONS_PREFIX}<name>'")
    return ref[len(DEFINITIONS_PREFIX):]
