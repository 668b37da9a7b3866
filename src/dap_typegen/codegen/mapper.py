"""Type mapper -- schema node to TypeScript type expression."""

from __future__ import annotations

from dap_typegen.codegen.context import TranslationContext
from dap_typegen.schema.errors import MalformedSchemaError
from dap_typegen.schema.models import SchemaNode, definition_name

ANY_TYPE = "any"

_PRIMITIVE_MAP: dict[str, str] = {
    "integer": "number",
}


def map_type(node: SchemaNode, context: TranslationContext, *, owner: str | None = None) -> str:
    """Render ``node`` as a type expression.

    Every ``$ref`` met along the way is registered on the context's worklist,
    so the referenced definition is emitted later.  ``owner`` names the
    definition being rendered and only feeds error messages.
    """
    values = node.fixed_values()
    if values:
        return " | ".join(f"'{value}'" for value in values)

    if node.ref:
        name = definition_name(node.ref)
        context.reference(name)
        return name

    if isinstance(node.type, list):
        return " | ".join(
            map_type(SchemaNode(type=alternative), context, owner=owner)
            for alternative in node.type
        )

    if node.type == "array":
        subtype = map_type(node.items, context, owner=owner) if node.items else ANY_TYPE
        return f"{subtype}[]"

    if node.type is None:
        raise MalformedSchemaError("Schema node has no type, $ref or enum", definition=owner)

    return _PRIMITIVE_MAP.get(node.type, node.type)


def alias_type(node: SchemaNode, context: TranslationContext, *, owner: str | None = None) -> str:
    """Render the body of ``export type <owner> = ...`` for a non-object definition.

    A single primitive ``type`` is emitted by name only; enum restrictions on
    the definition itself are not expanded.  Anything else (a bare ``$ref``, a
    type list) goes through map_type.
    """
    if isinstance(node.type, str):
        return _PRIMITIVE_MAP.get(node.type, node.type)
    return map_type(node, context, owner=owner)
