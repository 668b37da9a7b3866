"""Codegen subsystem -- schema definitions to TypeScript declarations."""

from dap_typegen.codegen.classifier import (
    ApiMethod,
    Classification,
    MessageKind,
    Stub,
    StubKind,
    classify,
    classify_definition,
)
from dap_typegen.codegen.context import TranslationContext, Worklist
from dap_typegen.codegen.engine import GenerationResult, TypeGenerator, generate_declarations
from dap_typegen.codegen.mapper import alias_type, map_type
from dap_typegen.codegen.renderer import DeclarationWriter
from dap_typegen.codegen.resolver import PlainTypeDeclaration, iter_plain_types

__all__ = [
    "ApiMethod",
    "Classification",
    "DeclarationWriter",
    "GenerationResult",
    "MessageKind",
    "PlainTypeDeclaration",
    "Stub",
    "StubKind",
    "TranslationContext",
    "TypeGenerator",
    "Worklist",
    "alias_type",
    "classify",
    "classify_definition",
    "generate_declarations",
    "iter_plain_types",
    "map_type",
]
