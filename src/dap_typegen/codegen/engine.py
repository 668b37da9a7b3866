"""Translation engine -- classify, render the API surface, then drain plain types."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dap_typegen.codegen.classifier import Classification, classify
from dap_typegen.codegen.context import TranslationContext
from dap_typegen.codegen.mapper import alias_type
from dap_typegen.codegen.renderer import DeclarationWriter
from dap_typegen.codegen.resolver import iter_plain_types
from dap_typegen.config import GeneratorConfig
from dap_typegen.schema.store import SchemaStore
from dap_typegen.telemetry import COMPLETED, TYPE_EMITTED, NoOpTelemetrySink, TelemetrySink

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    text: str
    classification: Classification
    plain_types: list[str] = field(default_factory=list)

    @property
    def api_method_count(self) -> int:
        return len(self.classification.api_methods)

    @property
    def stub_count(self) -> int:
        return len(self.classification.stubs)

    def summary(self) -> dict[str, object]:
        return {
            "api_methods": self.api_method_count,
            "stubs": self.stub_count,
            "plain_types": len(self.plain_types),
            "reverse_requests_skipped": list(self.classification.reverse_requests),
        }


class TypeGenerator:
    """Turns a schema store into one declaration file.

    Each call to generate() starts from a fresh TranslationContext, so the
    same store always yields the same text.
    """

    def __init__(
        self,
        store: SchemaStore,
        config: GeneratorConfig | None = None,
        telemetry_sink: TelemetrySink | None = None,
    ) -> None:
        self.store = store
        self.config = config or GeneratorConfig()
        self.telemetry = telemetry_sink or NoOpTelemetrySink()

    def _new_context(self) -> TranslationContext:
        return TranslationContext(store=self.store, config=self.config, telemetry=self.telemetry)

    def classify(self) -> Classification:
        return classify(self._new_context())

    def generate(self) -> GenerationResult:
        context = self._new_context()
        classification = classify(context)

        writer = DeclarationWriter(self.config)
        writer.header()
        separate = writer.separator()

        separate()
        writer.api(classification.api_methods)

        for stub in classification.stubs:
            separate()
            writer.interface(stub.name, stub.source, context)

        plain_types: list[str] = []
        for declaration in iter_plain_types(context):
            separate()
            node = declaration.node
            if declaration.is_alias:
                expression = alias_type(node, context, owner=declaration.name)
                writer.type_alias(declaration.name, expression, description=node.description)
            else:
                writer.interface(declaration.name, node, context, description=node.description)
            plain_types.append(declaration.name)
            context.emit(TYPE_EMITTED, name=declaration.name, alias=declaration.is_alias)

        writer.footer()
        result = GenerationResult(
            text=writer.text(), classification=classification, plain_types=plain_types
        )
        context.emit(COMPLETED, **result.summary())
        logger.info(
            "Generated %d API methods, %d stubs, %d plain types",
            result.api_method_count,
            result.stub_count,
            len(plain_types),
        )
        return result


def generate_declarations(
    store: SchemaStore,
    config: GeneratorConfig | None = None,
    telemetry_sink: TelemetrySink | None = None,
) -> str:
    """Render the declaration file for ``store`` and return its text."""
    return TypeGenerator(store, config, telemetry_sink).generate().text
