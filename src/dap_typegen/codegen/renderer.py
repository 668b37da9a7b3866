"""Declaration renderer -- formats interfaces, aliases and API methods as text."""

from __future__ import annotations

from collections.abc import Callable

from dap_typegen.codegen.classifier import ApiMethod, MessageKind
from dap_typegen.codegen.context import TranslationContext
from dap_typegen.codegen.mapper import map_type
from dap_typegen.config import GeneratorConfig
from dap_typegen.schema.models import SchemaNode


def banner_lines(generator_name: str) -> list[str]:
    """Box the auto-generation warning in a comment sized to its message."""
    message = f"Auto-generated by {generator_name}, do not edit manually."
    stars = "*" * (len(message) + 4)
    return [f"/{stars}", f" * {message} *", f" {stars}/"]


def render_api_method(method: ApiMethod) -> str:
    if method.kind is MessageKind.EVENT:
        return f"{method.name}(params: {method.params_type}): void;"
    return (
        f"on(request: '{method.name}', handler: (params: {method.params_type}) "
        f"=> Promise<{method.result_type}>): void;"
    )


class DeclarationWriter:
    """Line buffer for one declaration file.

    ``depth`` arguments count indentation levels; one level is
    ``config.indent``.  Namespace members sit at depth 1, their members at
    depth 2.
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.lines: list[str] = []

    def _pad(self, depth: int) -> str:
        return self.config.indent * depth

    def line(self, text: str = "", depth: int = 0) -> None:
        self.lines.append(f"{self._pad(depth)}{text}" if text else "")

    def doc(self, text: str | None, depth: int) -> None:
        """Emit ``text`` as a ``/** */`` block, one comment line per source line."""
        if not text:
            return
        pad = self._pad(depth)
        self.lines.append(f"{pad}/**")
        for source_line in text.split("\n"):
            self.lines.append(f"{pad} * {source_line}")
        self.lines.append(f"{pad} */")

    def separator(self) -> Callable[[], None]:
        """Return a callable that emits a blank line on every call but the first."""
        first = True

        def separate() -> None:
            nonlocal first
            if not first:
                self.lines.append("")
            first = False

        return separate

    def header(self) -> None:
        if self.config.header_lines:
            self.lines.extend(self.config.header_lines)
            self.lines.append("")
        self.lines.extend(banner_lines(self.config.generator_name))
        self.lines.append(f"export namespace {self.config.namespace} {{")

    def footer(self) -> None:
        self.lines.extend(["}", "", f"export default {self.config.namespace};", ""])

    def api(self, methods: list[ApiMethod]) -> None:
        self.line("export interface Api {", depth=1)
        separate = self.separator()
        for method in methods:
            separate()
            self.doc(method.description, depth=2)
            self.line(render_api_method(method), depth=2)
        self.line("}", depth=1)

    def properties(
        self, node: SchemaNode, context: TranslationContext, depth: int, *, owner: str
    ) -> None:
        required = node.required_names()
        separate = self.separator()
        for name, prop in node.properties.items():
            separate()
            self.doc(prop.description, depth)
            optional = "" if name in required else "?"
            self.line(f"{name}{optional}: {map_type(prop, context, owner=owner)};", depth)

    def interface(
        self,
        name: str,
        node: SchemaNode,
        context: TranslationContext,
        *,
        description: str | None = None,
    ) -> None:
        self.doc(description, depth=1)
        self.line(f"export interface {name} {{", depth=1)
        self.properties(node, context, depth=2, owner=name)
        self.line("}", depth=1)

    def type_alias(self, name: str, expression: str, *, description: str | None = None) -> None:
        self.doc(description, depth=1)
        self.line(f"export type {name} = {expression};", depth=1)

    def text(self) -> str:
        return "\n".join(self.lines)
