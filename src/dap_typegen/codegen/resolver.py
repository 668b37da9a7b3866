"""Reference resolver -- drains the worklist of referenced plain types."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from dap_typegen.codegen.context import TranslationContext
from dap_typegen.schema.models import SchemaNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainTypeDeclaration:
    name: str
    node: SchemaNode

    @property
    def is_alias(self) -> bool:
        return not self.node.is_object()


def iter_plain_types(context: TranslationContext) -> Iterator[PlainTypeDeclaration]:
    """Yield each referenced plain type once, last-discovered first.

    The worklist is popped lazily: rendering a yielded declaration may queue
    further names, and those are picked up before the iterator is exhausted.
    A queued name missing from the store raises DefinitionNotFoundError.
    """
    for name in context.worklist.drain():
        node = context.store.require(name)
        logger.debug("Resolving plain type %s", name)
        yield PlainTypeDeclaration(name=name, node=node)
