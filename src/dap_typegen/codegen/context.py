"""Translation context -- the per-run state shared by every codegen component."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from dap_typegen.config import GeneratorConfig
from dap_typegen.schema.store import SchemaStore
from dap_typegen.telemetry import NoOpTelemetrySink, TelemetryEvent, TelemetrySink

logger = logging.getLogger(__name__)


class Worklist:
    """Plain-type names pending emission.

    A name is pushed at most once per run.  Names are popped last-in
    first-out, which fixes the order of plain types in the output.
    """

    def __init__(self) -> None:
        self._pending: list[str] = []
        self._seen: set[str] = set()

    def push(self, name: str) -> bool:
        """Queue ``name`` unless it was seen before. Returns True if queued."""
        if name in self._seen:
            return False
        self._seen.add(name)
        self._pending.append(name)
        return True

    def pop(self) -> str:
        return self._pending.pop()

    def drain(self) -> Iterator[str]:
        """Pop names until empty; pushes made while iterating are picked up."""
        while self._pending:
            yield self._pending.pop()

    @property
    def seen(self) -> frozenset[str]:
        return frozenset(self._seen)

    @property
    def pending(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)


@dataclass
class TranslationContext:
    store: SchemaStore
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    telemetry: TelemetrySink = field(default_factory=NoOpTelemetrySink)
    worklist: Worklist = field(default_factory=Worklist)

    def reference(self, name: str) -> None:
        """Record that ``name`` appears as a bare type reference."""
        if self.worklist.push(name):
            logger.debug("Queued plain type %s", name)

    def emit(self, event: str, /, **attributes: Any) -> None:
        self.telemetry.emit(TelemetryEvent(name=event, attributes=attributes))
