"""Run events for generation.

The engine reports what it does through a TelemetrySink:
  - typegen.classified: one per Event or Request placed on the API surface
  - typegen.type_emitted: one per plain type declaration
  - typegen.completed: once, with counts for the whole run

The CLI logs them, tests collect them, library callers get nothing by default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

CLASSIFIED = "typegen.classified"
TYPE_EMITTED = "typegen.type_emitted"
COMPLETED = "typegen.completed"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    attributes: dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        """``name key=value ...`` with attributes in emission order."""
        pairs = " ".join(f"{key}={value}" for key, value in self.attributes.items())
        return f"{self.name} {pairs}" if pairs else self.name


class TelemetrySink(Protocol):
    def emit(self, event: TelemetryEvent) -> None: ...


class NoOpTelemetrySink:
    def emit(self, event: TelemetryEvent) -> None:
        pass


class InMemoryTelemetrySink:
    """Keeps every event; used by tests to inspect a run."""

    def __init__(self) -> None:
        self.events: list[TelemetryEvent] = []

    def emit(self, event: TelemetryEvent) -> None:
        self.events.append(event)

    def named(self, name: str) -> list[TelemetryEvent]:
        return [event for event in self.events if event.name == name]


class LoggerTelemetrySink:
    """Logs each event at DEBUG, so ``dap-typegen -v`` shows the run."""

    def emit(self, event: TelemetryEvent) -> None:
        logger.debug("%s", event.describe())
