"""Test fixtures for dap-typegen tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from dap_typegen.codegen.context import TranslationContext
from dap_typegen.config import GeneratorConfig
from dap_typegen.schema.store import SchemaStore


@pytest.fixture(autouse=True)
def _clear_typegen_env(monkeypatch):
    """Keep DAP_TYPEGEN_* settings from the outer environment out of tests."""
    for name in ("SCHEMA_URL", "OUTPUT", "NAMESPACE", "TIMEOUT"):
        monkeypatch.delenv(f"DAP_TYPEGEN_{name}", raising=False)


_BASES: dict[str, Any] = {
    "ProtocolMessage": {
        "type": "object",
        "properties": {"seq": {"type": "integer"}},
        "required": ["seq"],
    },
    "Request": {
        "allOf": [
            {"$ref": "#/definitions/ProtocolMessage"},
            {"type": "object", "properties": {"command": {"type": "string"}}},
        ]
    },
    "Event": {
        "allOf": [
            {"$ref": "#/definitions/ProtocolMessage"},
            {"type": "object", "properties": {"event": {"type": "string"}}},
        ]
    },
    "Response": {
        "allOf": [
            {"$ref": "#/definitions/ProtocolMessage"},
            {"type": "object", "properties": {"success": {"type": "boolean"}}},
        ]
    },
}


def make_event(
    event: str,
    body: dict[str, Any] | None = None,
    description: str | None = None,
) -> dict[str, Any]:
    """Build an Event definition with a fixed event name."""
    extension: dict[str, Any] = {
        "type": "object",
        "properties": {"event": {"type": "string", "enum": [event]}},
    }
    if description:
        extension["description"] = description
    if body is not None:
        extension["properties"]["body"] = body
    return {"allOf": [{"$ref": "#/definitions/Event"}, extension]}


def make_request(
    command: str,
    arguments: str | None = None,
    title: str = "Requests",
    description: str | None = None,
) -> dict[str, Any]:
    """Build a Request definition; ``arguments`` names the arguments definition."""
    extension: dict[str, Any] = {
        "type": "object",
        "title": title,
        "properties": {"command": {"type": "string", "enum": [command]}},
    }
    if description:
        extension["description"] = description
    if arguments:
        extension["properties"]["arguments"] = {"$ref": f"#/definitions/{arguments}"}
    return {"allOf": [{"$ref": "#/definitions/Request"}, extension]}


def make_response(body: dict[str, Any] | None = None) -> dict[str, Any]:
    extension: dict[str, Any] = {"type": "object"}
    if body is not None:
        extension["properties"] = {"body": body}
    return {"allOf": [{"$ref": "#/definitions/Response"}, extension]}


def make_document(definitions: dict[str, Any], *, with_bases: bool = True) -> dict[str, Any]:
    merged: dict[str, Any] = copy.deepcopy(_BASES) if with_bases else {}
    merged.update(copy.deepcopy(definitions))
    return {"definitions": merged}


def make_store(definitions: dict[str, Any], *, with_bases: bool = True) -> SchemaStore:
    return SchemaStore.from_document(make_document(definitions, with_bases=with_bases))


def make_context(
    definitions: dict[str, Any] | None = None,
    config: GeneratorConfig | None = None,
) -> TranslationContext:
    return TranslationContext(
        store=make_store(definitions or {}),
        config=config or GeneratorConfig(),
    )


def sample_definitions() -> dict[str, Any]:
    """A small slice of the Debug Adapter Protocol."""
    return {
        "ExitedEvent": make_event(
            "exited",
            body={
                "type": "object",
                "properties": {
                    "exitCode": {"type": "integer", "description": "The exit code."},
                },
                "required": ["exitCode"],
            },
            description="The debuggee has exited.",
        ),
        "RunInTerminalRequest": make_request("runInTerminal", title="Reverse Requests"),
        "SetBreakpointsRequest": make_request(
            "setBreakpoints", arguments="SetBreakpointsArguments", description="Sets breakpoints."
        ),
        "SetBreakpointsArguments": {
            "type": "object",
            "properties": {
                "source": {"$ref": "#/definitions/Source"},
                "lines": {"type": "array", "items": {"type": "integer"}},
            },
            "required": ["source"],
        },
        "SetBreakpointsResponse": make_response(
            {
                "type": "object",
                "properties": {
                    "breakpoints": {
                        "type": "array",
                        "items": {"$ref": "#/definitions/Breakpoint"},
                    },
                },
                "required": ["breakpoints"],
            }
        ),
        "Source": {
            "type": "object",
            "description": "A source.",
            "properties": {
                "name": {"type": "string"},
                "checksums": {"type": "array", "items": {"$ref": "#/definitions/Checksum"}},
            },
        },
        "Breakpoint": {
            "type": "object",
            "properties": {
                "verified": {"type": "boolean"},
                "source": {"$ref": "#/definitions/Source"},
            },
            "required": ["verified"],
        },
        "Checksum": {
            "type": "object",
            "properties": {
                "algorithm": {"$ref": "#/definitions/ChecksumAlgorithm"},
                "checksum": {"type": "string"},
            },
            "required": ["algorithm", "checksum"],
        },
        "ChecksumAlgorithm": {
            "type": "string",
            "description": "Names of checksum algorithms.",
            "enum": ["MD5", "SHA1"],
        },
        "ConfigurationDoneRequest": make_request("configurationDone"),
        "ConfigurationDoneResponse": make_response(),
    }


@pytest.fixture()
def sample_store() -> SchemaStore:
    return make_store(sample_definitions())
