"""Message classifier -- splits definitions into Events, Requests and plain types.

Every definition is tagged once with a MessageKind.  Events and Requests
contribute entries to the aggregate API surface and synthesize stub shapes
(the payload of an event, the arguments and result of a request) that are
emitted as interfaces of their own.  Plain types are only emitted when
something references them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from dap_typegen.codegen.context import TranslationContext
from dap_typegen.config import GeneratorConfig
from dap_typegen.schema.errors import MalformedSchemaError, UnresolvableReferenceError
from dap_typegen.schema.models import EMPTY_NODE, SchemaNode, definition_name
from dap_typegen.telemetry import CLASSIFIED

logger = logging.getLogger(__name__)

REQUEST_SUFFIX = "Request"
RESPONSE_SUFFIX = "Response"


class MessageKind(str, Enum):
    EVENT = "event"
    REQUEST = "request"
    PLAIN_TYPE = "plain_type"


class StubKind(str, Enum):
    EVENT_PARAMS = "event"
    PARAMS = "params"
    RESULT = "result"


@dataclass(frozen=True)
class ApiMethod:
    """One entry of the aggregate ``Api`` interface."""

    kind: MessageKind
    definition: str
    name: str
    params_type: str
    result_type: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Stub:
    """A synthetic shape emitted as ``export interface <name>``."""

    kind: StubKind
    name: str
    source: SchemaNode


@dataclass
class Classification:
    api_methods: list[ApiMethod] = field(default_factory=list)
    stubs: list[Stub] = field(default_factory=list)
    reverse_requests: list[str] = field(default_factory=list)

    def stub_names(self) -> list[str]:
        return [stub.name for stub in self.stubs]


def title_case(command: str) -> str:
    """Uppercase the first letter only: ``setBreakpoints`` -> ``SetBreakpoints``."""
    return command[:1].upper() + command[1:]


def is_reverse_request(node: SchemaNode, config: GeneratorConfig) -> bool:
    base = node.base_reference()
    extension = node.extension()
    return (
        base is not None
        and base.ref == config.request_base_ref
        and extension is not None
        and extension.title == config.reverse_request_title
    )


def classify_definition(node: SchemaNode, config: GeneratorConfig) -> MessageKind:
    base = node.base_reference()
    if base is None:
        return MessageKind.PLAIN_TYPE
    if base.ref == config.event_base_ref:
        return MessageKind.EVENT
    if base.ref == config.request_base_ref and not is_reverse_request(node, config):
        return MessageKind.REQUEST
    return MessageKind.PLAIN_TYPE


def follow_references(node: SchemaNode, context: TranslationContext, *, owner: str) -> SchemaNode:
    """Follow a ``$ref`` chain until it reaches a concrete shape.

    Raises UnresolvableReferenceError if the chain revisits a definition or
    is longer than the configured depth bound.
    """
    chain: list[str] = []
    while node.ref:
        name = definition_name(node.ref)
        if name in chain or len(chain) >= context.config.max_reference_depth:
            raise UnresolvableReferenceError([*chain, name], definition=owner)
        chain.append(name)
        node = context.store.require(name, referrer=owner)
    return node


def _fixed_name(extension: SchemaNode, property_name: str, *, owner: str) -> str:
    prop = extension.child(property_name)
    if prop is None or not prop.enum:
        raise MalformedSchemaError(
            f"Expected property '{property_name}' with a fixed enum value", definition=owner
        )
    return str(prop.enum[0])


def _require_extension(node: SchemaNode, *, owner: str) -> SchemaNode:
    extension = node.extension()
    if extension is None:
        raise MalformedSchemaError("allOf has no inline extension", definition=owner)
    return extension


def _event_entry(
    name: str, node: SchemaNode, context: TranslationContext
) -> tuple[ApiMethod, list[Stub]]:
    extension = _require_extension(node, owner=name)
    event_name = _fixed_name(extension, "event", owner=name)
    params_type = f"{name}Params"
    body = extension.child("body")
    source = follow_references(body, context, owner=name) if body else EMPTY_NODE
    method = ApiMethod(
        kind=MessageKind.EVENT,
        definition=name,
        name=event_name,
        params_type=params_type,
        description=extension.description,
    )
    return method, [Stub(kind=StubKind.EVENT_PARAMS, name=params_type, source=source)]


def _request_entry(
    name: str, node: SchemaNode, context: TranslationContext
) -> tuple[ApiMethod, list[Stub]]:
    extension = _require_extension(node, owner=name)
    command = _fixed_name(extension, "command", owner=name)
    title = title_case(command)

    arguments = extension.child("arguments")
    if arguments is None:
        params_source = EMPTY_NODE
    else:
        params_source = follow_references(arguments, context, owner=name)

    if not name.endswith(REQUEST_SUFFIX):
        raise MalformedSchemaError(
            f"Request definition name must end with '{REQUEST_SUFFIX}'", definition=name
        )
    response_name = name[: -len(REQUEST_SUFFIX)] + RESPONSE_SUFFIX
    response = context.store.require(response_name, referrer=name)
    holder = response.extension() if response.all_of else response
    response_body = holder.child("body") if holder else None
    result_source = (
        follow_references(response_body, context, owner=response_name)
        if response_body
        else EMPTY_NODE
    )

    method = ApiMethod(
        kind=MessageKind.REQUEST,
        definition=name,
        name=command,
        params_type=f"{title}Params",
        result_type=f"{title}Result",
        description=extension.description,
    )
    stubs = [
        Stub(kind=StubKind.PARAMS, name=f"{title}Params", source=params_source),
        Stub(kind=StubKind.RESULT, name=f"{title}Result", source=result_source),
    ]
    return method, stubs


def classify(context: TranslationContext) -> Classification:
    """Build the API surface and stub list from the context's schema store.

    Definitions are visited in document order; stubs come back sorted by name.
    """
    result = Classification()
    for name, node in context.store.items():
        if not node.all_of:
            continue
        kind = classify_definition(node, context.config)
        if kind is MessageKind.EVENT:
            method, stubs = _event_entry(name, node, context)
        elif kind is MessageKind.REQUEST:
            method, stubs = _request_entry(name, node, context)
        else:
            if is_reverse_request(node, context.config):
                logger.debug("Skipping reverse request %s", name)
                result.reverse_requests.append(name)
            continue
        result.api_methods.append(method)
        result.stubs.extend(stubs)
        context.emit(CLASSIFIED, definition=name, kind=kind.value, method=method.name)

    result.stubs.sort(key=lambda stub: stub.name)
    logger.info(
        "Classified %d API methods, %d stubs, %d reverse requests skipped",
        len(result.api_methods),
        len(result.stubs),
        len(result.reverse_requests),
    )
    return result
