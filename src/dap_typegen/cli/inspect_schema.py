"""CLI handler for ``dap-typegen inspect``."""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from dap_typegen.cli.common import build_config, load_store
from dap_typegen.codegen.classifier import Classification, MessageKind
from dap_typegen.codegen.engine import TypeGenerator
from dap_typegen.schema.errors import SchemaError


def format_json(classification: Classification) -> str:
    return json.dumps(
        {
            "events": [
                m.name for m in classification.api_methods if m.kind is MessageKind.EVENT
            ],
            "requests": [
                m.name for m in classification.api_methods if m.kind is MessageKind.REQUEST
            ],
            "reverse_requests": list(classification.reverse_requests),
            "stubs": classification.stub_names(),
        },
        indent=2,
    )


def format_table(classification: Classification) -> str:
    lines = [f"{'Kind':<10} {'Name':<32} Definition", "-" * 72]
    for method in classification.api_methods:
        lines.append(f"{method.kind.value:<10} {method.name:<32} {method.definition}")
    for name in classification.reverse_requests:
        lines.append(f"{'skipped':<10} {'(reverse request)':<32} {name}")
    lines.append("")
    lines.append(f"Stubs ({len(classification.stubs)}): {', '.join(classification.stub_names())}")
    return "\n".join(lines)


def run_inspect(args: Namespace) -> None:
    try:
        config = build_config(args)
        classification = TypeGenerator(load_store(config), config).classify()
    except (SchemaError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(classification))
    else:
        print(format_table(classification))
