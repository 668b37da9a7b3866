"""CLI handler for ``dap-typegen generate``."""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from dap_typegen.cli.common import build_config, load_store
from dap_typegen.codegen.engine import TypeGenerator
from dap_typegen.output import write_declarations
from dap_typegen.schema.errors import SchemaError
from dap_typegen.telemetry import LoggerTelemetrySink


def run_generate(args: Namespace) -> None:
    try:
        config = build_config(args)
        store = load_store(config)
        result = TypeGenerator(store, config, telemetry_sink=LoggerTelemetrySink()).generate()
    except (SchemaError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.stdout:
        sys.stdout.write(result.text)
        return

    try:
        path = write_declarations(config.output_path, result.text)
    except OSError as exc:
        print(f"Error: cannot write {config.output_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    summary = {"output": str(path), **result.summary()}
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print(
            f"Wrote {path}: {result.api_method_count} API methods, "
            f"{result.stub_count} stubs, {len(result.plain_types)} plain types"
        )
