"""Config and schema loading shared by the CLI handlers."""

from __future__ import annotations

import dataclasses
from argparse import Namespace
from pathlib import Path

from dap_typegen.config import GeneratorConfig
from dap_typegen.schema.loader import load_schema_store
from dap_typegen.schema.store import SchemaStore


def build_config(args: Namespace) -> GeneratorConfig:
    """Layer defaults, the YAML config file, the environment and CLI flags."""
    config = GeneratorConfig.from_yaml(args.config) if args.config else GeneratorConfig()
    config = config.with_env()

    overrides: dict[str, object] = {}
    if args.source:
        overrides["schema_url"] = args.source
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if getattr(args, "output", ""):
        overrides["output_path"] = Path(args.output)
    if getattr(args, "namespace", ""):
        overrides["namespace"] = args.namespace
    return dataclasses.replace(config, **overrides)


def load_store(config: GeneratorConfig) -> SchemaStore:
    return load_schema_store(config.schema_url, timeout=config.timeout)
