"""Generator configuration -- every knob the translation engine reads.

A GeneratorConfig is the single object that tells the engine where the
schema lives, where the declarations go, and how the output is framed.
The defaults reproduce the upstream Debug Adapter Protocol generator, so
a parameterless run needs no configuration at all.

Settings can be layered::

    config = GeneratorConfig.from_yaml("dap-typegen.yaml").with_env()

Example YAML::

    schema_url: https://example.com/debugAdapterProtocol.json
    output_path: src/dap/api.d.ts
    namespace: Dap
    header_lines:
      - "// Copyright (c) Example Corp."
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_URL = (
    "https://raw.githubusercontent.com/microsoft/debug-adapter-protocol/"
    "gh-pages/debugAdapterProtocol.json"
)

DEFAULT_HEADER_LINES: tuple[str, ...] = (
    "/*---------------------------------------------------------",
    " * Copyright (C) Microsoft Corporation. All rights reserved.",
    " *--------------------------------------------------------*/",
)

ENV_PREFIX = "DAP_TYPEGEN_"


@dataclass
class GeneratorConfig:
    """Configuration for one generation run.

    Attributes:
        schema_url: URL or local path of the JSON-schema document.
        output_path: Where the declaration file is written.
        namespace: Name of the exported TypeScript namespace.
        header_lines: License comment emitted verbatim at the top.
        generator_name: Name shown in the auto-generated banner.
        event_base_ref: ``$ref`` that marks a definition as an Event.
        request_base_ref: ``$ref`` that marks a definition as a Request.
        reverse_request_title: Extension title that excludes a Request
            from the API surface.
        indent: One level of indentation in the emitted text.
        timeout: Seconds to wait for the schema download.
        max_reference_depth: Upper bound on ``$ref`` hops when following
            a Response body to a concrete shape.
    """

    schema_url: str = DEFAULT_SCHEMA_URL
    output_path: Path = Path("src/dap/api.d.ts")
    namespace: str = "Dap"
    header_lines: tuple[str, ...] = DEFAULT_HEADER_LINES
    generator_name: str = "generate-dap-api.js"
    event_base_ref: str = "#/definitions/Event"
    request_base_ref: str = "#/definitions/Request"
    reverse_request_title: str = "Reverse Requests"
    indent: str = "  "
    timeout: float = 30.0
    max_reference_depth: int = 32

    def __post_init__(self) -> None:
        self.output_path = Path(self.output_path)
        self.header_lines = tuple(self.header_lines)
        if not self.namespace:
            raise ValueError("namespace must not be empty")
        try:
            self.timeout = float(self.timeout)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"timeout must be a number, got {self.timeout!r}") from exc
        try:
            self.max_reference_depth = int(self.max_reference_depth)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"max_reference_depth must be an integer, got {self.max_reference_depth!r}"
            ) from exc
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_reference_depth < 1:
            raise ValueError("max_reference_depth must be at least 1")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> GeneratorConfig:
        """Build a config from a plain mapping; unknown keys are logged and dropped."""
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs = {key: value for key, value in data.items() if key in known}
        unknown = [key for key in data if key not in known]
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GeneratorConfig:
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid config YAML {path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config YAML root must be a mapping: {path}")
        return cls.from_mapping(data)

    @classmethod
    def from_env(cls) -> GeneratorConfig:
        return cls().with_env()

    def with_env(self) -> GeneratorConfig:
        """Return a copy with ``DAP_TYPEGEN_*`` environment overrides applied."""
        overrides: dict[str, Any] = {}
        url = os.environ.get(f"{ENV_PREFIX}SCHEMA_URL", "").strip()
        if url:
            overrides["schema_url"] = url
        output = os.environ.get(f"{ENV_PREFIX}OUTPUT", "").strip()
        if output:
            overrides["output_path"] = Path(output)
        namespace = os.environ.get(f"{ENV_PREFIX}NAMESPACE", "").strip()
        if namespace:
            overrides["namespace"] = namespace
        timeout = os.environ.get(f"{ENV_PREFIX}TIMEOUT", "").strip()
        if timeout:
            try:
                overrides["timeout"] = float(timeout)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {timeout!r}") from exc
        return dataclasses.replace(self, **overrides)
