"""Schema document loading from a URL or a local JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from dap_typegen.schema.errors import SchemaFetchError
from dap_typegen.schema.store import SchemaStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def is_remote_source(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def fetch_schema_document(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Download and parse the schema document at ``url``.

    There is no retry; any transport, status or JSON failure raises
    SchemaFetchError.
    """
    logger.info("Fetching schema from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SchemaFetchError(f"Failed to fetch {url}: {exc}") from exc

    try:
        document = response.json()
    except ValueError as exc:
        raise SchemaFetchError(f"Invalid JSON from {url}: {exc}") from exc
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return document


def load_schema_file(path: str | Path) -> Any:
    """Read and parse a schema document saved on disk."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise SchemaFetchError(f"Failed to read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SchemaFetchError(f"Invalid JSON in {path}: {exc}") from exc


def load_schema_store(source: str | Path, *, timeout: float = DEFAULT_TIMEOUT) -> SchemaStore:
    """Load a schema store from an ``http(s)://`` URL or a local path."""
    if is_remote_source(source):
        document = fetch_schema_document(str(source), timeout=timeout)
    else:
        document = load_schema_file(source)
    return SchemaStore.from_document(document)
