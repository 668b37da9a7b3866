"""CLI entry point: python -m dap_typegen [command]."""

from __future__ import annotations

import argparse
import logging


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--source", default="", help="Schema URL or local JSON path")
    parser.add_argument("--config", default="", help="Path to a YAML config file")
    parser.add_argument("--timeout", type=float, default=None, help="Download timeout in seconds")
    parser.add_argument("--json", action="store_true", default=False, help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dap-typegen",
        description="Generate TypeScript declarations from the DAP JSON schema",
    )
    sub = parser.add_subparsers(dest="command")

    gen = sub.add_parser("generate", help="Write the declaration file (default command)")
    _add_source_options(gen)
    gen.add_argument("--output", default="", help="Declaration file to write")
    gen.add_argument("--namespace", default="", help="Name of the exported namespace")
    gen.add_argument(
        "--stdout", action="store_true", default=False, help="Print declarations instead of writing"
    )

    ins = sub.add_parser("inspect", help="Show how definitions are classified")
    _add_source_options(ins)

    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["generate"])

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        from dap_typegen.cli.generate import run_generate
        run_generate(args)
    elif args.command == "inspect":
        from dap_typegen.cli.inspect_schema import run_inspect
        run_inspect(args)


if __name__ == "__main__":
    main()
