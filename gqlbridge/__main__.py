"""Entry point: python -m gqlbridge

Reads schema/schema.graphql (or --schema), prints the tool catalog summary,
optionally writes the JSON catalog, or compiles a single tool call.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .compiler import compile_operation
from .config import Settings
from .errors import BridgeError
from .extractor import extract_tools
from .loader import load_schema
from .models import ToolCall
from .report import render_report, write_catalog


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gqlbridge",
        description="Derive MCP tools from a GraphQL schema and compile tool calls.",
    )
    parser.add_argument("--schema", type=Path, default=settings.schema_path,
                        help="GraphQL SDL file (default: %(default)s)")
    parser.add_argument("--output", type=Path,
                        help="Write the tool catalog as JSON to this file")
    parser.add_argument("--call", metavar="TOOL",
                        help="Compile a call to TOOL and print the GraphQL operation")
    parser.add_argument("--args", default="{}",
                        help="JSON object of arguments for --call")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except BridgeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    args = _build_parser(settings).parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        schema = load_schema(args.schema)

        if args.call:
            try:
                arguments = json.loads(args.args)
            except json.JSONDecodeError as exc:
                print(f"Error: --args is not valid JSON: {exc}", file=sys.stderr)
                return 1
            if not isinstance(arguments, dict):
                print("Error: --args must be a JSON object", file=sys.stderr)
                return 1
            call = ToolCall(name=args.call, arguments=arguments)
            print(compile_operation(call, schema, settings.selection_policy()))
            return 0

        tools = extract_tools(schema)
        print(render_report(tools), end="")
        if args.output:
            path = write_catalog(tools, args.output)
            print(f"Wrote {path} ({len(tools)} tools)")
    except BridgeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
