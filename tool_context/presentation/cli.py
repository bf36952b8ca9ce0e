"""
Command line entry point.

    tool-context describe [NAME]      print local tool descriptors as JSON
    tool-context list-remote SERVER   print the tools an MCP server advertises
    tool-context call SERVER TOOL ARGS_JSON
    tool-context serve                run the calculator server over stdio
    tool-context api                  run the HTTP API
"""

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from tool_context.application.use_cases.describe_tools import DescribeToolsUseCase
from tool_context.application.use_cases.list_remote_tools import (
    ListRemoteToolsUseCase,
)
from tool_context.domain.exceptions.domain_exceptions import DomainError
from tool_context.infrastructure.config.logging_config import configure_logging
from tool_context.infrastructure.config.settings import get_settings
from tool_context.infrastructure.mcp.client.mcp_client import (
    MCPClientManager,
    load_server_configs,
)
from tool_context.infrastructure.mcp.servers import calculator_server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tool-context",
        description="Describe Python functions as MCP tools and inspect MCP servers.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    describe = sub.add_parser("describe", help="Print local tool descriptors")
    describe.add_argument("name", nargs="?", help="Only describe this tool")

    remote = sub.add_parser("list-remote", help="List tools of an MCP server")
    remote.add_argument("server", help="Configured server name")

    call = sub.add_parser("call", help="Call a tool on an MCP server")
    call.add_argument("server", help="Configured server name")
    call.add_argument("tool", help="Tool name")
    call.add_argument("arguments", nargs="?", default="{}", help="Arguments as JSON")

    sub.add_parser("serve", help="Run the calculator server over stdio")
    sub.add_parser("api", help="Run the HTTP API")
    return parser


def _describe(name: Optional[str]) -> str:
    use_case = DescribeToolsUseCase(tool_registry=calculator_server.calculator)
    return use_case.execute(name=name).model_dump_json(indent=2)


async def _list_remote(server: str) -> str:
    client = MCPClientManager(load_server_configs(get_settings()))
    result = await ListRemoteToolsUseCase(mcp_client=client).execute(server)
    return result.model_dump_json(indent=2)


async def _call(server: str, tool: str, arguments: dict) -> str:
    client = MCPClientManager(load_server_configs(get_settings()))
    await client.connect(server)
    try:
        result = await client.call_tool(tool, arguments)
    finally:
        await client.disconnect()
    return "" if result is None else str(result)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.command == "serve":
        calculator_server.main()
        return 0
    if args.command == "api":
        from tool_context.presentation.main import run

        run()
        return 0

    try:
        if args.command == "describe":
            output = _describe(args.name)
        elif args.command == "list-remote":
            output = asyncio.run(_list_remote(args.server))
        else:
            try:
                arguments = json.loads(args.arguments)
            except json.JSONDecodeError as e:
                print(f"Invalid arguments JSON: {e}", file=sys.stderr)
                return 2
            if not isinstance(arguments, dict):
                print("Arguments must be a JSON object", file=sys.stderr)
                return 2
            output = asyncio.run(_call(args.server, args.tool, arguments))
    except DomainError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
