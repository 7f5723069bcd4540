#!/usr/bin/env python3
"""
Command-line entry point for the notation MCP server.

Serves over stdio (default, for MCP clients) or HTTP.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

LAYOUTS_DIR_ENV = "CHUK_NOTATION_LAYOUTS_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Notation MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--layouts-dir",
        help=f"Directory of project layout presets (default: ./layouts, or ${LAYOUTS_DIR_ENV})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure logging and run the server."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.layouts_dir:
        os.environ[LAYOUTS_DIR_ENV] = args.layouts_dir

    # The server module reads the layouts dir at import time
    from chuk_mcp_notation.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Notation MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Notation MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
