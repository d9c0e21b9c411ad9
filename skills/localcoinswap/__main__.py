"""
LocalCoinSwap skill entry point. Starts the MCP server.

Run with: python -m skills.localcoinswap
"""

from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from .server import create_mcp_server, on_skill_load, on_skill_unload

# stdout carries the MCP protocol; logs go to stderr
logging.basicConfig(
  level=logging.INFO,
  format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  stream=sys.stderr,
)

log = logging.getLogger("skill.localcoinswap")


async def serve() -> None:
  """Start the MCP server."""
  server = create_mcp_server()
  await on_skill_load()
  try:
    async with stdio_server() as (read_stream, write_stream):
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await on_skill_unload()


def main() -> None:
  try:
    asyncio.run(serve())
  except KeyboardInterrupt:
    log.info("Interrupted")


if __name__ == "__main__":
  main()
