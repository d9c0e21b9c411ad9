"""
MCP server + skill lifecycle hooks.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call;
load/unload build and tear down the shared SkillRuntime.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.types import CallToolResult, TextContent, Tool

from .config import SkillConfig, load_config
from .handlers import dispatch_tool
from .runtime import SkillRuntime, get_runtime, set_runtime
from .tools import ALL_TOOLS

log = logging.getLogger("skill.localcoinswap.server")


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server("localcoinswap")

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool()
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    result = await dispatch_tool(name, arguments or {})
    return CallToolResult(
      content=[TextContent(type="text", text=result.content)],
      isError=result.is_error,
    )

  return server


async def on_skill_load(params: dict[str, Any] | None = None) -> SkillRuntime:
  """
  Build the runtime, connect the client and start the sweeper.

  A non-empty ``config`` mapping in params takes precedence over the
  LCS_* environment variables.
  """
  config_data: dict[str, Any] = (params or {}).get("config") or {}
  config = SkillConfig.from_dict(config_data) if config_data else load_config()

  if not config.has_token:
    log.warning("No API token configured, authenticated tools will refuse to run")

  try:
    previous = get_runtime()
  except RuntimeError:
    pass
  else:
    log.info("Reloading LocalCoinSwap skill, shutting down previous runtime")
    await previous.shutdown()
    set_runtime(None)

  runtime = SkillRuntime.create(config)
  await runtime.start()
  set_runtime(runtime)

  log.info(
    "LocalCoinSwap skill loaded (api_url=%s, require_confirmation=%s, token=%s)",
    config.api_url,
    config.require_confirmation,
    "configured" if config.has_token else "NOT configured",
  )
  return runtime


async def on_skill_unload() -> None:
  try:
    runtime = get_runtime()
  except RuntimeError:
    return
  await runtime.shutdown()
  set_runtime(None)
  log.info("LocalCoinSwap skill unloaded")
