"""
LocalCoinSwap tool definitions organized by domain.
"""

from __future__ import annotations

from mcp.types import Tool

from .market import currency_tools, offer_tools
from .trading import swap_tools, trade_tools

ALL_TOOLS: list[Tool] = [
  *currency_tools,
  *offer_tools,
  *swap_tools,
  *trade_tools,
]
