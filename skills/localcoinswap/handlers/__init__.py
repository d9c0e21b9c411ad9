"""
Tool handler dispatcher.
"""

from __future__ import annotations

from typing import Any

from ..helpers import ToolResult, log_and_format_error
from .currency import get_currency, list_currencies
from .offers import (
  get_featured_offers,
  get_my_offers,
  get_offer,
  list_payment_methods,
  list_trade_types,
  search_offers,
)
from .swaps import create_swap, estimate_swap, get_min_swap_amount, get_my_swaps
from .trades import get_my_trades, get_trade, start_trade

HANDLERS: dict[str, Any] = {
  # Currencies
  "list_currencies": list_currencies,
  "get_currency": get_currency,
  # Offers
  "search_offers": search_offers,
  "get_offer": get_offer,
  "get_featured_offers": get_featured_offers,
  "get_my_offers": get_my_offers,
  "list_payment_methods": list_payment_methods,
  "list_trade_types": list_trade_types,
  # Swaps
  "estimate_swap": estimate_swap,
  "get_min_swap_amount": get_min_swap_amount,
  "get_my_swaps": get_my_swaps,
  "create_swap": create_swap,
  # Trades
  "start_trade": start_trade,
  "get_my_trades": get_my_trades,
  "get_trade": get_trade,
}


async def dispatch_tool(tool_name: str, args: dict[str, Any]) -> ToolResult:
  """Dispatch a tool call to the appropriate handler."""
  handler = HANDLERS.get(tool_name)
  if not handler:
    return ToolResult(
      content=f"Unknown tool: {tool_name}",
      is_error=True,
    )
  try:
    result: ToolResult = await handler(args)
    return result
  except Exception as e:
    return log_and_format_error(tool_name, e)
