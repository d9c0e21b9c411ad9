"""
Currency handlers.
"""

from __future__ import annotations

from typing import Any

from ..helpers import ErrorCategory, ToolResult, json_result, log_and_format_error
from ..runtime import get_runtime
from ..validation import opt_choice, req_string, validate_currency_symbol


async def list_currencies(args: dict[str, Any]) -> ToolResult:
  """List crypto (default), fiat or active crypto currencies."""
  try:
    kind = opt_choice(args, "type", ("crypto", "fiat", "active"))
    client = get_runtime().client

    if kind == "fiat":
      currencies = await client.get_fiat_currencies()
    elif kind == "active":
      currencies = await client.get_active_cryptos()
    else:
      currencies = await client.get_crypto_currencies()

    return json_result(
      [
        {
          "symbol": c.get("symbol"),
          "name": c.get("title"),
          "network": c.get("network") or "native",
          "active": c.get("is_active"),
        }
        for c in currencies
      ]
    )
  except Exception as e:
    return log_and_format_error("list_currencies", e, ErrorCategory.CURRENCY)


async def get_currency(args: dict[str, Any]) -> ToolResult:
  try:
    symbol = validate_currency_symbol(req_string(args, "symbol"))
    currency = await get_runtime().client.get_currency(symbol)
    return json_result(currency)
  except Exception as e:
    return log_and_format_error("get_currency", e, ErrorCategory.CURRENCY)
