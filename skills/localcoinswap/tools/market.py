"""
Currency and offer tools (read-only).
"""

from __future__ import annotations

from mcp.types import Tool

EMPTY_SCHEMA = {"type": "object", "properties": {}}

currency_tools: list[Tool] = [
  Tool(
    name="list_currencies",
    description=(
      "List all available cryptocurrencies on LocalCoinSwap, including network "
      "information (e.g., USDT on TRC20, ERC20, etc.)"
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "type": {
          "type": "string",
          "description": "Type of currencies to list",
          "enum": ["crypto", "fiat", "active"],
        },
      },
    },
  ),
  Tool(
    name="get_currency",
    description="Get detailed information about a specific currency",
    inputSchema={
      "type": "object",
      "properties": {
        "symbol": {
          "type": "string",
          "description": "Currency symbol (e.g., BTC, USDT, ETH)",
        },
      },
      "required": ["symbol"],
    },
  ),
]

offer_tools: list[Tool] = [
  Tool(
    name="search_offers",
    description="Search P2P trading offers on LocalCoinSwap with filtering and sorting options",
    inputSchema={
      "type": "object",
      "properties": {
        "coin_currency": {
          "type": "string",
          "description": "Cryptocurrency symbol (e.g., BTC, ETH, USDT)",
        },
        "fiat_currency": {
          "type": "string",
          "description": "Fiat currency code (e.g., USD, EUR, GBP)",
        },
        "trading_type": {
          "type": "string",
          "description": "Type of trade: buy (you buy crypto) or sell (you sell crypto)",
          "enum": ["buy", "sell"],
        },
        "payment_method": {
          "type": "string",
          "description": "Payment method slug (e.g., bank-transfer, paypal)",
        },
        "country_code": {
          "type": "string",
          "description": "Country code (e.g., US, GB, DE)",
        },
        "min_amount": {
          "type": "number",
          "description": "Minimum trade amount in fiat",
        },
        "max_amount": {
          "type": "number",
          "description": "Maximum trade amount in fiat",
        },
        "ordering": {
          "type": "string",
          "description": "Sort order (e.g., price, -price, created_at, -created_at)",
        },
        "page": {
          "type": "number",
          "description": "Page number for pagination",
        },
        "page_size": {
          "type": "number",
          "description": "Number of results per page (default 20)",
        },
      },
    },
  ),
  Tool(
    name="get_offer",
    description="Get detailed information about a specific offer by its UUID",
    inputSchema={
      "type": "object",
      "properties": {
        "uuid": {
          "type": "string",
          "description": "The UUID of the offer",
        },
      },
      "required": ["uuid"],
    },
  ),
  Tool(
    name="get_featured_offers",
    description="Get featured/promoted offers on LocalCoinSwap",
    inputSchema=EMPTY_SCHEMA,
  ),
  Tool(
    name="get_my_offers",
    description="Get your own offers (requires authentication)",
    inputSchema=EMPTY_SCHEMA,
  ),
  Tool(
    name="list_payment_methods",
    description="List all available payment methods for P2P trading",
    inputSchema=EMPTY_SCHEMA,
  ),
  Tool(
    name="list_trade_types",
    description="List available trade types",
    inputSchema=EMPTY_SCHEMA,
  ),
]
