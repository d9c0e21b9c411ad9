"""
Swap and trade tools. create_swap and start_trade move real money and
require confirmation unless it is disabled.
"""

from __future__ import annotations

from mcp.types import Tool

CONFIRM_PROPERTIES = {
  "confirm": {
    "type": "boolean",
    "description": "Set to true to execute immediately without a confirmation step",
  },
  "confirmation_id": {
    "type": "string",
    "description": (
      "Confirmation ID from a previous call. Must be used with the SAME parameters "
      "as the original request."
    ),
  },
}

swap_tools: list[Tool] = [
  Tool(
    name="estimate_swap",
    description="Get an estimate for swapping one cryptocurrency to another",
    inputSchema={
      "type": "object",
      "properties": {
        "from_currency": {
          "type": "string",
          "description": "Source currency symbol (e.g., BTC)",
        },
        "to_currency": {
          "type": "string",
          "description": "Target currency symbol (e.g., ETH)",
        },
        "amount": {
          "type": "string",
          "description": "Amount of source currency to swap",
        },
      },
      "required": ["from_currency", "to_currency", "amount"],
    },
  ),
  Tool(
    name="get_min_swap_amount",
    description="Get the minimum amount required for a swap between two currencies",
    inputSchema={
      "type": "object",
      "properties": {
        "from_currency": {
          "type": "string",
          "description": "Source currency symbol",
        },
        "to_currency": {
          "type": "string",
          "description": "Target currency symbol",
        },
      },
      "required": ["from_currency", "to_currency"],
    },
  ),
  Tool(
    name="get_my_swaps",
    description="Get your swap history (requires authentication)",
    inputSchema={
      "type": "object",
      "properties": {
        "status": {
          "type": "string",
          "description": "Filter by swap status",
          "enum": ["active", "past", "all"],
        },
      },
    },
  ),
  Tool(
    name="create_swap",
    description=(
      "Create a new cryptocurrency swap (requires authentication). "
      "SENSITIVE: executes a real-money swap. Without confirm=true this returns a "
      "confirmation_id that must be sent back with identical parameters."
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "from_currency": {
          "type": "string",
          "description": "Source currency symbol",
        },
        "to_currency": {
          "type": "string",
          "description": "Target currency symbol",
        },
        "from_amount": {
          "type": "string",
          "description": "Amount of source currency to swap",
        },
        **CONFIRM_PROPERTIES,
      },
      "required": ["from_currency", "to_currency", "from_amount"],
    },
  ),
]

trade_tools: list[Tool] = [
  Tool(
    name="start_trade",
    description=(
      "Start a P2P trade on an offer (requires authentication). "
      "SENSITIVE: initiates a real trade. Without confirm=true this returns a "
      "confirmation_id that must be sent back with identical parameters."
    ),
    inputSchema={
      "type": "object",
      "properties": {
        "offer_uuid": {
          "type": "string",
          "description": "UUID of the offer to trade on",
        },
        "amount": {
          "type": "string",
          "description": "Amount in fiat currency",
        },
        **CONFIRM_PROPERTIES,
      },
      "required": ["offer_uuid", "amount"],
    },
  ),
  Tool(
    name="get_my_trades",
    description="Get your trade history (requires authentication)",
    inputSchema={"type": "object", "properties": {}},
  ),
  Tool(
    name="get_trade",
    description="Get details of a specific trade (requires authentication)",
    inputSchema={
      "type": "object",
      "properties": {
        "uuid": {
          "type": "string",
          "description": "The UUID of the trade",
        },
      },
      "required": ["uuid"],
    },
  ),
]
