"""
Offer handlers (search, details, reference lists).
"""

from __future__ import annotations

from typing import Any

from ..config import require_api_token
from ..helpers import ErrorCategory, ToolResult, json_result, log_and_format_error
from ..runtime import get_runtime
from ..validation import (
  opt_choice,
  opt_number,
  opt_string,
  req_string,
  validate_currency_symbol,
  validate_range,
)


def _summarize_offer(offer: dict[str, Any]) -> dict[str, Any]:
  trader = offer.get("trader") or {}
  payment_method = offer.get("payment_method") or {}
  return {
    "uuid": offer.get("uuid"),
    "type": offer.get("trading_type"),
    "crypto": offer.get("coin_currency"),
    "fiat": offer.get("fiat_currency"),
    "payment_method": payment_method.get("name"),
    "price": offer.get("price"),
    "margin": offer.get("margin"),
    "min_trade": offer.get("min_trade_size"),
    "max_trade": offer.get("max_trade_size"),
    "trader": {
      "username": trader.get("username"),
      "trades": trader.get("trades_count"),
      "feedback": trader.get("feedback_score"),
    },
    "headline": offer.get("headline"),
  }


async def search_offers(args: dict[str, Any]) -> ToolResult:
  try:
    coin = opt_string(args, "coin_currency")
    fiat = opt_string(args, "fiat_currency")
    country = opt_string(args, "country_code")

    params: dict[str, Any] = {
      "coin_currency": validate_currency_symbol(coin) if coin else None,
      "fiat_currency": validate_currency_symbol(fiat) if fiat else None,
      "trading_type": opt_choice(args, "trading_type", ("buy", "sell")),
      "payment_method": opt_string(args, "payment_method"),
      "country_code": country.upper() if country else None,
      "min_amount": validate_range("min_amount", opt_number(args, "min_amount")),
      "max_amount": validate_range("max_amount", opt_number(args, "max_amount")),
      "ordering": opt_string(args, "ordering"),
      "page": opt_number(args, "page"),
      "page_size": opt_number(args, "page_size"),
    }

    results = await get_runtime().client.search_offers(params)
    return json_result(
      {
        "total_count": results.get("count"),
        "page_info": {
          "has_next": bool(results.get("next")),
          "has_previous": bool(results.get("previous")),
        },
        "offers": [_summarize_offer(o) for o in results.get("results") or []],
      }
    )
  except Exception as e:
    return log_and_format_error("search_offers", e, ErrorCategory.OFFER)


async def get_offer(args: dict[str, Any]) -> ToolResult:
  try:
    uuid = req_string(args, "uuid")
    return json_result(await get_runtime().client.get_offer(uuid))
  except Exception as e:
    return log_and_format_error("get_offer", e, ErrorCategory.OFFER)


async def get_featured_offers(args: dict[str, Any]) -> ToolResult:
  try:
    return json_result(await get_runtime().client.get_featured_offers())
  except Exception as e:
    return log_and_format_error("get_featured_offers", e, ErrorCategory.OFFER)


async def get_my_offers(args: dict[str, Any]) -> ToolResult:
  try:
    runtime = get_runtime()
    require_api_token(runtime.config)
    return json_result(await runtime.client.get_my_offers())
  except Exception as e:
    return log_and_format_error("get_my_offers", e, ErrorCategory.OFFER)


async def list_payment_methods(args: dict[str, Any]) -> ToolResult:
  try:
    return json_result(await get_runtime().client.get_payment_methods())
  except Exception as e:
    return log_and_format_error("list_payment_methods", e, ErrorCategory.OFFER)


async def list_trade_types(args: dict[str, Any]) -> ToolResult:
  try:
    return json_result(await get_runtime().client.get_trade_types())
  except Exception as e:
    return log_and_format_error("list_trade_types", e, ErrorCategory.OFFER)
