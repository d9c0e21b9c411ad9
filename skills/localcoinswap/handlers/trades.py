"""
Trade handlers. start_trade goes through the confirmation gate.
"""

from __future__ import annotations

from typing import Any

from ..config import require_api_token
from ..confirmation import TradeParameters
from ..executors import execute_start_trade
from ..helpers import ErrorCategory, ToolResult, json_result, log_and_format_error
from ..runtime import get_runtime
from ..validation import opt_boolean, opt_string, req_string, validate_amount

CONFIRM_TRADE_MESSAGE = (
  "This trade requires confirmation before starting. Call start_trade again with "
  "confirm=true or use the confirmation_id with the SAME parameters."
)


def _trade_details(params: TradeParameters, offer: dict[str, Any]) -> dict[str, Any]:
  trader = offer.get("trader") or {}
  payment_method = offer.get("payment_method") or {}
  return {
    "offer_uuid": params.offer_uuid,
    "amount": f"{params.amount} {offer.get('fiat_currency')}",
    "crypto": offer.get("coin_currency"),
    "type": offer.get("trading_type"),
    "trader": trader.get("username"),
    "payment_method": payment_method.get("name"),
  }


async def start_trade(args: dict[str, Any]) -> ToolResult:
  """Start a trade on an offer, or issue a confirmation id for it first."""
  try:
    runtime = get_runtime()
    require_api_token(runtime.config)

    params = TradeParameters(
      offer_uuid=req_string(args, "offer_uuid"),
      amount=validate_amount(req_string(args, "amount")),
    )
    client = runtime.client

    async def preview() -> dict[str, Any]:
      return await client.get_offer(params.offer_uuid)

    decision = await runtime.gate.check(
      params,
      confirm=opt_boolean(args, "confirm"),
      confirmation_id=opt_string(args, "confirmation_id"),
      preview=preview,
    )

    if not decision.proceed:
      return json_result(
        {
          "status": "confirmation_required",
          "message": CONFIRM_TRADE_MESSAGE,
          "confirmation_id": decision.confirmation_id,
          "expires_in": runtime.gate.expires_in,
          "trade_details": _trade_details(params, decision.preview or {}),
        }
      )

    trade = await execute_start_trade(client, params)
    return json_result({"status": "trade_started", "trade": trade})
  except Exception as e:
    return log_and_format_error("start_trade", e, ErrorCategory.TRADE)


async def get_my_trades(args: dict[str, Any]) -> ToolResult:
  try:
    runtime = get_runtime()
    require_api_token(runtime.config)
    return json_result(await runtime.client.get_my_trades())
  except Exception as e:
    return log_and_format_error("get_my_trades", e, ErrorCategory.TRADE)


async def get_trade(args: dict[str, Any]) -> ToolResult:
  try:
    runtime = get_runtime()
    require_api_token(runtime.config)
    uuid = req_string(args, "uuid")
    return json_result(await runtime.client.get_trade(uuid))
  except Exception as e:
    return log_and_format_error("get_trade", e, ErrorCategory.TRADE)
