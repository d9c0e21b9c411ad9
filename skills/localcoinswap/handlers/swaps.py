"""
Swap handlers. create_swap goes through the confirmation gate.
"""

from __future__ import annotations

from typing import Any

from ..config import require_api_token
from ..confirmation import SwapParameters
from ..executors import execute_create_swap
from ..helpers import ErrorCategory, ToolResult, json_result, log_and_format_error
from ..runtime import get_runtime
from ..validation import (
  opt_boolean,
  opt_choice,
  opt_string,
  req_string,
  validate_amount,
  validate_currency_symbol,
)

CONFIRM_SWAP_MESSAGE = (
  "This swap requires confirmation before execution. Call create_swap again with "
  "confirm=true or use the confirmation_id with the SAME parameters."
)


async def estimate_swap(args: dict[str, Any]) -> ToolResult:
  try:
    from_currency = validate_currency_symbol(req_string(args, "from_currency"))
    to_currency = validate_currency_symbol(req_string(args, "to_currency"))
    amount = validate_amount(req_string(args, "amount"))

    estimate = await get_runtime().client.estimate_swap(from_currency, to_currency, amount)
    return json_result(
      {
        "from": f"{estimate.get('from_amount')} {estimate.get('from_currency')}",
        "to": f"{estimate.get('to_amount')} {estimate.get('to_currency')}",
        "rate": estimate.get("rate"),
        "fee": estimate.get("fee"),
      }
    )
  except Exception as e:
    return log_and_format_error("estimate_swap", e, ErrorCategory.SWAP)


async def get_min_swap_amount(args: dict[str, Any]) -> ToolResult:
  try:
    from_currency = validate_currency_symbol(req_string(args, "from_currency"))
    to_currency = validate_currency_symbol(req_string(args, "to_currency"))
    return json_result(await get_runtime().client.get_min_swap_amount(from_currency, to_currency))
  except Exception as e:
    return log_and_format_error("get_min_swap_amount", e, ErrorCategory.SWAP)


async def get_my_swaps(args: dict[str, Any]) -> ToolResult:
  try:
    runtime = get_runtime()
    require_api_token(runtime.config)
    status = opt_choice(args, "status", ("active", "past", "all"))

    if status == "active":
      swaps = await runtime.client.get_active_swaps()
    elif status == "past":
      swaps = await runtime.client.get_past_swaps()
    else:
      swaps = await runtime.client.get_swaps()
    return json_result(swaps)
  except Exception as e:
    return log_and_format_error("get_my_swaps", e, ErrorCategory.SWAP)


async def create_swap(args: dict[str, Any]) -> ToolResult:
  """Create a swap, or issue a confirmation id for it first."""
  try:
    runtime = get_runtime()
    require_api_token(runtime.config)

    params = SwapParameters(
      from_currency=validate_currency_symbol(req_string(args, "from_currency")),
      to_currency=validate_currency_symbol(req_string(args, "to_currency")),
      from_amount=validate_amount(req_string(args, "from_amount")),
    )
    client = runtime.client

    async def preview() -> dict[str, Any]:
      return await client.estimate_swap(
        params.from_currency, params.to_currency, params.from_amount
      )

    decision = await runtime.gate.check(
      params,
      confirm=opt_boolean(args, "confirm"),
      confirmation_id=opt_string(args, "confirmation_id"),
      preview=preview,
    )

    if not decision.proceed:
      estimate = decision.preview or {}
      return json_result(
        {
          "status": "confirmation_required",
          "message": CONFIRM_SWAP_MESSAGE,
          "confirmation_id": decision.confirmation_id,
          "expires_in": runtime.gate.expires_in,
          "swap_details": {
            "from": f"{params.from_amount} {params.from_currency}",
            "to": f"{estimate.get('to_amount')} {params.to_currency}",
            "rate": estimate.get("rate"),
          },
        }
      )

    swap = await execute_create_swap(client, params)
    return json_result({"status": "swap_created", "swap": swap})
  except Exception as e:
    return log_and_format_error("create_swap", e, ErrorCategory.SWAP)
