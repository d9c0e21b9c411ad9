"""
Calls that change state on LocalCoinSwap. Only reached once the gate has
authorized the exact parameters; each runs exactly once, no retries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from .client import LocalCoinSwapClient
  from .confirmation import SwapParameters, TradeParameters

log = logging.getLogger("skill.localcoinswap.executors")


async def execute_create_swap(client: LocalCoinSwapClient, params: SwapParameters) -> Any:
  log.info(
    "Creating swap %s %s -> %s", params.from_amount, params.from_currency, params.to_currency
  )
  return await client.create_swap(params.from_currency, params.to_currency, params.from_amount)


async def execute_start_trade(client: LocalCoinSwapClient, params: TradeParameters) -> Any:
  log.info("Starting trade on offer %s for %s", params.offer_uuid, params.amount)
  return await client.start_trade(params.offer_uuid, params.amount)
