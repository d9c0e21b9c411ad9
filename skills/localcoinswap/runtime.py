"""
Process-wide skill runtime: the config, API client and confirmation
objects that tool handlers share. Built on load, torn down on unload.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .client import LocalCoinSwapClient
from .confirmation import ConfirmationGate, ConfirmationStore, ConfirmationSweeper

if TYPE_CHECKING:
  from collections.abc import Callable

  from .config import SkillConfig

log = logging.getLogger("skill.localcoinswap.runtime")

_runtime: SkillRuntime | None = None


@dataclass
class SkillRuntime:
  config: SkillConfig
  client: LocalCoinSwapClient
  store: ConfirmationStore
  gate: ConfirmationGate
  sweeper: ConfirmationSweeper

  @classmethod
  def create(
    cls,
    config: SkillConfig,
    client: LocalCoinSwapClient | None = None,
    clock: Callable[[], float] = time.time,
  ) -> SkillRuntime:
    if client is None:
      client = LocalCoinSwapClient(
        config.api_url, config.api_token, timeout=config.request_timeout_seconds
      )
    store = ConfirmationStore(ttl_seconds=config.confirmation_ttl_seconds, clock=clock)
    return cls(
      config=config,
      client=client,
      store=store,
      gate=ConfirmationGate(store, require_confirmation=config.require_confirmation),
      sweeper=ConfirmationSweeper(store, interval_seconds=config.sweep_interval_seconds),
    )

  async def start(self) -> None:
    await self.client.connect()
    await self.sweeper.start()

  async def shutdown(self) -> None:
    await self.sweeper.stop()
    await self.client.close()
    self.store.clear()


def set_runtime(runtime: SkillRuntime | None) -> None:
  global _runtime
  _runtime = runtime


def get_runtime() -> SkillRuntime:
  if _runtime is None:
    raise RuntimeError("LocalCoinSwap skill not initialized")
  return _runtime
