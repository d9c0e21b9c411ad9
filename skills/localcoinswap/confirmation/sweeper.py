"""
Background sweep of expired confirmations.

Runs as an asyncio task with explicit start/stop so memory stays bounded
even when callers never come back to redeem.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from .store import ConfirmationStore

log = logging.getLogger("skill.localcoinswap.confirmation.sweeper")

DEFAULT_SWEEP_INTERVAL = 60


class ConfirmationSweeper:
  def __init__(self, store: ConfirmationStore, interval_seconds: float = DEFAULT_SWEEP_INTERVAL):
    if interval_seconds <= 0:
      raise ValueError(f"interval_seconds must be positive, got: {interval_seconds}")
    self._store = store
    self._interval = interval_seconds
    self._task: asyncio.Task[None] | None = None

  @property
  def interval_seconds(self) -> float:
    return self._interval

  @property
  def is_running(self) -> bool:
    return self._task is not None and not self._task.done()

  def sweep_once(self) -> int:
    try:
      return self._store.sweep()
    except Exception:
      log.exception("Confirmation sweep failed")
      return 0

  async def start(self) -> None:
    if self.is_running:
      log.warning("Sweeper already running, ignoring start")
      return
    self._task = asyncio.create_task(self._run(), name="confirmation-sweeper")
    log.info("Sweeper started (interval=%ss)", self._interval)

  async def stop(self) -> None:
    if self._task is None:
      log.debug("Sweeper not running, ignoring stop")
      return
    task, self._task = self._task, None
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
      await task
    log.info("Sweeper stopped")

  async def _run(self) -> None:
    while True:
      await asyncio.sleep(self._interval)
      self.sweep_once()
