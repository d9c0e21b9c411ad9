"""
Confirmation gate for sensitive operations.

Decides, per call, between three paths:

  1. execute now: confirmation is disabled, or the caller passed
     confirm=True (an explicit False counts as absent)
  2. redeem: the caller presented a confirmation_id; it must match the
     action and the current normalized parameters
  3. issue: nothing presented; fetch a read-only preview, bind the
     parameters to a fresh id and stop without executing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Awaitable, Callable

  from .store import ConfirmationStore
  from .types import BoundParameters

log = logging.getLogger("skill.localcoinswap.confirmation.gate")


@dataclass(frozen=True)
class GateDecision:
  proceed: bool
  confirmation_id: str | None = None
  preview: Any = None
  redeemed: bool = False


def describe_ttl(seconds: float) -> str:
  """Human-readable TTL, e.g. 300 -> "5 minutes"."""
  if seconds >= 60 and seconds % 60 == 0:
    minutes = int(seconds // 60)
    return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
  return f"{seconds:g} seconds"


class ConfirmationGate:
  def __init__(self, store: ConfirmationStore, require_confirmation: bool = True) -> None:
    self._store = store
    self._require_confirmation = require_confirmation

  @property
  def store(self) -> ConfirmationStore:
    return self._store

  @property
  def require_confirmation(self) -> bool:
    return self._require_confirmation

  @property
  def expires_in(self) -> str:
    return describe_ttl(self._store.ttl_seconds)

  async def check(
    self,
    params: BoundParameters,
    *,
    confirm: bool | None = None,
    confirmation_id: str | None = None,
    preview: Callable[[], Awaitable[Any]],
  ) -> GateDecision:
    """
    Run the decision table for one sensitive call.

    Raises any ConfirmationError from redemption and any error from the
    preview call; in both cases nothing may be executed.
    """
    action = params.action

    if not self._require_confirmation or confirm is True:
      return GateDecision(proceed=True)

    if confirmation_id:
      self._store.redeem(confirmation_id, action, params)
      return GateDecision(proceed=True, confirmation_id=confirmation_id, redeemed=True)

    # Preview first: a failing lookup must not leave an orphaned record.
    details = await preview()
    new_id = self._store.create(action, params)
    log.info("Confirmation required for %s (id=%s)", action.value, new_id)
    return GateDecision(proceed=False, confirmation_id=new_id, preview=details)
