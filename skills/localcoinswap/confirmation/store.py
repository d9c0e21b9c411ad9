"""
In-memory store of pending confirmations.

Records are created once and deleted once; nothing is mutated in place.
Every operation holds the same lock, so a record can be redeemed at most
once even when redemptions race, and a sweep never removes a record in
the middle of a successful redemption.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import TYPE_CHECKING

from .errors import ConfirmationExpired, ConfirmationNotFound, ParameterMismatch, WrongAction
from .types import BoundParameters, PendingConfirmation, SensitiveAction

if TYPE_CHECKING:
  from collections.abc import Callable

log = logging.getLogger("skill.localcoinswap.confirmation.store")

DEFAULT_TTL_SECONDS = 5 * 60


class ConfirmationStore:
  def __init__(
    self,
    ttl_seconds: float = DEFAULT_TTL_SECONDS,
    clock: Callable[[], float] = time.time,
  ) -> None:
    if ttl_seconds <= 0:
      raise ValueError(f"ttl_seconds must be positive, got: {ttl_seconds}")
    self._ttl = ttl_seconds
    self._clock = clock
    self._records: dict[str, PendingConfirmation] = {}
    self._lock = threading.Lock()

  @property
  def ttl_seconds(self) -> float:
    return self._ttl

  def __len__(self) -> int:
    with self._lock:
      return len(self._records)

  def __contains__(self, confirmation_id: object) -> bool:
    with self._lock:
      return confirmation_id in self._records

  def _new_id(self, now: float) -> str:
    while True:
      candidate = f"confirm_{int(now * 1000)}_{secrets.token_hex(4)}"
      if candidate not in self._records:
        return candidate

  # ---------------------------------------------------------------------------
  # Operations
  # ---------------------------------------------------------------------------

  def create(self, action: SensitiveAction, params: BoundParameters) -> str:
    """Issue a pending confirmation bound to action and params; returns its id."""
    with self._lock:
      now = self._clock()
      record = PendingConfirmation(
        id=self._new_id(now),
        action=action,
        params=params,
        expires_at=now + self._ttl,
      )
      self._records[record.id] = record

    log.info("Issued confirmation %s for %s", record.id, action.value)
    return record.id

  def peek(self, confirmation_id: str) -> PendingConfirmation | None:
    """Read a record without touching it. Diagnostics only."""
    with self._lock:
      return self._records.get(confirmation_id)

  def redeem(
    self,
    confirmation_id: str,
    action: SensitiveAction,
    params: BoundParameters,
  ) -> PendingConfirmation:
    """
    Claim a confirmation for execution.

    Checks existence, expiry, action and parameters in that order. On
    success the record is removed before this returns. An expired record
    is removed as well; wrong action and parameter mismatches leave the
    record in place.

    Only keys present in ``params`` are compared against the bound values.
    Both sides use the same per-action model, so in practice every bound
    key is compared.

    Raises:
        ConfirmationNotFound, ConfirmationExpired, WrongAction, ParameterMismatch
    """
    with self._lock:
      record = self._records.get(confirmation_id)
      if record is None:
        raise ConfirmationNotFound(confirmation_id)

      if record.is_expired(self._clock()):
        del self._records[confirmation_id]
        log.info("Confirmation %s expired on redemption", confirmation_id)
        raise ConfirmationExpired(confirmation_id)

      if record.action is not action:
        raise WrongAction(confirmation_id, record.action.value, action.value)

      bound = record.params.model_dump()
      for key, value in params.model_dump().items():
        if key not in bound or bound[key] != value:
          raise ParameterMismatch(confirmation_id, key)

      del self._records[confirmation_id]

    log.info("Redeemed confirmation %s for %s", confirmation_id, action.value)
    return record

  def sweep(self) -> int:
    """Delete every expired record. Returns how many were removed."""
    with self._lock:
      now = self._clock()
      expired = [cid for cid, record in self._records.items() if record.is_expired(now)]
      for cid in expired:
        del self._records[cid]

    if expired:
      log.info("Swept %d expired confirmation(s)", len(expired))
    return len(expired)

  def clear(self) -> None:
    with self._lock:
      self._records.clear()
