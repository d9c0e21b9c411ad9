"""
Confirmation record types.

Each sensitive action has its own bound-parameter model, so a token for
a swap can only ever carry swap parameters.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class SensitiveAction(str, Enum):
  CREATE_SWAP = "create_swap"
  START_TRADE = "start_trade"


class SwapParameters(BaseModel):
  """Normalized create_swap arguments: upper-cased symbols, amount as given."""

  model_config = ConfigDict(frozen=True)

  action: ClassVar[SensitiveAction] = SensitiveAction.CREATE_SWAP

  from_currency: str
  to_currency: str
  from_amount: str


class TradeParameters(BaseModel):
  """Normalized start_trade arguments."""

  model_config = ConfigDict(frozen=True)

  action: ClassVar[SensitiveAction] = SensitiveAction.START_TRADE

  offer_uuid: str
  amount: str


BoundParameters = SwapParameters | TradeParameters


class PendingConfirmation(BaseModel):
  model_config = ConfigDict(frozen=True)

  id: str
  action: SensitiveAction
  params: BoundParameters
  expires_at: float

  @model_validator(mode="after")
  def _params_match_action(self) -> PendingConfirmation:
    if self.params.action is not self.action:
      raise ValueError(
        f"{type(self.params).__name__} cannot be bound to action {self.action.value}"
      )
    return self

  def is_expired(self, now: float) -> bool:
    return self.expires_at < now
