"""
Two-phase confirmation for real-money actions.
"""

from .errors import (
  ConfirmationError,
  ConfirmationExpired,
  ConfirmationNotFound,
  ParameterMismatch,
  WrongAction,
)
from .gate import ConfirmationGate, GateDecision
from .store import ConfirmationStore
from .sweeper import ConfirmationSweeper
from .types import (
  BoundParameters,
  PendingConfirmation,
  SensitiveAction,
  SwapParameters,
  TradeParameters,
)

__all__ = [
  "BoundParameters",
  "ConfirmationError",
  "ConfirmationExpired",
  "ConfirmationGate",
  "ConfirmationNotFound",
  "ConfirmationStore",
  "ConfirmationSweeper",
  "GateDecision",
  "ParameterMismatch",
  "PendingConfirmation",
  "SensitiveAction",
  "SwapParameters",
  "TradeParameters",
  "WrongAction",
]
