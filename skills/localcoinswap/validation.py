"""
Input validation helpers for LocalCoinSwap tool arguments.

The symbol, amount and range checks are pure and run before any
confirmation state is created or any request leaves the process.
"""

from __future__ import annotations

import math
import re
from typing import Any

CURRENCY_SYMBOL_RE = re.compile(r"^[A-Z0-9]{2,10}$")
AMOUNT_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")


class ValidationError(Exception):
  pass


class InvalidSymbol(ValidationError):
  """Currency symbol is not 2-10 alphanumeric characters."""

  def __init__(self, value: Any, rule: str) -> None:
    self.value = value
    self.rule = rule
    super().__init__(f'Invalid currency symbol: "{value}". {rule}')


class InvalidAmount(ValidationError):
  """Amount is not a positive, finite decimal string."""

  def __init__(self, value: Any, rule: str) -> None:
    self.value = value
    self.rule = rule
    super().__init__(f'Invalid amount: "{value}". {rule}')


class InvalidRange(ValidationError):
  """A numeric search bound is negative."""

  def __init__(self, name: str, value: Any) -> None:
    self.name = name
    self.value = value
    self.rule = "Must be non-negative."
    super().__init__(f"{name} must be non-negative.")


# ---------------------------------------------------------------------------
# Domain checks
# ---------------------------------------------------------------------------


def validate_currency_symbol(symbol: Any) -> str:
  """Return the upper-cased, trimmed symbol or raise InvalidSymbol."""
  if not isinstance(symbol, str):
    raise InvalidSymbol(symbol, "Must be 2-10 alphanumeric characters.")
  normalized = symbol.upper().strip()
  if not CURRENCY_SYMBOL_RE.match(normalized):
    raise InvalidSymbol(symbol, "Must be 2-10 alphanumeric characters.")
  return normalized


def validate_amount(amount: Any) -> str:
  """
  Check a decimal amount string.

  Returns the amount exactly as given; the original string is what gets
  bound into a confirmation, so "1.0" and "1" are different amounts.
  """
  if not isinstance(amount, str):
    raise InvalidAmount(amount, "Must be a positive number.")
  trimmed = amount.strip()
  if not AMOUNT_RE.match(trimmed):
    raise InvalidAmount(amount, "Must be a positive number.")
  value = float(trimmed)
  if not math.isfinite(value):
    raise InvalidAmount(amount, "Number is not finite.")
  if value <= 0:
    raise InvalidAmount(amount, "Must be greater than zero.")
  return amount


def validate_range(name: str, value: int | float | None) -> int | float | None:
  """Reject negative search bounds. None means the bound is unset."""
  if value is None:
    return None
  if value < 0:
    raise InvalidRange(name, value)
  return value


# ---------------------------------------------------------------------------
# Argument readers
# ---------------------------------------------------------------------------


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v:
    raise ValidationError(f"Missing required parameter: {key}")
  return v


def opt_string(args: dict[str, Any], key: str) -> str | None:
  """Read an optional string from args."""
  v = args.get(key)
  return v if isinstance(v, str) and v else None


def opt_number(args: dict[str, Any], key: str) -> int | float | None:
  v = args.get(key)
  if isinstance(v, bool):
    return None
  if isinstance(v, (int, float)):
    return v
  return None


def opt_boolean(args: dict[str, Any], key: str) -> bool | None:
  """Read an optional boolean; anything that is not a real bool is None."""
  v = args.get(key)
  return v if isinstance(v, bool) else None


def opt_choice(args: dict[str, Any], key: str, choices: tuple[str, ...]) -> str | None:
  v = opt_string(args, key)
  if v is None:
    return None
  if v not in choices:
    raise ValidationError(f"{key} must be one of: {', '.join(choices)}")
  return v
