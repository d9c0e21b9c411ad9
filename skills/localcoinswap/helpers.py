"""
Shared formatting and error handling helpers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

log = logging.getLogger("skill.localcoinswap.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def json_result(data: Any) -> ToolResult:
  return ToolResult(content=to_json(data))


def to_json(data: Any) -> str:
  return json.dumps(data, indent=2, default=str)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  CURRENCY = "CURRENCY"
  OFFER = "OFFER"
  SWAP = "SWAP"
  TRADE = "TRADE"


def _is_user_facing(error: Exception) -> bool:
  from .client import LcsApiError
  from .config import MissingCredentialError
  from .confirmation.errors import ConfirmationError
  from .validation import ValidationError

  return isinstance(
    error, (ValidationError, MissingCredentialError, ConfirmationError, LcsApiError)
  )


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  error_code = f"{prefix}-ERR-{hash_val:03d}"

  if _is_user_facing(error):
    log.warning("[LCS] %s failed - Code: %s - %s", function_name, error_code, error)
    user_message = f"Error: {error}"
  else:
    log.error(
      "[LCS] Error in %s - Code: %s - %s", function_name, error_code, error, exc_info=error
    )
    user_message = (
      f"Error: an unexpected error occurred (code: {error_code}). Check logs for details."
    )

  return ToolResult(content=user_message, is_error=True)
