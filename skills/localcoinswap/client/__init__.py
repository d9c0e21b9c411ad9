"""
LocalCoinSwap API client.
"""

from .lcs_client import (
  LcsApiError,
  LcsAuthError,
  LocalCoinSwapClient,
)

__all__ = [
  "LcsApiError",
  "LcsAuthError",
  "LocalCoinSwapClient",
]
