"""
Async HTTP client for the LocalCoinSwap REST API v2.

Uses aiohttp with token auth. Requests are never retried: a failed
create-swap or start-trade must not be replayed behind the caller's back.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

log = logging.getLogger("skill.localcoinswap.client")

REQUEST_TIMEOUT = 30


class LcsApiError(Exception):
  """Upstream request failed; the message is passed through to the caller."""

  def __init__(self, status: int, message: str):
    self.status = status
    self.detail = message
    super().__init__(f"API Error ({status}): {message}")


class LcsAuthError(LcsApiError):
  """Authentication error (401/403)."""

  pass


def _error_detail(body: Any, fallback: str) -> str:
  if isinstance(body, dict):
    for key in ("detail", "error", "message"):
      if body.get(key):
        return str(body[key])
    return json.dumps(body)
  if body:
    return str(body)
  return fallback


class LocalCoinSwapClient:
  """Async HTTP client for the LocalCoinSwap API."""

  def __init__(
    self,
    base_url: str,
    token: str = "",
    timeout: float = REQUEST_TIMEOUT,
  ) -> None:
    self._base_url = base_url.rstrip("/")
    self._token = token
    self._timeout = timeout
    self._session: aiohttp.ClientSession | None = None

  @property
  def is_connected(self) -> bool:
    return self._session is not None and not self._session.closed

  async def connect(self) -> None:
    """Create the aiohttp session."""
    if self._session and not self._session.closed:
      return
    headers = {"Content-Type": "application/json"}
    if self._token:
      headers["Authorization"] = f"Token {self._token}"
    self._session = aiohttp.ClientSession(
      headers=headers,
      timeout=aiohttp.ClientTimeout(total=self._timeout),
    )

  async def close(self) -> None:
    """Close the aiohttp session."""
    if self._session and not self._session.closed:
      await self._session.close()
    self._session = None

  async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
    if not self._session:
      raise LcsApiError(0, "Client not connected. Call connect() first.")

    url = f"{self._base_url}{path}"
    try:
      async with self._session.request(method, url, **kwargs) as resp:
        if resp.status >= 400:
          try:
            body = await resp.json(content_type=None)
          except (ValueError, aiohttp.ContentTypeError):
            body = None
          detail = _error_detail(body, resp.reason or "Request failed")
          if resp.status in (401, 403):
            raise LcsAuthError(resp.status, detail)
          raise LcsApiError(resp.status, detail)
        return await resp.json(content_type=None)
    except (TimeoutError, aiohttp.ClientError) as e:
      log.warning("%s %s failed: %s", method, path, e)
      raise LcsApiError(0, f"Request failed: {e!s}") from e

  async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
    return await self._request("GET", path, params=params)

  async def _post(self, path: str, body: dict[str, Any]) -> Any:
    return await self._request("POST", path, json=body)

  # ------------------------------------------------------------------
  # Currencies
  # ------------------------------------------------------------------

  async def get_active_cryptos(self) -> list[dict[str, Any]]:
    return await self._get("/api/v2/currencies/active-cryptos/")

  async def get_crypto_currencies(self) -> list[dict[str, Any]]:
    return await self._get("/api/v2/currencies/crypto-currencies/")

  async def get_fiat_currencies(self) -> list[dict[str, Any]]:
    return await self._get("/api/v2/currencies/fiat-currencies/")

  async def get_currency(self, symbol: str) -> dict[str, Any]:
    return await self._get(f"/api/v2/currencies/{symbol}/")

  # ------------------------------------------------------------------
  # Offers
  # ------------------------------------------------------------------

  async def search_offers(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
    """Search offers. Unset and falsy filters are left out of the query."""
    query = {k: str(v) for k, v in (params or {}).items() if v}
    return await self._get("/api/v2/offers/search/", params=query or None)

  async def get_my_offers(self) -> dict[str, Any]:
    return await self._get("/api/v2/offers/")

  async def get_offer(self, uuid: str) -> dict[str, Any]:
    return await self._get(f"/api/v2/offers/{quote(uuid, safe='')}/")

  async def get_featured_offers(self) -> list[dict[str, Any]]:
    return await self._get("/api/v2/offers/featured/")

  async def get_payment_methods(self) -> list[dict[str, Any]]:
    return await self._get("/api/v2/offers/payment-methods/")

  async def get_trade_types(self) -> list[dict[str, Any]]:
    return await self._get("/api/v2/offers/trade-types/")

  # ------------------------------------------------------------------
  # Swaps
  # ------------------------------------------------------------------

  async def estimate_swap(self, from_currency: str, to_currency: str, amount: str) -> dict[str, Any]:
    return await self._post(
      "/api/v2/swaps/estimate-swap-amount/",
      {"from_currency": from_currency, "to_currency": to_currency, "from_amount": amount},
    )

  async def get_min_swap_amount(self, from_currency: str, to_currency: str) -> dict[str, Any]:
    return await self._get(f"/api/v2/swaps/min-swap-amount/{from_currency}/{to_currency}/")

  async def get_active_swaps(self) -> dict[str, Any]:
    return await self._get("/api/v2/swaps/active-swaps/")

  async def get_past_swaps(self) -> dict[str, Any]:
    return await self._get("/api/v2/swaps/past-swaps/")

  async def get_swaps(self) -> dict[str, Any]:
    return await self._get("/api/v2/swaps/")

  async def create_swap(self, from_currency: str, to_currency: str, from_amount: str) -> dict[str, Any]:
    return await self._post(
      "/api/v2/swaps/",
      {"from_currency": from_currency, "to_currency": to_currency, "from_amount": from_amount},
    )

  # ------------------------------------------------------------------
  # Trades
  # ------------------------------------------------------------------

  async def start_trade(self, offer_uuid: str, amount: str) -> dict[str, Any]:
    return await self._post("/api/v2/trades/", {"offer": offer_uuid, "fiat_amount": amount})

  async def get_trade(self, uuid: str) -> dict[str, Any]:
    return await self._get(f"/api/v2/trades/{quote(uuid, safe='')}/")

  async def get_my_trades(self) -> dict[str, Any]:
    return await self._get("/api/v2/trades/")
