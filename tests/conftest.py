"""
Shared fixtures: a recording fake of the LocalCoinSwap client, a
controllable clock, and an installed SkillRuntime.
"""

from __future__ import annotations

from typing import Any

import pytest

from skills.localcoinswap.config import SkillConfig
from skills.localcoinswap.runtime import SkillRuntime, set_runtime

ESTIMATE = {
  "from_currency": "ETH",
  "to_currency": "USDT",
  "from_amount": "1.0",
  "to_amount": "3150.25",
  "rate": "3150.25",
  "fee": "0.5",
}

OFFER = {
  "uuid": "offer-123",
  "trading_type": "sell",
  "coin_currency": "BTC",
  "fiat_currency": "USD",
  "payment_method": {"id": 1, "name": "Bank Transfer", "slug": "bank-transfer"},
  "min_trade_size": "50",
  "max_trade_size": "5000",
  "price": "65000",
  "margin": "2",
  "headline": "Fast release",
  "is_active": True,
  "trader": {"username": "satoshi", "uuid": "u-1", "trades_count": 120, "feedback_score": 99},
}


class FakeClock:
  def __init__(self, start: float = 1_700_000_000.0) -> None:
    self.now = start

  def __call__(self) -> float:
    return self.now

  def advance(self, seconds: float) -> None:
    self.now += seconds


class FakeLcsClient:
  """Stands in for LocalCoinSwapClient and records every call."""

  def __init__(self) -> None:
    self.calls: list[tuple[str, tuple[Any, ...]]] = []
    self.failures: dict[str, Exception] = {}
    self.connected = False

  def count(self, name: str) -> int:
    return sum(1 for called, _ in self.calls if called == name)

  def args_of(self, name: str) -> list[tuple[Any, ...]]:
    return [args for called, args in self.calls if called == name]

  async def _call(self, name: str, *args: Any, result: Any = None) -> Any:
    self.calls.append((name, args))
    if name in self.failures:
      raise self.failures[name]
    return result

  async def connect(self) -> None:
    self.connected = True

  async def close(self) -> None:
    self.connected = False

  async def get_active_cryptos(self) -> Any:
    return await self._call("get_active_cryptos", result=[{"symbol": "BTC", "title": "Bitcoin"}])

  async def get_crypto_currencies(self) -> Any:
    return await self._call(
      "get_crypto_currencies",
      result=[
        {"symbol": "BTC", "title": "Bitcoin", "is_active": True},
        {"symbol": "USDT", "title": "Tether", "network": "TRC20", "is_active": True},
      ],
    )

  async def get_fiat_currencies(self) -> Any:
    return await self._call("get_fiat_currencies", result=[{"symbol": "USD", "title": "Dollar"}])

  async def get_currency(self, symbol: str) -> Any:
    return await self._call("get_currency", symbol, result={"symbol": symbol})

  async def search_offers(self, params: dict[str, Any]) -> Any:
    return await self._call(
      "search_offers",
      params,
      result={"count": 1, "next": "page2", "previous": None, "results": [OFFER]},
    )

  async def get_my_offers(self) -> Any:
    return await self._call("get_my_offers", result={"count": 0, "results": []})

  async def get_offer(self, uuid: str) -> Any:
    return await self._call("get_offer", uuid, result=dict(OFFER, uuid=uuid))

  async def get_featured_offers(self) -> Any:
    return await self._call("get_featured_offers", result=[OFFER])

  async def get_payment_methods(self) -> Any:
    return await self._call("get_payment_methods", result=[OFFER["payment_method"]])

  async def get_trade_types(self) -> Any:
    return await self._call("get_trade_types", result=[{"slug": "buy", "name": "Buy"}])

  async def estimate_swap(self, from_currency: str, to_currency: str, amount: str) -> Any:
    return await self._call("estimate_swap", from_currency, to_currency, amount, result=ESTIMATE)

  async def get_min_swap_amount(self, from_currency: str, to_currency: str) -> Any:
    return await self._call(
      "get_min_swap_amount", from_currency, to_currency, result={"min_amount": "0.01"}
    )

  async def get_active_swaps(self) -> Any:
    return await self._call("get_active_swaps", result={"results": ["active"]})

  async def get_past_swaps(self) -> Any:
    return await self._call("get_past_swaps", result={"results": ["past"]})

  async def get_swaps(self) -> Any:
    return await self._call("get_swaps", result={"results": ["all"]})

  async def create_swap(self, from_currency: str, to_currency: str, from_amount: str) -> Any:
    return await self._call(
      "create_swap",
      from_currency,
      to_currency,
      from_amount,
      result={"uuid": "swap-1", "status": "pending"},
    )

  async def start_trade(self, offer_uuid: str, amount: str) -> Any:
    return await self._call(
      "start_trade", offer_uuid, amount, result={"uuid": "trade-1", "status": "created"}
    )

  async def get_trade(self, uuid: str) -> Any:
    return await self._call("get_trade", uuid, result={"uuid": uuid})

  async def get_my_trades(self) -> Any:
    return await self._call("get_my_trades", result={"count": 0, "results": []})


@pytest.fixture
def clock() -> FakeClock:
  return FakeClock()


@pytest.fixture
def fake_client() -> FakeLcsClient:
  return FakeLcsClient()


@pytest.fixture
def make_runtime(fake_client, clock):
  """Install a runtime built around the fake client; removed after the test."""

  def _make(**config: Any) -> SkillRuntime:
    settings = {"api_token": "test-token", "require_confirmation": True, **config}
    runtime = SkillRuntime.create(SkillConfig(**settings), client=fake_client, clock=clock)
    set_runtime(runtime)
    return runtime

  yield _make
  set_runtime(None)


@pytest.fixture
def runtime(make_runtime) -> SkillRuntime:
  return make_runtime()
