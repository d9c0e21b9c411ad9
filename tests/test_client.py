"""
LocalCoinSwapClient against a local aiohttp test server.
"""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from skills.localcoinswap.client import LcsApiError, LcsAuthError, LocalCoinSwapClient


class Upstream:
  """Records what reached the fake API."""

  def __init__(self):
    self.requests = []

  def app(self) -> web.Application:
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", self.handle)
    return app

  async def handle(self, request: web.Request) -> web.Response:
    body = await request.json() if request.can_read_body else None
    self.requests.append(
      {
        "method": request.method,
        "path": request.path,
        "raw_path": request.raw_path,
        "query": dict(request.query),
        "auth": request.headers.get("Authorization"),
        "body": body,
      }
    )
    path = request.path
    if path == "/api/v2/swaps/" and request.method == "POST":
      return web.json_response({"uuid": "swap-1", **body}, status=201)
    if path == "/api/v2/offers/bad/":
      return web.json_response({"detail": "Not found."}, status=404)
    if path == "/api/v2/trades/":
      if request.method == "POST":
        return web.json_response({"error": "Amount below offer minimum"}, status=400)
      return web.json_response({"detail": "Invalid token."}, status=401)
    if path == "/api/v2/swaps/past-swaps/":
      return web.json_response({"code": "E42"}, status=400)
    if path == "/api/v2/swaps/active-swaps/":
      return web.Response(text="", status=500, reason="Internal Server Error")
    return web.json_response({"ok": True})


@pytest_asyncio.fixture
async def upstream():
  fake = Upstream()
  server = TestServer(fake.app())
  await server.start_server()
  fake.base_url = str(server.make_url("/"))
  yield fake
  await server.close()


@pytest_asyncio.fixture
async def client(upstream):
  c = LocalCoinSwapClient(upstream.base_url, token="secret")
  await c.connect()
  yield c
  await c.close()


@pytest.mark.asyncio
async def test_token_header_and_trailing_slash(upstream, client):
  await client.get_currency("BTC")
  request = upstream.requests[-1]
  assert request["auth"] == "Token secret"
  assert request["path"] == "/api/v2/currencies/BTC/"


@pytest.mark.asyncio
async def test_no_header_without_token(upstream):
  c = LocalCoinSwapClient(upstream.base_url)
  await c.connect()
  try:
    await c.get_trade_types()
  finally:
    await c.close()
  assert upstream.requests[-1]["auth"] is None


@pytest.mark.asyncio
async def test_search_drops_unset_filters(upstream, client):
  await client.search_offers(
    {"coin_currency": "BTC", "fiat_currency": None, "min_amount": 10, "page": None, "ordering": ""}
  )
  assert upstream.requests[-1]["query"] == {"coin_currency": "BTC", "min_amount": "10"}


@pytest.mark.asyncio
async def test_estimate_swap_body(upstream, client):
  await client.estimate_swap("ETH", "USDT", "1.0")
  request = upstream.requests[-1]
  assert request["method"] == "POST"
  assert request["path"] == "/api/v2/swaps/estimate-swap-amount/"
  assert request["body"] == {"from_currency": "ETH", "to_currency": "USDT", "from_amount": "1.0"}


@pytest.mark.asyncio
async def test_create_swap(upstream, client):
  swap = await client.create_swap("ETH", "USDT", "1.0")
  assert swap["uuid"] == "swap-1"
  assert upstream.requests[-1]["body"] == {
    "from_currency": "ETH",
    "to_currency": "USDT",
    "from_amount": "1.0",
  }


@pytest.mark.asyncio
async def test_start_trade_error_detail(upstream, client):
  with pytest.raises(LcsApiError) as exc_info:
    await client.start_trade("offer-123", "250")
  assert upstream.requests[-1]["body"] == {"offer": "offer-123", "fiat_amount": "250"}
  assert exc_info.value.status == 400
  assert str(exc_info.value) == "API Error (400): Amount below offer minimum"
  assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_not_found_detail(client):
  with pytest.raises(LcsApiError) as exc_info:
    await client.get_offer("bad")
  assert str(exc_info.value) == "API Error (404): Not found."


@pytest.mark.asyncio
@pytest.mark.parametrize(
  ("method", "prefix"), [("get_offer", "/api/v2/offers/"), ("get_trade", "/api/v2/trades/")]
)
async def test_uuid_stays_in_one_path_segment(upstream, client, method, prefix):
  await getattr(client, method)("../swaps")
  request = upstream.requests[-1]
  assert request["raw_path"].upper() == f"{prefix}..%2FSWAPS/".upper()
  assert request["path"] != "/api/v2/swaps/"


@pytest.mark.asyncio
async def test_auth_error(client):
  with pytest.raises(LcsAuthError) as exc_info:
    await client.get_my_trades()
  assert exc_info.value.status == 401
  assert exc_info.value.detail == "Invalid token."


@pytest.mark.asyncio
async def test_body_without_known_keys_is_serialized(client):
  with pytest.raises(LcsApiError) as exc_info:
    await client.get_past_swaps()
  assert exc_info.value.detail == '{"code": "E42"}'


@pytest.mark.asyncio
async def test_empty_error_body_uses_reason(client):
  with pytest.raises(LcsApiError) as exc_info:
    await client.get_active_swaps()
  assert str(exc_info.value) == "API Error (500): Internal Server Error"


@pytest.mark.asyncio
async def test_not_connected():
  c = LocalCoinSwapClient("http://127.0.0.1:1")
  assert c.is_connected is False
  with pytest.raises(LcsApiError, match="not connected"):
    await c.get_swaps()


@pytest.mark.asyncio
async def test_connection_failure_is_wrapped():
  c = LocalCoinSwapClient("http://127.0.0.1:1", timeout=2)
  await c.connect()
  try:
    with pytest.raises(LcsApiError) as exc_info:
      await c.get_swaps()
  finally:
    await c.close()
  assert exc_info.value.status == 0
  assert "Request failed" in str(exc_info.value)
