import httpx
import pytest

from core.api_client import ShopApi, is_success_status
from core.errors import SeedError


def recording_transport(status: int = 200, body: str = "ok", calls: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status, text=body)

    return httpx.MockTransport(handler)


@pytest.mark.parametrize("status, expected", [
    (199, False), (200, True), (204, True), (302, True), (399, True), (400, False), (500, False),
])
def test_success_status_range(status, expected):
    assert is_success_status(status) is expected


async def test_reset_cart_posts_without_body():
    calls = []
    async with ShopApi("http://shop.test/", transport=recording_transport(calls=calls)) as api:
        response = await api.reset_cart()

    assert response.status_code == 200
    assert [(r.method, str(r.url)) for r in calls] == [("POST", "http://shop.test/reset-cart")]
    assert calls[0].content == b""


async def test_add_to_cart_sends_item_id_as_form_field():
    calls = []
    async with ShopApi("http://shop.test", transport=recording_transport(calls=calls)) as api:
        await api.add_to_cart(7)

    request = calls[0]
    assert request.url.path == "/add-to-cart"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert request.content == b"itemId=7"


async def test_redirect_counts_as_success_and_is_not_followed():
    calls = []
    async with ShopApi("http://shop.test", transport=recording_transport(status=302, calls=calls)) as api:
        response = await api.reset_cart()

    assert response.status_code == 302
    assert len(calls) == 1


async def test_error_status_raises_with_status_and_body():
    transport = recording_transport(status=500, body="database is locked")
    async with ShopApi("http://shop.test", transport=transport) as api:
        with pytest.raises(SeedError) as excinfo:
            await api.add_to_cart(1)

    assert excinfo.value.status_code == 500
    assert excinfo.value.body == "database is locked"
    assert "add to cart for item 1" in str(excinfo.value)


async def test_transport_failure_raises_seed_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with ShopApi("http://shop.test", transport=httpx.MockTransport(handler)) as api:
        with pytest.raises(SeedError) as excinfo:
            await api.reset_cart()

    assert excinfo.value.status_code is None
    assert "connection refused" in excinfo.value.body


async def test_seed_error_is_a_test_failure():
    async with ShopApi("http://shop.test", transport=recording_transport(status=404)) as api:
        with pytest.raises(AssertionError):
            await api.reset_cart()


async def test_get_cart_does_not_check_status():
    async with ShopApi("http://shop.test", transport=recording_transport(status=500, body="boom")) as api:
        response = await api.get_cart()

    assert response.status_code == 500
