"""
ShopApi — ustawia stan backendu przez HTTP zanim wystartuje UI.

Kazde wywolanie musi zwrocic status 200–399 (redirect po POST jest sukcesem),
inaczej SeedError ze statusem i trescia odpowiedzi. Bez cichego degradowania —
to tutaj definiujemy stan poczatkowy testu.
"""
import logging

import httpx

from core.errors import SeedError


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 400


class ShopApi:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger(__name__)
        # follow_redirects=False — 302 po formularzu liczymy jako sukces, nie idziemy dalej
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            follow_redirects=False,
            transport=transport,
        )

    async def __aenter__(self) -> "ShopApi":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    # ── Publiczne API ─────────────────────────────────────────────────────────

    async def reset_cart(self) -> httpx.Response:
        response = await self._post("reset cart", "/reset-cart")
        self.logger.info(f"Koszyk wyczyszczony (status: {response.status_code})")
        return response

    async def add_to_cart(self, item_id: int) -> httpx.Response:
        response = await self._post(
            f"add to cart for item {item_id}", "/add-to-cart", data={"itemId": str(item_id)}
        )
        self.logger.info(f"Produkt {item_id} dodany do koszyka (status: {response.status_code})")
        return response

    async def get_cart(self) -> httpx.Response:
        """Surowa odpowiedz strony koszyka — bez sprawdzania statusu."""
        return await self._client.get("/cart")

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def _post(self, operation: str, path: str, data: dict | None = None) -> httpx.Response:
        self.logger.debug(f"POST {self.base_url}{path} data={data}")
        try:
            response = await self._client.post(path, data=data)
        except httpx.HTTPError as e:
            raise SeedError(operation, None, f"{type(e).__name__}: {e}") from e

        if not is_success_status(response.status_code):
            raise SeedError(operation, response.status_code, response.text)
        return response
