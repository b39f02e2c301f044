# sdk/techlab.py
import logging
from typing import Any, Dict, Optional, Union

import httpx

DEFAULT_BASE_URL = "https://fakestoreapi.com"

log = logging.getLogger("techlab.sdk")


class ApiError(Exception):
    """Raised for any failed call: non-2xx status, transport error or a non-JSON body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProductsClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def placeholder_image(self) -> str:
        return f"{self.base_url}/img/placeholder.jpg"

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        log.debug("%s %s", method, url)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport, follow_redirects=True
        ) as client:
            try:
                r = await client.request(method, url, **kwargs)
            except httpx.RequestError as e:
                log.warning("%s %s failed: %s", method, url, e)
                raise ApiError(str(e) or e.__class__.__name__) from e

        if not r.is_success:
            log.warning("%s %s -> %s", method, url, r.status_code)
            raise ApiError(f"HTTP Error: {r.status_code} - {r.reason_phrase}", status_code=r.status_code)

        try:
            return r.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON response from {url}", status_code=r.status_code) from e

    # Products
    async def list_products(self):
        return await self._request("GET", "/products")

    async def get_product(self, product_id: Union[int, str]):
        return await self._request("GET", f"/products/{product_id}")

    def new_product_payload(self, title: str, price: float, category: str) -> Dict[str, Any]:
        return {
            "title": title,
            "price": price,
            "description": f"Producto {title} de la categoría {category}",
            "image": self.placeholder_image,
            "category": category,
        }

    async def create_product(self, title: str, price: float, category: str):
        payload = self.new_product_payload(title, price, category)
        return await self._request("POST", "/products", json=payload)

    async def delete_product(self, product_id: Union[int, str]):
        return await self._request("DELETE", f"/products/{product_id}")
