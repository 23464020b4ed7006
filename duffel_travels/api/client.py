"""
Async client for the Duffel flights API.

Only the calls the tools need are implemented: one resource object per entity,
each exposing ``create``/``get`` the way the Duffel SDKs do. Requests are wrapped
in ``{"data": ...}`` and responses unwrapped from it.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .models import Offer, OfferRequest, Order, Payment, SeatMap

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.duffel.com"
API_VERSION = "v2"
DEFAULT_TIMEOUT = 30.0


class DuffelAPIError(Exception):
    """The provider rejected a request (non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message)

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "DuffelAPIError":
        errors: List[Dict[str, Any]] = []
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("errors"), list):
            errors = body["errors"]

        message = f"Duffel API request failed with status {response.status_code}"
        if errors and isinstance(errors[0], dict):
            message = errors[0].get("message") or errors[0].get("title") or message
        return cls(message, status_code=response.status_code, errors=errors)


class DuffelClient:
    def __init__(
        self,
        token: str,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

        self.offer_requests = OfferRequests(self)
        self.offers = Offers(self)
        self.orders = Orders(self)
        self.payments = Payments(self)
        self.seat_maps = SeatMaps(self)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Duffel-Version": API_VERSION,
            "Accept": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the unwrapped ``data`` member of the response."""
        json_body = {"data": data} if data is not None else None
        logger.debug(f"Duffel request: {method} {path}")

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(method, path, headers=self._headers(), params=params, json=json_body)

        logger.debug(f"Duffel response: {response.status_code} {path}")
        if response.is_error:
            raise DuffelAPIError.from_response(response)
        return response.json().get("data")


class _Resource:
    def __init__(self, client: DuffelClient):
        self._client = client


class OfferRequests(_Resource):
    async def create(self, slices: List[Dict[str, Any]], passengers: List[Dict[str, Any]], cabin_class: str) -> OfferRequest:
        data = await self._client.request(
            "POST",
            "/air/offer_requests",
            params={"return_offers": "true"},
            data={"slices": slices, "passengers": passengers, "cabin_class": cabin_class},
        )
        return OfferRequest.model_validate(data)


class Offers(_Resource):
    async def get(self, offer_id: str) -> Offer:
        data = await self._client.request("GET", f"/air/offers/{offer_id}")
        return Offer.model_validate(data)


class Orders(_Resource):
    async def create(self, order: Dict[str, Any]) -> Order:
        data = await self._client.request("POST", "/air/orders", data=order)
        return Order.model_validate(data)

    async def get(self, order_id: str) -> Order:
        data = await self._client.request("GET", f"/air/orders/{order_id}")
        return Order.model_validate(data)


class Payments(_Resource):
    async def create(self, order_id: str, payment: Dict[str, Any]) -> Payment:
        data = await self._client.request("POST", "/air/payments", data={"order_id": order_id, "payment": payment})
        return Payment.model_validate(data)


class SeatMaps(_Resource):
    async def get(self, offer_id: str) -> List[SeatMap]:
        data = await self._client.request("GET", "/air/seat_maps", params={"offer_id": offer_id})
        return [SeatMap.model_validate(item) for item in data or []]

    async def find(self, offer_id: str) -> Optional[List[SeatMap]]:
        """
        Seat maps for an offer, or None when the provider has none to give.

        Not every airline supports seat selection, so a provider rejection is an
        expected outcome here. Authentication and transport failures still raise.
        """
        try:
            return await self.get(offer_id)
        except DuffelAPIError as e:
            if e.is_auth_error:
                raise
            logger.info(f"Seat maps unavailable for offer {offer_id}: {e.message}")
            return None
