"""
Typed records for the Duffel resources this server reads.

Every model allows extra fields so that tools returning a full record pass the
provider's data through untouched, while the fields the tools project are named
and validated here. A response missing an ``id`` fails at the client boundary
instead of surfacing later as an empty payload.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class DuffelRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    def to_dict(self) -> Dict[str, Any]:
        """The record as the provider sent it."""
        return self.model_dump(mode="json", exclude_unset=True)

    def project(self, *fields: str) -> Dict[str, Any]:
        """Subset of the record limited to ``fields`` the provider actually sent."""
        data = self.to_dict()
        return {name: data[name] for name in fields if name in data}


class Place(DuffelRecord):
    iata_code: Optional[str] = None
    name: Optional[str] = None


class Airline(DuffelRecord):
    name: Optional[str] = None
    iata_code: Optional[str] = None


class OfferSlice(DuffelRecord):
    duration: Optional[str] = None
    origin: Optional[Place] = None
    destination: Optional[Place] = None
    segments: Optional[List[Dict[str, Any]]] = None


class Offer(DuffelRecord):
    id: str
    live_mode: Optional[bool] = None
    expires_at: Optional[str] = None
    total_amount: Optional[str] = None
    total_currency: Optional[str] = None
    tax_amount: Optional[str] = None
    tax_currency: Optional[str] = None
    owner: Optional[Airline] = None
    slices: List[OfferSlice] = []


class OfferRequest(DuffelRecord):
    id: str
    live_mode: Optional[bool] = None
    offers: List[Offer] = []


class Order(DuffelRecord):
    id: str
    booking_reference: Optional[str] = None
    live_mode: Optional[bool] = None
    total_amount: Optional[str] = None
    total_currency: Optional[str] = None
    created_at: Optional[str] = None
    owner: Optional[Airline] = None
    passengers: List[Dict[str, Any]] = []
    slices: List[Dict[str, Any]] = []
    documents: List[Dict[str, Any]] = []
    services: List[Dict[str, Any]] = []


class Payment(DuffelRecord):
    id: str
    type: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    created_at: Optional[str] = None


class SeatMap(DuffelRecord):
    id: str
    segment_id: Optional[str] = None
    slice_id: Optional[str] = None
    cabins: List[Dict[str, Any]] = []
