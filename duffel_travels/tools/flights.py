from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..api.client import DuffelClient
from ..api.models import Offer

MAX_OFFERS = 10

SEATMAPS_UNAVAILABLE = {"message": "Seat maps not available for this offer"}
SERVICES_NOTE = (
    "For available services (baggage, meals, etc.), please retrieve the full offer details using "
    "flight_offers tool. Services are included in the offer's available_services field."
)


class CabinClass(str, Enum):
    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium_economy"
    BUSINESS = "business"
    FIRST = "first"


class OfferRequestArgs(BaseModel):
    origin: str = Field(..., description="IATA airport code for origin.")
    destination: str = Field(..., description="IATA airport code for destination.")
    departure_date: str = Field(..., description="Departure date (YYYY-MM-DD).")
    return_date: Optional[str] = Field(None, description="Return date (YYYY-MM-DD).")
    passengers: List[Dict[str, Any]] = Field(..., description="Passenger descriptors, e.g. {'type': 'adult'}.")
    cabin_class: CabinClass = CabinClass.ECONOMY


class OfferIdArgs(BaseModel):
    offer_id: str = Field(..., description="The unique identifier of the flight offer.")


def build_slices(args: OfferRequestArgs) -> List[Dict[str, str]]:
    """Outbound slice, plus the inbound one for round trips."""
    slices = [
        {
            "origin": args.origin,
            "destination": args.destination,
            "departure_date": args.departure_date,
        }
    ]
    if args.return_date:
        slices.append({
            "origin": args.destination,
            "destination": args.origin,
            "departure_date": args.return_date,
        })
    return slices


def _summarize_slice(data: Dict[str, Any]) -> Dict[str, Any]:
    summary = {"duration": data["duration"]} if "duration" in data else {}
    for end in ("origin", "destination"):
        place = data.get(end)
        if isinstance(place, dict) and "iata_code" in place:
            summary[end] = place["iata_code"]
    if isinstance(data.get("segments"), list):
        summary["segments_count"] = len(data["segments"])
    return summary


def summarize_offer(offer: Offer) -> Dict[str, Any]:
    """Search-result view of an offer; keys the provider left out are omitted."""
    data = offer.to_dict()
    summary = offer.project("id", "total_amount", "total_currency")
    owner = data.get("owner")
    if isinstance(owner, dict) and "name" in owner:
        summary["owner"] = owner["name"]
    if "slices" in data:
        summary["slices"] = [_summarize_slice(s) for s in data["slices"]]
    return summary


async def flight_offer_request(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Search for offers and return a bounded summary of them."""
    args = OfferRequestArgs.model_validate(arguments)
    offer_request = await client.offer_requests.create(
        slices=build_slices(args),
        passengers=args.passengers,
        cabin_class=args.cabin_class.value,
    )
    summary = offer_request.project("id", "live_mode")
    summary["offers_count"] = len(offer_request.offers)
    if "offers" in offer_request.model_fields_set:
        summary["offers"] = [summarize_offer(o) for o in offer_request.offers[:MAX_OFFERS]]
    return summary


async def flight_offers(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    args = OfferIdArgs.model_validate(arguments)
    offer = await client.offers.get(args.offer_id)
    return offer.to_dict()


async def validate_or_price_offer(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """
    Re-fetch the offer and report its current price and expiry.

    Duffel has no separate pricing call; a successful fetch means the offer is
    still bookable, and the returned amounts are the ones an order would use.
    """
    args = OfferIdArgs.model_validate(arguments)
    offer = await client.offers.get(args.offer_id)
    return {
        "offer_id": args.offer_id,
        **offer.project("expires_at", "total_amount", "total_currency", "tax_amount", "tax_currency"),
    }


async def list_services_and_seatmaps(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    args = OfferIdArgs.model_validate(arguments)
    seat_maps = await client.seat_maps.find(args.offer_id)
    return {
        "seatmaps": [m.to_dict() for m in seat_maps] if seat_maps is not None else dict(SEATMAPS_UNAVAILABLE),
        "note": SERVICES_NOTE,
    }
