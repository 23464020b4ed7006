import json
import unittest
from unittest.mock import AsyncMock, MagicMock

from pydantic import ValidationError

from duffel_travels.api.models import Offer, OfferRequest, SeatMap
from duffel_travels.tools import build_server
from duffel_travels.tools.flights import (
    MAX_OFFERS,
    SEATMAPS_UNAVAILABLE,
    OfferRequestArgs,
    build_slices,
    flight_offer_request,
    list_services_and_seatmaps,
    validate_or_price_offer,
)


def make_offer(i: int) -> dict:
    return {
        "id": f"off_{i}",
        "total_amount": f"{100 + i}.00",
        "total_currency": "GBP",
        "owner": {"name": "Duffel Airways", "iata_code": "ZZ"},
        "slices": [
            {
                "duration": "PT7H",
                "origin": {"iata_code": "LHR", "name": "Heathrow"},
                "destination": {"iata_code": "JFK", "name": "John F. Kennedy"},
                "segments": [{"id": "seg_1"}, {"id": "seg_2"}],
            }
        ],
        "conditions": {"refund_before_departure": None},
    }


def make_client():
    client = MagicMock()
    client.offer_requests.create = AsyncMock()
    client.offers.get = AsyncMock()
    client.seat_maps.find = AsyncMock()
    return client


SEARCH_ARGS = {
    "origin": "LHR",
    "destination": "JFK",
    "departure_date": "2026-12-01",
    "passengers": [{"type": "adult"}],
}


class TestBuildSlices(unittest.TestCase):
    def test_one_way(self):
        slices = build_slices(OfferRequestArgs(**SEARCH_ARGS))
        self.assertEqual(slices, [{"origin": "LHR", "destination": "JFK", "departure_date": "2026-12-01"}])

    def test_round_trip(self):
        slices = build_slices(OfferRequestArgs(**SEARCH_ARGS, return_date="2026-12-10"))
        self.assertEqual(len(slices), 2)
        self.assertEqual(slices[1], {"origin": "JFK", "destination": "LHR", "departure_date": "2026-12-10"})

    def test_rejects_unknown_cabin_class(self):
        with self.assertRaises(ValidationError):
            OfferRequestArgs(**SEARCH_ARGS, cabin_class="steerage")


class TestOfferRequest(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = make_client()

    async def test_request_defaults_to_economy(self):
        self.client.offer_requests.create.return_value = OfferRequest.model_validate({"id": "orq_1", "offers": []})

        await flight_offer_request(self.client, SEARCH_ARGS)

        kwargs = self.client.offer_requests.create.await_args.kwargs
        self.assertEqual(kwargs["cabin_class"], "economy")
        self.assertEqual(kwargs["passengers"], [{"type": "adult"}])
        self.assertEqual(len(kwargs["slices"]), 1)

    async def test_round_trip_sends_two_slices(self):
        self.client.offer_requests.create.return_value = OfferRequest.model_validate({"id": "orq_1"})

        await flight_offer_request(self.client, {**SEARCH_ARGS, "return_date": "2026-12-10", "cabin_class": "business"})

        kwargs = self.client.offer_requests.create.await_args.kwargs
        self.assertEqual(kwargs["cabin_class"], "business")
        self.assertEqual([s["origin"] for s in kwargs["slices"]], ["LHR", "JFK"])

    async def test_summary_is_capped_at_ten_offers(self):
        self.client.offer_requests.create.return_value = OfferRequest.model_validate({
            "id": "orq_1",
            "live_mode": False,
            "offers": [make_offer(i) for i in range(25)],
        })

        payload = await flight_offer_request(self.client, SEARCH_ARGS)

        self.assertEqual(payload["id"], "orq_1")
        self.assertFalse(payload["live_mode"])
        self.assertEqual(payload["offers_count"], 25)
        self.assertEqual(len(payload["offers"]), MAX_OFFERS)
        self.assertEqual(payload["offers"][0], {
            "id": "off_0",
            "total_amount": "100.00",
            "total_currency": "GBP",
            "owner": "Duffel Airways",
            "slices": [{"duration": "PT7H", "origin": "LHR", "destination": "JFK", "segments_count": 2}],
        })

    async def test_summary_without_offers(self):
        self.client.offer_requests.create.return_value = OfferRequest.model_validate({"id": "orq_1"})

        payload = await flight_offer_request(self.client, SEARCH_ARGS)

        self.assertEqual(payload, {"id": "orq_1", "offers_count": 0})

    async def test_summary_omits_fields_the_provider_left_out(self):
        self.client.offer_requests.create.return_value = OfferRequest.model_validate({
            "id": "orq_1",
            "live_mode": True,
            "offers": [
                {"id": "off_1", "total_amount": "80.00", "slices": [{"duration": "PT2H", "origin": {"name": "Gatwick"}}]},
            ],
        })

        payload = await flight_offer_request(self.client, SEARCH_ARGS)

        offer = payload["offers"][0]
        self.assertEqual(offer, {"id": "off_1", "total_amount": "80.00", "slices": [{"duration": "PT2H"}]})
        self.assertNotIn("owner", offer)
        self.assertNotIn("segments_count", offer["slices"][0])


class TestOfferTools(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.client = make_client()
        self.server = build_server("duffel_test_key", self.client)

    async def test_flight_offers_returns_full_record(self):
        self.client.offers.get.return_value = Offer.model_validate(make_offer(1))

        result = await self.server.call_tool("flight_offers", {"offer_id": "off_1"})

        self.assertFalse(result.isError)
        self.assertEqual(json.loads(result.text), make_offer(1))
        self.client.offers.get.assert_awaited_once_with("off_1")

    async def test_validate_or_price_offer(self):
        self.client.offers.get.return_value = Offer.model_validate({
            **make_offer(1),
            "expires_at": "2026-11-01T10:00:00Z",
            "tax_amount": "20.00",
            "tax_currency": "GBP",
        })

        payload = await validate_or_price_offer(self.client, {"offer_id": "off_1"})

        self.assertEqual(payload, {
            "offer_id": "off_1",
            "expires_at": "2026-11-01T10:00:00Z",
            "total_amount": "101.00",
            "total_currency": "GBP",
            "tax_amount": "20.00",
            "tax_currency": "GBP",
        })

    async def test_price_check_omits_missing_fields(self):
        self.client.offers.get.return_value = Offer.model_validate({
            "id": "off_1", "total_amount": "99.00", "total_currency": "EUR", "tax_amount": None,
        })

        payload = await validate_or_price_offer(self.client, {"offer_id": "off_1"})

        self.assertEqual(payload, {
            "offer_id": "off_1", "total_amount": "99.00", "total_currency": "EUR", "tax_amount": None,
        })

    async def test_seatmaps_returned_when_available(self):
        self.client.seat_maps.find.return_value = [
            SeatMap.model_validate({"id": "sea_1", "segment_id": "seg_1", "cabins": [{"deck": 0}]})
        ]

        payload = await list_services_and_seatmaps(self.client, {"offer_id": "off_1"})

        self.assertEqual(payload["seatmaps"], [{"id": "sea_1", "segment_id": "seg_1", "cabins": [{"deck": 0}]}])
        self.assertIn("flight_offers", payload["note"])

    async def test_seatmaps_sentinel_when_unavailable(self):
        self.client.seat_maps.find.return_value = None

        result = await self.server.call_tool("flight_booking_list_services_and_seatmaps", {"offer_id": "off_1"})

        self.assertFalse(result.isError)
        payload = json.loads(result.text)
        self.assertEqual(payload["seatmaps"], SEATMAPS_UNAVAILABLE)
        self.assertIn("available_services", payload["note"])

if __name__ == "__main__":
    unittest.main()
