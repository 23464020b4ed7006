from enum import Enum
from typing import List

from ..mcp.protocol import Tool


class ToolName(str, Enum):
    """The closed set of tools this server dispatches."""
    FLIGHT_OFFER_REQUEST = "flight_offer_request"
    FLIGHT_OFFERS = "flight_offers"
    VALIDATE_OR_PRICE_OFFER = "flight_booking_validate_or_price_offer"
    LIST_SERVICES_AND_SEATMAPS = "flight_booking_list_services_and_seatmaps"
    CREATE_ORDER = "flight_booking_create_order"
    PAY_FOR_ORDER = "flight_booking_pay_for_order"
    GET_ORDER_STATUS = "flight_booking_get_order_status"


PASSENGER_TYPES = ["adult", "child", "infant_without_seat"]
CABIN_CLASSES = ["economy", "premium_economy", "business", "first"]
PAYMENT_TYPES = ["balance", "arc_bsp_cash"]
PASSENGER_TITLES = ["mr", "ms", "mrs", "miss", "dr"]
GENDERS = ["m", "f"]


def _payment_schema(required: bool) -> dict:
    schema = {
        "type": "object",
        "description": "Payment details",
        "properties": {
            "type": {
                "type": "string",
                "enum": PAYMENT_TYPES,
                "description": "Payment type",
            },
            "amount": {
                "type": "string",
                "description": "Payment amount",
            },
            "currency": {
                "type": "string",
                "description": "Currency code (e.g., 'USD', 'GBP')",
            },
        },
    }
    if required:
        schema["required"] = ["type", "amount", "currency"]
    return schema


def _id_schema(field: str, description: str) -> dict:
    return {
        "type": "object",
        "properties": {
            field: {"type": "string", "description": description},
        },
        "required": [field],
    }


TOOLS: List[Tool] = [
    Tool(
        name=ToolName.FLIGHT_OFFER_REQUEST.value,
        description=(
            "Search for flight offers based on origin, destination, departure date, and passenger details. "
            "Returns a list of available flight offers with offer_id that can be used in subsequent steps."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "origin": {
                    "type": "string",
                    "description": "IATA airport code for origin (e.g., 'JFK', 'LHR')",
                },
                "destination": {
                    "type": "string",
                    "description": "IATA airport code for destination (e.g., 'LAX', 'CDG')",
                },
                "departure_date": {
                    "type": "string",
                    "description": "Departure date in ISO 8601 format (YYYY-MM-DD)",
                },
                "return_date": {
                    "type": "string",
                    "description": "Return date in ISO 8601 format (YYYY-MM-DD). Optional for one-way flights.",
                },
                "passengers": {
                    "type": "array",
                    "description": "Array of passenger details",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {
                                "type": "string",
                                "enum": PASSENGER_TYPES,
                                "description": "Type of passenger",
                            },
                        },
                    },
                },
                "cabin_class": {
                    "type": "string",
                    "enum": CABIN_CLASSES,
                    "description": "Cabin class preference (default: economy)",
                },
            },
            "required": ["origin", "destination", "departure_date", "passengers"],
        },
    ),
    Tool(
        name=ToolName.FLIGHT_OFFERS.value,
        description=(
            "Get detailed information about a specific flight offer using its offer_id. "
            "This can be used after flight_offer_request to get more details about a particular offer."
        ),
        inputSchema=_id_schema("offer_id", "The unique identifier of the flight offer"),
    ),
    Tool(
        name=ToolName.VALIDATE_OR_PRICE_OFFER.value,
        description=(
            "Validate an offer and confirm its current price before booking. "
            "This ensures the offer is still available and the price hasn't changed since the initial search."
        ),
        inputSchema=_id_schema("offer_id", "The unique identifier of the flight offer to validate"),
    ),
    Tool(
        name=ToolName.LIST_SERVICES_AND_SEATMAPS.value,
        description=(
            "Get available services (baggage, meals, etc.) and seat maps for a specific offer. "
            "Use this to select add-ons before creating an order."
        ),
        inputSchema=_id_schema("offer_id", "The unique identifier of the flight offer"),
    ),
    Tool(
        name=ToolName.CREATE_ORDER.value,
        description=(
            "Create a booking order with passenger details and payment information. "
            "Returns order_id and booking reference. This step reserves the flight before payment."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "offer_id": {
                    "type": "string",
                    "description": "The unique identifier of the flight offer to book",
                },
                "passengers": {
                    "type": "array",
                    "description": "Array of passenger details with full information",
                    "items": {
                        "type": "object",
                        "properties": {
                            "id": {"type": "string", "description": "Passenger identifier (matches offer request)"},
                            "title": {"type": "string", "enum": PASSENGER_TITLES, "description": "Passenger title"},
                            "given_name": {"type": "string", "description": "First name"},
                            "family_name": {"type": "string", "description": "Last name"},
                            "gender": {"type": "string", "enum": GENDERS, "description": "Gender"},
                            "born_on": {"type": "string", "description": "Date of birth (YYYY-MM-DD)"},
                            "email": {"type": "string", "description": "Email address"},
                            "phone_number": {"type": "string", "description": "Phone number"},
                        },
                        "required": ["id", "given_name", "family_name", "born_on", "email", "phone_number"],
                    },
                },
                "payment": _payment_schema(required=False),
                "services": {
                    "type": "array",
                    "description": "Optional array of service IDs to add to the booking",
                    "items": {"type": "string"},
                },
            },
            "required": ["offer_id", "passengers"],
        },
    ),
    Tool(
        name=ToolName.PAY_FOR_ORDER.value,
        description=(
            "Process payment for a held order. Use this after creating an order if payment was not included "
            "or if the order is on hold. Returns payment confirmation and e-tickets."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "order_id": {
                    "type": "string",
                    "description": "The unique identifier of the order to pay for",
                },
                "payment": _payment_schema(required=True),
            },
            "required": ["order_id", "payment"],
        },
    ),
    Tool(
        name=ToolName.GET_ORDER_STATUS.value,
        description=(
            "Retrieve the current status of an order, including booking reference, tickets, and confirmation details. "
            "Use this to check order status and retrieve e-tickets."
        ),
        inputSchema=_id_schema("order_id", "The unique identifier of the order"),
    ),
]


def list_tools() -> List[Tool]:
    return list(TOOLS)
