from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..api.client import DuffelClient

ORDER_FIELDS = (
    "id",
    "booking_reference",
    "live_mode",
    "total_amount",
    "total_currency",
    "created_at",
    "owner",
    "passengers",
    "documents",
)

ORDER_STATUS_FIELDS = (
    "id",
    "booking_reference",
    "live_mode",
    "total_amount",
    "total_currency",
    "created_at",
    "owner",
    "passengers",
    "slices",
    "documents",
    "services",
)


class PaymentType(str, Enum):
    BALANCE = "balance"
    ARC_BSP_CASH = "arc_bsp_cash"


class PaymentDetails(BaseModel):
    type: PaymentType = Field(..., description="Payment type.")
    amount: str = Field(..., description="Payment amount, e.g. '250.00'.")
    currency: str = Field(..., description="Currency code, e.g. 'USD'.")


class CreateOrderArgs(BaseModel):
    offer_id: str = Field(..., description="The offer to book.")
    passengers: List[Dict[str, Any]] = Field(..., description="Full passenger details.")
    # Passed through as given; Duffel validates the payment of an instant order.
    payment: Optional[Dict[str, Any]] = None
    services: Optional[List[str]] = None


class PayForOrderArgs(BaseModel):
    order_id: str = Field(..., description="The held order to pay for.")
    payment: PaymentDetails


class OrderIdArgs(BaseModel):
    order_id: str = Field(..., description="The unique identifier of the order.")


def build_order_request(args: CreateOrderArgs) -> Dict[str, Any]:
    order: Dict[str, Any] = {
        "selected_offers": [args.offer_id],
        "passengers": args.passengers,
        "type": "instant",
    }
    if args.payment is not None:
        order["payments"] = [args.payment]
    if args.services:
        order["services"] = [{"id": service_id} for service_id in args.services]
    return order


async def create_order(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    args = CreateOrderArgs.model_validate(arguments)
    order = await client.orders.create(build_order_request(args))
    return order.project(*ORDER_FIELDS)


async def pay_for_order(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    args = PayForOrderArgs.model_validate(arguments)
    payment = await client.payments.create(
        order_id=args.order_id,
        payment=args.payment.model_dump(mode="json"),
    )
    return payment.to_dict()


async def get_order_status(client: DuffelClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    args = OrderIdArgs.model_validate(arguments)
    order = await client.orders.get(args.order_id)
    return order.project(*ORDER_STATUS_FIELDS)
