from .client import DuffelAPIError, DuffelClient
from .models import Offer, OfferRequest, Order, Payment, SeatMap
