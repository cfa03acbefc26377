# parkit/services/fare_calculator.py
"""
Fare computation for a closed ticket.

Rules:
  - Stays up to FREE_PARKING_MINUTES (30) are free, whatever the vehicle type
  - Otherwise price = hours (minutes / 60) × hourly rate of the spot's type
  - Recurring users get RECURRING_USER_DISCOUNT (×0.95) on a non-zero fare
"""

from types import MappingProxyType

from parkit.config import settings
from parkit.exceptions import InvalidTimeRange, UnsupportedCategory
from parkit.models.parking_spot import ParkingType
from parkit.utils.logger import get_logger

logger = get_logger(__name__)

FARE_RATES = MappingProxyType({
    ParkingType.CAR: settings.CAR_RATE_PER_HOUR,
    ParkingType.BIKE: settings.BIKE_RATE_PER_HOUR,
})


def calculate_fare(ticket, discount: bool = False) -> float:
    """Set ticket.price from its in/out times and spot type. Returns the price."""
    if ticket.out_time is None or ticket.out_time < ticket.in_time:
        raise InvalidTimeRange(f"Out time provided is incorrect: {ticket.out_time}")

    parking_type = ticket.parking_spot.parking_type
    rate = FARE_RATES.get(parking_type)
    if rate is None:
        raise UnsupportedCategory(f"Unknown Parking Type: {parking_type}")

    duration_minutes = int((ticket.out_time - ticket.in_time).total_seconds() // 60)
    if duration_minutes <= settings.FREE_PARKING_MINUTES:
        ticket.price = 0
        return ticket.price

    duration_hours = duration_minutes / 60.0
    logger.debug(f"[Fare] {duration_minutes} min ({duration_hours:.2f} h) | Type={parking_type}")

    price = duration_hours * rate
    if discount:
        price *= settings.RECURRING_USER_DISCOUNT

    ticket.price = price
    return ticket.price
