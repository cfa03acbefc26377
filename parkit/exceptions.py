# parkit/exceptions.py
"""
Parking errors raised by the fare calculator and the entry/exit workflow.
Each carries the HTTP status the API layer answers with.
"""


class ParkingError(Exception):
    """Base exception for the parking system."""

    status_code = 400


class InvalidTimeRange(ParkingError):
    """Raised when a ticket's out time is missing or precedes its in time."""


class UnsupportedCategory(ParkingError):
    """Raised when a ticket's spot has no known fare category."""

    status_code = 500


class InvalidSelection(ParkingError):
    """Raised when user input (vehicle type, plate number) is invalid."""

    status_code = 422


class TicketNotFound(ParkingError):
    """Raised when no open ticket exists for a registration number."""

    status_code = 404


class PersistenceFailure(ParkingError):
    """Raised when the store could not record a ticket or spot change."""

    status_code = 503


class VehicleAlreadyParked(ParkingError):
    """Raised on entry when the plate still has an open ticket."""

    status_code = 409
