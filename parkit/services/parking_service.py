# parkit/services/parking_service.py
"""
Entry/exit workflow for a single vehicle transaction.

Entry: vehicle type → next free spot → plate → spot marked occupied → ticket saved
Exit:  plate → open ticket → discount check → out time + fare → ticket updated → spot released

The stores commit each write on their own, so the exit flow only releases the
spot once the ticket update has been recorded. Times come from the UTC
clock; the open ticket handed out by the ticket store is detached from its
session, so an aborted exit leaves nothing pending.
"""

from types import MappingProxyType
from typing import Optional, Protocol

from parkit.exceptions import InvalidSelection, PersistenceFailure, TicketNotFound, VehicleAlreadyParked
from parkit.models.parking_spot import ParkingSpot, ParkingType
from parkit.models.ticket import Ticket
from parkit.services.fare_calculator import calculate_fare
from parkit.utils.clock import utc_now
from parkit.utils.logger import get_logger

logger = get_logger(__name__)

VEHICLE_TYPE_SELECTION = MappingProxyType({
    1: ParkingType.CAR,
    2: ParkingType.BIKE,
})


class InputReader(Protocol):
    def read_selection(self) -> int: ...

    def read_vehicle_registration_number(self) -> str: ...


class SpotStore(Protocol):
    def get_next_available_slot(self, parking_type: ParkingType) -> Optional[int]: ...

    def update_parking(self, parking_spot) -> bool: ...


class TicketStore(Protocol):
    def save_ticket(self, ticket) -> bool: ...

    def get_ticket(self, vehicle_reg_number: str) -> Optional[Ticket]: ...

    def update_ticket(self, ticket) -> bool: ...

    def count_prior_tickets(self, vehicle_reg_number: str) -> int: ...


class ParkingService:
    def __init__(self, input_reader: InputReader, parking_spot_dao: SpotStore,
                 ticket_dao: TicketStore, clock=utc_now):
        self.input_reader = input_reader
        self.parking_spot_dao = parking_spot_dao
        self.ticket_dao = ticket_dao
        self.clock = clock

    def get_vehicle_type(self) -> ParkingType:
        selection = self.input_reader.read_selection()
        parking_type = VEHICLE_TYPE_SELECTION.get(selection)
        if parking_type is None:
            logger.warning(f"[Entry] Incorrect vehicle type selection: {selection}")
            raise InvalidSelection(f"Entered input is invalid: {selection}")
        return parking_type

    def get_next_parking_number_if_available(self) -> Optional[ParkingSpot]:
        parking_type = self.get_vehicle_type()
        parking_number = self.parking_spot_dao.get_next_available_slot(parking_type)
        if not parking_number:
            logger.warning(f"[Entry] No {parking_type.value} parking slot available")
            return None
        return ParkingSpot(id=parking_number, parking_type=parking_type, available=True)

    def process_incoming_vehicle(self) -> Optional[Ticket]:
        """
        Park a vehicle. Returns the saved ticket, or None when the lot is full.
        Raises VehicleAlreadyParked for a plate with an open ticket, and
        PersistenceFailure when the spot or the ticket could not be recorded;
        in both cases the spot is left free.
        """
        parking_spot = self.get_next_parking_number_if_available()
        if parking_spot is None:
            return None

        vehicle_reg_number = self.input_reader.read_vehicle_registration_number()
        if self.ticket_dao.get_ticket(vehicle_reg_number) is not None:
            raise VehicleAlreadyParked(f"Vehicle {vehicle_reg_number} is already parked")
        if self.ticket_dao.count_prior_tickets(vehicle_reg_number) > 0:
            logger.info(f"[Entry] Plate={vehicle_reg_number} | Happy to see you again! "
                        f"As a regular user of our parking lot, you will get a 5% discount.")

        parking_spot.available = False
        if not self.parking_spot_dao.update_parking(parking_spot):
            logger.error(f"[Entry] Unable to occupy spot {parking_spot.id} for {vehicle_reg_number}")
            raise PersistenceFailure(f"Unable to allocate spot {parking_spot.id}")

        ticket = Ticket(
            parking_spot=parking_spot,
            vehicle_reg_number=vehicle_reg_number,
            price=0,
            in_time=self.clock(),
            out_time=None,
        )
        if not self.ticket_dao.save_ticket(ticket):
            parking_spot.available = True
            self.parking_spot_dao.update_parking(parking_spot)
            logger.error(f"[Entry] Unable to save ticket for {vehicle_reg_number}. Spot {parking_spot.id} freed")
            raise PersistenceFailure(f"Unable to save ticket for vehicle {vehicle_reg_number}")

        logger.info(f"[Entry] Plate={vehicle_reg_number} | Spot={parking_spot.id} | "
                    f"In={ticket.in_time:%Y-%m-%d %H:%M:%S}")
        return ticket

    def process_exiting_vehicle(self) -> Optional[Ticket]:
        """
        Close the open ticket for a plate and free its spot.
        Raises TicketNotFound for an unknown plate. Returns None, leaving the spot
        occupied, when the ticket update could not be recorded.
        """
        vehicle_reg_number = self.input_reader.read_vehicle_registration_number()
        ticket = self.ticket_dao.get_ticket(vehicle_reg_number)
        if ticket is None:
            raise TicketNotFound(f"No open ticket for vehicle {vehicle_reg_number}")

        discount = self.ticket_dao.count_prior_tickets(vehicle_reg_number) > 0
        ticket.out_time = self.clock()
        calculate_fare(ticket, discount)

        if not self.ticket_dao.update_ticket(ticket):
            logger.error(f"[Exit] Unable to update ticket information for {vehicle_reg_number}. "
                         f"Spot {ticket.parking_spot.id} left occupied")
            return None

        parking_spot = ticket.parking_spot
        parking_spot.available = True
        if not self.parking_spot_dao.update_parking(parking_spot):
            logger.error(f"[Exit] Ticket closed but spot {parking_spot.id} could not be released")

        logger.info(f"[Exit] Plate={vehicle_reg_number} | Fare={ticket.price:.2f} | "
                    f"Discount={discount} | Out={ticket.out_time:%Y-%m-%d %H:%M:%S}")
        return ticket
