# parkit/routers/parking.py
"""
Entry/exit endpoints. Each request runs one ParkingService transaction
against the stores bound to the request's DB session.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from parkit.dao.parking_spot_dao import ParkingSpotDAO
from parkit.dao.ticket_dao import TicketDAO
from parkit.database import get_db
from parkit.exceptions import PersistenceFailure
from parkit.schemas.ticket import EntryRequest, ExitRequest, TicketOut
from parkit.services.parking_service import ParkingService
from parkit.utils.input_reader import RequestInputReader

router = APIRouter()


def build_service(reader: RequestInputReader, db: Session) -> ParkingService:
    return ParkingService(reader, ParkingSpotDAO(db), TicketDAO(db))


@router.post("/parking/entry", response_model=TicketOut, status_code=status.HTTP_201_CREATED,
             summary="Vehicle entering — allocate a spot")
def vehicle_entry(body: EntryRequest, db: Session = Depends(get_db)):
    """Allocates the next free spot for the vehicle type (1 = CAR, 2 = BIKE) and opens a ticket."""
    service = build_service(RequestInputReader(body.plate_number, body.vehicle_type), db)
    ticket = service.process_incoming_vehicle()
    if ticket is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No parking spot available")
    return TicketOut.from_ticket(ticket)


@router.post("/parking/exit", response_model=TicketOut, summary="Vehicle exiting — compute fare")
def vehicle_exit(body: ExitRequest, db: Session = Depends(get_db)):
    """Closes the open ticket for the plate, computes the fare and frees the spot."""
    service = build_service(RequestInputReader(body.plate_number), db)
    ticket = service.process_exiting_vehicle()
    if ticket is None:
        raise PersistenceFailure(f"Unable to update ticket for vehicle {body.plate_number}")
    return TicketOut.from_ticket(ticket)
